"""
Domain models and value objects.

Contains the Polynomial value type and the division result/option models.
"""

from src.core.domain.division import (
    DEFAULT_PAD_RANGE,
    DivisionResult,
    FFTDivisionOptions,
    LongDivisionResult,
    LongDivisionStep,
)
from src.core.domain.polynomial import NumericKind, Polynomial

__all__ = [
    # Polynomial
    "Polynomial",
    "NumericKind",
    # Division
    "DEFAULT_PAD_RANGE",
    "DivisionResult",
    "FFTDivisionOptions",
    "LongDivisionResult",
    "LongDivisionStep",
]
