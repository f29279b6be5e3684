"""
Polynomial algorithms: long division, FFT division, roots, calibration.

Каждый алгоритм принимает immutable Polynomial и возвращает новый результат.
"""

from src.polynomial.calibration import (
    OffsetSweepRecord,
    SweepConfig,
    discover_offsets,
    find_offset,
    random_polynomial,
    sweep_offsets,
)
from src.polynomial.fft_division import (
    DEFAULT_OFFSETS,
    Deconvolution,
    DeconvolutionCache,
    deconvolve,
    fft_divide,
    resolve_offsets,
)
from src.polynomial.long_division import long_divide, long_divide_steps
from src.polynomial.roots import MAX_CLOSED_FORM_DEGREE, companion_roots, roots

__all__ = [
    # Long division
    "long_divide",
    "long_divide_steps",
    # FFT division
    "DEFAULT_OFFSETS",
    "Deconvolution",
    "DeconvolutionCache",
    "deconvolve",
    "fft_divide",
    "resolve_offsets",
    # Roots
    "MAX_CLOSED_FORM_DEGREE",
    "companion_roots",
    "roots",
    # Calibration
    "OffsetSweepRecord",
    "SweepConfig",
    "discover_offsets",
    "find_offset",
    "random_polynomial",
    "sweep_offsets",
]
