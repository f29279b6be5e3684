"""
Core math modules для polynomial toolkit

Численные примитивы и операции над последовательностями коэффициентов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    COMPARE_DIGITS,
    DEFAULT_ROUND_DIGITS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_SPECTRUM_ZERO,
    # Number checks
    is_number,
    is_valid_number,
    to_python_number,
    # Rounding
    round_value,
    sigfigs,
    # Epsilon comparisons
    is_close,
    is_zero,
    sequences_close,
    sequences_equal_sigfigs,
    # Validation
    validate_non_negative_int,
)

# Array Alignment
from src.core.math.array_alignment import (
    AlignmentSpec,
    PadAlignment,
    narrow_if_real,
    pad,
    rotate_left,
    rotate_right,
    round_sequence,
    shift_left,
    shift_right,
    strip_leading_zeros,
    zero_pad,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "COMPARE_DIGITS",
    "DEFAULT_ROUND_DIGITS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_SPECTRUM_ZERO",
    # Numerical Safeguards — Number checks
    "is_number",
    "is_valid_number",
    "to_python_number",
    # Numerical Safeguards — Rounding
    "round_value",
    "sigfigs",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_zero",
    "sequences_close",
    "sequences_equal_sigfigs",
    # Numerical Safeguards — Validation
    "validate_non_negative_int",
    # Array Alignment — Types
    "AlignmentSpec",
    "PadAlignment",
    # Array Alignment — Functions
    "narrow_if_real",
    "pad",
    "rotate_left",
    "rotate_right",
    "round_sequence",
    "shift_left",
    "shift_right",
    "strip_leading_zeros",
    "zero_pad",
]
