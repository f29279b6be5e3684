"""
Contract Validation Module

Модуль для валидации JSON контрактов диагностики FFT-деления и
кодирования коэффициентов в JSON.
"""

from .encoding import decode_number, decode_sequence, encode_number, encode_sequence
from .validators import (
    DIVISION_RESULT,
    OFFSET_SWEEP_RECORD,
    ContractValidator,
    DivisionResultValidator,
    OffsetSweepRecordValidator,
    SchemaLoader,
    validate_division_result,
    validate_offset_sweep_record,
)

__all__ = [
    # Contract names
    "DIVISION_RESULT",
    "OFFSET_SWEEP_RECORD",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DivisionResultValidator",
    "OffsetSweepRecordValidator",
    # Functions
    "validate_division_result",
    "validate_offset_sweep_record",
    # Encoding
    "encode_number",
    "decode_number",
    "encode_sequence",
    "decode_sequence",
]
