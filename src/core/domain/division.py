"""
Division — модели результатов и параметров деления полиномов

- LongDivisionResult: quotient + remainder точного деления
- LongDivisionStep: один шаг исключения старшего члена (для пошагового вывода)
- FFTDivisionOptions: immutable Pydantic конфигурация FFT-деления
- DivisionResult: результат FFT-деления (+ диагностика при details=True)

Все результаты создаются заново при каждом вызове и не модифицируются.
"""

from dataclasses import dataclass
from typing import Any, Dict, Final, NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.encoding import encode_sequence
from src.core.domain.polynomial import Polynomial
from src.core.math.array_alignment import PadAlignment
from src.core.math.numerical_safeguards import DEFAULT_ROUND_DIGITS, EPS_SPECTRUM_ZERO

# Диапазон дополнительного padding по умолчанию (включительно)
DEFAULT_PAD_RANGE: Final[tuple[int, int]] = (0, 10)


# =============================================================================
# LONG DIVISION
# =============================================================================


class LongDivisionResult(NamedTuple):
    """
    Результат точного деления: dividend == quotient * divisor + remainder.

    remainder канонический: order(remainder) < degree(divisor) или
    remainder — нулевой полином.
    """

    quotient: Polynomial
    remainder: Polynomial


class LongDivisionStep(NamedTuple):
    """Один шаг long division: исключение старшего члена текущего остатка."""

    index: int  # позиция коэффициента частного
    coefficient: complex  # коэффициент частного на этом шаге
    remainder: tuple  # running remainder после шага (длина dividend)


# =============================================================================
# FFT DIVISION CONFIG
# =============================================================================


class FFTDivisionOptions(BaseModel):
    """
    Конфигурация деления в частотной области.

    pad_range — включительный диапазон дополнительных нулей сверх длины
    делимого; кандидаты перебираются по возрастанию.

    offsets — принудительная калибровка (self_offset, other_offset). Если
    не задана, используется откалиброванное значение для политики
    alignment (для SPLIT его нет: offsets нужно найти через calibration).
    """

    pad_range: tuple[int, int] = Field(
        DEFAULT_PAD_RANGE, description="Диапазон дополнительного padding (min, max)"
    )
    offsets: Optional[tuple[int, int]] = Field(
        None, description="Принудительные (self_offset, other_offset)"
    )
    details: bool = Field(False, description="Вернуть padding, offsets и буфер до обрезки")
    alignment: PadAlignment = Field(
        PadAlignment.PAD_AT_START, description="Политика zero-padding обоих операндов"
    )
    spectrum_tolerance: float = Field(
        EPS_SPECTRUM_ZERO, gt=0, description="Порог near-zero bin спектра делителя"
    )
    round_digits: int = Field(
        DEFAULT_ROUND_DIGITS, ge=0, description="Округление буфера после обратного FFT"
    )

    model_config = {"frozen": True}

    @field_validator("pad_range")
    @classmethod
    def validate_pad_range(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Проверка, что 0 <= min_pad <= max_pad"""
        min_pad, max_pad = v
        if min_pad < 0:
            raise ValueError(f"pad_range minimum must be non-negative, got {min_pad}")
        if max_pad < min_pad:
            raise ValueError(f"Pad range {min_pad}..{max_pad} is empty")
        return v


# =============================================================================
# FFT DIVISION RESULT
# =============================================================================


@dataclass(frozen=True)
class DivisionResult:
    """Результат FFT-деления."""

    quotient: tuple

    # Диагностика (заполняется только при details=True)
    padding: Optional[int] = None
    self_offset: Optional[int] = None
    other_offset: Optional[int] = None
    buffer: Optional[tuple] = None  # повёрнутый буфер до обрезки

    def to_polynomial(self) -> Polynomial:
        return Polynomial(self.quotient)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-совместимое представление (контракт division_result)."""
        return {
            "quotient": encode_sequence(self.quotient),
            "padding": self.padding,
            "self_offset": self.self_offset,
            "other_offset": self.other_offset,
            "buffer": None if self.buffer is None else encode_sequence(self.buffer),
        }
