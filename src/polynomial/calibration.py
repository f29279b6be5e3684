"""
Calibration — поиск offset для FFT-деления перебором

Позиция частного внутри буфера деконволюции аналитически не
предсказывается по длине/чётности padding. Поэтому offset находится
перебором: строим A, B, C = A * B, делим C на B для каждой комбинации
(padding, self_offset, other_offset) и ищем ротацию, при которой
результат совпадает с round(A, 6).

Перебор всегда ограничен диапазонами из SweepConfig.

Пример:
    a = Polynomial([-33, -97, -65])
    b = Polynomial([2, 1])
    record = discover_offsets(a * b, b, a, SweepConfig(pad_range=(1, 10)))
    rotate_left(round_sequence(record.quotient, 6), record.found_offset)
    # == round_sequence(a.coefficients, 6)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np
from pydantic import BaseModel, Field, field_validator

from src.core.contracts.encoding import encode_sequence
from src.core.domain.division import FFTDivisionOptions
from src.core.domain.polynomial import Polynomial
from src.core.errors import DegenerateSpectrum
from src.core.math.array_alignment import (
    PadAlignment,
    rotate_left,
    rotate_right,
    round_sequence,
    zero_pad,
)
from src.core.math.numerical_safeguards import COMPARE_DIGITS, validate_non_negative_int
from src.polynomial.fft_division import DeconvolutionCache, fft_divide

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


class SweepConfig(BaseModel):
    """
    Диапазоны перебора (все включительные).

    По умолчанию offsets перебираются в 0..length, что покрывает все
    ротации буфера для pad_range по умолчанию и коротких операндов.
    """

    pad_range: tuple[int, int] = Field((0, 10), description="Диапазон padding")
    self_offset_range: tuple[int, int] = Field((0, 0), description="Диапазон self_offset")
    other_offset_range: tuple[int, int] = Field((0, 0), description="Диапазон other_offset")
    alignment: PadAlignment = Field(PadAlignment.PAD_AT_START, description="Политика padding")
    digits: int = Field(COMPARE_DIGITS, ge=0, description="Округление перед сравнением")

    model_config = {"frozen": True}

    @field_validator("pad_range", "self_offset_range", "other_offset_range")
    @classmethod
    def validate_range(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Проверка, что диапазон не пустой"""
        if v[1] < v[0]:
            raise ValueError(f"Range {v[0]}..{v[1]} is empty")
        return v

    @field_validator("pad_range")
    @classmethod
    def validate_pad_non_negative(cls, v: tuple[int, int]) -> tuple[int, int]:
        if v[0] < 0:
            raise ValueError(f"pad_range minimum must be non-negative, got {v[0]}")
        return v


# =============================================================================
# RECORD
# =============================================================================


@dataclass(frozen=True)
class OffsetSweepRecord:
    """Одна строка таблицы перебора."""

    padding: int
    self_offset: int
    other_offset: int

    # None если ни одна ротация не совпала (или спектр вырожден)
    found_offset: Optional[int]
    degenerate: bool

    quotient: tuple

    @property
    def matched(self) -> bool:
        return self.found_offset is not None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-совместимое представление (контракт offset_sweep_record)."""
        return {
            "padding": self.padding,
            "self_offset": self.self_offset,
            "other_offset": self.other_offset,
            "found_offset": self.found_offset,
            "degenerate": self.degenerate,
            "quotient": encode_sequence(self.quotient),
        }


# =============================================================================
# OFFSET SEARCH
# =============================================================================


def find_offset(
    target: Sequence[complex],
    query: Sequence[complex],
    digits: int = COMPARE_DIGITS,
) -> Optional[int]:
    """
    Ротация query, совпадающая с target.

    target дополняется нулями в начало до длины query, затем обе
    последовательности округляются до digits знаков.

    Returns:
        offset > 0 если rotate_left(query, offset) == target,
        offset < 0 если rotate_right(query, -offset) == target,
        None если совпадения нет

    Raises:
        LengthMismatch: Если target длиннее query

    Examples:
        >>> find_offset([1, 2, 3], [2, 3, 1])
        -1
        >>> find_offset([1, 2, 3], [3, 1, 2])
        1
    """
    padded_target = round_sequence(zero_pad(target, len(query), PadAlignment.PAD_AT_START), digits)
    rounded_query = round_sequence(query, digits)

    for offset in range(len(rounded_query)):
        if rotate_right(rounded_query, offset) == padded_target:
            return -offset
        if rotate_left(rounded_query, offset) == padded_target:
            return offset

    return None


def sweep_offsets(
    dividend: Polynomial,
    divisor: Polynomial,
    expected: Polynomial,
    config: Optional[SweepConfig] = None,
    cache: Optional[DeconvolutionCache] = None,
) -> list[OffsetSweepRecord]:
    """
    Полная таблица перебора padding × self_offset × other_offset.

    Вырожденный спектр для padding записывается (degenerate=True), а не
    поднимается. Буферы для одного padding переиспользуются через cache.
    """
    config = config or SweepConfig()
    cache = cache if cache is not None else DeconvolutionCache()
    records: list[OffsetSweepRecord] = []

    for padding in range(config.pad_range[0], config.pad_range[1] + 1):
        for self_offset in range(config.self_offset_range[0], config.self_offset_range[1] + 1):
            for other_offset in range(
                config.other_offset_range[0], config.other_offset_range[1] + 1
            ):
                options = FFTDivisionOptions(
                    pad_range=(padding, padding),
                    offsets=(self_offset, other_offset),
                    alignment=config.alignment,
                    details=True,
                )

                try:
                    result = fft_divide(dividend, divisor, options, cache=cache)
                except DegenerateSpectrum:
                    records.append(
                        OffsetSweepRecord(
                            padding=padding,
                            self_offset=self_offset,
                            other_offset=other_offset,
                            found_offset=None,
                            degenerate=True,
                            quotient=(),
                        )
                    )
                    continue

                records.append(
                    OffsetSweepRecord(
                        padding=padding,
                        self_offset=self_offset,
                        other_offset=other_offset,
                        found_offset=find_offset(
                            expected.coefficients, result.quotient, config.digits
                        ),
                        degenerate=False,
                        quotient=result.quotient,
                    )
                )

    logger.debug(
        "sweep_offsets: %d records, %d matched, %d degenerate (cache hits %d)",
        len(records),
        sum(1 for r in records if r.matched),
        sum(1 for r in records if r.degenerate),
        cache.hits,
    )
    return records


def discover_offsets(
    dividend: Polynomial,
    divisor: Polynomial,
    expected: Polynomial,
    config: Optional[SweepConfig] = None,
) -> Optional[OffsetSweepRecord]:
    """
    Первая успешная комбинация (padding, offsets) перебора.

    Если config не задан, offsets перебираются по всем ротациям буфера
    максимальной длины.
    """
    if config is None:
        max_length = len(dividend.coefficients) + 10
        config = SweepConfig(
            pad_range=(0, 10),
            self_offset_range=(0, max_length - 1),
            other_offset_range=(0, 0),
        )

    for record in sweep_offsets(dividend, divisor, expected, config):
        if record.matched:
            return record

    logger.warning("discover_offsets: no matching offset found for divisor %s", divisor)
    return None


# =============================================================================
# TEST DATA
# =============================================================================


def random_polynomial(order: int, rng: np.random.Generator) -> Polynomial:
    """
    Случайный полином с целыми коэффициентами в -100..100.

    Старший коэффициент ненулевой, остальные равны нулю с вероятностью 1/2.
    """
    validate_non_negative_int(order, "order")

    lead = 0
    while lead == 0:
        lead = int(rng.integers(-100, 101))

    coefficients = [lead]
    for _ in range(order):
        coefficients.append(0 if rng.random() > 0.5 else int(rng.integers(-100, 101)))

    return Polynomial(coefficients)
