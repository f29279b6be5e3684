"""
FFT Division — приближённое деление полиномов в частотной области

Деконволюция: оба операнда дополняются нулями до общей длины, переводятся
в частотную область (numpy.fft), делятся поэлементно и переводятся обратно.
Long division квадратична по размеру операндов, деконволюция ~ n·log(n),
но:
(a) деление взрывается, если какой-то bin спектра делителя близок к нулю;
(b) позиция коэффициентов частного внутри (дополненного нулями) буфера
    зависит от длины padding, его чётности и распределения нулей.

Формула offset в замкнутом виде НЕ предполагается. Offset — это
конфигурация: либо передаётся явно, либо берётся откалиброванное значение
для политики выравнивания, либо находится перебором
(src.polynomial.calibration).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не содержит NaN/Inf: иначе DegenerateSpectrum
2. Кандидаты padding перебираются строго по возрастанию, цикл ограничен
3. Сравнение с точным результатом — только после round до 6 знаков
4. Complex вход даёт complex буфер; для real входа берётся real часть
5. Near-zero bin допускается только как DC 0/0 (делитель и делимое оба
   с корнем x = 1); константа частного восстанавливается по зоне padding
"""

import logging
from typing import Callable, Dict, Final, Hashable, NamedTuple, Optional, Tuple

import numpy as np

from src.core.domain.division import DivisionResult, FFTDivisionOptions
from src.core.domain.polynomial import NumericKind, Polynomial
from src.core.errors import DegenerateSpectrum, LengthMismatch
from src.core.math.array_alignment import PadAlignment, rotate_left, round_sequence, zero_pad

logger = logging.getLogger(__name__)

# Откалиброванные (self_offset, other_offset) для политик выравнивания.
# Получены перебором find_offset / sweep_offsets; для SPLIT позиция частного
# зависит от чётности padding, поэтому значения по умолчанию нет.
DEFAULT_OFFSETS: Final[Dict[PadAlignment, Tuple[int, int]]] = {
    PadAlignment.PAD_AT_START: (1, 0),
    PadAlignment.PAD_AT_END: (0, 0),
}


# =============================================================================
# DECONVOLUTION CACHE
# =============================================================================


class DeconvolutionCache:
    """
    Явный кэш сырых буферов деконволюции.

    Ключ — (dividend, divisor, length, alignment, spectrum_tolerance,
    round_digits). Время жизни контролирует вызывающий код: кэш не
    глобальный и не потокобезопасный. Нужен при переборе offsets, когда
    один и тот же padding пересчитывается для каждой пары offsets.
    """

    def __init__(self):
        self._buffers: Dict[Hashable, Optional["Deconvolution"]] = {}
        self.hits = 0
        self.misses = 0

    def get_or_compute(
        self, key: Hashable, compute: Callable[[], Optional["Deconvolution"]]
    ) -> Optional["Deconvolution"]:
        """
        Возврат закэшированного буфера или вычисление и сохранение.

        None (вырожденный спектр) тоже кэшируется.
        """
        if key in self._buffers:
            self.hits += 1
            return self._buffers[key]

        self.misses += 1
        buffer = compute()
        self._buffers[key] = buffer
        return buffer

    def clear(self) -> None:
        self._buffers.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._buffers)


# =============================================================================
# DECONVOLUTION
# =============================================================================


class Deconvolution(NamedTuple):
    """Сырой буфер обратного FFT для одной длины."""

    buffer: tuple

    # True если DC bin частного был 0/0 и обнулён: буфер смещён на
    # неизвестную константу, которую fft_divide снимает по зоне padding
    dc_recovered: bool


def deconvolve(
    dividend: Polynomial,
    divisor: Polynomial,
    length: int,
    alignment: PadAlignment,
    spectrum_tolerance: float,
    round_digits: int,
) -> Optional[Deconvolution]:
    """
    Сырой буфер деконволюции для одной длины.

    Единственный near-zero bin, который допускается, это DC bin (0/0):
    делитель с корнем x = 1 имеет нулевой DC bin при любой длине, и если
    делимое кратно делителю, его DC bin тоже нулевой. Тогда DC bin
    частного обнуляется, а результат помечается dc_recovered.

    Args:
        dividend: Делимое
        divisor: Делитель
        length: Общая длина буфера (>= len(dividend), >= len(divisor))
        alignment: Политика zero-padding обоих операндов
        spectrum_tolerance: Порог near-zero bin спектра
        round_digits: Округление результата обратного FFT

    Returns:
        Deconvolution или None, если спектр делителя содержит near-zero
        bin (кроме DC 0/0) или результат не finite

    Raises:
        LengthMismatch: Если length короче одного из операндов
    """
    padded_dividend = np.asarray(
        zero_pad(dividend.coefficients, length, alignment), dtype=np.complex128
    )
    padded_divisor = np.asarray(
        zero_pad(divisor.coefficients, length, alignment), dtype=np.complex128
    )

    divisor_spectrum = np.fft.fft(padded_divisor)
    dividend_spectrum = np.fft.fft(padded_dividend)

    near_zero = np.abs(divisor_spectrum) < spectrum_tolerance
    dc_recovered = bool(
        near_zero[0]
        and not near_zero[1:].any()
        and abs(dividend_spectrum[0]) < spectrum_tolerance
    )

    if near_zero.any() and not dc_recovered:
        logger.debug(
            "deconvolve: length %d rejected, %d near-zero divisor bins (tolerance %.3e)",
            length,
            int(near_zero.sum()),
            spectrum_tolerance,
        )
        return None

    if dc_recovered:
        divisor_spectrum[0] = 1.0
        quotient_spectrum = dividend_spectrum / divisor_spectrum
        quotient_spectrum[0] = 0.0
    else:
        quotient_spectrum = dividend_spectrum / divisor_spectrum

    raw = np.fft.ifft(quotient_spectrum)

    if not np.all(np.isfinite(raw)):
        logger.debug("deconvolve: length %d rejected, non-finite inverse transform", length)
        return None

    if dividend.kind == NumericKind.REAL and divisor.kind == NumericKind.REAL:
        values = raw.real.tolist()
    else:
        values = raw.tolist()

    return Deconvolution(
        buffer=tuple(round_sequence(values, round_digits)),
        dc_recovered=dc_recovered,
    )


# =============================================================================
# FFT DIVIDE
# =============================================================================


def resolve_offsets(options: FFTDivisionOptions) -> Tuple[int, int]:
    """
    Явные offsets из options или откалиброванные для политики alignment.

    Raises:
        ValueError: Если offsets не заданы, а для alignment нет калибровки
    """
    if options.offsets is not None:
        return options.offsets

    try:
        return DEFAULT_OFFSETS[options.alignment]
    except KeyError:
        raise ValueError(
            f"No calibrated offsets for alignment {options.alignment.value}; "
            f"pass offsets explicitly (see calibration.discover_offsets)"
        ) from None


def fft_divide(
    dividend: Polynomial,
    divisor: Polynomial,
    options: Optional[FFTDivisionOptions] = None,
    cache: Optional[DeconvolutionCache] = None,
) -> DivisionResult:
    """
    Приближённое деление dividend на divisor через FFT-деконволюцию.

    Алгоритм:
    0. Ведущие нули обоих операндов удаляются (canonical), как в long_divide
    1. Для каждого padding из options.pad_range (по возрастанию):
       длина буфера = len(dividend) + padding
    2. Zero-padding обоих операндов, FFT каждого
    3. Отказ от кандидата, если |bin| спектра делителя < spectrum_tolerance
       (кроме DC bin 0/0, см. deconvolve)
    4. Поэлементное complex-деление, обратный FFT, real часть, round
    5. Ротация буфера влево на (self_offset - other_offset)
    6. Если DC bin был обнулён: вычитание значения ячейки из зоны
       padding (buffer[0] для PAD_AT_START, иначе buffer[-1])
    7. Обрезка до order(dividend) - order(divisor) + 1 коэффициентов
       (хвост буфера для PAD_AT_START, начало для остальных политик)

    Корректно только когда divisor — делитель dividend без остатка.

    Args:
        dividend: Делимое (обычно произведение A * B)
        divisor: Делитель (B)
        options: Конфигурация (default: FFTDivisionOptions())
        cache: Явный кэш буферов (optional)

    Returns:
        DivisionResult; padding, offsets и buffer заполнены при details=True

    Raises:
        LengthMismatch: Если degree(divisor) > degree(dividend)
        DegenerateSpectrum: Если ни один padding не избегает near-zero bin
        ValueError: Если offsets не заданы, а калибровки для alignment нет
    """
    options = options or FFTDivisionOptions()
    dividend = dividend.canonical()
    divisor = divisor.canonical()

    expected = dividend.order - divisor.order + 1
    if expected < 1:
        raise LengthMismatch(
            f"Divisor degree {divisor.order} exceeds dividend degree {dividend.order}"
        )

    self_offset, other_offset = resolve_offsets(options)
    min_pad, max_pad = options.pad_range

    for padding in range(min_pad, max_pad + 1):
        length = len(dividend.coefficients) + padding

        def compute(length: int = length) -> Optional[Deconvolution]:
            return deconvolve(
                dividend,
                divisor,
                length,
                options.alignment,
                options.spectrum_tolerance,
                options.round_digits,
            )

        if cache is not None:
            key = (
                dividend.coefficients,
                divisor.coefficients,
                length,
                options.alignment,
                options.spectrum_tolerance,
                options.round_digits,
            )
            raw = cache.get_or_compute(key, compute)
        else:
            raw = compute()

        if raw is None:
            continue

        buffer = rotate_left(raw.buffer, self_offset - other_offset)

        if raw.dc_recovered:
            # Без зоны padding постоянную составляющую не восстановить
            if length == expected:
                logger.debug("fft_divide: padding %d has no zero region for DC recovery", padding)
                continue

            reference = buffer[0] if options.alignment == PadAlignment.PAD_AT_START else buffer[-1]
            buffer = round_sequence([v - reference for v in buffer], options.round_digits)

        if options.alignment == PadAlignment.PAD_AT_START:
            quotient = buffer[length - expected:]
        else:
            quotient = buffer[:expected]

        logger.debug(
            "fft_divide: padding %d (length %d), offsets (%d, %d), dc_recovered %s",
            padding,
            length,
            self_offset,
            other_offset,
            raw.dc_recovered,
        )

        if not options.details:
            return DivisionResult(quotient=tuple(quotient))

        return DivisionResult(
            quotient=tuple(quotient),
            padding=padding,
            self_offset=self_offset,
            other_offset=other_offset,
            buffer=tuple(buffer),
        )

    raise DegenerateSpectrum(
        f"No padding in {min_pad}..{max_pad} avoids a near-zero divisor frequency bin "
        f"(tolerance {options.spectrum_tolerance}) for divisor {divisor}"
    )
