"""
Numerical Safeguards — численные примитивы для полиномиальной арифметики

Модуль обеспечивает численную устойчивость операций над коэффициентами:
- Проверка finite для real и complex значений (strict refusal)
- Округление real/complex до заданного числа десятичных знаков
- Округление до значащих цифр (significant figures)
- Epsilon-сравнения float/complex и последовательностей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют: вместо fallback поднимается ошибка
2. Complex никогда не сужается до real внутри арифметики
3. Round идемпотентен: round(round(x, n), n) == round(x, n)
4. Все операции детерминированы и воспроизводимы
"""

import cmath
import math
import sys
from numbers import Number
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог near-zero для модуля bin спектра делителя при FFT-делении
# Совпадает с точностью round(f, 6) == 0 из ранних экспериментов
EPS_SPECTRUM_ZERO: Final[float] = 1e-6

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Число десятичных знаков для сравнения приближённых и точных результатов
# FFT round-trip вносит шум ниже этой точности
COMPARE_DIGITS: Final[int] = 6

# Округление сырого буфера после обратного FFT
DEFAULT_ROUND_DIGITS: Final[int] = 12


# =============================================================================
# FINITE-ПРОВЕРКИ
# =============================================================================


def is_number(value: object) -> bool:
    """
    Проверка, является ли значение числом (int, float, complex, numpy scalar).

    bool исключается явно: True/False не являются коэффициентами.
    """
    return isinstance(value, Number) and not isinstance(value, bool)


def is_valid_number(value: complex) -> bool:
    """
    Проверка, что число finite (не NaN, не Inf).

    Для complex проверяются обе компоненты.

    Examples:
        >>> is_valid_number(1.0)
        True
        >>> is_valid_number(complex(1.0, float('nan')))
        False
    """
    if isinstance(value, complex):
        return cmath.isfinite(value)
    return math.isfinite(value)


def to_python_number(value: complex) -> complex:
    """
    Приведение numpy scalar к встроенному типу Python.

    numpy.float64 → float, numpy.complex128 → complex, numpy.int64 → int.
    Встроенные значения возвращаются без изменений.
    """
    item = getattr(value, "item", None)
    if item is not None and type(value) not in (int, float, complex):
        return item()
    return value


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_value(value: complex, digits: int = 0) -> complex:
    """
    Округление числа до digits знаков после запятой.

    Для complex real и imag округляются независимо; тип не сужается,
    т.е. complex с нулевой мнимой частью остаётся complex.

    Args:
        value: Значение (int, float, complex)
        digits: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение того же типа (int остаётся int)

    Raises:
        ValueError: Если digits < 0

    Examples:
        >>> round_value(2.0000004, 6)
        2.0
        >>> round_value(complex(2.0, 0.0000004), 6)
        (2+0j)
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")

    if isinstance(value, complex):
        return complex(round(value.real, digits), round(value.imag, digits))

    return round(value, digits)


def sigfigs(value: complex, figs: int) -> complex:
    """
    Округление до figs значащих цифр.

    Для complex real и imag округляются независимо. Значения у нижней
    границы диапазона float (около 1e-307) могут обратиться в 0.0.

    Args:
        value: Значение (int, float, complex)
        figs: Количество значащих цифр (>= 1)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если figs < 1

    Examples:
        >>> sigfigs(34567, 3)
        34600
        >>> sigfigs(1.9111111, 3)
        1.91
    """
    if figs < 1:
        raise ValueError(f"Number of significant digits must be >= 1, got {figs}")

    if isinstance(value, complex):
        return complex(sigfigs(value.real, figs), sigfigs(value.imag, figs))

    if value == 0:
        return 0.0

    round_digits = figs - math.ceil(math.log10(abs(value)))
    if round_digits > sys.float_info.max_10_exp:
        return 0.0

    return round(value, round_digits)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: complex,
    b: complex,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение real/complex с учётом машинной точности.

    Алгоритм (cmath.isclose):
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return cmath.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: complex, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol


def sequences_close(
    a: Sequence[complex],
    b: Sequence[complex],
    abs_tol: float = 10.0 ** -COMPARE_DIGITS,
) -> bool:
    """
    Поэлементное сравнение последовательностей с абсолютной толерантностью.

    Последовательности разной длины не равны.

    Examples:
        >>> sequences_close([1.0, 2.0], [1.0000001, 2.0])
        True
        >>> sequences_close([1.0], [1.0, 0.0])
        False
    """
    if len(a) != len(b):
        return False
    return all(abs(x - y) <= abs_tol for x, y in zip(a, b))


def sequences_equal_sigfigs(
    a: Sequence[complex],
    b: Sequence[complex],
    figs: int = COMPARE_DIGITS,
) -> bool:
    """
    Сравнение последовательностей по значащим цифрам (significant figures).

    Сравниваются ведущие цифры, а не абсолютная разница: 123456.7 и
    123457.1 равны при figs=6.
    """
    if len(a) != len(b):
        return False
    return all(sigfigs(x, figs) == sigfigs(y, figs) for x, y in zip(a, b))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое.

    Raises:
        ValueError: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
