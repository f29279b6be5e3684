"""
Long Division — точное деление полиномов

Классическое деление столбиком: на каждом шаге старший член текущего
остатка исключается вычитанием отмасштабированной и выровненной копии
делителя; масштаб становится очередным коэффициентом частного.

Сложность: O(n·m) для операндов длины n и m.

ИЗВЕСТНОЕ ОГРАНИЧЕНИЕ:
Для float коэффициентов деление точное только с точностью до округления.
Ошибка накапливается примерно линейно по числу шагов исключения
(order(dividend) - order(divisor) + 1). Для int коэффициентов частное
вычисляется через true division и тоже становится float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dividend == quotient * divisor + remainder (с точностью до округления)
2. order(remainder) < degree(divisor) или remainder — нулевой полином
3. Нулевой делитель → DivisionByZero (никогда не NaN/Inf)
"""

import logging
from typing import Iterator

from src.core.domain.division import LongDivisionResult, LongDivisionStep
from src.core.domain.polynomial import Polynomial
from src.core.errors import DivisionByZero

logger = logging.getLogger(__name__)


def long_divide_steps(dividend: Polynomial, divisor: Polynomial) -> Iterator[LongDivisionStep]:
    """
    Пошаговое деление: yield одного LongDivisionStep на каждый шаг исключения.

    Ведущие нули делителя удаляются перед делением. Если делимое короче
    делителя, шагов нет.

    Raises:
        DivisionByZero: Если все коэффициенты делителя равны 0
    """
    divisor = divisor.canonical()
    if divisor.is_zero():
        raise DivisionByZero(f"Cannot divide {dividend} by the zero polynomial")

    lead = divisor.coefficients[0]
    tail = divisor.coefficients[1:]
    remainder = list(dividend.coefficients)
    steps = len(remainder) - len(divisor.coefficients) + 1

    for idx in range(max(steps, 0)):
        coefficient = remainder[idx] / lead

        # Исключение старшего члена; сам член обнуляется явно
        remainder[idx] = 0
        for j, c in enumerate(tail, start=1):
            remainder[idx + j] -= coefficient * c

        yield LongDivisionStep(index=idx, coefficient=coefficient, remainder=tuple(remainder))


def long_divide(dividend: Polynomial, divisor: Polynomial) -> LongDivisionResult:
    """
    Деление dividend на divisor столбиком.

    Args:
        dividend: Делимое
        divisor: Делитель (ведущие нули допускаются)

    Returns:
        LongDivisionResult(quotient, remainder); remainder канонический

    Raises:
        DivisionByZero: Если все коэффициенты делителя равны 0

    Examples:
        >>> q, r = long_divide(Polynomial([1, 4, 6, 4, 1]), Polynomial([1, 1]))
        >>> q.coefficients
        (1.0, 3.0, 3.0, 1.0)
        >>> r.coefficients
        (0,)
    """
    divisor_len = len(divisor.canonical().coefficients)

    quotient = []
    remainder = dividend.coefficients
    for step in long_divide_steps(dividend, divisor):
        quotient.append(step.coefficient)
        remainder = step.remainder

    if not quotient:
        # Делимое короче делителя: частное 0, остаток равен делимому
        return LongDivisionResult(
            quotient=Polynomial.zero(),
            remainder=dividend.canonical(),
        )

    logger.debug(
        "long_divide: %d elimination steps, dividend order %d, divisor order %d",
        len(quotient),
        dividend.order,
        divisor_len - 1,
    )

    # Остаток: младшие (divisor_len - 1) коэффициентов
    tail = remainder[len(remainder) - divisor_len + 1:] if divisor_len > 1 else ()
    remainder_poly = Polynomial(tail).canonical() if tail else Polynomial.zero()

    return LongDivisionResult(quotient=Polynomial(quotient), remainder=remainder_poly)
