"""
Roots — поиск корней полиномов

Closed-form решение для степени <= 2 полностью в complex арифметике:
отрицательный дискриминант даёт пару комплексно-сопряжённых корней, а не
ошибку. Для произвольной степени — собственные значения сопровождающей
(companion) матрицы.

Порядок корней детерминирован:
- квадратное уравнение: (-b + sqrt(D)) / 2a, затем (-b - sqrt(D)) / 2a
- companion_roots: сортировка по (real, imag)
Кратный корень возвращается столько раз, какова его кратность.
"""

import cmath
from typing import Final

import numpy as np

from src.core.domain.polynomial import Polynomial
from src.core.errors import InvalidDegree
from src.core.math.numerical_safeguards import to_python_number

# Максимальная степень для closed-form решения
MAX_CLOSED_FORM_DEGREE: Final[int] = 2


def roots(polynomial: Polynomial) -> tuple[complex, ...]:
    """
    Корни полинома степени <= 2.

    Полином сначала приводится к canonical(): нулевой старший
    коэффициент понижает степень (a = 0 в квадратном → линейное).

    Returns:
        degree 0 → (), degree 1 → (-b/a,), degree 2 → два корня

    Raises:
        InvalidDegree: Для нулевого полинома или степени > 2

    Examples:
        >>> roots(Polynomial([2, -6])) == (3,)
        True
        >>> roots(Polynomial([1, 0, 4])) == (2j, -2j)
        True
    """
    canonical = polynomial.canonical()
    if canonical.is_zero():
        raise InvalidDegree("Cannot find roots of the zero polynomial")

    degree = canonical.order
    if degree > MAX_CLOSED_FORM_DEGREE:
        raise InvalidDegree(
            f"Closed-form roots support degree <= {MAX_CLOSED_FORM_DEGREE}, got {degree}; "
            f"use companion_roots for higher degrees"
        )

    coefficients = [complex(c) for c in canonical.coefficients]

    if degree == 0:
        return ()

    if degree == 1:
        a, b = coefficients
        return (-b / a,)

    a, b, c = coefficients
    disc = cmath.sqrt(b * b - 4 * a * c)
    denom = 2 * a
    return ((-b + disc) / denom, (-b - disc) / denom)


def companion_roots(polynomial: Polynomial) -> tuple[complex, ...]:
    """
    Корни полинома любой степени как собственные значения companion матрицы.

    Для монического x^n + c1·x^(n-1) + ... + cn companion матрица имеет
    -c1..-cn в первой строке и единицы на поддиагонали.

    Raises:
        InvalidDegree: Для нулевого полинома
    """
    canonical = polynomial.canonical()
    if canonical.is_zero():
        raise InvalidDegree("Cannot find roots of the zero polynomial")

    degree = canonical.order
    if degree == 0:
        return ()

    coefficients = np.asarray(canonical.coefficients, dtype=np.complex128)
    monic = coefficients[1:] / coefficients[0]

    companion = np.zeros((degree, degree), dtype=np.complex128)
    companion[0, :] = -monic
    companion[1:, :-1] = np.eye(degree - 1, dtype=np.complex128)

    eigenvalues = [complex(to_python_number(v)) for v in np.linalg.eigvals(companion)]
    return tuple(sorted(eigenvalues, key=lambda z: (z.real, z.imag)))
