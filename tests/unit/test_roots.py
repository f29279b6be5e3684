"""
Тесты для Root Finder

Проверяет:
1. Closed-form корни для степени 0, 1, 2
2. Комплексные корни при отрицательном дискриминанте
3. Кратные корни и понижение степени через canonical()
4. InvalidDegree для нулевого полинома и степени > 2
5. companion_roots для произвольной степени
"""

import pytest

from src.core.domain.polynomial import Polynomial
from src.core.errors import InvalidDegree
from src.core.math.numerical_safeguards import sequences_close
from src.polynomial.roots import MAX_CLOSED_FORM_DEGREE, companion_roots, roots

# =============================================================================
# ТЕСТЫ CLOSED-FORM
# =============================================================================


class TestRoots:
    """Тесты для roots"""

    def test_constant_has_no_roots(self) -> None:
        assert roots(Polynomial([5])) == ()

    def test_linear(self) -> None:
        assert roots(Polynomial([2, -6])) == (3,)

    def test_quadratic_real(self) -> None:
        """x^2 - 3x + 2 = (x - 1)(x - 2)"""
        assert roots(Polynomial([1, -3, 2])) == (2, 1)

    def test_quadratic_complex(self) -> None:
        """x^2 + 4: отрицательный дискриминант даёт ±2i"""
        assert roots(Polynomial([1, 0, 4])) == (2j, -2j)

    def test_repeated_root_returned_twice(self) -> None:
        assert roots(Polynomial([1, -2, 1])) == (1, 1)

    def test_results_are_complex(self) -> None:
        assert all(isinstance(r, complex) for r in roots(Polynomial([1, -3, 2])))

    def test_roots_evaluate_to_zero(self) -> None:
        p = Polynomial([3, 2, 7])
        for r in roots(p):
            assert abs(p(r)) < 1e-9

    def test_complex_coefficients(self) -> None:
        """(x - i)(x + 2) = x^2 + (2 - i)x - 2i"""
        p = Polynomial([1, 2 - 1j, -2j])
        for r in roots(p):
            assert abs(p(r)) < 1e-9

    def test_leading_zero_lowers_degree(self) -> None:
        """a = 0 в квадратном → линейное уравнение"""
        assert roots(Polynomial([0, 2, -6])) == (3,)


class TestRootsErrors:
    """Тесты InvalidDegree"""

    def test_zero_polynomial(self) -> None:
        with pytest.raises(InvalidDegree):
            roots(Polynomial([0, 0, 0]))

    def test_degree_too_high(self) -> None:
        assert MAX_CLOSED_FORM_DEGREE == 2
        with pytest.raises(InvalidDegree, match="companion_roots"):
            roots(Polynomial([1, 0, 0, -1]))


# =============================================================================
# ТЕСТЫ COMPANION MATRIX
# =============================================================================


class TestCompanionRoots:
    """Тесты для companion_roots"""

    def test_cubic(self) -> None:
        """(x - 1)(x - 2)(x - 3)"""
        result = companion_roots(Polynomial([1, -6, 11, -6]))
        assert sequences_close(result, [1, 2, 3], abs_tol=1e-9)

    def test_sorted_ascending(self) -> None:
        """(x + 2)(x - 1)(x - 4)"""
        result = companion_roots(Polynomial([1, -3, -6, 8]))
        assert sequences_close(result, [-2, 1, 4], abs_tol=1e-9)

    def test_agrees_with_closed_form(self) -> None:
        p = Polynomial([2, 3, 5])
        # Пара сопряжённых корней: сравнение по мнимой части
        closed = sorted(roots(p), key=lambda z: z.imag)
        companion = sorted(companion_roots(p), key=lambda z: z.imag)
        assert sequences_close(companion, closed, abs_tol=1e-9)

    def test_non_monic(self) -> None:
        result = companion_roots(Polynomial([2, -6]))
        assert sequences_close(result, [3], abs_tol=1e-12)

    def test_constant(self) -> None:
        assert companion_roots(Polynomial([0, 4])) == ()

    def test_zero_polynomial(self) -> None:
        with pytest.raises(InvalidDegree):
            companion_roots(Polynomial.zero())
