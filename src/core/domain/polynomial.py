"""
Polynomial — immutable полином с числовыми коэффициентами

Value-type модель: упорядоченная последовательность коэффициентов фиксированной
длины, каждый real (int/float) или complex.

Соглашение об индексации:
    index 0 — коэффициент при старшей степени
    index (length - 1) — свободный член
    order = length - 1

Пример:
    # 5*x^2 + 2*x - 6
    Polynomial([5, 2, -6])

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Конструирование никогда не удаляет ведущие нули (для этого canonical())
2. Пустая последовательность, нечисловые значения и NaN/Inf → InvalidPolynomial
3. len(A * B) == len(A) + len(B) - 1
4. Complex никогда не сужается до real в арифметике (только в отображении)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from src.core.errors import DivisionByZero, InvalidPolynomial
from src.core.math.array_alignment import (
    PadAlignment,
    narrow_if_real,
    strip_leading_zeros,
    zero_pad,
)
from src.core.math.numerical_safeguards import (
    is_number,
    is_valid_number,
    round_value,
    sigfigs,
    to_python_number,
)

Scalar = Union[int, float, complex]


# =============================================================================
# ENUMS
# =============================================================================


class NumericKind(str, Enum):
    """Тег числового типа коэффициентов."""

    REAL = "real"
    COMPLEX = "complex"


# =============================================================================
# POLYNOMIAL
# =============================================================================


@dataclass(frozen=True)
class Polynomial:
    """
    Полином как immutable кортеж коэффициентов (старшая степень первой).

    Поддерживает вычисление (Horner), сложение, вычитание, умножение
    (свёртка), масштабирование, производную, округление и отображение.
    Деление полинома на полином — в src.polynomial (long_divide, fft_divide).
    """

    coefficients: tuple

    def __init__(self, coefficients: Iterable[Scalar]):
        if isinstance(coefficients, (str, bytes)):
            raise InvalidPolynomial(f"Coefficients must be numeric, got {coefficients!r}")

        try:
            values = tuple(to_python_number(c) for c in coefficients)
        except TypeError as e:
            raise InvalidPolynomial(
                f"Coefficients must be an iterable of numbers, got {coefficients!r}"
            ) from e

        if not values:
            raise InvalidPolynomial("Polynomial requires at least one coefficient")

        for idx, value in enumerate(values):
            if not is_number(value):
                raise InvalidPolynomial(
                    f"All coefficients must be numeric, got {value!r} at index {idx}"
                )
            if not is_valid_number(value):
                raise InvalidPolynomial(
                    f"Coefficient at index {idx} must be finite (not NaN/Inf), got {value}"
                )

        object.__setattr__(self, "coefficients", values)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Polynomial":
        """Явный нулевой полином: один коэффициент, равный 0."""
        return cls([0])

    @classmethod
    def constant(cls, value: Scalar) -> "Polynomial":
        """Полином нулевого порядка."""
        return cls([value])

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def order(self) -> int:
        """Объявленный порядок: length - 1 (ведущие нули учитываются)."""
        return len(self.coefficients) - 1

    @property
    def degree(self) -> int:
        """Фактическая степень: порядок canonical() (0 для нулевого полинома)."""
        return self.canonical().order

    @property
    def kind(self) -> NumericKind:
        """COMPLEX если хотя бы один коэффициент complex, иначе REAL."""
        if any(isinstance(c, complex) for c in self.coefficients):
            return NumericKind.COMPLEX
        return NumericKind.REAL

    def is_zero(self, tol: float = 0.0) -> bool:
        """True если все коэффициенты по модулю <= tol."""
        return all(abs(c) <= tol for c in self.coefficients)

    def canonical(self) -> "Polynomial":
        """
        Удаление ведущих нулевых коэффициентов.

        Полином из одних нулей превращается в Polynomial.zero().
        """
        stripped = strip_leading_zeros(self.coefficients)
        if not stripped:
            return Polynomial.zero()
        return Polynomial(stripped)

    # -------------------------------------------------------------------------
    # Вычисление
    # -------------------------------------------------------------------------

    def evaluate(self, x: Scalar) -> Scalar:
        """
        Значение полинома в точке x методом Горнера.

        Накопление от старшего коэффициента к свободному члену, поэтому
        одинаково работает для real и complex x.

        Examples:
            >>> Polynomial([4, 0, -2]).evaluate(-2)
            14
            >>> Polynomial([4, 0, -2]).evaluate(1j)
            (-6+0j)
        """
        acc: Scalar = 0
        for c in self.coefficients:
            acc = acc * x + c
        return acc

    def __call__(self, x: Scalar) -> Scalar:
        return self.evaluate(x)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        """
        Сумма полиномов.

        Более короткий операнд дополняется нулями со стороны старших
        степеней, чтобы свободные члены совпали. Длина результата равна
        длине более длинного операнда; ведущие нули не удаляются.
        """
        other = _as_polynomial(other)
        length = max(len(self.coefficients), len(other.coefficients))
        a = zero_pad(self.coefficients, length, PadAlignment.PAD_AT_START)
        b = zero_pad(other.coefficients, length, PadAlignment.PAD_AT_START)
        return Polynomial([x + y for x, y in zip(a, b)])

    def negate(self) -> "Polynomial":
        return Polynomial([-c for c in self.coefficients])

    def subtract(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        return self.add(_as_polynomial(other).negate())

    def multiply(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        """
        Произведение полиномов как полная дискретная свёртка коэффициентов.

        Каноническое, всегда корректное умножение: используется для
        проверки обоих делителей. Для int коэффициентов результат точный.

        len(result) == len(self) + len(other) - 1
        """
        if is_number(other):
            return self.scale(other)

        other = _as_polynomial(other)
        a = self.coefficients
        b = other.coefficients
        result: list[Scalar] = [0] * (len(a) + len(b) - 1)

        for i, x in enumerate(a):
            if x == 0:
                continue
            for j, y in enumerate(b):
                result[i + j] += x * y

        return Polynomial(result)

    def scale(self, factor: Scalar) -> "Polynomial":
        """Умножение каждого коэффициента на скаляр."""
        return Polynomial([c * factor for c in self.coefficients])

    def __add__(self, other):
        if not isinstance(other, Polynomial) and not is_number(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not is_number(other):
            return NotImplemented
        return Polynomial.constant(other).add(self)

    def __sub__(self, other):
        if not isinstance(other, Polynomial) and not is_number(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not is_number(other):
            return NotImplemented
        return Polynomial.constant(other).subtract(self)

    def __neg__(self) -> "Polynomial":
        return self.negate()

    def __mul__(self, other):
        if not isinstance(other, Polynomial) and not is_number(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not is_number(other):
            return NotImplemented
        return self.scale(other)

    def __truediv__(self, other):
        # Полином / полином: через long_divide или fft_divide
        if not is_number(other):
            return NotImplemented
        if other == 0:
            raise DivisionByZero("Cannot divide polynomial by zero scalar")
        return Polynomial([c / other for c in self.coefficients])

    # -------------------------------------------------------------------------
    # Производная / округление
    # -------------------------------------------------------------------------

    def derivative(self, n: int = 1) -> "Polynomial":
        """
        Производная n-го порядка.

        Examples:
            >>> Polynomial([3, 6, 2]).derivative().coefficients
            (6, 6)
            >>> Polynomial([3, 2, 1, 0]).derivative(2).coefficients
            (18, 4)
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"Derivative order must be a positive integer, got {n!r}")

        if n > self.order:
            return Polynomial.zero()

        result = []
        for idx, c in enumerate(self.coefficients[: self.order - n + 1]):
            exponent = self.order - idx
            for _ in range(n):
                c *= exponent
                exponent -= 1
            result.append(c)

        return Polynomial(result)

    def round(self, digits: int = 0) -> "Polynomial":
        """Округление коэффициентов до digits знаков после запятой."""
        return Polynomial([round_value(c, digits) for c in self.coefficients])

    def sigfigs(self, figs: int) -> "Polynomial":
        """Округление коэффициентов до figs значащих цифр."""
        return Polynomial([sigfigs(c, figs) for c in self.coefficients])

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def to_display_string(self) -> str:
        """
        Человекочитаемое выражение.

        Свободный член без x, степень 1 как `c * x`, старшие как `c * x^n`.
        Нулевые члены пропускаются, знак члена определяет `" + "` / `" - "`,
        после знака выводится модуль коэффициента.

        Examples:
            >>> Polynomial([1, -2, 0, 3]).to_display_string()
            '1 * x^3 - 2 * x^2 + 3'
            >>> Polynomial([-1.5, 4]).to_display_string()
            '-1.5 * x + 4'
        """
        # Сужение complex → real только для отображения
        coefficients = narrow_if_real(self.coefficients)
        terms: list[str] = []

        for idx, c in enumerate(coefficients):
            if c == 0:
                continue

            if isinstance(c, complex):
                negative = False
                magnitude = f"({_format_number(c)})"
            else:
                negative = c < 0
                magnitude = _format_number(-c if negative else c)

            power = self.order - idx
            if power == 0:
                term = magnitude
            elif power == 1:
                term = f"{magnitude} * x"
            else:
                term = f"{magnitude} * x^{power}"

            if not terms:
                terms.append(f"-{term}" if negative else term)
            else:
                terms.append(f" - {term}" if negative else f" + {term}")

        return "".join(terms) if terms else "0"

    def __str__(self) -> str:
        return self.to_display_string()


# =============================================================================
# HELPERS
# =============================================================================


def _as_polynomial(value: Union[Polynomial, Scalar]) -> Polynomial:
    if isinstance(value, Polynomial):
        return value
    if is_number(value):
        return Polynomial.constant(value)
    raise TypeError(f"Expected Polynomial or number, got {type(value).__name__}")


def _format_number(value: Scalar) -> str:
    if isinstance(value, complex):
        real = _format_number(value.real)
        imag = _format_number(abs(value.imag))
        sign = "-" if value.imag < 0 else "+"
        return f"{real}{sign}{imag}j"

    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))

    return repr(value)
