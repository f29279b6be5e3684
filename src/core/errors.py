"""
Errors — таксономия ошибок полиномиального ядра

Все ошибки локальные и синхронные: поднимаются в точке обнаружения,
автоматических повторов нет. Перебор padding/offset — явный цикл
вызывающего кода, а не внутреннее восстановление.

ИНВАРИАНТ: ни одна операция не возвращает NaN/Inf вместо ошибки.
"""


class PolynomialError(Exception):
    """Базовый класс всех ошибок полиномиального ядра."""
    pass


class InvalidPolynomial(PolynomialError):
    """Пустая, нечисловая или не-finite последовательность коэффициентов."""
    pass


class DivisionByZero(PolynomialError, ZeroDivisionError):
    """
    Деление на нулевой полином (все коэффициенты делителя равны 0).

    Наследует ZeroDivisionError, чтобы обычный `except ZeroDivisionError`
    в вызывающем коде продолжал работать.
    """
    pass


class DegenerateSpectrum(PolynomialError):
    """
    Ни один padding из диапазона не избегает near-zero bin в спектре делителя.

    Деление в частотной области в таком случае численно бессмысленно.
    """
    pass


class InvalidDegree(PolynomialError):
    """Поиск корней для нулевого полинома или неподдерживаемой степени."""
    pass


class LengthMismatch(PolynomialError, ValueError):
    """Утилита выравнивания не может согласовать запрошенные длины."""
    pass
