"""
Array Alignment — выравнивание числовых последовательностей

Утилиты подготовки буферов равной длины и сравнения результатов:
- Zero-padding с политикой выравнивания (в конец / в начало / split)
- Циклическая ротация влево/вправо (применение и поиск offset)
- Нециклический сдвиг с заполнением нулями
- Округление real/complex элементов
- Presentation-only сужение complex → real

Все функции чистые: вход не модифицируется, возвращается новый list.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. zero_pad никогда не обрезает: target_length < len(seq) → LengthMismatch
2. rotate_left(rotate_right(seq, n), n) == seq для любого n
3. narrow_if_real используется только для отображения, не в арифметике
"""

from enum import Enum
from typing import Sequence

from pydantic import BaseModel, Field

from src.core.errors import LengthMismatch
from src.core.math.numerical_safeguards import round_value


# =============================================================================
# ALIGNMENT SPEC
# =============================================================================


class PadAlignment(str, Enum):
    """
    Политика размещения нулей при padding.

    PAD_AT_END — данные остаются в начале, нули в конце
    PAD_AT_START — нули в начале, данные прижаты к концу
    SPLIT — нули делятся между началом и концом (данные по центру)
    """

    PAD_AT_END = "pad_at_end"
    PAD_AT_START = "pad_at_start"
    SPLIT = "split"


class AlignmentSpec(BaseModel):
    """
    Сколько нулей добавить к последовательности и по какой политике.

    Объект-параметр, а не хранимая сущность. Пример:
    AlignmentSpec(padding=2, alignment=PadAlignment.PAD_AT_END)
    превращает [1, 2, 3] в [1, 2, 3, 0, 0].
    """

    padding: int = Field(..., ge=0, description="Количество добавляемых нулей")
    alignment: PadAlignment = Field(
        PadAlignment.PAD_AT_END, description="Политика размещения нулей"
    )

    model_config = {"frozen": True}


# =============================================================================
# PADDING
# =============================================================================


def zero_pad(
    values: Sequence[complex],
    target_length: int,
    alignment: PadAlignment = PadAlignment.PAD_AT_END,
) -> list[complex]:
    """
    Дополнение последовательности нулями до target_length.

    Для SPLIT нули после данных получают большую половину при нечётном
    количестве: добавить 3 → 1 ноль до, 2 нуля после.

    Args:
        values: Исходная последовательность
        target_length: Целевая длина (>= len(values))
        alignment: Политика размещения нулей

    Returns:
        Новый list длины target_length

    Raises:
        LengthMismatch: Если target_length < len(values)

    Examples:
        >>> zero_pad([1, 2, 3], 5)
        [1, 2, 3, 0, 0]
        >>> zero_pad([1, 2, 3], 5, PadAlignment.PAD_AT_START)
        [0, 0, 1, 2, 3]
        >>> zero_pad([1, 2, 3], 6, PadAlignment.SPLIT)
        [0, 1, 2, 3, 0, 0]
    """
    add = target_length - len(values)
    if add < 0:
        raise LengthMismatch(
            f"Cannot pad sequence of length {len(values)} to shorter length {target_length}"
        )

    if alignment == PadAlignment.PAD_AT_END:
        after = add
    elif alignment == PadAlignment.PAD_AT_START:
        after = 0
    else:
        after = (add + 1) // 2

    before = add - after
    return [0] * before + list(values) + [0] * after


def pad(values: Sequence[complex], spec: AlignmentSpec) -> list[complex]:
    """Добавление spec.padding нулей по политике spec.alignment."""
    return zero_pad(values, len(values) + spec.padding, spec.alignment)


def strip_leading_zeros(values: Sequence[complex]) -> list[complex]:
    """
    Удаление нулей в начале последовательности.

    Последовательность из одних нулей превращается в пустой list.
    """
    for idx, value in enumerate(values):
        if value != 0:
            return list(values[idx:])
    return []


# =============================================================================
# ROTATION / SHIFT
# =============================================================================


def rotate_left(values: Sequence[complex], n: int) -> list[complex]:
    """
    Циклический сдвиг влево на n позиций (n по модулю длины).

    Отрицательный n сдвигает вправо.

    Examples:
        >>> rotate_left([1, 2, 3, 4], 1)
        [2, 3, 4, 1]
        >>> rotate_left([1, 2, 3, 4], -1)
        [4, 1, 2, 3]
    """
    if not values:
        return list(values)

    n %= len(values)
    return list(values[n:]) + list(values[:n])


def rotate_right(values: Sequence[complex], n: int) -> list[complex]:
    """
    Циклический сдвиг вправо на n позиций (rotate_left(values, -n)).

    Examples:
        >>> rotate_right([1, 2, 3, 4], 1)
        [4, 1, 2, 3]
    """
    return rotate_left(values, -n)


def shift_left(values: Sequence[complex], n: int) -> list[complex]:
    """
    Удаление первых n элементов и добавление n нулей в конец.

    Вправо не сдвигает: для этого shift_right.
    """
    if n < 0:
        raise ValueError(f"shift must be non-negative, got {n}")

    if n >= len(values):
        return [0] * len(values)

    return list(values[n:]) + [0] * n


def shift_right(values: Sequence[complex], n: int) -> list[complex]:
    """Удаление последних n элементов и добавление n нулей в начало."""
    if n < 0:
        raise ValueError(f"shift must be non-negative, got {n}")

    if n >= len(values):
        return [0] * len(values)

    return [0] * n + list(values[: len(values) - n])


# =============================================================================
# ROUNDING / NARROWING
# =============================================================================


def round_sequence(values: Sequence[complex], digits: int) -> list[complex]:
    """
    Округление каждого элемента до digits знаков после запятой.

    Для complex real и imag округляются независимо.

    Examples:
        >>> round_sequence([1.23456789, complex(2.0, 0.0000004)], 6)
        [1.234568, (2+0j)]
    """
    return [round_value(v, digits) for v in values]


def narrow_if_real(values: Sequence[complex], tolerance: float = 0.0) -> list[complex]:
    """
    Presentation-only: complex → real, если все мнимые части в пределах tolerance.

    Если хотя бы одна мнимая часть больше tolerance, последовательность
    возвращается без изменений (копией). НЕ использовать в арифметике.

    Examples:
        >>> narrow_if_real([complex(1, 0), complex(2, 1e-9)], 1e-6)
        [1.0, 2.0]
        >>> narrow_if_real([complex(1, 1)])
        [(1+1j)]
    """
    if all(abs(getattr(v, "imag", 0)) <= tolerance for v in values):
        return [v.real if isinstance(v, complex) else v for v in values]
    return list(values)
