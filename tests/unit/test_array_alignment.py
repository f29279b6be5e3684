"""
Тесты для модуля Array Alignment

Проверяет:
1. Zero-padding для всех политик выравнивания
2. Циклический сдвиг (rotate) и shift с заполнением нулями
3. Округление последовательностей (complex покомпонентно)
4. Presentation-only сужение complex → real
"""

import pytest
from pydantic import ValidationError

from src.core.errors import LengthMismatch
from src.core.math.array_alignment import (
    AlignmentSpec,
    PadAlignment,
    narrow_if_real,
    pad,
    rotate_left,
    rotate_right,
    round_sequence,
    shift_left,
    shift_right,
    strip_leading_zeros,
    zero_pad,
)

# =============================================================================
# ТЕСТЫ PADDING
# =============================================================================


class TestZeroPad:
    """Тесты для zero_pad"""

    def test_pad_at_end_default(self) -> None:
        assert zero_pad([1, 2, 3], 5) == [1, 2, 3, 0, 0]

    def test_pad_at_start(self) -> None:
        assert zero_pad([1, 2, 3], 5, PadAlignment.PAD_AT_START) == [0, 0, 1, 2, 3]

    def test_split_even(self) -> None:
        assert zero_pad([1, 2], 4, PadAlignment.SPLIT) == [0, 1, 2, 0]

    def test_split_odd_extra_after(self) -> None:
        """При нечётном количестве больше нулей после данных"""
        assert zero_pad([1, 2, 3], 6, PadAlignment.SPLIT) == [0, 1, 2, 3, 0, 0]

    def test_same_length_returns_copy(self) -> None:
        values = [1, 2, 3]
        result = zero_pad(values, 3)
        assert result == values
        assert result is not values

    def test_input_not_mutated(self) -> None:
        values = (1, 2)
        zero_pad(values, 4, PadAlignment.PAD_AT_START)
        assert values == (1, 2)

    def test_shorter_target_raises(self) -> None:
        with pytest.raises(LengthMismatch):
            zero_pad([1, 2, 3], 2)

    def test_length_mismatch_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            zero_pad([1, 2, 3], 0)


class TestAlignmentSpec:
    """Тесты для AlignmentSpec и pad"""

    def test_pad_with_spec(self) -> None:
        spec = AlignmentSpec(padding=2, alignment=PadAlignment.PAD_AT_START)
        assert pad([5, 6], spec) == [0, 0, 5, 6]

    def test_default_alignment(self) -> None:
        assert AlignmentSpec(padding=1).alignment == PadAlignment.PAD_AT_END

    def test_negative_padding_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AlignmentSpec(padding=-1)

    def test_frozen(self) -> None:
        spec = AlignmentSpec(padding=1)
        with pytest.raises(ValidationError):
            spec.padding = 3


class TestStripLeadingZeros:
    """Тесты для strip_leading_zeros"""

    def test_strips_only_leading(self) -> None:
        assert strip_leading_zeros([0, 0, 1, 0, 2]) == [1, 0, 2]

    def test_all_zeros(self) -> None:
        assert strip_leading_zeros([0, 0.0, 0j]) == []

    def test_no_zeros(self) -> None:
        assert strip_leading_zeros([3, 0]) == [3, 0]


# =============================================================================
# ТЕСТЫ ROTATE / SHIFT
# =============================================================================


class TestRotate:
    """Тесты для rotate_left / rotate_right"""

    def test_rotate_left(self) -> None:
        assert rotate_left([1, 2, 3, 4], 1) == [2, 3, 4, 1]

    def test_rotate_right(self) -> None:
        assert rotate_right([1, 2, 3, 4], 1) == [4, 1, 2, 3]

    def test_negative_rotates_other_way(self) -> None:
        assert rotate_left([1, 2, 3, 4], -1) == rotate_right([1, 2, 3, 4], 1)

    def test_modulo_length(self) -> None:
        assert rotate_left([1, 2, 3], 4) == [2, 3, 1]
        assert rotate_left([1, 2, 3], 3) == [1, 2, 3]

    def test_inverse(self) -> None:
        values = [1, 2, 3, 4, 5]
        for n in range(-7, 8):
            assert rotate_right(rotate_left(values, n), n) == values

    def test_empty(self) -> None:
        assert rotate_left([], 3) == []


class TestShift:
    """Тесты для shift_left / shift_right"""

    def test_shift_left(self) -> None:
        assert shift_left([1, 2, 3, 4], 1) == [2, 3, 4, 0]

    def test_shift_right(self) -> None:
        assert shift_right([1, 2, 3, 4], 2) == [0, 0, 1, 2]

    def test_shift_beyond_length(self) -> None:
        assert shift_left([1, 2], 5) == [0, 0]
        assert shift_right([1, 2], 5) == [0, 0]

    def test_shift_zero(self) -> None:
        assert shift_left([1, 2], 0) == [1, 2]

    def test_negative_shift_raises(self) -> None:
        with pytest.raises(ValueError):
            shift_left([1, 2], -1)
        with pytest.raises(ValueError):
            shift_right([1, 2], -1)


# =============================================================================
# ТЕСТЫ ROUNDING / NARROWING
# =============================================================================


class TestRoundSequence:
    """Тесты для round_sequence"""

    def test_real(self) -> None:
        assert round_sequence([1.23456789, -0.0000001], 6) == [1.234568, 0.0]

    def test_complex_components(self) -> None:
        """2 + 4e-7j → 2 + 0j, тип complex сохраняется"""
        result = round_sequence([complex(2, 4e-7)], 6)
        assert result == [complex(2, 0)]
        assert isinstance(result[0], complex)

    def test_idempotent(self) -> None:
        values = [1.23456789, complex(3.14159265, -2.71828182)]
        once = round_sequence(values, 4)
        assert round_sequence(once, 4) == once


class TestNarrowIfReal:
    """Тесты для narrow_if_real"""

    def test_narrows_zero_imag(self) -> None:
        result = narrow_if_real([complex(1, 0), complex(-2.5, 0)])
        assert result == [1.0, -2.5]
        assert all(isinstance(v, float) for v in result)

    def test_tolerance(self) -> None:
        assert narrow_if_real([complex(1, 1e-9)], 1e-6) == [1.0]

    def test_keeps_complex_when_any_imag(self) -> None:
        """Сужается вся последовательность или ничего"""
        values = [complex(1, 0), complex(2, 1)]
        assert narrow_if_real(values) == values
        assert isinstance(narrow_if_real(values)[0], complex)

    def test_real_input_unchanged(self) -> None:
        assert narrow_if_real([1, 2.5]) == [1, 2.5]
