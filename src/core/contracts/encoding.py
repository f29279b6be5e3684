"""
JSON Encoding — кодирование коэффициентов для диагностических контрактов

JSON не имеет complex типа, поэтому:
- int / float → JSON number
- complex → {"real": number, "imag": number}

Complex с нулевой мнимой частью остаётся объектом: тип коэффициента
сохраняется при round-trip.
"""

from typing import Any, Sequence, Union

JsonNumber = Union[int, float, dict]


def encode_number(value: complex) -> JsonNumber:
    """
    Кодирование числа в JSON-совместимое значение.

    Examples:
        >>> encode_number(3)
        3
        >>> encode_number(complex(1.5, -2))
        {'real': 1.5, 'imag': -2.0}
    """
    if isinstance(value, complex):
        return {"real": value.real, "imag": value.imag}
    return value


def decode_number(value: Any) -> complex:
    """
    Обратное преобразование encode_number.

    Raises:
        ValueError: Если значение не number и не {"real", "imag"}
    """
    if isinstance(value, dict):
        try:
            return complex(value["real"], value["imag"])
        except KeyError as e:
            raise ValueError(f"Complex value requires 'real' and 'imag' keys, got {value}") from e

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Expected JSON number or complex object, got {value!r}")

    return value


def encode_sequence(values: Sequence[complex]) -> list[JsonNumber]:
    return [encode_number(v) for v in values]


def decode_sequence(values: Sequence[Any]) -> list[complex]:
    return [decode_number(v) for v in values]
