"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация to_dict() от DivisionResult и OffsetSweepRecord
- Детекция нарушений required полей и типов
- Кодирование complex коэффициентов
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    DIVISION_RESULT,
    OFFSET_SWEEP_RECORD,
    DivisionResultValidator,
    OffsetSweepRecordValidator,
    SchemaLoader,
    decode_number,
    decode_sequence,
    encode_number,
    encode_sequence,
    validate_division_result,
    validate_offset_sweep_record,
)
from src.core.domain import FFTDivisionOptions, Polynomial
from src.polynomial import SweepConfig, fft_divide, sweep_offsets


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def division_operands():
    a = Polynomial([-33, -97, -65])
    b = Polynomial([2, 1])
    return a * b, b, a


@pytest.fixture
def valid_division_result():
    return {
        "quotient": [1.0, 2.0],
        "padding": None,
        "self_offset": None,
        "other_offset": None,
        "buffer": None,
    }


# =============================================================================
# ТЕСТЫ SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузки схем"""

    def test_schemas_exist(self) -> None:
        loader = SchemaLoader()
        assert (loader.schema_dir / "division_result.json").exists()
        assert (loader.schema_dir / "offset_sweep_record.json").exists()

    def test_schemas_are_valid_json(self) -> None:
        loader = SchemaLoader()
        for name in ("division_result", "offset_sweep_record"):
            with open(loader.schema_dir / f"{name}.json", "r", encoding="utf-8") as f:
                assert json.load(f)["title"]

    def test_load_caches(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("division_result") is loader.load_schema("division_result")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_available(self) -> None:
        assert SchemaLoader().available() == [DIVISION_RESULT, OFFSET_SWEEP_RECORD]

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# ТЕСТЫ DIVISION RESULT
# =============================================================================


class TestDivisionResultContract:
    """Тесты контракта division_result"""

    def test_valid_sample(self, valid_division_result) -> None:
        validate_division_result(valid_division_result)

    def test_fft_result_without_details(self, division_operands) -> None:
        dividend, divisor, _ = division_operands
        validate_division_result(fft_divide(dividend, divisor).to_dict())

    def test_fft_result_with_details(self, division_operands) -> None:
        dividend, divisor, _ = division_operands
        result = fft_divide(dividend, divisor, FFTDivisionOptions(details=True))
        data = result.to_dict()
        validate_division_result(data)
        assert data["padding"] == 0
        assert len(data["buffer"]) == len(dividend.coefficients)

    def test_complex_result(self) -> None:
        a = Polynomial([1j, 2])
        b = Polynomial([1, 2j])
        data = fft_divide(a * b, b).to_dict()
        validate_division_result(data)
        assert set(data["quotient"][0]) == {"real", "imag"}

    def test_result_is_json_serializable(self, division_operands) -> None:
        dividend, divisor, _ = division_operands
        data = fft_divide(dividend, divisor, FFTDivisionOptions(details=True)).to_dict()
        assert json.loads(json.dumps(data)) == data

    def test_missing_required_field(self, valid_division_result) -> None:
        del valid_division_result["buffer"]
        with pytest.raises(ValidationError):
            validate_division_result(valid_division_result)

    def test_empty_quotient(self, valid_division_result) -> None:
        valid_division_result["quotient"] = []
        assert not DivisionResultValidator().is_valid(valid_division_result)

    def test_negative_padding(self, valid_division_result) -> None:
        valid_division_result["padding"] = -1
        with pytest.raises(ValidationError):
            validate_division_result(valid_division_result)

    def test_string_coefficient(self, valid_division_result) -> None:
        valid_division_result["quotient"] = ["1.0"]
        with pytest.raises(ValidationError):
            validate_division_result(valid_division_result)

    def test_incomplete_complex(self, valid_division_result) -> None:
        valid_division_result["quotient"] = [{"real": 1.0}]
        with pytest.raises(ValidationError):
            validate_division_result(valid_division_result)

    def test_additional_properties(self, valid_division_result) -> None:
        valid_division_result["extra"] = 1
        errors = list(DivisionResultValidator().iter_errors(valid_division_result))
        assert len(errors) == 1

    def test_describe_errors_paths(self, valid_division_result) -> None:
        valid_division_result["quotient"] = [1.0, "x"]
        valid_division_result["padding"] = -1
        messages = DivisionResultValidator().describe_errors(valid_division_result)
        assert len(messages) == 2
        assert messages[0].startswith("padding: ")
        assert messages[1].startswith("quotient/1: ")


# =============================================================================
# ТЕСТЫ OFFSET SWEEP RECORD
# =============================================================================


class TestOffsetSweepRecordContract:
    """Тесты контракта offset_sweep_record"""

    def test_sweep_records_valid(self, division_operands) -> None:
        dividend, divisor, expected = division_operands
        config = SweepConfig(pad_range=(0, 2), self_offset_range=(0, 2))
        validator = OffsetSweepRecordValidator()
        for record in sweep_offsets(dividend, divisor, expected, config):
            validator.validate(record.to_dict())

    def test_degenerate_record_valid(self) -> None:
        # x - 1 не делит x^2 + 2x + 3: спектр вырожден
        config = SweepConfig(pad_range=(0, 0))
        (record,) = sweep_offsets(
            Polynomial([1, 2, 3]), Polynomial([1, -1]), Polynomial([1, 3]), config
        )
        assert record.degenerate
        validate_offset_sweep_record(record.to_dict())

    def test_degenerate_with_offset_rejected(self) -> None:
        data = {
            "padding": 0,
            "self_offset": 0,
            "other_offset": 0,
            "found_offset": 2,
            "degenerate": True,
            "quotient": [],
        }
        with pytest.raises(ValidationError):
            validate_offset_sweep_record(data)

    def test_degenerate_with_quotient_rejected(self) -> None:
        data = {
            "padding": 0,
            "self_offset": 0,
            "other_offset": 0,
            "found_offset": None,
            "degenerate": True,
            "quotient": [1.0],
        }
        with pytest.raises(ValidationError):
            validate_offset_sweep_record(data)

    def test_degenerate_must_be_boolean(self) -> None:
        data = {
            "padding": 0,
            "self_offset": 0,
            "other_offset": 0,
            "found_offset": None,
            "degenerate": "no",
            "quotient": [],
        }
        with pytest.raises(ValidationError):
            validate_offset_sweep_record(data)


# =============================================================================
# ТЕСТЫ ENCODING
# =============================================================================


class TestEncoding:
    """Тесты кодирования чисел в JSON"""

    def test_real_passthrough(self) -> None:
        assert encode_number(3) == 3
        assert encode_number(-1.5) == -1.5

    def test_complex_object(self) -> None:
        assert encode_number(complex(1.5, -2)) == {"real": 1.5, "imag": -2.0}

    def test_decode_inverse(self) -> None:
        values = [1, -2.5, complex(0, 1)]
        assert decode_sequence(encode_sequence(values)) == values

    def test_decode_rejects_bool(self) -> None:
        with pytest.raises(ValueError):
            decode_number(True)

    def test_decode_rejects_incomplete_complex(self) -> None:
        with pytest.raises(ValueError, match="real"):
            decode_number({"real": 1.0})
