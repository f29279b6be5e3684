"""
Diagnostics Contract Validators

Проверка JSON-представлений диагностики деления (DivisionResult.to_dict,
OffsetSweepRecord.to_dict) против JSON Schema (Draft 2020-12) из
contracts/schema/. Эти словари — единственный формат, в котором таблицы
перебора padding/offsets покидают ядро.

Контракты:
- division_result: частное + (опционально) padding, offsets, буфер
- offset_sweep_record: строка таблицы перебора offsets
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

# Корень репозитория: src/core/contracts/validators.py → 4 уровня вверх
DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

DIVISION_RESULT: Final[str] = "division_result"
OFFSET_SWEEP_RECORD: Final[str] = "offset_sweep_record"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов.

    Каждая схема проходит meta-validation при первой загрузке.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> list[str]:
        """Имена всех схем в каталоге (без расширения), по алфавиту."""
        return sorted(p.stem for p in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'division_result')

        Returns:
            Схема как dict (один и тот же объект при повторных вызовах)

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор словаря диагностики против одной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое (наиболее релевантное) нарушение схемы
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения, отсортированные по пути внутри документа."""
        errors = self.validator.iter_errors(data)
        return iter(sorted(errors, key=lambda e: [str(p) for p in e.path]))

    def describe_errors(self, data: Dict[str, Any]) -> list[str]:
        """Человекочитаемые сообщения вида 'quotient/0: ...' для логов harness."""
        return [
            f"{'/'.join(str(p) for p in error.path) or '<root>'}: {error.message}"
            for error in self.iter_errors(data)
        ]


class DivisionResultValidator(ContractValidator):
    """Контракт DivisionResult.to_dict()."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(DIVISION_RESULT, loader)


class OffsetSweepRecordValidator(ContractValidator):
    """Контракт OffsetSweepRecord.to_dict()."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(OFFSET_SWEEP_RECORD, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_division_result(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если словарь не соответствует division_result
    """
    DivisionResultValidator().validate(data)


def validate_offset_sweep_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если словарь не соответствует offset_sweep_record
    """
    OffsetSweepRecordValidator().validate(data)


__all__ = [
    "DEFAULT_SCHEMA_DIR",
    "DIVISION_RESULT",
    "OFFSET_SWEEP_RECORD",
    "SchemaLoader",
    "ContractValidator",
    "DivisionResultValidator",
    "OffsetSweepRecordValidator",
    "validate_division_result",
    "validate_offset_sweep_record",
    "ValidationError",
]
