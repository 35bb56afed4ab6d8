"""
Payload Contracts: JSON Schema для сериализованных матриц и векторов

JSON не знает бесконечностей, поэтому payload кодирует EPS строкой "EPS",
INF строкой "INF". Контракты (Draft 2020-12) лежат в contracts/schema/:
- maxplus_matrix.json: {"rows": [[scalar, ...], ...]}, минимум 1x1
- maxplus_vector.json: {"values": [scalar, ...]}

Схема проверяет структуру и токены; прямоугольность и NaN проверяет
MaxPlusMatrix / MaxPlusVector уже после декодирования.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Каталог контрактов: <корень проекта>/contracts/schema
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


class PayloadKind(str, Enum):
    """Вид payload и имя его схемы."""
    MATRIX = "maxplus_matrix"
    VECTOR = "maxplus_vector"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Читает схемы из каталога, проверяет их meta-схемой и кэширует."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файла нет
            ValueError: Если документ не является валидной Draft 2020-12 схемой
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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка payload против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.validator = Draft202012Validator((loader or _SCHEMA_LOADER).load_schema(schema_name))

    def validate(self, data: Any) -> None:
        """Raises: ValidationError на первом нарушении контракта."""
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class MatrixPayloadValidator(ContractValidator):
    def __init__(self):
        super().__init__(PayloadKind.MATRIX.value)


class VectorPayloadValidator(ContractValidator):
    def __init__(self):
        super().__init__(PayloadKind.VECTOR.value)


_VALIDATORS: Dict[PayloadKind, ContractValidator] = {}


def get_validator(kind: PayloadKind) -> ContractValidator:
    """Валидатор для вида payload (создаётся один раз)."""
    if kind not in _VALIDATORS:
        _VALIDATORS[kind] = ContractValidator(kind.value)
    return _VALIDATORS[kind]


def validate_matrix_payload(data: Any) -> None:
    """Raises: ValidationError если data не соответствует maxplus_matrix."""
    get_validator(PayloadKind.MATRIX).validate(data)


def validate_vector_payload(data: Any) -> None:
    """Raises: ValidationError если data не соответствует maxplus_vector."""
    get_validator(PayloadKind.VECTOR).validate(data)
