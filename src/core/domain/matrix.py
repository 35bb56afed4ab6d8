"""
MaxPlusMatrix / MaxPlusVector: immutable value objects max-plus алгебры

Immutable Pydantic модели (frozen=True) поверх функций src.core.math.maxplus.
Каждая операция возвращает новый экземпляр, аргументы не изменяются.

Сериализация (payload):
    JSON не поддерживает бесконечности, поэтому EPS кодируется строкой "EPS",
    INF строкой "INF". Схемы: contracts/schema/maxplus_matrix.json,
    contracts/schema/maxplus_vector.json.
"""

from typing import Any, Dict, Final, Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.validators import validate_matrix_payload, validate_vector_payload
from src.core.math import maxplus
from src.core.math.maxplus import ClosureConfig
from src.core.math.numerical_safeguards import EPS, INF, is_eps, is_inf, validate_scalar

# Строковые маркеры сентинелов в payload
EPS_TOKEN: Final[str] = "EPS"
INF_TOKEN: Final[str] = "INF"

PayloadScalar = Union[float, int, str]


# =============================================================================
# PAYLOAD ENCODING
# =============================================================================


def encode_scalar(value: float) -> PayloadScalar:
    """Скаляр → JSON-совместимое значение ("EPS" / "INF" для бесконечностей)."""
    if is_eps(value):
        return EPS_TOKEN
    if is_inf(value):
        return INF_TOKEN
    return value


def decode_scalar(value: PayloadScalar) -> float:
    """
    JSON значение → скаляр.

    Raises:
        ValueError: Если строка не "EPS"/"INF" или значение не число
    """
    if value == EPS_TOKEN:
        return EPS
    if value == INF_TOKEN:
        return INF
    if isinstance(value, str):
        raise ValueError(f"Unknown scalar token {value!r}, expected {EPS_TOKEN!r} or {INF_TOKEN!r}")
    return validate_scalar(value, "payload scalar")


# =============================================================================
# VECTOR MODEL
# =============================================================================


class MaxPlusVector(BaseModel):
    """
    Вектор скаляров max-plus алгебры.

    Длина фиксирована при создании; NaN запрещён.
    """

    values: tuple[float, ...] = Field(..., description="Скаляры в [-inf, +inf]")

    model_config = {"frozen": True}  # Immutable

    @field_validator("values", mode="before")
    @classmethod
    def validate_values(cls, v: Any) -> tuple[float, ...]:
        """Проверка, что каждый элемент является допустимым скаляром."""
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"values must be a list or tuple, got {type(v).__name__}")
        return tuple(validate_scalar(x, f"values[{k}]") for k, x in enumerate(v))

    def __len__(self) -> int:
        return len(self.values)

    def dot(self, other: "MaxPlusVector") -> float:
        """Max-plus скалярное произведение (⊙)."""
        return maxplus.odot(self.values, other.values)

    def to_payload(self) -> Dict[str, Any]:
        """Сериализация в JSON-совместимый dict."""
        return {"values": [encode_scalar(x) for x in self.values]}

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "MaxPlusVector":
        """
        Десериализация из dict формата to_payload().

        Raises:
            jsonschema.ValidationError: Если payload нарушает maxplus_vector
        """
        validate_vector_payload(payload)
        return cls(values=tuple(decode_scalar(x) for x in payload["values"]))


# =============================================================================
# MATRIX MODEL
# =============================================================================


class MaxPlusMatrix(BaseModel):
    """
    Непустая прямоугольная матрица max-plus алгебры.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    """

    rows: tuple[tuple[float, ...], ...] = Field(..., description="Строки матрицы")

    model_config = {"frozen": True}  # Immutable

    @field_validator("rows", mode="before")
    @classmethod
    def validate_rows(cls, v: Any) -> tuple[tuple[float, ...], ...]:
        """
        Проверка формы и скаляров.

        Матрица должна быть непустой и прямоугольной; ragged вход отвергается.
        """
        if not isinstance(v, (list, tuple)) or not all(isinstance(row, (list, tuple)) for row in v):
            raise ValueError("rows must be a sequence of sequences")

        rows = tuple(tuple(row) for row in v)
        if not rows or not rows[0]:
            raise ValueError("matrix must have at least one row and one column")

        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {i} has length {len(row)}, expected {width}")

        return tuple(
            tuple(validate_scalar(x, f"rows[{i}][{j}]") for j, x in enumerate(row))
            for i, row in enumerate(rows)
        )

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def epsilon(cls, rows: int, cols: int) -> "MaxPlusMatrix":
        """Нулевая матрица полукольца rows×cols."""
        return cls(rows=maxplus.create_epsilon_matrix(rows, cols))

    @classmethod
    def identity(cls, size: int) -> "MaxPlusMatrix":
        """Единичная матрица полукольца size×size."""
        return cls(rows=maxplus.create_identity_matrix(size))

    # -------------------------------------------------------------------------
    # Инспекция
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return maxplus.get_dimensions(self.rows)

    @property
    def is_square(self) -> bool:
        return maxplus.is_square(self.rows)

    def cell(self, i: int, j: int) -> float:
        """Ячейка (i, j); EPS вне хранимого диапазона."""
        return maxplus.cell(self.rows, i, j)

    def to_lists(self) -> list[list[float]]:
        return [list(row) for row in self.rows]

    # -------------------------------------------------------------------------
    # Операции полукольца
    # -------------------------------------------------------------------------

    def oplus(self, other: "MaxPlusMatrix") -> "MaxPlusMatrix":
        return MaxPlusMatrix(rows=maxplus.oplus(self.rows, other.rows))

    def otimes(self, other: "MaxPlusMatrix") -> "MaxPlusMatrix":
        return MaxPlusMatrix(rows=maxplus.otimes(self.rows, other.rows))

    def apply(self, x: MaxPlusVector) -> MaxPlusVector:
        """Один шаг системы x(k+1) = A ⊗ x(k)."""
        return MaxPlusVector(values=maxplus.otimes_vector(self.rows, x.values))

    def transpose(self) -> "MaxPlusMatrix":
        return MaxPlusMatrix(rows=maxplus.transpose(self.rows))

    def power(self, n: int) -> "MaxPlusMatrix":
        """A^n; n <= 1 возвращает ту же матрицу (см. pow_otimes)."""
        return MaxPlusMatrix(rows=maxplus.pow_otimes(self.rows, n))

    def trace(self) -> float:
        return maxplus.trace(self.rows)

    def star(self, config: Optional[ClosureConfig] = None) -> "MaxPlusMatrix":
        return MaxPlusMatrix(rows=maxplus.star(self.rows, config))

    def plus(self, config: Optional[ClosureConfig] = None) -> "MaxPlusMatrix":
        return MaxPlusMatrix(rows=maxplus.plus(self.rows, config))

    def reset(self) -> "MaxPlusMatrix":
        return MaxPlusMatrix(rows=maxplus.reset(self.rows))

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_payload(self) -> Dict[str, Any]:
        """Сериализация в JSON-совместимый dict ({"rows": [[...], ...]})."""
        return {"rows": [[encode_scalar(x) for x in row] for row in self.rows]}

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "MaxPlusMatrix":
        """
        Десериализация из dict формата to_payload().

        Raises:
            jsonschema.ValidationError: Если payload нарушает maxplus_matrix
            pydantic.ValidationError: Если строки разной длины
        """
        validate_matrix_payload(payload)
        return cls(rows=[[decode_scalar(x) for x in row] for row in payload["rows"]])
