"""
Contract Validation Module

Валидация JSON payload матриц и векторов max-plus алгебры.
"""

from .validators import (
    ContractValidator,
    MatrixPayloadValidator,
    PayloadKind,
    SchemaLoader,
    VectorPayloadValidator,
    get_validator,
    validate_matrix_payload,
    validate_vector_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixPayloadValidator",
    "VectorPayloadValidator",
    "PayloadKind",
    # Functions
    "get_validator",
    "validate_matrix_payload",
    "validate_vector_payload",
]
