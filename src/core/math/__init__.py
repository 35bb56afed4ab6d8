"""
Core math modules для max-plus алгебры

Скаляры extended reals и операции полукольца (max, +) над матрицами.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Sentinels
    EPS,
    INF,
    UNIT,
    # Predicates
    is_eps,
    is_inf,
    is_undefined_sum,
    is_valid_scalar,
    # Validation
    validate_scalar,
)

# Max-Plus Algebra
from src.core.math.maxplus import (
    DEFAULT_CLOSURE_CONFIG,
    ClosureConfig,
    ClosureStrategy,
    LengthError,
    Matrix,
    MaxPlusError,
    ShapeError,
    UndefinedSumError,
    Vector,
    cell,
    create_epsilon_matrix,
    create_identity_matrix,
    get_dimensions,
    is_square,
    odot,
    oplus,
    otimes,
    otimes_vector,
    plus,
    pow_otimes,
    reset,
    star,
    trace,
    transpose,
)

__all__ = [
    # Numerical Safeguards: sentinels
    "EPS",
    "INF",
    "UNIT",
    # Numerical Safeguards: predicates
    "is_eps",
    "is_inf",
    "is_undefined_sum",
    "is_valid_scalar",
    # Numerical Safeguards: validation
    "validate_scalar",
    # Max-Plus: types
    "Matrix",
    "Vector",
    # Max-Plus: config
    "DEFAULT_CLOSURE_CONFIG",
    "ClosureConfig",
    "ClosureStrategy",
    # Max-Plus: exceptions
    "LengthError",
    "MaxPlusError",
    "ShapeError",
    "UndefinedSumError",
    # Max-Plus: primitives
    "odot",
    "oplus",
    "transpose",
    # Max-Plus: multiplication
    "otimes",
    "otimes_vector",
    # Max-Plus: derived
    "pow_otimes",
    "trace",
    # Max-Plus: closures
    "plus",
    "star",
    # Max-Plus: constructors & inspection
    "cell",
    "create_epsilon_matrix",
    "create_identity_matrix",
    "get_dimensions",
    "is_square",
    "reset",
]
