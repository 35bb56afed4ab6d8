"""
Domain models and value objects.

Immutable max-plus matrix and vector models with JSON payload encoding.
"""

from src.core.domain.matrix import (
    EPS_TOKEN,
    INF_TOKEN,
    MaxPlusMatrix,
    MaxPlusVector,
    decode_scalar,
    encode_scalar,
)

__all__ = [
    # Payload tokens
    "EPS_TOKEN",
    "INF_TOKEN",
    # Payload encoding
    "decode_scalar",
    "encode_scalar",
    # Models
    "MaxPlusMatrix",
    "MaxPlusVector",
]
