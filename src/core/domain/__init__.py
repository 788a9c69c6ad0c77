"""
Domain models and value objects.

Contains the arbitrary-precision BigInteger value type.
"""

from src.core.domain.big_integer import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT32_MAX,
    UINT64_MAX,
    BigInteger,
    Sign,
)

__all__ = [
    # Fixed-width ranges
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "UINT32_MAX",
    "UINT64_MAX",
    # BigInteger model
    "BigInteger",
    "Sign",
]
