"""
Contract Validation Module

Модуль для валидации JSON представлений BigInteger.
"""

from .validators import (
    BIG_INTEGER_SCHEMA_PATH,
    big_integer_validator,
    iter_big_integer_errors,
    load_schema,
    validate_big_integer,
)

__all__ = [
    "BIG_INTEGER_SCHEMA_PATH",
    # Functions
    "load_schema",
    "big_integer_validator",
    "validate_big_integer",
    "iter_big_integer_errors",
]
