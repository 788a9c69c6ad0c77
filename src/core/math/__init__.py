"""
Core math modules для arken-math

Примитивы над массивами limbs, десятичный кодек и иерархия ошибок.
"""

# Errors
from src.core.math.errors import (
    BigIntegerError,
    DivideByZeroError,
    InvalidFormatError,
    UnsupportedError,
)

# Limb primitives
from src.core.math.limbs import (
    EMPTY_LIMBS,
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    Limbs,
    add_limbs,
    compare_limbs,
    divmod_small,
    limbs_from_magnitude,
    mul_small_add,
    subtract_limbs,
    trim_high_zeros,
    validate_limb,
)

# Decimal codec
from src.core.math.decimal_codec import (
    DEFAULT_PARSE_CONFIG,
    DIGIT_CHUNK_SIZE,
    INT32_MAX,
    DecimalParseConfig,
    ParsedDecimal,
    format_decimal,
    parse_decimal,
)

__all__ = [
    # Errors
    "BigIntegerError",
    "DivideByZeroError",
    "InvalidFormatError",
    "UnsupportedError",
    # Limbs — Constants
    "EMPTY_LIMBS",
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    # Limbs — Types
    "Limbs",
    # Limbs — Functions
    "add_limbs",
    "compare_limbs",
    "divmod_small",
    "limbs_from_magnitude",
    "mul_small_add",
    "subtract_limbs",
    "trim_high_zeros",
    "validate_limb",
    # Decimal codec — Constants
    "DEFAULT_PARSE_CONFIG",
    "DIGIT_CHUNK_SIZE",
    "INT32_MAX",
    # Decimal codec — Types
    "DecimalParseConfig",
    "ParsedDecimal",
    # Decimal codec — Functions
    "format_decimal",
    "parse_decimal",
]
