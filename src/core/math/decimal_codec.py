"""
Decimal Codec — разбор и рендеринг десятичных строк над limbs

Разбор:
- Ведущие знаки '+' / '-' отбрасываются все подряд; значение отрицательное,
  если строка начинается с '-' ("--5" → -5, "+-5" → 5)
- Затем только ASCII-цифры 0-9; иначе UnsupportedError, как и для
  значений вне диапазона. InvalidFormatError только для None/пустой
  строки или строки из пробелов
- По умолчанию цифровая часть обязана помещаться в signed 32-bit
  machine word; больше — UnsupportedError (известное ограничение)
- DecimalParseConfig(allow_arbitrary_length=True) снимает ограничение:
  цифры сворачиваются через multiply-by-10^k-and-add над limbs

Рендеринг:
- Повторное деление magnitude на 10, остатки — цифры от младшей
- Ведущий '-' только для отрицательных, ноль рендерится как "0"
"""

import re
from dataclasses import dataclass
from typing import Final, NamedTuple, Optional, Sequence

from src.core.math.errors import InvalidFormatError, UnsupportedError
from src.core.math.limbs import EMPTY_LIMBS, Limbs, divmod_small, mul_small_add

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Верхняя граница цифровой части в режиме machine word (int32)
INT32_MAX: Final[int] = 2**31 - 1

# Количество цифр INT32_MAX; более длинная цифровая часть (без ведущих нулей)
# гарантированно не помещается
INT32_MAX_DIGITS: Final[int] = len(str(INT32_MAX))

# Размер блока цифр при свёртке: 10^9 < 2^32, блок помещается в один limb
DIGIT_CHUNK_SIZE: Final[int] = 9

DECIMAL_BASE: Final[int] = 10

_SIGN_CHARS: Final[str] = "+-"

_DIGITS_PATTERN: Final = re.compile(r"[0-9]+")

_OUT_OF_RANGE_MESSAGE: Final[str] = (
    f"Decimal digits exceed the signed 32-bit range (max {INT32_MAX}); "
    "use DecimalParseConfig(allow_arbitrary_length=True)"
)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class DecimalParseConfig:
    """Конфигурация разбора десятичных строк.

    - allow_arbitrary_length: False — только int32 диапазон (по умолчанию),
      True — произвольная длина через свёртку по limbs
    - max_digits: ограничение длины цифровой части в расширенном режиме
      (None — без ограничения)
    """

    allow_arbitrary_length: bool = False
    max_digits: Optional[int] = None


DEFAULT_PARSE_CONFIG: Final[DecimalParseConfig] = DecimalParseConfig()


class ParsedDecimal(NamedTuple):
    """Результат разбора: каноническая magnitude и признак отрицательности."""

    limbs: Limbs
    negative: bool


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_decimal(
    text: Optional[str], config: Optional[DecimalParseConfig] = None
) -> ParsedDecimal:
    """
    Разбор десятичной строки в magnitude + знак.

    Пробелы вокруг строки допускаются. Все ведущие символы '+' / '-'
    отбрасываются, знак определяется первым символом. Для нуля
    ("0", "-0", "+000") возвращается пустая magnitude и negative=False.

    Args:
        text: Входная строка
        config: Конфигурация разбора (default: DEFAULT_PARSE_CONFIG)

    Returns:
        ParsedDecimal(limbs, negative)

    Raises:
        InvalidFormatError: Строка None, пустая или из пробелов
        UnsupportedError: Цифровая часть не является десятичным числом
            или вне поддерживаемого диапазона

    Examples:
        >>> parse_decimal("--5")
        ParsedDecimal(limbs=(5,), negative=True)
    """
    cfg = config or DEFAULT_PARSE_CONFIG

    if text is None or not text.strip():
        raise InvalidFormatError("Input string cannot be null or whitespace.")

    stripped = text.strip()
    digits = stripped.lstrip(_SIGN_CHARS)
    if _DIGITS_PATTERN.fullmatch(digits) is None:
        raise UnsupportedError(f"Digit portion is not a supported decimal integer: {text!r}")

    significant = digits.lstrip("0")

    if cfg.allow_arbitrary_length:
        limbs = _fold_digits(significant, cfg)
    else:
        limbs = _parse_machine_word(significant)

    return ParsedDecimal(limbs=limbs, negative=bool(limbs) and stripped.startswith("-"))


def _parse_machine_word(significant: str) -> Limbs:
    """Разбор цифр в пределах int32; пустая строка — ноль."""
    if len(significant) > INT32_MAX_DIGITS:
        raise UnsupportedError(_OUT_OF_RANGE_MESSAGE)

    value = int(significant) if significant else 0
    if value > INT32_MAX:
        raise UnsupportedError(_OUT_OF_RANGE_MESSAGE)

    return (value,) if value else EMPTY_LIMBS


def _fold_digits(significant: str, cfg: DecimalParseConfig) -> Limbs:
    """Свёртка цифр блоками по DIGIT_CHUNK_SIZE: limbs * 10^k + chunk."""
    if cfg.max_digits is not None and len(significant) > cfg.max_digits:
        raise UnsupportedError(
            f"Digit string of length {len(significant)} exceeds "
            f"max_digits={cfg.max_digits}"
        )

    limbs: Limbs = EMPTY_LIMBS
    head = len(significant) % DIGIT_CHUNK_SIZE or DIGIT_CHUNK_SIZE
    start = 0
    end = min(head, len(significant))

    while start < len(significant):
        chunk = significant[start:end]
        limbs = mul_small_add(limbs, DECIMAL_BASE ** len(chunk), int(chunk))
        start = end
        end += DIGIT_CHUNK_SIZE

    return limbs


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def format_decimal(limbs: Sequence[int], negative: bool = False) -> str:
    """
    Рендеринг magnitude в десятичную строку.

    Каждая цифра требует полного прохода деления по magnitude,
    поэтому стоимость O(limbs × digits).

    Args:
        limbs: Каноническая magnitude
        negative: Добавить ведущий '-' (игнорируется для нуля)

    Returns:
        Каноническая десятичная строка

    Examples:
        >>> format_decimal((0, 0, 1))
        '18446744073709551616'
        >>> format_decimal((), negative=True)
        '0'
    """
    if not limbs:
        return "0"

    digits = []
    quotient = tuple(limbs)
    while quotient:
        quotient, remainder = divmod_small(quotient, DECIMAL_BASE)
        digits.append(chr(ord("0") + remainder))

    if negative:
        digits.append("-")

    digits.reverse()
    return "".join(digits)
