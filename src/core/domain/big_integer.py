"""
BigInteger — Знаковое целое произвольной точности

Immutable Pydantic модель в sign-magnitude представлении:
- limbs: magnitude как tuple 32-битных limbs, младший первым
- sign: Sign.NEGATIVE / Sign.ZERO / Sign.POSITIVE

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sign == ZERO тогда и только тогда, когда limbs == ()
2. limbs не содержит старшего нулевого limb (каноническая форма)
3. Каждый limb в диапазоне [0, 2^32 - 1]

Прямой конструктор BigInteger(limbs=..., sign=...) отвергает
неканонические комбинации (ValidationError). Фабрики from_* приводят
вход к канонической форме. Все операции возвращают новые значения.
"""

from enum import Enum
from typing import Any, Dict, Final, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, StrictInt, field_validator

from src.core.contracts.validators import validate_big_integer
from src.core.math.decimal_codec import DecimalParseConfig, format_decimal, parse_decimal
from src.core.math.errors import UnsupportedError
from src.core.math.limbs import (
    EMPTY_LIMBS,
    add_limbs,
    compare_limbs,
    divmod_small,
    limbs_from_magnitude,
    subtract_limbs,
    trim_high_zeros,
    validate_limb,
)

# =============================================================================
# FIXED-WIDTH ДИАПАЗОНЫ
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT32_MAX: Final[int] = 2**32 - 1
UINT64_MAX: Final[int] = 2**64 - 1


# =============================================================================
# ENUMS
# =============================================================================


class Sign(int, Enum):
    """Знак значения"""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True). Равенство и hash определяются парой
    (limbs, sign); благодаря канонической форме равные числа равны
    как модели.
    """

    limbs: Tuple[StrictInt, ...] = Field(
        default=EMPTY_LIMBS, description="Magnitude: 32-битные limbs, младший первым"
    )
    sign: Sign = Field(default=Sign.ZERO, description="Знак (-1/0/1)")

    model_config = {"frozen": True}

    @field_validator("limbs")
    @classmethod
    def validate_canonical_limbs(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Проверка диапазона limbs и отсутствия старшего нулевого limb."""
        for limb in v:
            validate_limb(limb)
        if v and v[-1] == 0:
            raise ValueError(f"limbs {v} have a high-order zero limb (not canonical)")
        return v

    @field_validator("sign")
    @classmethod
    def validate_sign_matches_magnitude(cls, v: Sign, info) -> Sign:
        """Sign.ZERO допустим только для пустой magnitude и наоборот."""
        if "limbs" not in info.data:
            return v

        is_empty = len(info.data["limbs"]) == 0
        if is_empty and v != Sign.ZERO:
            raise ValueError(f"Empty magnitude requires Sign.ZERO, got {v.name}")
        if not is_empty and v == Sign.ZERO:
            raise ValueError("Non-empty magnitude cannot have Sign.ZERO")
        return v

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigInteger":
        """Канонический ноль."""
        return cls()

    @classmethod
    def from_limbs(cls, limbs: Sequence[int], sign: Union[int, Sign]) -> "BigInteger":
        """
        Построение из сырых limbs и индикатора знака.

        Старшие нулевые limbs отбрасываются. Если ничего не осталось,
        знак принудительно ZERO независимо от индикатора. Иначе
        sign >= 0 → POSITIVE, sign < 0 → NEGATIVE.

        Вход всегда копируется: последующие изменения списка вызывающим
        кодом не затрагивают значение.

        Диапазон и тип limbs проверяет валидатор модели.

        Raises:
            ValidationError: Если какой-либо limb не int или вне [0, 2^32 - 1]
        """
        trimmed = trim_high_zeros(limbs)
        if not trimmed:
            return cls.zero()
        return cls(limbs=trimmed, sign=Sign.POSITIVE if int(sign) >= 0 else Sign.NEGATIVE)

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Построение из fixed-width целого (signed или unsigned, до 64 бит).

        Допустимый диапазон: [-2^63, 2^64 - 1].

        Raises:
            TypeError: Если value не int
            UnsupportedError: Если value вне 64-битного диапазона
        """
        return cls._from_fixed_width(value, INT64_MIN, UINT64_MAX, "64-bit")

    @classmethod
    def from_int32(cls, value: int) -> "BigInteger":
        """Widening-конверсия из signed 32-bit."""
        return cls._from_fixed_width(value, INT32_MIN, INT32_MAX, "int32")

    @classmethod
    def from_int64(cls, value: int) -> "BigInteger":
        """Widening-конверсия из signed 64-bit."""
        return cls._from_fixed_width(value, INT64_MIN, INT64_MAX, "int64")

    @classmethod
    def from_uint32(cls, value: int) -> "BigInteger":
        """Widening-конверсия из unsigned 32-bit."""
        return cls._from_fixed_width(value, 0, UINT32_MAX, "uint32")

    @classmethod
    def from_uint64(cls, value: int) -> "BigInteger":
        """Widening-конверсия из unsigned 64-bit."""
        return cls._from_fixed_width(value, 0, UINT64_MAX, "uint64")

    @classmethod
    def _from_fixed_width(
        cls, value: int, lower: int, upper: int, width_name: str
    ) -> "BigInteger":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")

        if value < lower or value > upper:
            raise UnsupportedError(
                f"Value {value} out of {width_name} range [{lower}, {upper}]"
            )

        if value == 0:
            return cls.zero()

        return cls(
            limbs=limbs_from_magnitude(abs(value)),
            sign=Sign.POSITIVE if value > 0 else Sign.NEGATIVE,
        )

    @classmethod
    def from_string(
        cls, value: Optional[str], config: Optional[DecimalParseConfig] = None
    ) -> "BigInteger":
        """
        Построение из десятичной строки с необязательным знаком '+' / '-'.

        По умолчанию цифровая часть ограничена signed 32-bit диапазоном.

        Raises:
            InvalidFormatError: Строка None, пустая или из пробелов
            UnsupportedError: Цифровая часть не число или вне диапазона
        """
        parsed = parse_decimal(value, config)
        return cls.from_limbs(parsed.limbs, -1 if parsed.negative else 1)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "BigInteger") -> "BigInteger":
        """
        Сумма self + other.

        Одинаковые знаки — сложение magnitudes с переносом; разные знаки —
        вычитание меньшей magnitude из большей со знаком большей.
        """
        if self.sign == Sign.ZERO:
            return other
        if other.sign == Sign.ZERO:
            return self

        if self.sign == other.sign:
            return BigInteger.from_limbs(add_limbs(self.limbs, other.limbs), self.sign)

        return BigInteger._subtract_internal(self, other)

    def negate(self) -> "BigInteger":
        """Значение с противоположным знаком (ноль остаётся нулём)."""
        if self.sign == Sign.ZERO:
            return self
        return BigInteger(limbs=self.limbs, sign=Sign(-self.sign))

    def subtract(self, other: "BigInteger") -> "BigInteger":
        """Разность self - other через знаковое сложение."""
        return self.add(other.negate())

    def get_absolute_value(self) -> "BigInteger":
        """
        Абсолютное значение.

        Неотрицательное значение возвращается как есть; отрицательное —
        новым экземпляром с той же magnitude и Sign.POSITIVE.
        """
        if self.sign != Sign.NEGATIVE:
            return self
        return BigInteger(limbs=self.limbs, sign=Sign.POSITIVE)

    @staticmethod
    def compare_abs(a: "BigInteger", b: "BigInteger") -> int:
        """
        Сравнение абсолютных значений.

        Returns:
            1 если |a| > |b|, 0 если |a| == |b|, -1 если |a| < |b|
        """
        return compare_limbs(a.limbs, b.limbs)

    @staticmethod
    def _subtract_internal(a: "BigInteger", b: "BigInteger") -> "BigInteger":
        # Знак результата берётся у операнда с большей (или равной) magnitude
        if BigInteger.compare_abs(a, b) >= 0:
            bigger, smaller = a, b
        else:
            bigger, smaller = b, a

        result_limbs = subtract_limbs(bigger.limbs, smaller.limbs)
        return BigInteger.from_limbs(result_limbs, bigger.sign)

    @staticmethod
    def div_rem_small(value: "BigInteger", divisor: int) -> Tuple["BigInteger", int]:
        """
        Деление на малое целое (один limb).

        Частное сохраняет знак делимого (ноль, если частное пустое);
        остаток — от magnitude, всегда неотрицательный.

        Raises:
            DivideByZeroError: Если divisor == 0
        """
        quotient, remainder = divmod_small(value.limbs, divisor)
        return BigInteger.from_limbs(quotient, value.sign), remainder

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    @staticmethod
    def is_zero(value: "BigInteger") -> bool:
        """True если значение равно нулю."""
        return value.sign == Sign.ZERO

    def is_all_zero(self) -> bool:
        """True если magnitude пустая (эквивалент is_zero)."""
        return not self.limbs

    # -------------------------------------------------------------------------
    # Рендеринг и контракт
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Каноническое десятичное представление ('-' только для отрицательных)."""
        return format_decimal(self.limbs, negative=self.sign == Sign.NEGATIVE)

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в JSON-контракт big_integer.

        Returns:
            {"sign": -1|0|1, "limbs": [...], "decimal": "..."}
        """
        return {
            "sign": int(self.sign),
            "limbs": list(self.limbs),
            "decimal": self.to_string(),
        }

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "BigInteger":
        """
        Десериализация из JSON-контракта big_integer.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            ValueError: Если поле decimal не совпадает с limbs
        """
        validate_big_integer(data)

        value = cls.from_limbs(data["limbs"], data["sign"])
        if value.sign != Sign(data["sign"]):
            raise ValueError(
                f"Contract sign {data['sign']} does not match magnitude {data['limbs']}"
            )

        decimal = data.get("decimal")
        if decimal is not None and decimal != value.to_string():
            raise ValueError(
                f"Contract decimal {decimal!r} does not match limbs ({value.to_string()})"
            )
        return value

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __add__(self, other: object) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.add(coerced)

    def __radd__(self, other: object) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.add(self)

    def __sub__(self, other: object) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.subtract(coerced)

    def __rsub__(self, other: object) -> "BigInteger":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.subtract(self)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __abs__(self) -> "BigInteger":
        return self.get_absolute_value()


def _coerce(other: object) -> Optional[BigInteger]:
    """Приведение операнда оператора: BigInteger как есть, int через from_int."""
    if isinstance(other, BigInteger):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return BigInteger.from_int(other)
    return None
