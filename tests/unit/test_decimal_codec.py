"""
Тесты для Decimal Codec — разбор и рендеринг десятичных строк

Проверяет:
1. Разбор знака и цифр в режиме machine word (int32)
2. InvalidFormatError только для None/пустых/пробельных строк
3. UnsupportedError для нечисловой цифровой части; повторные ведущие знаки
4. UnsupportedError за пределами int32
5. Расширенный режим произвольной длины (DecimalParseConfig)
6. Рендеринг через повторное деление на 10
7. Round-trip для значений в пределах machine word
"""

import pytest

from src.core.math.decimal_codec import (
    DEFAULT_PARSE_CONFIG,
    INT32_MAX,
    DecimalParseConfig,
    ParsedDecimal,
    format_decimal,
    parse_decimal,
)
from src.core.math.errors import BigIntegerError, InvalidFormatError, UnsupportedError
from src.core.math.limbs import LIMB_MASK

EXTENDED = DecimalParseConfig(allow_arbitrary_length=True)


# =============================================================================
# ТЕСТЫ: Разбор (machine word)
# =============================================================================


class TestParseMachineWord:
    """Тесты parse_decimal в режиме по умолчанию"""

    def test_default_config(self) -> None:
        """По умолчанию расширенный режим выключен"""
        assert DEFAULT_PARSE_CONFIG.allow_arbitrary_length is False
        assert DEFAULT_PARSE_CONFIG.max_digits is None

    def test_positive(self) -> None:
        assert parse_decimal("123") == ParsedDecimal(limbs=(123,), negative=False)

    def test_negative(self) -> None:
        assert parse_decimal("-123") == ParsedDecimal(limbs=(123,), negative=True)

    def test_explicit_plus(self) -> None:
        assert parse_decimal("+42") == ParsedDecimal(limbs=(42,), negative=False)

    def test_surrounding_whitespace(self) -> None:
        assert parse_decimal("  7\n") == ParsedDecimal(limbs=(7,), negative=False)

    @pytest.mark.parametrize("text", ["0", "-0", "+0", "000", "-000"])
    def test_zero_forms(self, text: str) -> None:
        """Все записи нуля дают пустую magnitude без знака"""
        assert parse_decimal(text) == ParsedDecimal(limbs=(), negative=False)

    def test_int32_max_accepted(self) -> None:
        assert parse_decimal(str(INT32_MAX)).limbs == (INT32_MAX,)
        assert parse_decimal(f"-{INT32_MAX}") == ParsedDecimal((INT32_MAX,), True)

    def test_leading_zeros_do_not_count(self) -> None:
        """Ведущие нули не выводят значение за пределы int32"""
        assert parse_decimal("0000000000002147483647").limbs == (INT32_MAX,)

    @pytest.mark.parametrize(
        "text",
        ["2147483648", "-2147483648", "4294967296", "99999999999999999999999"],
    )
    def test_out_of_int32_range(self, text: str) -> None:
        """Цифровая часть > 2^31 - 1 → UnsupportedError"""
        with pytest.raises(UnsupportedError):
            parse_decimal(text)

    def test_unsupported_is_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            parse_decimal("2147483648")


class TestParseInvalidFormat:
    """Тесты InvalidFormatError"""

    @pytest.mark.parametrize("text", [None, "", " ", "   \t\n"])
    def test_null_empty_whitespace(self, text) -> None:
        with pytest.raises(InvalidFormatError):
            parse_decimal(text)

    def test_invalid_format_hierarchy(self) -> None:
        """InvalidFormatError ловится как ValueError и BigIntegerError"""
        with pytest.raises(ValueError):
            parse_decimal("")
        assert issubclass(InvalidFormatError, BigIntegerError)


class TestParseMalformedDigits:
    """Нечисловая цифровая часть — UnsupportedError, не InvalidFormatError"""

    @pytest.mark.parametrize(
        "text", ["abc", "12a", "+", "-", "+-", "1 2", "0x10", "1.5", "1e3", "٣", "5-"]
    )
    def test_malformed_digits_unsupported(self, text: str) -> None:
        with pytest.raises(UnsupportedError):
            parse_decimal(text)

    @pytest.mark.parametrize("text", ["12a", "1.5", "abc"])
    def test_malformed_digits_not_invalid_format(self, text: str) -> None:
        """InvalidFormatError зарезервирован для None/пустых/пробельных строк"""
        with pytest.raises(BigIntegerError) as exc_info:
            parse_decimal(text)
        assert not isinstance(exc_info.value, InvalidFormatError)

    def test_malformed_digits_in_extended_mode(self) -> None:
        with pytest.raises(UnsupportedError):
            parse_decimal("99999999999999999999x", EXTENDED)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("--5", ParsedDecimal(limbs=(5,), negative=True)),
            ("-+5", ParsedDecimal(limbs=(5,), negative=True)),
            ("+-5", ParsedDecimal(limbs=(5,), negative=False)),
            ("++5", ParsedDecimal(limbs=(5,), negative=False)),
            ("--0", ParsedDecimal(limbs=(), negative=False)),
        ],
    )
    def test_repeated_leading_signs(self, text: str, expected: ParsedDecimal) -> None:
        """Все ведущие знаки отбрасываются, знак — по первому символу"""
        assert parse_decimal(text) == expected


# =============================================================================
# ТЕСТЫ: Разбор (произвольная длина)
# =============================================================================


class TestParseArbitraryLength:
    """Тесты расширенного режима"""

    def test_two_pow_64(self) -> None:
        assert parse_decimal("18446744073709551616", EXTENDED).limbs == (0, 0, 1)

    def test_negative_two_pow_128_minus_one(self) -> None:
        parsed = parse_decimal("-340282366920938463463374607431768211455", EXTENDED)
        assert parsed.limbs == (LIMB_MASK,) * 4
        assert parsed.negative is True

    def test_chunk_boundary(self) -> None:
        """10 цифр: неполный головной блок + полный блок из 9 цифр"""
        assert parse_decimal("1000000000", EXTENDED).limbs == (1000000000,)
        assert parse_decimal("999999999", EXTENDED).limbs == (999999999,)

    def test_small_values_match_machine_word(self) -> None:
        for text in ["0", "1", "-5", "2147483647"]:
            assert parse_decimal(text, EXTENDED) == parse_decimal(text)

    def test_max_digits(self) -> None:
        cfg = DecimalParseConfig(allow_arbitrary_length=True, max_digits=5)
        assert parse_decimal("12345", cfg).limbs == (12345,)
        with pytest.raises(UnsupportedError):
            parse_decimal("123456", cfg)

    def test_max_digits_ignores_leading_zeros(self) -> None:
        cfg = DecimalParseConfig(allow_arbitrary_length=True, max_digits=3)
        assert parse_decimal("000123", cfg).limbs == (123,)

    def test_config_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            EXTENDED.allow_arbitrary_length = False  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ: Рендеринг
# =============================================================================


class TestFormatDecimal:
    """Тесты format_decimal"""

    def test_zero(self) -> None:
        assert format_decimal(()) == "0"
        assert format_decimal((), negative=True) == "0"

    def test_single_limb(self) -> None:
        assert format_decimal((123,)) == "123"
        assert format_decimal((123,), negative=True) == "-123"

    def test_two_limbs(self) -> None:
        """[1, 2] = 2 * 2^32 + 1"""
        assert format_decimal((1, 2)) == "8589934593"

    def test_uint64_max(self) -> None:
        assert format_decimal((LIMB_MASK, LIMB_MASK)) == "18446744073709551615"

    def test_two_pow_64(self) -> None:
        assert format_decimal((0, 0, 1)) == "18446744073709551616"

    def test_powers_of_ten(self) -> None:
        """Нули внутри числа не теряются"""
        assert format_decimal((1000000000,)) == "1000000000"
        assert format_decimal((10,)) == "10"


class TestRoundTrip:
    """Инвариант: parse(format(x)) == x в пределах machine word"""

    @pytest.mark.parametrize(
        "value", [0, 1, -1, 9, 10, -10, 4294967, 1000000, -999999, INT32_MAX, -INT32_MAX]
    )
    def test_roundtrip(self, value: int) -> None:
        parsed = parse_decimal(str(value))
        assert format_decimal(parsed.limbs, parsed.negative) == str(value)

    def test_roundtrip_arbitrary_length(self) -> None:
        text = "-" + "1234567890" * 8
        parsed = parse_decimal(text, EXTENDED)
        assert format_decimal(parsed.limbs, parsed.negative) == text
