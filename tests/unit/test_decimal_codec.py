"""
Тесты для модуля Decimal Codec

Проверяет:
1. Форматирование (ноль, знак, дополнение чанков нулями)
2. Парсинг (знак, чанки по 9 цифр, ведущие нули, "-0")
3. Отклонение невалидных строк (InvalidFormat)
4. Лимит количества цифр (CodecConfig)
5. Round trip format → parse
"""

import random

import pytest

from bigint.core.config import CodecConfig
from bigint.core.errors import InvalidFormat
from bigint.core.math.decimal_codec import (
    DECIMAL_CHUNK_BASE,
    DECIMAL_CHUNK_DIGITS,
    format_decimal,
    parse_decimal,
)
from bigint.core.math.magnitude import magnitude_from_int, magnitude_to_int

# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ
# =============================================================================


class TestFormatDecimal:
    """Тесты для format_decimal"""

    def test_zero(self) -> None:
        """Ноль → "0" """
        assert format_decimal(False, []) == "0"

    def test_negative(self) -> None:
        """Отрицательные значения с '-'"""
        assert format_decimal(True, [42]) == "-42"

    def test_inner_chunks_zero_padded(self) -> None:
        """Внутренние чанки дополняются нулями до 9 цифр"""
        value = 10**18 + 5
        assert format_decimal(False, magnitude_from_int(value)) == "1000000000000000005"

    def test_exact_chunk_boundary(self) -> None:
        """10^9: ровно на границе чанка"""
        assert format_decimal(False, [DECIMAL_CHUNK_BASE]) == "1000000000"
        assert format_decimal(False, [DECIMAL_CHUNK_BASE - 1]) == "999999999"

    def test_does_not_mutate_words(self) -> None:
        """Магнитуда не изменяется"""
        words = magnitude_from_int(10**30)
        snapshot = list(words)
        format_decimal(False, words)
        assert words == snapshot

    def test_matches_native_str(self) -> None:
        """Совпадение с str(int)"""
        rng = random.Random(99)
        for _ in range(100):
            value = rng.getrandbits(rng.randint(1, 600))
            assert format_decimal(False, magnitude_from_int(value)) == str(value)


# =============================================================================
# ТЕСТЫ ПАРСИНГА
# =============================================================================


class TestParseDecimal:
    """Тесты для parse_decimal"""

    def test_positive(self) -> None:
        """Положительное число"""
        assert parse_decimal("4294967296") == (False, [0, 1])

    def test_negative(self) -> None:
        """Ведущий '-' задаёт знак"""
        assert parse_decimal("-1") == (True, [1])

    def test_negative_zero_is_canonical(self) -> None:
        """"-0" → неотрицательный ноль"""
        assert parse_decimal("-0") == (False, [])
        assert parse_decimal("-000000000000") == (False, [])

    def test_leading_zeros(self) -> None:
        """Ведущие нули допустимы"""
        assert parse_decimal("007") == (False, [7])

    @pytest.mark.parametrize("length", [1, 8, 9, 10, 17, 18, 19, 27, 100])
    def test_chunk_lengths(self, length: int) -> None:
        """Чанки неполной длины в конце строки"""
        text = ("1234567890" * 10)[:length]
        negative, words = parse_decimal(text)
        assert not negative
        assert magnitude_to_int(words) == int(text)

    def test_chunk_size_constant(self) -> None:
        """10^9 помещается в одно слово"""
        assert DECIMAL_CHUNK_BASE == 10**DECIMAL_CHUNK_DIGITS
        assert DECIMAL_CHUNK_BASE < 2**32


class TestParseDecimalErrors:
    """Тесты отклонения невалидных строк"""

    def test_empty(self) -> None:
        """Пустая строка"""
        with pytest.raises(InvalidFormat, match="non-empty"):
            parse_decimal("")

    def test_bare_sign(self) -> None:
        """Одиночный '-'"""
        with pytest.raises(InvalidFormat, match="no digits"):
            parse_decimal("-")

    @pytest.mark.parametrize(
        "text",
        ["+1", "1 ", " 1", "12a3", "--1", "1-", "1_000", "0x10", "1.0", "١٢", "²"],
    )
    def test_non_digit(self, text: str) -> None:
        """Любой символ вне ASCII 0-9"""
        with pytest.raises(InvalidFormat, match="only digits"):
            parse_decimal(text)

    def test_invalid_format_is_value_error(self) -> None:
        """InvalidFormat ловится как ValueError"""
        with pytest.raises(ValueError):
            parse_decimal("abc")


class TestDigitLimit:
    """Тесты для CodecConfig.max_str_digits"""

    def test_unlimited_by_default(self) -> None:
        """По умолчанию лимита нет"""
        negative, words = parse_decimal("9" * 5000)
        assert magnitude_to_int(words) == 10**5000 - 1

    def test_limit_enforced(self) -> None:
        """Превышение лимита"""
        config = CodecConfig(max_str_digits=10)
        with pytest.raises(InvalidFormat, match="exceed the limit"):
            parse_decimal("12345678901", config)

    def test_limit_counts_digits_not_sign(self) -> None:
        """Знак не учитывается в лимите"""
        config = CodecConfig(max_str_digits=3)
        assert parse_decimal("-999", config) == (True, [999])

    def test_negative_limit_rejected(self) -> None:
        """Отрицательный лимит невалиден"""
        with pytest.raises(ValueError, match="non-negative"):
            CodecConfig(max_str_digits=-1)


# =============================================================================
# ТЕСТЫ ROUND TRIP
# =============================================================================


class TestRoundTrip:
    """parse(format(x)) == x"""

    @pytest.mark.parametrize(
        "value",
        [0, 1, -1, 2**63 - 1, -(2**63), 2**64 - 1, 10**9, -(10**9), 10**100 + 1],
    )
    def test_round_trip(self, value: int) -> None:
        """Граничные значения"""
        negative, words = value < 0, magnitude_from_int(abs(value))
        text = format_decimal(negative, words)
        assert text == str(value)
        assert parse_decimal(text) == (negative, words)
