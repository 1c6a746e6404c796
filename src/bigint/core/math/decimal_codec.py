"""
Decimal Codec — Десятичный ввод/вывод

Формат: магнитуда многократно делится на 10^9 (divmod_word), каждый шаг
даёт до 9 десятичных цифр. Все чанки, кроме старшего, дополняются нулями
до 9 цифр. Ноль форматируется как "0", отрицательные значения получают '-'.

Парсинг: необязательный ведущий '-', затем только ASCII-цифры. Строка
читается слева направо чанками до 9 цифр: аккумулятор умножается на
10^(длина чанка), затем прибавляется значение чанка.
"""

import logging
from typing import Final

from bigint.core.config import DEFAULT_CODEC_CONFIG, CodecConfig
from bigint.core.errors import InvalidFormat
from bigint.core.math.arithmetic import add_word, divmod_word, mul_word
from bigint.core.math.magnitude import trim

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество десятичных цифр в одном чанке (10^9 < 2^32)
DECIMAL_CHUNK_DIGITS: Final[int] = 9

# 10^DECIMAL_CHUNK_DIGITS
DECIMAL_CHUNK_BASE: Final[int] = 10**DECIMAL_CHUNK_DIGITS

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_decimal(negative: bool, words: list[int]) -> str:
    """
    Каноническая десятичная запись значения.

    Args:
        negative: True для отрицательного значения
        words: Магнитуда (не мутируется)

    Returns:
        Десятичная строка без ведущих нулей

    Examples:
        >>> format_decimal(False, [])
        '0'
        >>> format_decimal(True, [1000000000])
        '-1000000000'
        >>> format_decimal(False, [0, 1])
        '4294967296'
    """
    if not words:
        return "0"

    chunks = []
    remaining = words
    while remaining:
        remaining, chunk = divmod_word(remaining, DECIMAL_CHUNK_BASE)
        chunks.append(chunk)

    parts = [str(chunks[-1])]
    parts.extend(f"{chunk:0{DECIMAL_CHUNK_DIGITS}d}" for chunk in reversed(chunks[:-1]))

    text = "".join(parts)
    return f"-{text}" if negative else text


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_decimal(text: str, config: CodecConfig | None = None) -> tuple[bool, list[int]]:
    """
    Разбор десятичной строки.

    Args:
        text: Строка вида [-]digits
        config: Конфигурация кодека (default: DEFAULT_CODEC_CONFIG)

    Returns:
        (negative, words) в канонической форме ("-0" → (False, []))

    Raises:
        InvalidFormat: пустая строка, одиночный '-', символ вне 0-9,
            превышение config.max_str_digits

    Examples:
        >>> parse_decimal("-42")
        (True, [42])
        >>> parse_decimal("-000")
        (False, [])
    """
    config = config or DEFAULT_CODEC_CONFIG

    if not text:
        raise InvalidFormat("Invalid argument: non-empty string expected")

    negative = text[0] == "-"
    digits = text[1:] if negative else text

    if not digits:
        raise InvalidFormat("Invalid argument: no digits after sign")

    for position, char in enumerate(digits, start=int(negative)):
        if char not in _DIGITS:
            logger.debug(f"Rejected decimal input at position {position}: {char!r}")
            raise InvalidFormat(
                f"Invalid argument: only digits expected, got {char!r} at position {position}"
            )

    if not config.allows(len(digits)):
        raise InvalidFormat(
            f"Invalid argument: {len(digits)} digits exceed the limit "
            f"of {config.max_str_digits}"
        )

    words: list[int] = []
    for start in range(0, len(digits), DECIMAL_CHUNK_DIGITS):
        chunk = digits[start:start + DECIMAL_CHUNK_DIGITS]
        words = mul_word(words, 10 ** len(chunk))
        words = add_word(words, int(chunk))

    trim(words)
    if not words:
        negative = False
    return negative, words
