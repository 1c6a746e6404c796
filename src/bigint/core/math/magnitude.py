"""
Magnitude — Хранилище беззнаковой магнитуды

Магнитуда: little-endian список 32-битных слов (индекс 0 соответствует младшему слову,
основание 2^32).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет старших нулевых слов (trim после каждой мутации)
2. Пустой список: это ноль
3. Каждое слово лежит в [0, 2^32)
"""

from typing import Final

from bigint.core.errors import PreconditionViolation

# =============================================================================
# КОНСТАНТЫ СЛОВА
# =============================================================================

# Разрядность слова
WORD_BITS: Final[int] = 32

# Основание системы счисления
BASE: Final[int] = 1 << WORD_BITS

# Маска слова (BASE - 1)
WORD_MASK: Final[int] = BASE - 1

# Половина основания: нижняя граница старшего слова нормализованного делителя
HALF_BASE: Final[int] = BASE >> 1


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def trim(words: list[int]) -> list[int]:
    """
    Удаление старших нулевых слов (in place).

    Args:
        words: Список слов (мутируется)

    Returns:
        Тот же список без старших нулей

    Examples:
        >>> trim([1, 2, 0, 0])
        [1, 2]
        >>> trim([0, 0])
        []
    """
    while words and words[-1] == 0:
        words.pop()
    return words


def is_zero(words: list[int]) -> bool:
    """Ноль ⇔ пустой список."""
    return not words


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: list[int], b: list[int]) -> int:
    """
    Трёхзначное сравнение канонических магнитуд.

    Более короткая магнитуда меньше; при равной длине слова сравниваются
    от старшего к младшему.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> compare_magnitudes([5], [0, 1])
        -1
        >>> compare_magnitudes([1, 2], [1, 2])
        0
        >>> compare_magnitudes([0, 3], [9, 2])
        1
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def less_magnitude(a: list[int], b: list[int]) -> bool:
    """|a| < |b|"""
    return compare_magnitudes(a, b) < 0


# =============================================================================
# КОНВЕРСИЯ С NATIVE INT
# =============================================================================


def magnitude_from_int(value: int) -> list[int]:
    """
    Разложение неотрицательного int на слова.

    Raises:
        PreconditionViolation: если value < 0

    Examples:
        >>> magnitude_from_int(0)
        []
        >>> magnitude_from_int(2**32 + 7)
        [7, 1]
    """
    if value < 0:
        raise PreconditionViolation(f"magnitude must be non-negative, got {value}")

    words = []
    while value:
        words.append(value & WORD_MASK)
        value >>= WORD_BITS
    return words


def magnitude_to_int(words: list[int]) -> int:
    """Сборка неотрицательного int из слов."""
    value = 0
    for word in reversed(words):
        value = (value << WORD_BITS) | word
    return value


def validate_words(words) -> list[int]:
    """
    Проверка и копирование внешнего списка слов.

    Args:
        words: Итерируемое слов (младшее первым)

    Returns:
        Новый канонический список

    Raises:
        PreconditionViolation: если слово не int или вне [0, 2^32)
    """
    result = []
    for index, word in enumerate(words):
        if not isinstance(word, int) or isinstance(word, bool):
            raise PreconditionViolation(
                f"word #{index} must be int, got {type(word).__name__}"
            )
        if word < 0 or word > WORD_MASK:
            raise PreconditionViolation(
                f"word #{index} out of range [0, 2^{WORD_BITS}): {word}"
            )
        result.append(word)
    return trim(result)
