"""
Magnitude Arithmetic — Беззнаковая арифметика над магнитудами

Все функции игнорируют знак, не мутируют аргументы и возвращают новый
канонический список слов. Это позволяет вызывающему коду сначала построить
результат целиком и только потом зафиксировать его (copy-then-commit).

Операции:
- Сложение / вычитание (в т.ч. с одним словом)
- Умножение на слово и на магнитуду (schoolbook O(n·m))
- Деление на слово с остатком
- Сдвиги на произвольное число бит
"""

from bigint.core.errors import DivisionByZero, PreconditionViolation
from bigint.core.math.magnitude import (
    WORD_BITS,
    WORD_MASK,
    compare_magnitudes,
    trim,
)

# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    |a| + |b| с распространением переноса.

    Examples:
        >>> add_magnitudes([0xFFFFFFFF], [1])
        [0, 1]
        >>> add_magnitudes([], [5])
        [5]
    """
    if len(a) < len(b):
        a, b = b, a

    result = []
    carry = 0
    for i in range(len(a)):
        value = a[i] + (b[i] if i < len(b) else 0) + carry
        result.append(value & WORD_MASK)
        carry = value >> WORD_BITS

    if carry:
        result.append(carry)
    return result


def add_word(a: list[int], word: int) -> list[int]:
    """|a| + word (быстрый путь для инкремента и парсинга)."""
    result = list(a)
    carry = word
    i = 0
    while carry:
        if i == len(result):
            result.append(carry)
            break
        value = result[i] + carry
        result[i] = value & WORD_MASK
        carry = value >> WORD_BITS
        i += 1
    return result


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    |a| - |b| с заёмом.

    Raises:
        PreconditionViolation: если |a| < |b|. Вызывающий код обязан
            сравнить операнды заранее и поменять их местами.

    Examples:
        >>> sub_magnitudes([0, 1], [1])
        [4294967295]
        >>> sub_magnitudes([7], [7])
        []
    """
    if compare_magnitudes(a, b) < 0:
        raise PreconditionViolation("magnitude subtraction requires |a| >= |b|")

    result = []
    borrow = 0
    for i in range(len(a)):
        value = a[i] - (b[i] if i < len(b) else 0) - borrow
        if value < 0:
            value += WORD_MASK + 1
            borrow = 1
        else:
            borrow = 0
        result.append(value)

    return trim(result)


def sub_word(a: list[int], word: int) -> list[int]:
    """|a| - word (быстрый путь для декремента)."""
    if len(a) <= 1 and (a[0] if a else 0) < word:
        raise PreconditionViolation("magnitude subtraction requires |a| >= |b|")

    result = list(a)
    borrow = word
    i = 0
    while borrow:
        value = result[i] - borrow
        if value < 0:
            result[i] = value + WORD_MASK + 1
            borrow = 1
        else:
            result[i] = value
            borrow = 0
        i += 1

    return trim(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_word(a: list[int], word: int) -> list[int]:
    """
    |a| * word, multiply-accumulate с переносом.

    Examples:
        >>> mul_word([0x80000000], 2)
        [0, 1]
        >>> mul_word([123], 0)
        []
    """
    if word == 0 or not a:
        return []

    result = []
    carry = 0
    for digit in a:
        value = digit * word + carry
        result.append(value & WORD_MASK)
        carry = value >> WORD_BITS

    if carry:
        result.append(carry)
    return result


def mul_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    |a| * |b|: schoolbook двойной цикл O(n·m).

    Буфер результата заранее имеет длину len(a) + len(b); перенос
    распространяется во внутреннем цикле и записывается в следующее слово.
    """
    if not a or not b:
        return []

    result = [0] * (len(a) + len(b))
    for i, digit in enumerate(a):
        if digit == 0:
            continue
        carry = 0
        for j, other in enumerate(b):
            value = result[i + j] + digit * other + carry
            result[i + j] = value & WORD_MASK
            carry = value >> WORD_BITS
        result[i + len(b)] = carry

    return trim(result)


# =============================================================================
# ДЕЛЕНИЕ НА СЛОВО
# =============================================================================


def divmod_word(a: list[int], word: int) -> tuple[list[int], int]:
    """
    Деление магнитуды на одно слово сверху вниз.

    Returns:
        (quotient, remainder): частное (каноническое) и остаток в [0, word)

    Raises:
        DivisionByZero: если word == 0

    Examples:
        >>> divmod_word([0, 1], 3)
        ([1431655765], 1)
        >>> divmod_word([], 7)
        ([], 0)
    """
    if word == 0:
        raise DivisionByZero("division by zero")

    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        current = (remainder << WORD_BITS) | a[i]
        quotient[i], remainder = divmod(current, word)

    return trim(quotient), remainder


# =============================================================================
# СДВИГИ
# =============================================================================


def shift_left_magnitude(a: list[int], count: int) -> list[int]:
    """
    |a| << count: вставка count // 32 нулевых слов и умножение на 2^(count % 32).

    Raises:
        PreconditionViolation: если count < 0
    """
    if count < 0:
        raise PreconditionViolation(f"negative shift count: {count}")
    if not a:
        return []

    word_shift, bit_shift = divmod(count, WORD_BITS)
    return mul_word([0] * word_shift + list(a), 1 << bit_shift)


def shift_right_magnitude(a: list[int], count: int) -> tuple[list[int], bool]:
    """
    |a| >> count: отбрасывание count // 32 слов и деление на 2^(count % 32).

    Returns:
        (shifted, inexact): сдвинутая магнитуда и флаг того, что среди
        вытолкнутых бит был хотя бы один ненулевой

    Raises:
        PreconditionViolation: если count < 0
    """
    if count < 0:
        raise PreconditionViolation(f"negative shift count: {count}")

    word_shift, bit_shift = divmod(count, WORD_BITS)
    if word_shift >= len(a):
        return [], bool(a)

    dropped_nonzero = any(a[:word_shift])
    shifted, remainder = divmod_word(a[word_shift:], 1 << bit_shift)
    return shifted, dropped_nonzero or remainder != 0
