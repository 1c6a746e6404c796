"""
Two's-Complement Bitwise — Эмуляция бесконечного дополнительного кода

Хранимое представление: sign-magnitude. AND/OR/XOR должны вести себя так,
как если бы операнды были записаны в дополнительном коде бесконечной
разрядности (~x == -x - 1, отрицательные битовые шаблоны корректно
комбинируются).

Алгоритм:
1. Отрицательный операнд переводится в дополнительный код на лету:
   word' = (~word & WORD_MASK) + carry_in, перенос уходит в следующее слово
2. Более короткий операнд дополняется знаковым расширением
   (0 для неотрицательных, WORD_MASK для отрицательных)
3. Оператор применяется пословно, знак результата = тот же оператор над знаками
4. Отрицательный результат переводится обратно в sign-magnitude
   (инверсия + 1), затем trim

Дополнительный код никогда не сохраняется вне этого модуля.
"""

import operator
from typing import Callable, Iterator

from bigint.core.math.magnitude import WORD_BITS, WORD_MASK, trim

BitwiseOp = Callable[[int, int], int]


def twos_complement_words(words: list[int], negative: bool, length: int) -> Iterator[int]:
    """
    Слова операнда в дополнительном коде, длиной length.

    Слова за пределами хранимой длины считаются нулевыми до инверсии,
    что даёт знаковое расширение WORD_MASK для отрицательных значений.

    Examples:
        >>> list(twos_complement_words([1], True, 2))
        [4294967295, 4294967295]
        >>> list(twos_complement_words([5], False, 2))
        [5, 0]
    """
    carry = 1
    for i in range(length):
        word = words[i] if i < len(words) else 0
        if not negative:
            yield word
            continue
        value = (~word & WORD_MASK) + carry
        carry = value >> WORD_BITS
        yield value & WORD_MASK


def negate_words(words: list[int]) -> list[int]:
    """
    Отрицание в дополнительном коде (инверсия + 1) фиксированной длины.

    Финальный перенос дописывается старшим словом, поэтому результат
    остаётся точной магнитудой и для -BASE^len.
    """
    result = list(twos_complement_words(words, True, len(words)))
    if not any(words):
        result.append(1)
    return result


def apply_bitwise(
    a_negative: bool,
    a_words: list[int],
    b_negative: bool,
    b_words: list[int],
    op: BitwiseOp,
) -> tuple[bool, list[int]]:
    """
    Побитовая операция над двумя знаковыми значениями.

    Args:
        a_negative, a_words: Знак и магнитуда левого операнда
        b_negative, b_words: Знак и магнитуда правого операнда
        op: Пословный оператор (operator.and_ / or_ / xor)

    Returns:
        (negative, words) результата в sign-magnitude, каноническая форма
    """
    length = max(len(a_words), len(b_words))
    words = [
        op(a_word, b_word) & WORD_MASK
        for a_word, b_word in zip(
            twos_complement_words(a_words, a_negative, length),
            twos_complement_words(b_words, b_negative, length),
        )
    ]
    negative = bool(op(a_negative, b_negative))

    if negative:
        words = negate_words(words)

    trim(words)
    if not words:
        negative = False
    return negative, words


def and_words(a_negative: bool, a_words: list[int], b_negative: bool, b_words: list[int]) -> tuple[bool, list[int]]:
    """a & b"""
    return apply_bitwise(a_negative, a_words, b_negative, b_words, operator.and_)


def or_words(a_negative: bool, a_words: list[int], b_negative: bool, b_words: list[int]) -> tuple[bool, list[int]]:
    """a | b"""
    return apply_bitwise(a_negative, a_words, b_negative, b_words, operator.or_)


def xor_words(a_negative: bool, a_words: list[int], b_negative: bool, b_words: list[int]) -> tuple[bool, list[int]]:
    """a ^ b"""
    return apply_bitwise(a_negative, a_words, b_negative, b_words, operator.xor)
