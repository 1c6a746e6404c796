"""
Long Division — Многословное деление магнитуд

Нормализованное деление в стиле Knuth Algorithm D:
1. |dividend| < |divisor| → частное 0, остаток = делимое
2. Однословный делитель → divmod_word
3. Нормализация: сдвиг обоих операндов на k бит, чтобы старшее слово
   делителя было ≥ BASE / 2
4. Для каждой позиции частного (от старшей): пробная цифра по одному-двум
   старшим словам остатка, clamp до BASE - 1, затем цикл коррекции
5. Денормализация остатка сдвигом вправо на k бит

ВАЖНО: пробная цифра только приблизительна. Цикл коррекции обязателен для
корректности; при нормализованном делителе он выполняется не более двух раз,
но ограничение в коде не закладывается.
"""

import logging

from bigint.core.errors import DivisionByZero
from bigint.core.math.arithmetic import (
    divmod_word,
    mul_word,
    shift_left_magnitude,
    shift_right_magnitude,
    sub_magnitudes,
)
from bigint.core.math.magnitude import (
    BASE,
    WORD_BITS,
    WORD_MASK,
    compare_magnitudes,
    less_magnitude,
    trim,
)

logger = logging.getLogger(__name__)


def normalization_shift(divisor: list[int]) -> int:
    """
    Число бит k (0 ≤ k < 32), после сдвига на которое старшее слово
    делителя становится ≥ BASE / 2.

    Examples:
        >>> normalization_shift([0, 1])
        31
        >>> normalization_shift([0x80000000])
        0
    """
    return WORD_BITS - divisor[-1].bit_length()


def _trial_digit(remainder: list[int], position: int, divisor_top: int) -> int:
    """Пробная цифра частного по словам remainder[position], remainder[position - 1]."""
    if position - 1 >= len(remainder):
        return 0
    if position >= len(remainder):
        estimate = remainder[position - 1] // divisor_top
    else:
        estimate = (remainder[position] * BASE + remainder[position - 1]) // divisor_top
    return min(estimate, WORD_MASK)


def divmod_magnitudes(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """
    Беззнаковое деление с остатком.

    Args:
        dividend: Магнитуда делимого
        divisor: Магнитуда делителя

    Returns:
        (quotient, remainder): канонические магнитуды,
        dividend = quotient * divisor + remainder, remainder < divisor

    Raises:
        DivisionByZero: если divisor пустой

    Examples:
        >>> divmod_magnitudes([1000000000], [3])
        ([333333333], [1])
        >>> divmod_magnitudes([5], [0, 1])
        ([], [5])
    """
    if not divisor:
        raise DivisionByZero("division by zero")

    if less_magnitude(dividend, divisor):
        return [], list(dividend)

    if len(divisor) == 1:
        quotient, remainder = divmod_word(dividend, divisor[0])
        return quotient, ([remainder] if remainder else [])

    shift = normalization_shift(divisor)
    normalized_divisor = shift_left_magnitude(divisor, shift)
    remainder = shift_left_magnitude(dividend, shift)

    divisor_len = len(normalized_divisor)
    divisor_top = normalized_divisor[-1]
    positions = len(remainder) - divisor_len
    quotient = [0] * (positions + 1)

    # normalized_divisor * BASE^positions
    shifted_divisor = [0] * positions + normalized_divisor
    if compare_magnitudes(remainder, shifted_divisor) >= 0:
        quotient[positions] = 1
        remainder = sub_magnitudes(remainder, shifted_divisor)

    for i in range(positions - 1, -1, -1):
        shifted_divisor = shifted_divisor[1:]

        digit = _trial_digit(remainder, divisor_len + i, divisor_top)
        product = mul_word(shifted_divisor, digit)

        corrections = 0
        while less_magnitude(remainder, product):
            digit -= 1
            product = sub_magnitudes(product, shifted_divisor)
            corrections += 1

        if corrections:
            logger.debug(f"Quotient digit #{i} corrected {corrections} time(s)")

        remainder = sub_magnitudes(remainder, product)
        quotient[i] = digit

    remainder, _ = shift_right_magnitude(remainder, shift)
    return trim(quotient), remainder
