"""
Тесты для модуля Long Division

Проверяет:
1. Короткие пути (|a| < |b|, однословный делитель)
2. Нормализацию делителя
3. Тождество деления dividend = q * divisor + r, r < divisor
4. Цикл коррекции пробной цифры на адверсариальных операндах
5. Деление на ноль
"""

import logging
import random

import pytest

from bigint.core.errors import DivisionByZero
from bigint.core.math.division import divmod_magnitudes, normalization_shift
from bigint.core.math.magnitude import (
    BASE,
    HALF_BASE,
    WORD_MASK,
    magnitude_from_int as M,
    magnitude_to_int,
)


def _check(dividend: int, divisor: int) -> None:
    quotient, remainder = divmod_magnitudes(M(dividend), M(divisor))
    assert (magnitude_to_int(quotient), magnitude_to_int(remainder)) == divmod(dividend, divisor)
    # Канонические результаты
    assert not quotient or quotient[-1] != 0
    assert not remainder or remainder[-1] != 0


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalizationShift:
    """Тесты для normalization_shift"""

    def test_already_normalized(self) -> None:
        """Старшее слово ≥ BASE/2: сдвиг 0"""
        assert normalization_shift([5, HALF_BASE]) == 0
        assert normalization_shift([WORD_MASK]) == 0

    def test_top_word_one(self) -> None:
        """Старшее слово 1: сдвиг 31"""
        assert normalization_shift([0, 1]) == 31

    def test_shift_brings_top_word_above_half_base(self) -> None:
        """После сдвига старшее слово в [BASE/2, BASE)"""
        for top in (1, 2, 3, 1000, HALF_BASE - 1):
            shift = normalization_shift([0, top])
            assert HALF_BASE <= top << shift < BASE


# =============================================================================
# ТЕСТЫ КОРОТКИХ ПУТЕЙ
# =============================================================================


class TestShortCircuits:
    """Тесты для коротких путей деления"""

    def test_dividend_smaller_than_divisor(self) -> None:
        """|a| < |b| → (0, a)"""
        assert divmod_magnitudes([5], [0, 1]) == ([], [5])

    def test_remainder_is_a_copy(self) -> None:
        """Остаток не разделяет список с делимым"""
        dividend = [5]
        _, remainder = divmod_magnitudes(dividend, [0, 1])
        assert remainder is not dividend

    def test_zero_dividend(self) -> None:
        """0 / b = 0, остаток 0"""
        assert divmod_magnitudes([], [3]) == ([], [])

    def test_single_word_divisor(self) -> None:
        """Однословный делитель"""
        assert divmod_magnitudes([1000000000], [3]) == ([333333333], [1])

    def test_equal_operands(self) -> None:
        """a / a = 1, остаток 0"""
        assert divmod_magnitudes([1, 2, 3], [1, 2, 3]) == ([1], [])

    def test_division_by_zero(self) -> None:
        """Пустой делитель"""
        with pytest.raises(DivisionByZero):
            divmod_magnitudes([1], [])


# =============================================================================
# ТЕСТЫ ТОЖДЕСТВА ДЕЛЕНИЯ
# =============================================================================


class TestDivisionIdentity:
    """Тесты dividend = q * divisor + r"""

    def test_random_multi_word(self) -> None:
        """Случайные многословные операнды"""
        rng = random.Random(1337)
        for _ in range(300):
            divisor = rng.getrandbits(rng.randint(33, 400)) | 1
            dividend = rng.getrandbits(rng.randint(1, 800))
            _check(dividend, divisor)

    def test_exact_division(self) -> None:
        """Деление без остатка"""
        divisor = 3**100
        _check(divisor * 7**80, divisor)

    def test_quotient_top_word_one(self) -> None:
        """Старшее слово частного равно 1 (начальное вычитание)"""
        divisor = (HALF_BASE << 64) | 12345
        _check(divisor * BASE + 17, divisor)
        _check(divisor * (BASE + 1), divisor)

    def test_remainder_one_less_than_divisor(self) -> None:
        """Остаток максимален: divisor - 1"""
        divisor = 2**200 + 2**100 + 1
        _check(divisor * 12345678901234567890 + divisor - 1, divisor)


# =============================================================================
# ТЕСТЫ ЦИКЛА КОРРЕКЦИИ
# =============================================================================


class TestCorrectionLoop:
    """Адверсариальные операнды для пробной цифры"""

    @pytest.mark.parametrize("low_words", [1, 2, 3, 5])
    def test_divisor_top_word_exactly_half_base(self, low_words: int) -> None:
        """Старшее слово делителя ровно BASE/2, делимое из одних единиц"""
        divisor = magnitude_to_int([0] * low_words + [HALF_BASE])
        for extra in range(1, 4):
            dividend = BASE ** (low_words + 1 + extra) - 1
            _check(dividend, divisor)

    def test_divisor_low_words_all_ones(self) -> None:
        """Низкие слова делителя: все единицы: пробная цифра завышена"""
        divisor = magnitude_to_int([WORD_MASK, WORD_MASK, HALF_BASE])
        dividend = magnitude_to_int([0, 0, 0, 0, HALF_BASE - 1, WORD_MASK])
        _check(dividend, divisor)

    def test_trial_digit_overestimated(self) -> None:
        """Пробная цифра BASE - 1 при истинной цифре BASE - 2"""
        divisor = magnitude_to_int([WORD_MASK, HALF_BASE])
        dividend = magnitude_to_int([0, 0, HALF_BASE])
        quotient, remainder = divmod_magnitudes(M(dividend), M(divisor))
        assert quotient == [WORD_MASK - 1]
        assert magnitude_to_int(remainder) == dividend - (WORD_MASK - 1) * divisor

    def test_unnormalized_divisor(self) -> None:
        """Делитель со старшим словом 1 (максимальный сдвиг нормализации)"""
        divisor = magnitude_to_int([WORD_MASK, WORD_MASK, 1])
        dividend = magnitude_to_int([WORD_MASK] * 8)
        _check(dividend, divisor)

    def test_correction_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Коррекции пишутся в DEBUG лог"""
        divisor = magnitude_to_int([WORD_MASK, HALF_BASE])
        dividend = magnitude_to_int([0, 0, HALF_BASE])
        with caplog.at_level(logging.DEBUG, logger="bigint.core.math.division"):
            _check(dividend, divisor)
        assert any("corrected" in record.getMessage() for record in caplog.records)
