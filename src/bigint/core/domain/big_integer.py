"""
BigInteger — Знаковое целое произвольной точности

Значение хранится в sign-magnitude: флаг знака + little-endian список
32-битных слов. Дополнительный код используется только внутри побитовых
операций (bigint.core.math.bitwise) и никогда не сохраняется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждой публичной операции):
1. Нет старших нулевых слов; пустой список означает ноль
2. Ноль всегда неотрицателен
3. Каждое значение владеет своим списком слов (копии всегда глубокие)
4. Составные операторы (+=, /=, ...) сначала строят результат целиком и
   только потом фиксируют его: при исключении получатель не меняется

СЕМАНТИКА:
- / и %: усечение к нулю, знак остатка совпадает со знаком делимого
- //: деление с округлением к -∞ (семантика Python int)
- &, |, ^, ~: бесконечный дополнительный код
- >>: арифметический сдвиг (округление к -∞)

Значения изменяемы (составные операторы мутируют получателя), поэтому
BigInteger не хешируется.
"""

import operator
from typing import TextIO

from bigint.core.config import CodecConfig
from bigint.core.errors import PreconditionViolation
from bigint.core.math.arithmetic import (
    add_magnitudes,
    add_word,
    mul_magnitudes,
    shift_left_magnitude,
    shift_right_magnitude,
    sub_magnitudes,
    sub_word,
)
from bigint.core.math.bitwise import and_words, or_words, xor_words
from bigint.core.math.decimal_codec import format_decimal, parse_decimal
from bigint.core.math.division import divmod_magnitudes
from bigint.core.math.magnitude import (
    compare_magnitudes,
    less_magnitude,
    magnitude_from_int,
    magnitude_to_int,
    validate_words,
)

# =============================================================================
# ЗНАКОВЫЕ ПРИМИТИВЫ
# =============================================================================


def _add_signed(
    a_negative: bool, a_words: list[int], b_negative: bool, b_words: list[int]
) -> tuple[bool, list[int]]:
    """a + b в sign-magnitude. Меньшая магнитуда всегда вычитается из большей."""
    if a_negative == b_negative:
        return a_negative, add_magnitudes(a_words, b_words)

    if less_magnitude(a_words, b_words):
        return b_negative, sub_magnitudes(b_words, a_words)
    return a_negative, sub_magnitudes(a_words, b_words)


def _divmod_signed(
    a_negative: bool, a_words: list[int], b_negative: bool, b_words: list[int]
) -> tuple[tuple[bool, list[int]], tuple[bool, list[int]]]:
    """
    Усекающее деление со знаками.

    Знак частного = XOR знаков операндов, знак остатка = знак делимого.
    Обнуление знака для нулевых результатов выполняет _commit.
    """
    quotient, remainder = divmod_magnitudes(a_words, b_words)
    return (a_negative != b_negative, quotient), (a_negative, remainder)


def _shift_count(count) -> int:
    count = operator.index(count)
    if count < 0:
        raise PreconditionViolation(f"negative shift count: {count}")
    return count


# =============================================================================
# BIG INTEGER
# =============================================================================


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Конструирование:
        BigInteger()  # ноль
        BigInteger(-12345)  # из int любой разрядности
        BigInteger("-12345")  # из десятичной строки (InvalidFormat при ошибке)
        BigInteger(other)  # глубокая копия
        BigInteger.from_words(negative, words)  # из явного списка слов

    Examples:
        >>> BigInteger("123456789123456789") * BigInteger(-2)
        BigInteger('-246913578246913578')
        >>> str(BigInteger(-7) % 3)
        '-1'
        >>> BigInteger(-1) & 1
        BigInteger('1')
    """

    __slots__ = ("_negative", "_words")

    __hash__ = None  # mutable

    def __init__(self, value: "BigInteger | int | str" = 0):
        if isinstance(value, BigInteger):
            negative, words = value._negative, list(value._words)
        elif isinstance(value, int):
            negative, words = value < 0, magnitude_from_int(abs(value))
        elif isinstance(value, str):
            negative, words = parse_decimal(value)
        else:
            raise TypeError(
                f"BigInteger() argument must be int, str or BigInteger, "
                f"got {type(value).__name__}"
            )
        self._negative = negative
        self._words = words

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str, config: CodecConfig | None = None) -> "BigInteger":
        """
        Парсинг десятичной строки с явной конфигурацией кодека.

        Raises:
            InvalidFormat: при невалидной строке или превышении лимита цифр
        """
        return cls._from_parts(*parse_decimal(text, config))

    @classmethod
    def from_words(cls, negative: bool, words) -> "BigInteger":
        """
        Значение из знака и little-endian слов.

        Старшие нули отбрасываются, отрицательный ноль становится нулём.

        Raises:
            PreconditionViolation: если слово не int или вне [0, 2^32)
        """
        return cls._from_parts(bool(negative), validate_words(words))

    @classmethod
    def _from_parts(cls, negative: bool, words: list[int]) -> "BigInteger":
        value = cls.__new__(cls)
        value._negative = negative and bool(words)
        value._words = words
        return value

    def _commit(self, negative: bool, words: list[int]) -> "BigInteger":
        """Фиксация полностью построенного результата (canonical zero)."""
        self._words = words
        self._negative = negative and bool(words)
        return self

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_negative(self) -> bool:
        return self._negative

    @property
    def words(self) -> tuple[int, ...]:
        """Копия магнитуды (младшее слово первым)."""
        return tuple(self._words)

    def is_zero(self) -> bool:
        return not self._words

    def copy(self) -> "BigInteger":
        return BigInteger(self)

    def __copy__(self) -> "BigInteger":
        return BigInteger(self)

    def __deepcopy__(self, memo) -> "BigInteger":
        return BigInteger(self)

    # -------------------------------------------------------------------------
    # Составные операторы (мутируют получателя)
    # -------------------------------------------------------------------------

    def __iadd__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._commit(*_add_signed(self._negative, self._words, other._negative, other._words))

    def __isub__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._commit(*_add_signed(self._negative, self._words, not other._negative, other._words))

    def __imul__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._commit(self._negative != other._negative, mul_magnitudes(self._words, other._words))

    def __itruediv__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        quotient, _ = _divmod_signed(self._negative, self._words, other._negative, other._words)
        return self._commit(*quotient)

    def __imod__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        _, remainder = _divmod_signed(self._negative, self._words, other._negative, other._words)
        return self._commit(*remainder)

    def __ifloordiv__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        (negative, words), (_, remainder) = _divmod_signed(
            self._negative, self._words, other._negative, other._words
        )
        # Усечение → округление к -inf: частное отрицательно и деление неточное
        if negative and remainder:
            words = add_word(words, 1)
        return self._commit(negative, words)

    def __iand__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._commit(*and_words(self._negative, self._words, other._negative, other._words))

    def __ior__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._commit(*or_words(self._negative, self._words, other._negative, other._words))

    def __ixor__(self, other: "BigInteger | int") -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._commit(*xor_words(self._negative, self._words, other._negative, other._words))

    def __ilshift__(self, count: int) -> "BigInteger":
        count = _shift_count(count)
        return self._commit(self._negative, shift_left_magnitude(self._words, count))

    def __irshift__(self, count: int) -> "BigInteger":
        count = _shift_count(count)
        words, inexact = shift_right_magnitude(self._words, count)
        # Арифметический сдвиг: для отрицательных округление к -inf
        if self._negative and inexact:
            words = add_word(words, 1)
        return self._commit(self._negative, words)

    # -------------------------------------------------------------------------
    # Бинарные операторы (copy-then-compound)
    # -------------------------------------------------------------------------

    def _binary(self, other, compound) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compound(self.copy(), other)

    def _reflected(self, other, compound) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compound(other.copy(), self)

    def __add__(self, other):
        return self._binary(other, BigInteger.__iadd__)

    def __radd__(self, other):
        return self._reflected(other, BigInteger.__iadd__)

    def __sub__(self, other):
        return self._binary(other, BigInteger.__isub__)

    def __rsub__(self, other):
        return self._reflected(other, BigInteger.__isub__)

    def __mul__(self, other):
        return self._binary(other, BigInteger.__imul__)

    def __rmul__(self, other):
        return self._reflected(other, BigInteger.__imul__)

    def __truediv__(self, other):
        return self._binary(other, BigInteger.__itruediv__)

    def __rtruediv__(self, other):
        return self._reflected(other, BigInteger.__itruediv__)

    def __mod__(self, other):
        return self._binary(other, BigInteger.__imod__)

    def __rmod__(self, other):
        return self._reflected(other, BigInteger.__imod__)

    def __floordiv__(self, other):
        return self._binary(other, BigInteger.__ifloordiv__)

    def __rfloordiv__(self, other):
        return self._reflected(other, BigInteger.__ifloordiv__)

    def __and__(self, other):
        return self._binary(other, BigInteger.__iand__)

    def __rand__(self, other):
        return self._reflected(other, BigInteger.__iand__)

    def __or__(self, other):
        return self._binary(other, BigInteger.__ior__)

    def __ror__(self, other):
        return self._reflected(other, BigInteger.__ior__)

    def __xor__(self, other):
        return self._binary(other, BigInteger.__ixor__)

    def __rxor__(self, other):
        return self._reflected(other, BigInteger.__ixor__)

    def __lshift__(self, count: int) -> "BigInteger":
        result = self.copy()
        result <<= count
        return result

    def __rshift__(self, count: int) -> "BigInteger":
        result = self.copy()
        result >>= count
        return result

    def divmod(self, other: "BigInteger | int") -> tuple["BigInteger", "BigInteger"]:
        """
        Частное и остаток за один проход деления.

        Согласовано с / и %: (a / b, a % b).

        Raises:
            DivisionByZero: если other == 0
        """
        divisor = _coerce(other)
        if divisor is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        quotient, remainder = _divmod_signed(
            self._negative, self._words, divisor._negative, divisor._words
        )
        return BigInteger._from_parts(*quotient), BigInteger._from_parts(*remainder)

    def __divmod__(self, other):
        if _coerce(other) is None:
            return NotImplemented
        return self.divmod(other)

    def __rdivmod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.divmod(self)

    # -------------------------------------------------------------------------
    # Унарные операторы
    # -------------------------------------------------------------------------

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __neg__(self) -> "BigInteger":
        return BigInteger._from_parts(not self._negative, list(self._words))

    def __abs__(self) -> "BigInteger":
        return BigInteger._from_parts(False, list(self._words))

    def __invert__(self) -> "BigInteger":
        """~x == -x - 1"""
        if self._negative:
            return BigInteger._from_parts(False, sub_word(self._words, 1))
        return BigInteger._from_parts(True, add_word(self._words, 1))

    # -------------------------------------------------------------------------
    # Инкремент / декремент
    # -------------------------------------------------------------------------

    def increment(self) -> "BigInteger":
        """Префиксный инкремент: value + 1 (мутирует, возвращает self)."""
        if self._negative:
            return self._commit(True, sub_word(self._words, 1))
        return self._commit(False, add_word(self._words, 1))

    def decrement(self) -> "BigInteger":
        """Префиксный декремент: value - 1 (мутирует, возвращает self)."""
        if self._negative:
            return self._commit(True, add_word(self._words, 1))
        if not self._words:
            return self._commit(True, [1])
        return self._commit(False, sub_word(self._words, 1))

    def post_increment(self) -> "BigInteger":
        """Постфиксный инкремент: возвращает копию прежнего значения."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInteger":
        """Постфиксный декремент: возвращает копию прежнего значения."""
        previous = self.copy()
        self.decrement()
        return previous

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _compare(self, other: "BigInteger") -> int:
        if self._negative != other._negative:
            return -1 if self._negative else 1
        result = compare_magnitudes(self._words, other._words)
        return -result if self._negative else result

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._words == other._words

    def __ne__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not (self._negative == other._negative and self._words == other._words)

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) >= 0

    # -------------------------------------------------------------------------
    # Конверсии и вывод
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return bool(self._words)

    def __int__(self) -> int:
        value = magnitude_to_int(self._words)
        return -value if self._negative else value

    __index__ = __int__

    def to_string(self) -> str:
        """Каноническая десятичная запись ("0", "-123", без ведущих нулей)."""
        return format_decimal(self._negative, self._words)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __format__(self, format_spec: str) -> str:
        return format(self.to_string(), format_spec)

    def write_to(self, stream: TextIO) -> TextIO:
        """Запись десятичного представления в текстовый поток."""
        stream.write(self.to_string())
        return stream


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value) -> BigInteger | None:
    """BigInteger как есть, int → BigInteger, иначе None (NotImplemented)."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return None


def to_string(value: BigInteger) -> str:
    """Десятичная запись значения."""
    return value.to_string()
