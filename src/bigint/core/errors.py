"""
Errors — Иерархия исключений bigint

Все исключения пакета наследуются от BigIntegerError и одновременно от
соответствующего builtin-исключения, чтобы вызывающий код мог ловить
как доменный тип, так и привычный ValueError / ZeroDivisionError.
"""


class BigIntegerError(Exception):
    """Базовое исключение для всех ошибок bigint."""

    pass


class InvalidFormat(BigIntegerError, ValueError):
    """
    Невалидная десятичная строка.

    Возникает при:
    1. Пустой строке
    2. Одиночном знаке '-' без цифр
    3. Символе вне ASCII 0-9
    4. Превышении CodecConfig.max_str_digits

    Частичное значение никогда не создаётся.
    """

    pass


class DivisionByZero(BigIntegerError, ZeroDivisionError):
    """
    Деление или остаток по модулю нулевого делителя.

    Операнды остаются без изменений.
    """

    pass


class PreconditionViolation(BigIntegerError, ValueError):
    """
    Нарушение контракта вызова.

    - отрицательный сдвиг (<<, >>)
    - вычитание магнитуд, когда уменьшаемое меньше вычитаемого
    - некорректный список слов в BigInteger.from_words
    """

    pass
