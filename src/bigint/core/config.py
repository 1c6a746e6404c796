"""
Config — Конфигурация десятичного кодека

Конфигурация передаётся явно (config: CodecConfig | None = None),
глобального изменяемого состояния нет.
"""

from dataclasses import dataclass
from typing import Final

# Без ограничения на количество цифр
MAX_STR_DIGITS_UNLIMITED: Final[int] = 0


@dataclass(frozen=True)
class CodecConfig:
    """Конфигурация парсера десятичных строк.

    max_str_digits ограничивает число цифр во входной строке
    (по аналогии с sys.set_int_max_str_digits). 0: без ограничения.
    """

    max_str_digits: int = MAX_STR_DIGITS_UNLIMITED

    def __post_init__(self) -> None:
        if self.max_str_digits < 0:
            raise ValueError(
                f"max_str_digits must be non-negative, got {self.max_str_digits}"
            )

    def allows(self, digit_count: int) -> bool:
        """True если digit_count не превышает лимит."""
        if self.max_str_digits == MAX_STR_DIGITS_UNLIMITED:
            return True
        return digit_count <= self.max_str_digits


DEFAULT_CODEC_CONFIG: Final[CodecConfig] = CodecConfig()
