"""
bigint — знаковые целые произвольной точности на 32-битных словах.
"""

from bigint.core.config import DEFAULT_CODEC_CONFIG, CodecConfig
from bigint.core.domain import BigInteger, to_string
from bigint.core.errors import (
    BigIntegerError,
    DivisionByZero,
    InvalidFormat,
    PreconditionViolation,
)

__version__ = "0.1.0"

__all__ = [
    "BigInteger",
    "to_string",
    # Config
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    # Errors
    "BigIntegerError",
    "InvalidFormat",
    "DivisionByZero",
    "PreconditionViolation",
]
