"""
Domain models and value objects.

Contains the BigInteger value type and the known-answer vector model.
"""

from bigint.core.domain.big_integer import BigInteger, to_string
from bigint.core.domain.vector import ArithmeticVector, VectorOp

__all__ = [
    # Value type
    "BigInteger",
    "to_string",
    # Known-answer vectors
    "ArithmeticVector",
    "VectorOp",
]
