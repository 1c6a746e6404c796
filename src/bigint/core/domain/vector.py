"""
ArithmeticVector — Модель known-answer вектора

Immutable Pydantic модель одной записи вида (op, lhs, rhs, expected).
Соответствует схеме contracts/schema/arithmetic_vector.json.
Вектора используются для проверки BigInteger на эталонных значениях.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from bigint.core.domain.big_integer import BigInteger

DECIMAL_PATTERN = r"^-?[0-9]+$"


# =============================================================================
# ENUMS
# =============================================================================


class VectorOp(str, Enum):
    """Операция known-answer вектора"""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    FLOORDIV = "floordiv"
    AND = "and"
    OR = "or"
    XOR = "xor"
    SHL = "shl"
    SHR = "shr"
    NOT = "not"
    NEG = "neg"
    INC = "inc"
    DEC = "dec"

    @property
    def is_unary(self) -> bool:
        return self in _UNARY_OPS


_UNARY_OPS = frozenset({VectorOp.NOT, VectorOp.NEG, VectorOp.INC, VectorOp.DEC})

_BINARY_EVALUATORS = {
    VectorOp.ADD: lambda a, b: a + b,
    VectorOp.SUB: lambda a, b: a - b,
    VectorOp.MUL: lambda a, b: a * b,
    VectorOp.DIV: lambda a, b: a / b,
    VectorOp.MOD: lambda a, b: a % b,
    VectorOp.FLOORDIV: lambda a, b: a // b,
    VectorOp.AND: lambda a, b: a & b,
    VectorOp.OR: lambda a, b: a | b,
    VectorOp.XOR: lambda a, b: a ^ b,
    VectorOp.SHL: lambda a, b: a << b,
    VectorOp.SHR: lambda a, b: a >> b,
}

_UNARY_EVALUATORS = {
    VectorOp.NOT: lambda a: ~a,
    VectorOp.NEG: lambda a: -a,
    VectorOp.INC: lambda a: a.copy().increment(),
    VectorOp.DEC: lambda a: a.copy().decrement(),
}


# =============================================================================
# VECTOR MODEL
# =============================================================================


class ArithmeticVector(BaseModel):
    """
    Known-answer вектор.

    Все операнды: десятичные строки (произвольной длины, без потери точности
    в JSON). Для div дополнительно может быть указан ожидаемый остаток.
    """

    op: VectorOp = Field(..., description="Операция")
    lhs: str = Field(..., pattern=DECIMAL_PATTERN, description="Левый операнд")
    rhs: Optional[str] = Field(
        None,
        pattern=DECIMAL_PATTERN,
        validate_default=True,
        description="Правый операнд (для сдвигов: число бит)",
    )
    expected: str = Field(..., pattern=DECIMAL_PATTERN, description="Ожидаемый результат")
    remainder: Optional[str] = Field(
        None, pattern=DECIMAL_PATTERN, description="Ожидаемый остаток (только div)"
    )
    description: str = Field("", description="Описание сценария")

    model_config = {"frozen": True}

    @field_validator("rhs")
    @classmethod
    def validate_rhs_arity(cls, v: Optional[str], info) -> Optional[str]:
        """Правый операнд обязателен для бинарных операций и запрещён для унарных."""
        op = info.data.get("op")
        if op is None:
            return v
        if op.is_unary and v is not None:
            raise ValueError(f"op '{op.value}' is unary, rhs must be omitted")
        if not op.is_unary and v is None:
            raise ValueError(f"op '{op.value}' requires rhs")
        if op in (VectorOp.SHL, VectorOp.SHR) and v is not None and v.startswith("-"):
            raise ValueError(f"shift count must be non-negative, got {v}")
        return v

    @field_validator("remainder")
    @classmethod
    def validate_remainder_op(cls, v: Optional[str], info) -> Optional[str]:
        """Остаток допустим только для div."""
        if v is not None and info.data.get("op") != VectorOp.DIV:
            raise ValueError("remainder is only allowed for op 'div'")
        return v

    def evaluate(self) -> BigInteger:
        """
        Вычисление операции на BigInteger.

        Raises:
            DivisionByZero: для div/mod/floordiv с нулевым делителем
        """
        lhs = BigInteger(self.lhs)
        if self.op.is_unary:
            return _UNARY_EVALUATORS[self.op](lhs)

        if self.op in (VectorOp.SHL, VectorOp.SHR):
            rhs = int(self.rhs)
        else:
            rhs = BigInteger(self.rhs)
        return _BINARY_EVALUATORS[self.op](lhs, rhs)

    def check(self) -> bool:
        """True если результат (и остаток для div) совпадает с ожидаемым."""
        if self.evaluate() != BigInteger(self.expected):
            return False
        if self.remainder is not None:
            return BigInteger(self.lhs) % BigInteger(self.rhs) == BigInteger(self.remainder)
        return True
