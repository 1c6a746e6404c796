"""
Contract Validation Module

Модуль для валидации JSON контрактов known-answer векторов.
"""

from .validators import (
    ArithmeticVectorValidator,
    ContractValidator,
    SchemaLoader,
    VectorFileValidator,
    load_vectors,
    validate_arithmetic_vector,
    validate_vector_file,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ArithmeticVectorValidator",
    "VectorFileValidator",
    # Functions
    "validate_arithmetic_vector",
    "validate_vector_file",
    "load_vectors",
]
