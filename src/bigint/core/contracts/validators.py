"""
JSON Schema Contract Validators

Модуль для валидации known-answer векторов согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия данных
схемам, затем строит Pydantic модели ArithmeticVector.

Схемы (schema/):
- vector_file.json (файл векторов: schema_version + vectors)
- arithmetic_vector.json (одна запись op/lhs/rhs/expected)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from bigint.core.domain.vector import ArithmeticVector

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'arithmetic_vector')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика (только чтение схем)
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ArithmeticVectorValidator(ContractValidator):
    """Валидатор одной записи arithmetic_vector."""

    def __init__(self):
        super().__init__("arithmetic_vector")


class VectorFileValidator(ContractValidator):
    """
    Валидатор файла векторов.

    Проверяет обёртку (vector_file), затем каждую запись отдельно
    (arithmetic_vector), чтобы ошибка указывала индекс записи.
    """

    def __init__(self):
        super().__init__("vector_file")
        self._record_validator = ArithmeticVectorValidator()

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)
        for index, record in enumerate(data["vectors"]):
            try:
                self._record_validator.validate(record)
            except ValidationError as e:
                raise ValidationError(f"vectors[{index}]: {e.message}") from e

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return super().is_valid(data) and all(
            self._record_validator.is_valid(record) for record in data["vectors"]
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_arithmetic_vector(data: Dict[str, Any]) -> None:
    """
    Валидация одной записи вектора.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ArithmeticVectorValidator().validate(data)


def validate_vector_file(data: Dict[str, Any]) -> None:
    """
    Валидация содержимого файла векторов.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    VectorFileValidator().validate(data)


def load_vectors(path: Union[str, Path]) -> List[ArithmeticVector]:
    """
    Загрузка known-answer векторов из JSON файла.

    Args:
        path: Путь к файлу векторов

    Returns:
        Список ArithmeticVector в порядке файла

    Raises:
        ValidationError: Если файл не соответствует схеме
        pydantic.ValidationError: Если запись не проходит валидацию модели
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_vector_file(data)
    vectors = [ArithmeticVector(**record) for record in data["vectors"]]

    logger.debug(f"Loaded {len(vectors)} vectors from {path}")
    return vectors
