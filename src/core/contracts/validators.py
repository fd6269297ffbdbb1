"""
JSON Schema Contract Validators

Модуль для валидации JSON данных на границе UI ↔ движок согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (src/core/contracts/schema/):
- operation_request.json — команда от UI-слоя
- operation_result.json — результат, возвращаемый UI-слою
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
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
            schema_name: Имя схемы без расширения (например, 'operation_request')

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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
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
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def first_error_message(self, data: Dict[str, Any]) -> str | None:
        """
        Сообщение о наиболее релевантной ошибке или None, если данные валидны.

        Релевантность определяется jsonschema best_match.
        """
        error = best_match(self.validator.iter_errors(data))
        if error is None:
            return None

        location = "/".join(str(part) for part in error.absolute_path)
        if location:
            return f"{location}: {error.message}"
        return error.message


class OperationRequestValidator(ContractValidator):
    """Валидатор для operation_request контракта."""

    def __init__(self):
        super().__init__("operation_request")


class OperationResultValidator(ContractValidator):
    """Валидатор для operation_result контракта."""

    def __init__(self):
        super().__init__("operation_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_operation_request(data: Dict[str, Any]) -> None:
    """
    Валидация operation_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OperationRequestValidator().validate(data)


def validate_operation_result(data: Dict[str, Any]) -> None:
    """
    Валидация operation_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OperationResultValidator().validate(data)

