"""
JSON Schema Contract Validators

Модуль для валидации сериализованных BigInt согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- bigint.json: {"magnitude": [word, ...], "negative": bool}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.bigint.domain.bigint import BigInt

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'bigint')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
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
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class BigIntValidator(ContractValidator):
    """Валидатор для bigint контракта."""

    def __init__(self):
        super().__init__("bigint")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bigint(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного BigInt.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntValidator().validate(data)


def bigint_from_contract(data: Dict[str, Any]) -> BigInt:
    """
    Валидация по контракту и построение BigInt.

    В отличие от BigInt.model_validate, отрицательный ноль и пустая
    магнитуда здесь отклоняются, а не нормализуются.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_bigint(data)
    return BigInt.model_validate(data)


def bigint_to_contract(value: BigInt) -> Dict[str, Any]:
    """Сериализация BigInt в каноническую форму контракта."""
    canonical = value.canonical()
    data = {"magnitude": list(canonical.magnitude), "negative": canonical.negative}
    validate_bigint(data)
    return data
