"""
JSON Schema Contract Validators

Валидация внешних представлений цвета по формальным JSON Schema контрактам.
Использует библиотеку jsonschema.

Схемы:
- color_payload.json (сериализованный цвет [r, g, b, a])
- color_dictionary.json (словарь {"red", "green", "blue"})
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат рядом с модулем, в schema/.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем (только чтение после загрузки)
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'color_payload')

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

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности без exception."""
        return self.validator.is_valid(data)


class ColorPayloadValidator(ContractValidator):
    """Массив ровно из 4 чисел в [0, 1]."""

    def __init__(self):
        super().__init__("color_payload")


class ColorDictionaryValidator(ContractValidator):
    """Объект с обязательными ключами red/green/blue."""

    def __init__(self):
        super().__init__("color_dictionary")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_color_payload(data: Any) -> None:
    """
    Валидация десериализованного цвета.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ColorPayloadValidator().validate(data)


def validate_color_dictionary(data: Any) -> None:
    """
    Валидация словаря цвета.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ColorDictionaryValidator().validate(data)
