"""
Contract Validation Module

Валидация внешних JSON представлений (payload и словарь цвета).
"""

from .validators import (
    ColorDictionaryValidator,
    ColorPayloadValidator,
    ContractValidator,
    SchemaLoader,
    validate_color_dictionary,
    validate_color_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ColorPayloadValidator",
    "ColorDictionaryValidator",
    # Functions
    "validate_color_payload",
    "validate_color_dictionary",
]
