"""
Errors — Типизированные ошибки конвертеров

Каждый домен имеет собственный закрытый набор видов ошибок (kind) и
собственное исключение. Общего базового типа, кроме ValueError, нет:
вызывающий код всегда знает, какой конвертер отказал и почему.

Вид ошибки дублируется в сообщении в скобках, например
"... (cannot_parse_amount)", чтобы его можно было сопоставить по тексту.
"""

from enum import Enum


# =============================================================================
# DATE
# =============================================================================


class DateErrorKind(str, Enum):
    """Виды ошибок конвертера дат."""

    CANNOT_GET_MONTH = "cannot_get_month"
    CANNOT_GET_YEAR = "cannot_get_year"


class DateError(ValueError):
    """Календарь не смог выделить месяц или год из даты."""

    def __init__(self, kind: DateErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(_message(kind, detail))


# =============================================================================
# CURRENCY
# =============================================================================


class CurrencyErrorKind(str, Enum):
    """Виды ошибок конвертера денежных сумм."""

    CANNOT_LOCALIZE_FOR_CURRENCY_FORMAT = "cannot_localize_for_currency_format"
    CANNOT_PARSE_AMOUNT = "cannot_parse_amount"


class CurrencyError(ValueError):
    """Сумма не может быть отформатирована или распознана."""

    def __init__(self, kind: CurrencyErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(_message(kind, detail))


# =============================================================================
# MONTH-YEAR IDENTIFIER
# =============================================================================


class IdentifierErrorKind(str, Enum):
    """Виды ошибок кодека month-year идентификатора."""

    INVALID_LENGTH = "invalid_length"


class IdentifierError(ValueError):
    """Идентификатор структурно невалиден."""

    def __init__(self, kind: IdentifierErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(_message(kind, detail))


# =============================================================================
# COLOR
# =============================================================================


class ColorErrorKind(str, Enum):
    """Виды ошибок кодека цвета."""

    CANNOT_GET_RGB_COMPONENTS = "cannot_get_rgb_components"
    CANNOT_GET_COLOR_DATA = "cannot_get_color_data"
    CORRUPTED_COLOR_DATA = "corrupted_color_data"
    CANNOT_GET_COLOR_DICTIONARY_DATA = "cannot_get_color_dictionary_data"


class ColorError(ValueError):
    """Цвет не может быть сериализован или восстановлен."""

    def __init__(self, kind: ColorErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(_message(kind, detail))


def _message(kind: Enum, detail: str) -> str:
    if detail:
        return f"{detail} ({kind.value})"
    return f"({kind.value})"
