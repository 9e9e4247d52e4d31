"""
valuecodecs — conversions between human-facing text and typed values.

Dates, currency amounts, month-year identifiers and RGBA colors.
"""

from valuecodecs.core.domain import (
    Color,
    DateFormat,
    color_from_dict,
    date_from_month_year_id,
    decode_color,
    encode_color,
    format_currency,
    format_date,
    month_year_id,
    month_year_id_from_date,
    parse_currency,
    parse_date,
)
from valuecodecs.core.errors import (
    ColorError,
    ColorErrorKind,
    CurrencyError,
    CurrencyErrorKind,
    DateError,
    DateErrorKind,
    IdentifierError,
    IdentifierErrorKind,
)
from valuecodecs.core.formatting import LocaleSettings

__version__ = "0.1.0"

__all__ = [
    "Color",
    "DateFormat",
    "LocaleSettings",
    "format_date",
    "parse_date",
    "month_year_id",
    "format_currency",
    "parse_currency",
    "date_from_month_year_id",
    "month_year_id_from_date",
    "encode_color",
    "decode_color",
    "color_from_dict",
    "DateError",
    "DateErrorKind",
    "CurrencyError",
    "CurrencyErrorKind",
    "IdentifierError",
    "IdentifierErrorKind",
    "ColorError",
    "ColorErrorKind",
]
