"""
Domain codecs and value models.

Contains the four conversion components: dates, currency amounts,
month-year identifiers and RGBA colors.
"""

from valuecodecs.core.domain.color import (
    CHANNEL_MAX,
    OPAQUE_ALPHA,
    Color,
    ColorDictionary,
    RGBAConvertible,
    color_from_dict,
    decode_color,
    encode_color,
)
from valuecodecs.core.domain.currency import format_currency, parse_currency
from valuecodecs.core.domain.dates import (
    DateFormat,
    format_date,
    month_year_id,
    parse_date,
)
from valuecodecs.core.domain.month_year import (
    MONTH_YEAR_ID_LENGTH,
    date_from_month_year_id,
    month_year_id_from_date,
)

__all__ = [
    # Dates
    "DateFormat",
    "format_date",
    "parse_date",
    "month_year_id",
    # Currency
    "format_currency",
    "parse_currency",
    # Month-year identifier
    "MONTH_YEAR_ID_LENGTH",
    "date_from_month_year_id",
    "month_year_id_from_date",
    # Color
    "CHANNEL_MAX",
    "OPAQUE_ALPHA",
    "Color",
    "ColorDictionary",
    "RGBAConvertible",
    "encode_color",
    "decode_color",
    "color_from_dict",
]
