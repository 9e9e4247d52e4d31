"""
Locale formatting gateway.

Thin layer over Babel: locale and currency resolution, per-call patterns.
"""

from .gateway import (
    CURRENCY_ENV_VAR,
    CURRENCY_FRACTION_DIGITS,
    FALLBACK_LOCALE,
    LOCALE_ENV_VAR,
    LocaleSettings,
    currency_pattern,
    date_pattern_tokens,
    calendar_names,
    resolve_currency,
    resolve_locale,
)

__all__ = [
    "LOCALE_ENV_VAR",
    "CURRENCY_ENV_VAR",
    "FALLBACK_LOCALE",
    "CURRENCY_FRACTION_DIGITS",
    "LocaleSettings",
    "resolve_locale",
    "resolve_currency",
    "currency_pattern",
    "date_pattern_tokens",
    "calendar_names",
]
