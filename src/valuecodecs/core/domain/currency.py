"""
Currency — Конвертер денежных сумм

Сумма (float) ↔ локализованная строка в денежном стиле текущей локали:
символ валюты, разделители групп, ровно 2 знака после запятой.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Форматирование никогда не возвращает пустую строку вместо ошибки
2. Разбор никогда не возвращает 0.0 вместо ошибки
3. Строка без символа валюты, с неверной группировкой или не с 2 знаками
   после запятой не распознаётся
"""

import logging
import math
import re
from decimal import Decimal
from typing import Final, Optional, Union

from babel.numbers import (
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
    get_minus_sign_symbol,
)

from valuecodecs.core.errors import CurrencyError, CurrencyErrorKind
from valuecodecs.core.formatting import (
    CURRENCY_FRACTION_DIGITS,
    currency_pattern,
    resolve_currency,
    resolve_locale,
)
from valuecodecs.core.formatting.gateway import LocaleLike

logger = logging.getLogger(__name__)

_DIGITS: Final = re.compile(r"[0-9]+")
_FRACTION: Final = re.compile(r"[0-9]{%d}" % CURRENCY_FRACTION_DIGITS)

# Невидимые метки направления текста (RTL-локали)
_DIRECTION_MARKS: Final = re.compile("[\u061c\u200e\u200f\u202a-\u202e\u2066-\u2069]")

Amount = Union[float, int, Decimal]


# =============================================================================
# FORMAT
# =============================================================================


def format_currency(amount: Amount, locale: LocaleLike = None, currency: Optional[str] = None) -> str:
    """
    Локализованная денежная строка.

    Args:
        amount: Сумма
        locale: Явная локаль (default: текущая)
        currency: ISO-код валюты (default: валюта территории локали)

    Returns:
        Строка с символом валюты и ровно 2 знаками после запятой

    Raises:
        CurrencyError: CANNOT_LOCALIZE_FOR_CURRENCY_FORMAT для NaN/Inf,
            нечисловых значений, неизвестной локали или валюты

    Examples:
        >>> format_currency(250.0, locale="en_US")
        '$250.00'
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise CurrencyError(
            CurrencyErrorKind.CANNOT_LOCALIZE_FOR_CURRENCY_FORMAT,
            f"Amount is not a number: {amount!r}",
        )
    if not math.isfinite(amount):
        raise CurrencyError(
            CurrencyErrorKind.CANNOT_LOCALIZE_FOR_CURRENCY_FORMAT,
            f"Amount is not finite: {amount!r}",
        )

    try:
        loc = resolve_locale(locale)
    except ValueError as e:
        raise CurrencyError(CurrencyErrorKind.CANNOT_LOCALIZE_FOR_CURRENCY_FORMAT, str(e)) from e

    code = resolve_currency(loc, currency)
    if code is None:
        raise CurrencyError(
            CurrencyErrorKind.CANNOT_LOCALIZE_FOR_CURRENCY_FORMAT,
            f"No currency for locale {loc}",
        )

    # str() избегает двоичного хвоста float при переводе в Decimal
    return currency_pattern(loc).apply(Decimal(str(amount)), loc, currency=code, currency_digits=False)


# =============================================================================
# PARSE
# =============================================================================


def parse_currency(text: str, locale: LocaleLike = None, currency: Optional[str] = None) -> float:
    """
    Сумма из локализованной денежной строки.

    Args:
        text: Строка вида "$10,000.00"
        locale: Явная локаль (default: текущая)
        currency: ISO-код валюты (default: валюта территории локали)

    Returns:
        Сумма (float)

    Raises:
        CurrencyError: CANNOT_PARSE_AMOUNT
    """
    if not isinstance(text, str):
        raise _cannot_parse(text, "not a string")

    try:
        loc = resolve_locale(locale)
    except ValueError as e:
        raise _cannot_parse(text, str(e)) from e

    code = resolve_currency(loc, currency)
    if code is None:
        raise _cannot_parse(text, f"no currency for locale {loc}")

    symbol = _strip_marks(get_currency_symbol(code, loc))
    stripped = _strip_marks(text).strip()
    if not symbol or stripped.count(symbol) != 1:
        raise _cannot_parse(text, f"expected exactly one {symbol!r}")

    body = stripped.replace(symbol, "", 1).strip()

    negative = False
    for sign in (_strip_marks(get_minus_sign_symbol(loc)), "-"):
        if sign and body.startswith(sign):
            negative = True
            body = body[len(sign):].strip()
            break

    decimal_symbol = get_decimal_symbol(loc)
    group_symbol = get_group_symbol(loc)
    integer, separator, fraction = body.rpartition(decimal_symbol)
    if not separator or not _FRACTION.fullmatch(fraction):
        raise _cannot_parse(text, f"expected {CURRENCY_FRACTION_DIGITS} fraction digits")

    digits = integer.replace(group_symbol, "")
    if not _DIGITS.fullmatch(digits):
        raise _cannot_parse(text, "malformed integer part")

    value = Decimal(f"{digits}.{fraction}")

    # Группировка сверяется с денежным шаблоном, а не с десятичным
    if group_symbol in integer and integer != _grouped_integer(value, loc, code, symbol, decimal_symbol):
        raise _cannot_parse(text, "grouping does not match locale")

    if negative:
        value = -value
    return float(value)


def _strip_marks(text: str) -> str:
    return _DIRECTION_MARKS.sub("", text)


def _grouped_integer(value: Decimal, loc, code: str, symbol: str, decimal_symbol: str) -> str:
    """Целая часть суммы в том виде, в каком её выводит format_currency."""
    rendered = _strip_marks(currency_pattern(loc).apply(value, loc, currency=code, currency_digits=False))
    rendered = rendered.replace(symbol, "", 1).strip()
    return rendered.rpartition(decimal_symbol)[0].strip()


def _cannot_parse(text: object, reason: str) -> CurrencyError:
    logger.debug("Cannot parse currency amount %r: %s", text, reason)
    return CurrencyError(
        CurrencyErrorKind.CANNOT_PARSE_AMOUNT,
        f"Cannot parse amount from {text!r}: {reason}",
    )
