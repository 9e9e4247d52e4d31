"""
Dates — Конвертер дат

Преобразования:
- строка ↔ date по LDML-шаблону (под текущей локалью)
- date → month-year идентификатор "YYYYMM"

Парсинг строки — операция "сопоставления": несовпадение возвращает None,
а не исключение. Исключения бросает только month_year_id, если из значения
нельзя получить месяц или год.
"""

import logging
import re
from datetime import date
from enum import Enum
from typing import Dict, Final, List, Optional, Tuple, Union

from babel import dates as babel_dates

from valuecodecs.core.errors import DateError, DateErrorKind
from valuecodecs.core.formatting import (
    calendar_names,
    date_pattern_tokens,
    resolve_locale,
)
from valuecodecs.core.formatting.gateway import LocaleLike

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Значения полей, отсутствующих в шаблоне (как у платформенных форматтеров)
DEFAULT_YEAR: Final[int] = 2000
DEFAULT_MONTH: Final[int] = 1
DEFAULT_DAY: Final[int] = 1

# Окно для двузначного года "yy": 69..99 → 19xx, 00..68 → 20xx
TWO_DIGIT_YEAR_PIVOT: Final[int] = 69

MIN_ID_YEAR: Final[int] = 0
MAX_ID_YEAR: Final[int] = 9999


class DateFormat(str, Enum):
    """Известные шаблоны дат (LDML)."""

    SHORT = "MMMM dd"
    YEAR_SLASH_MONTH = "yyyy/MM"


PatternLike = Union[DateFormat, str]


# =============================================================================
# FORMAT / PARSE
# =============================================================================


def format_date(value: date, pattern: PatternLike, locale: LocaleLike = None) -> str:
    """
    Форматирование даты по шаблону под текущей локалью.

    Неизвестная явная локаль не прерывает форматирование: используется
    текущая локаль (с warning).

    Examples:
        >>> format_date(date(2024, 10, 15), DateFormat.SHORT, locale="en_US")
        'October 15'
        >>> format_date(date(2024, 10, 15), DateFormat.YEAR_SLASH_MONTH, locale="en_US")
        '2024/10'
    """
    try:
        loc = resolve_locale(locale)
    except ValueError as e:
        logger.warning("%s, formatting date with the current locale", e)
        loc = resolve_locale()
    return babel_dates.format_date(value, format=_pattern_value(pattern), locale=loc)


def parse_date(raw: str, pattern: PatternLike, locale: LocaleLike = None) -> Optional[date]:
    """
    Разбор строки по шаблону под текущей локалью.

    Поддерживаемые поля:
    - y / yy / yyyy: год ("yy" через окно TWO_DIGIT_YEAR_PIVOT)
    - M, L: месяц цифрами (1-2 символа) или названием (3 — сокращённое,
      4 — полное, 5 — узкое)
    - d: день месяца
    - E (1-6), c/e (3-6): день недели названием; проверяется по дате
    - Q, q: квартал цифрой (1-2) или названием (3-5); без месяца даёт
      первый месяц квартала, с месяцем — должен ему соответствовать

    Поля, отсутствующие в шаблоне, берутся из DEFAULT_*. Неоднозначное
    название (узкое "J" — январь, июнь или июль) — несовпадение.

    Args:
        raw: Входная строка
        pattern: DateFormat или произвольный LDML-шаблон
        locale: Явная локаль (default: текущая)

    Returns:
        date или None, если строка не соответствует шаблону
        или локаль неизвестна
    """
    if not isinstance(raw, str):
        return None

    try:
        loc = resolve_locale(locale)
    except ValueError as e:
        logger.debug("Cannot parse date %r: %s", raw, e)
        return None

    compiled = _compile(_pattern_value(pattern), loc)
    if compiled is None:
        return None

    regex, fields = compiled
    match = regex.fullmatch(raw)
    if match is None:
        logger.debug("Date string %r does not match pattern %r", raw, _pattern_value(pattern))
        return None

    resolved: Dict[str, int] = {}
    for group, (char, count) in fields.items():
        value = _field_value(match.group(group), char, count, loc)
        if value is None:
            return None
        key = _FIELD_KEYS[char]
        # Одно поле дважды с разными значениями — несовпадение
        if key in resolved and resolved[key] != value:
            return None
        resolved[key] = value

    quarter = resolved.get("quarter")
    if quarter is not None:
        if not 1 <= quarter <= 4:
            return None
        first_month = (quarter - 1) * 3 + 1
        month = resolved.setdefault("month", first_month)
        if not first_month <= month < first_month + 3:
            logger.debug("Date string %r: month %d is not in quarter %d", raw, month, quarter)
            return None

    try:
        result = date(
            resolved.get("year", DEFAULT_YEAR),
            resolved.get("month", DEFAULT_MONTH),
            resolved.get("day", DEFAULT_DAY),
        )
    except ValueError:
        logger.debug("Date string %r resolves to an impossible date", raw)
        return None

    weekday = resolved.get("weekday")
    if weekday is not None and result.weekday() != weekday:
        logger.debug("Date string %r: weekday does not match %s", raw, result.isoformat())
        return None

    return result


# =============================================================================
# MONTH-YEAR ID
# =============================================================================


def month_year_id(value: date) -> str:
    """
    Month-year идентификатор даты: 4 цифры года + 2 цифры месяца.

    День не входит в идентификатор.

    Raises:
        DateError: CANNOT_GET_MONTH / CANNOT_GET_YEAR

    Examples:
        >>> month_year_id(date(2024, 10, 15))
        '202410'
    """
    month = _int_component(value, "month")
    if month is None or not 1 <= month <= 12:
        raise DateError(DateErrorKind.CANNOT_GET_MONTH, f"Cannot get month from {value!r}")

    year = _int_component(value, "year")
    if year is None or not MIN_ID_YEAR <= year <= MAX_ID_YEAR:
        raise DateError(DateErrorKind.CANNOT_GET_YEAR, f"Cannot get year from {value!r}")

    return f"{year:04d}{month:02d}"


# =============================================================================
# INTERNALS
# =============================================================================

_FIELD_KEYS: Final[Dict[str, str]] = {
    "y": "year",
    "M": "month",
    "L": "month",
    "d": "day",
    "E": "weekday",
    "c": "weekday",
    "e": "weekday",
    "Q": "quarter",
    "q": "quarter",
}

# Поле → таблица названий CLDR
_NAME_TABLES: Final[Dict[str, str]] = {
    "M": "months",
    "L": "months",
    "E": "days",
    "c": "days",
    "e": "days",
    "Q": "quarters",
    "q": "quarters",
}

# Длина поля → ширина названия
_NAME_WIDTHS: Final[Dict[int, str]] = {3: "abbreviated", 4: "wide", 5: "narrow", 6: "short"}


def _pattern_value(pattern: PatternLike) -> str:
    if isinstance(pattern, Enum):
        return pattern.value
    return pattern


def _int_component(value: object, name: str) -> Optional[int]:
    component = getattr(value, name, None)
    if isinstance(component, bool) or not isinstance(component, int):
        return None
    return component


def _compile(pattern: str, locale) -> Optional[Tuple[re.Pattern, Dict[str, Tuple[str, int]]]]:
    """Шаблон → regex с именованными группами + описание полей по группам."""
    parts: List[str] = []
    fields: Dict[str, Tuple[str, int]] = {}

    for kind, token in date_pattern_tokens(pattern):
        if kind == "chars":
            parts.append(re.escape(token))
            continue

        char, count = token
        regex = _field_regex(char, count, locale) if char in _FIELD_KEYS else None
        if regex is None:
            logger.debug("Unsupported date field %r in pattern %r", char * count, pattern)
            return None

        group = f"f{len(fields)}"
        fields[group] = (char, count)
        parts.append(f"(?P<{group}>{regex})")

    return re.compile("".join(parts), re.IGNORECASE), fields


def _name_width(char: str, count: int) -> Optional[str]:
    """Ширина названия для поля или None, если поле числовое."""
    if char == "E" and count <= 3:
        return "abbreviated"
    if char in ("M", "L", "Q", "q") and count == 6:
        return None
    return _NAME_WIDTHS.get(count)


def _field_regex(char: str, count: int, locale) -> Optional[str]:
    if char == "y":
        if count == 2:
            return r"\d{2}"
        return r"\d{%d,4}" % min(count, 4)

    if char in _NAME_TABLES:
        width = _name_width(char, count)
        if width is None:
            # Числовой день недели зависит от первого дня недели локали
            if char in ("c", "e") or count > 2:
                return None
            return r"\d{1,2}"
        names = calendar_names(locale, _NAME_TABLES[char], width)
        alternatives = sorted({n for variants in names.values() for n in variants}, key=len, reverse=True)
        if not alternatives:
            return None
        return "|".join(re.escape(n) for n in alternatives)

    return r"\d{1,2}"


def _field_value(text: str, char: str, count: int, locale) -> Optional[int]:
    width = _name_width(char, count) if char in _NAME_TABLES else None
    if width is not None:
        folded = text.casefold()
        candidates = [
            key
            for key, variants in calendar_names(locale, _NAME_TABLES[char], width).items()
            if any(v.casefold() == folded for v in variants)
        ]
        if len(candidates) != 1:
            logger.debug("Name %r is ambiguous or unknown for field %r", text, char * count)
            return None
        return candidates[0]

    value = int(text)
    if char == "y" and count == 2:
        return value + (1900 if value >= TWO_DIGIT_YEAR_PIVOT else 2000)
    return value
