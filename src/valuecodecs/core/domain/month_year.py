"""
MonthYearId — Кодек month-year идентификатора

Идентификатор: 6 символов "YYYYMM" (год с ведущими нулями + месяц 01..12).
Используется как стабильный ключ сортировки/группировки по месяцам.

ВАЖНО: преобразование с потерями. День не сохраняется ни в одну сторону:
date_from_month_year_id всегда возвращает первое число месяца.
"""

from datetime import date
from typing import Final, Optional

from valuecodecs.core.domain.dates import DateFormat, month_year_id, parse_date
from valuecodecs.core.errors import IdentifierError, IdentifierErrorKind
from valuecodecs.core.formatting.gateway import LocaleLike

MONTH_YEAR_ID_LENGTH: Final[int] = 6


def date_from_month_year_id(identifier: str, locale: LocaleLike = None) -> Optional[date]:
    """
    Дата из month-year идентификатора.

    Args:
        identifier: Строка "YYYYMM"
        locale: Явная локаль (default: текущая)

    Returns:
        date (день = 1) или None, если "YYYY/MM" не распознаётся как дата

    Raises:
        IdentifierError: INVALID_LENGTH, если длина не равна 6

    Examples:
        >>> date_from_month_year_id("202410", locale="en_US")
        datetime.date(2024, 10, 1)
    """
    if not isinstance(identifier, str) or len(identifier) != MONTH_YEAR_ID_LENGTH:
        raise IdentifierError(
            IdentifierErrorKind.INVALID_LENGTH,
            f"Month-year id must have {MONTH_YEAR_ID_LENGTH} characters, got {identifier!r}",
        )

    year, month = identifier[:4], identifier[4:]
    return parse_date(f"{year}/{month}", DateFormat.YEAR_SLASH_MONTH, locale=locale)


def month_year_id_from_date(value: date) -> str:
    """
    Month-year идентификатор даты.

    Raises:
        DateError: Если из даты нельзя получить месяц или год
    """
    return month_year_id(value)
