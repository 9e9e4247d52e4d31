"""
Тесты конвертера дат

Проверяет:
1. Форматирование по известным и произвольным шаблонам
2. Разбор строк: совпадение → date, несовпадение → None (без исключений)
3. Обратимость format → parse на гранулярности шаблона
4. Month-year идентификатор и ошибки CANNOT_GET_MONTH / CANNOT_GET_YEAR
"""

from datetime import date, datetime
from types import SimpleNamespace

import pytest

from valuecodecs.core.domain.dates import (
    DEFAULT_YEAR,
    DateFormat,
    format_date,
    month_year_id,
    parse_date,
)
from valuecodecs.core.errors import DateError, DateErrorKind
from valuecodecs.core.formatting import LOCALE_ENV_VAR


# =============================================================================
# FORMAT
# =============================================================================


class TestFormatDate:
    """Тесты format_date"""

    def test_short_format(self) -> None:
        """Шаблон "MMMM dd": название месяца и день"""
        assert format_date(date(2024, 10, 15), DateFormat.SHORT, locale="en_US") == "October 15"

    def test_year_slash_month_format(self) -> None:
        """Шаблон "yyyy/MM" с ведущими нулями"""
        assert format_date(date(2024, 3, 9), DateFormat.YEAR_SLASH_MONTH, locale="en_US") == "2024/03"

    def test_free_form_pattern(self) -> None:
        """Произвольный LDML-шаблон"""
        assert format_date(date(2024, 3, 9), "yyyy-MM-dd", locale="en_US") == "2024-03-09"

    def test_datetime_accepted(self) -> None:
        """datetime форматируется как дата"""
        value = datetime(2024, 10, 15, 23, 59)
        assert format_date(value, DateFormat.YEAR_SLASH_MONTH, locale="en_US") == "2024/10"

    def test_locale_month_names(self) -> None:
        """Названия месяцев берутся из локали"""
        assert format_date(date(2024, 3, 1), "MMMM yyyy", locale="de_DE") == "März 2024"

    def test_unknown_locale_uses_current_locale(self, monkeypatch) -> None:
        """Неизвестная явная локаль не прерывает форматирование"""
        monkeypatch.setenv(LOCALE_ENV_VAR, "en_US")
        assert format_date(date(2024, 10, 15), DateFormat.SHORT, locale="xx_XX") == "October 15"

    def test_weekday_and_quarter(self) -> None:
        assert format_date(date(2024, 10, 15), "EEEE, QQQ", locale="en_US") == "Tuesday, Q4"


# =============================================================================
# PARSE
# =============================================================================


class TestParseDate:
    """Тесты parse_date"""

    def test_short_uses_default_year(self) -> None:
        """Поля, отсутствующие в шаблоне, берутся по умолчанию"""
        assert parse_date("October 15", DateFormat.SHORT, locale="en_US") == date(DEFAULT_YEAR, 10, 15)

    def test_month_name_case_insensitive(self) -> None:
        """Название месяца без учёта регистра"""
        assert parse_date("OCTOBER 15", DateFormat.SHORT, locale="en_US") == date(DEFAULT_YEAR, 10, 15)

    def test_abbreviated_month(self) -> None:
        """Сокращённое название месяца (MMM)"""
        assert parse_date("Oct 5", "MMM d", locale="en_US") == date(DEFAULT_YEAR, 10, 5)

    def test_year_slash_month(self) -> None:
        """"yyyy/MM" → первое число месяца"""
        assert parse_date("2024/10", DateFormat.YEAR_SLASH_MONTH, locale="en_US") == date(2024, 10, 1)

    def test_two_digit_year_window(self) -> None:
        """"yy": 00..68 → 20xx, 69..99 → 19xx"""
        assert parse_date("24/10", "yy/MM", locale="en_US") == date(2024, 10, 1)
        assert parse_date("99/10", "yy/MM", locale="en_US") == date(1999, 10, 1)

    def test_localized_month_name(self) -> None:
        """Названия месяцев текущей локали"""
        assert parse_date("März 2024", "MMMM yyyy", locale="de_DE") == date(2024, 3, 1)

    @pytest.mark.parametrize(
        "raw,pattern",
        [
            ("Octember 15", DateFormat.SHORT),
            ("October 15 ", DateFormat.SHORT),
            ("February 30", DateFormat.SHORT),
            ("2024-10", DateFormat.YEAR_SLASH_MONTH),
            ("2024/13", DateFormat.YEAR_SLASH_MONTH),
            ("2024/00", DateFormat.YEAR_SLASH_MONTH),
            ("0000/10", DateFormat.YEAR_SLASH_MONTH),
            ("", DateFormat.YEAR_SLASH_MONTH),
        ],
    )
    def test_no_match_returns_none(self, raw: str, pattern: DateFormat) -> None:
        """Несовпадение — None, а не исключение"""
        assert parse_date(raw, pattern, locale="en_US") is None

    def test_non_string_returns_none(self) -> None:
        """Не строка — None"""
        assert parse_date(None, DateFormat.SHORT, locale="en_US") is None  # type: ignore[arg-type]

    def test_unsupported_field_returns_none(self) -> None:
        """Поля вне поддерживаемого набора (время) — None"""
        assert parse_date("10:30", "HH:mm", locale="en_US") is None

    def test_conflicting_repeated_field(self) -> None:
        """Одно поле дважды с разными значениями — несовпадение"""
        assert parse_date("2024/10/11", "yyyy/MM/MM", locale="en_US") is None
        assert parse_date("2024/10/10", "yyyy/MM/MM", locale="en_US") == date(2024, 10, 1)

    def test_unknown_locale_returns_none(self) -> None:
        """Неизвестная явная локаль — несовпадение, а не исключение"""
        assert parse_date("2024/10", DateFormat.YEAR_SLASH_MONTH, locale="xx_XX") is None

    def test_unknown_env_locale_ignored(self, monkeypatch) -> None:
        """Неизвестная локаль в окружении не ломает разбор"""
        monkeypatch.setenv(LOCALE_ENV_VAR, "xx_XX")
        assert parse_date("2024/10", DateFormat.YEAR_SLASH_MONTH) == date(2024, 10, 1)


class TestParseCalendarFields:
    """Дни недели, кварталы и узкие названия месяцев"""

    def test_weekday_matches_date(self) -> None:
        pattern = "EEEE, MMMM d, y"
        assert parse_date("Tuesday, October 15, 2024", pattern, locale="en_US") == date(2024, 10, 15)

    def test_abbreviated_weekday(self) -> None:
        assert parse_date("Tue 2024-10-15", "EEE yyyy-MM-dd", locale="en_US") == date(2024, 10, 15)

    def test_wrong_weekday_returns_none(self) -> None:
        """День недели не совпадает с датой — несовпадение"""
        assert parse_date("Monday, October 15, 2024", "EEEE, MMMM d, y", locale="en_US") is None

    def test_narrow_month(self) -> None:
        assert parse_date("O 15", "MMMMM d", locale="en_US") == date(DEFAULT_YEAR, 10, 15)

    def test_ambiguous_narrow_month_returns_none(self) -> None:
        """"J" — январь, июнь или июль"""
        assert parse_date("J 15", "MMMMM d", locale="en_US") is None

    @pytest.mark.parametrize(
        "raw,pattern",
        [("Q4 2024", "QQQ yyyy"), ("4th quarter 2024", "QQQQ yyyy"), ("4 2024", "Q yyyy"), ("04 2024", "QQ yyyy")],
    )
    def test_quarter_gives_first_month(self, raw: str, pattern: str) -> None:
        assert parse_date(raw, pattern, locale="en_US") == date(2024, 10, 1)

    def test_quarter_with_month_in_quarter(self) -> None:
        assert parse_date("Q4 2024/11", "QQQ yyyy/MM", locale="en_US") == date(2024, 11, 1)

    def test_quarter_month_conflict_returns_none(self) -> None:
        assert parse_date("Q1 2024/10", "QQQ yyyy/MM", locale="en_US") is None

    def test_quarter_out_of_range_returns_none(self) -> None:
        assert parse_date("5 2024", "Q yyyy", locale="en_US") is None

    @pytest.mark.parametrize("pattern", ["ee yyyy", "c yyyy", "EEEEEEE yyyy", "MMMMMM yyyy"])
    def test_unsupported_widths_return_none(self, pattern: str) -> None:
        """Числовой день недели (зависит от локали) и лишние длины не поддерживаются"""
        assert parse_date("3 2024", pattern, locale="en_US") is None


# =============================================================================
# ROUNDTRIP
# =============================================================================


class TestRoundtrip:
    """Инвариант: parse(format(d, p), p) == d на гранулярности шаблона"""

    @pytest.mark.parametrize(
        "value",
        [date(2024, 10, 15), date(1999, 1, 1), date(2023, 12, 31), date(2024, 2, 29)],
    )
    def test_short_preserves_month_and_day(self, value: date) -> None:
        parsed = parse_date(format_date(value, DateFormat.SHORT, locale="en_US"), DateFormat.SHORT, locale="en_US")
        assert parsed is not None
        assert (parsed.month, parsed.day) == (value.month, value.day)

    @pytest.mark.parametrize("value", [date(1, 1, 1), date(2024, 10, 15), date(9999, 12, 31)])
    def test_year_slash_month_preserves_year_and_month(self, value: date) -> None:
        text = format_date(value, DateFormat.YEAR_SLASH_MONTH, locale="en_US")
        parsed = parse_date(text, DateFormat.YEAR_SLASH_MONTH, locale="en_US")
        assert parsed is not None
        assert (parsed.year, parsed.month) == (value.year, value.month)

    def test_full_date_pattern(self) -> None:
        """Шаблон со всеми полями восстанавливает дату целиком"""
        value = date(2024, 7, 4)
        pattern = "dd MMMM yyyy"
        assert parse_date(format_date(value, pattern, locale="fr_FR"), pattern, locale="fr_FR") == value

    @pytest.mark.parametrize("locale", ["en_US", "de_DE", "fr_FR", "ru_RU"])
    @pytest.mark.parametrize("value", [date(2024, 10, 15), date(2023, 1, 1), date(2024, 2, 29)])
    def test_weekday_and_quarter_patterns(self, locale: str, value: date) -> None:
        for pattern in ("EEEE, d MMMM y", "EEE d MMM y", "QQQQ y, d MMMM"):
            assert parse_date(format_date(value, pattern, locale=locale), pattern, locale=locale) == value


# =============================================================================
# MONTH-YEAR ID
# =============================================================================


class TestMonthYearId:
    """Тесты month_year_id"""

    def test_basic(self) -> None:
        assert month_year_id(date(2024, 10, 15)) == "202410"

    def test_zero_padding(self) -> None:
        """Год — 4 цифры, месяц — 2 цифры"""
        assert month_year_id(date(5, 3, 1)) == "000503"

    def test_datetime(self) -> None:
        assert month_year_id(datetime(2024, 1, 31, 12, 0)) == "202401"

    def test_day_is_dropped(self) -> None:
        assert month_year_id(date(2024, 10, 1)) == month_year_id(date(2024, 10, 31))

    def test_missing_month(self) -> None:
        with pytest.raises(DateError, match="cannot_get_month") as exc_info:
            month_year_id(SimpleNamespace(year=2024))  # type: ignore[arg-type]
        assert exc_info.value.kind is DateErrorKind.CANNOT_GET_MONTH

    def test_invalid_month(self) -> None:
        with pytest.raises(DateError, match="cannot_get_month"):
            month_year_id(SimpleNamespace(year=2024, month=13))  # type: ignore[arg-type]

    def test_missing_year(self) -> None:
        with pytest.raises(DateError, match="cannot_get_year") as exc_info:
            month_year_id(SimpleNamespace(month=10))  # type: ignore[arg-type]
        assert exc_info.value.kind is DateErrorKind.CANNOT_GET_YEAR

    def test_year_out_of_range(self) -> None:
        with pytest.raises(DateError, match="cannot_get_year"):
            month_year_id(SimpleNamespace(year=10000, month=1))  # type: ignore[arg-type]

    def test_month_checked_before_year(self) -> None:
        """Без месяца и года — ошибка месяца"""
        with pytest.raises(DateError) as exc_info:
            month_year_id(object())  # type: ignore[arg-type]
        assert exc_info.value.kind is DateErrorKind.CANNOT_GET_MONTH

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            month_year_id(SimpleNamespace(year=2024, month=None))  # type: ignore[arg-type]
