"""
Locale Formatting Gateway — Доступ к локали и CLDR-данным через Babel

Единственная точка, через которую конвертеры получают:
- текущую локаль (явный аргумент → переопределение из окружения → локаль хоста)
- валюту локали (по территории)
- денежный NumberPattern с фиксированными 2 знаками после запятой
- токены LDML-шаблона даты и календарные названия

ИНВАРИАНТ: каждый вызов строит собственные объекты форматирования.
Ничего изменяемого между вызовами не разделяется.
"""

import copy
import logging
import os
from dataclasses import dataclass
from typing import Dict, Final, List, Optional, Tuple, Union

from babel import Locale, UnknownLocaleError, default_locale
from babel.dates import tokenize_pattern
from babel.numbers import NumberPattern, get_territory_currencies, parse_pattern

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Переменные окружения для детерминированного выбора локали/валюты
LOCALE_ENV_VAR: Final[str] = "VALUECODECS_LOCALE"
CURRENCY_ENV_VAR: Final[str] = "VALUECODECS_CURRENCY"

# Локаль, если хост не дал ничего пригодного
FALLBACK_LOCALE: Final[str] = "en_US"

# Фиксированная точность денежного отображения
CURRENCY_FRACTION_DIGITS: Final[int] = 2


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LocaleSettings:
    """Переопределения локали и валюты.

    Пустые поля означают "использовать локаль хоста".
    """

    locale: Optional[str] = None
    currency: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LocaleSettings":
        """Читает VALUECODECS_LOCALE / VALUECODECS_CURRENCY (пустые строки игнорируются)."""
        return cls(
            locale=os.environ.get(LOCALE_ENV_VAR) or None,
            currency=os.environ.get(CURRENCY_ENV_VAR) or None,
        )


LocaleLike = Union[str, Locale, None]


# =============================================================================
# LOCALE RESOLUTION
# =============================================================================


def resolve_locale(locale: LocaleLike = None) -> Locale:
    """
    Определение локали для одного вызова.

    Порядок:
    1. Явный аргумент (str или babel.Locale)
    2. VALUECODECS_LOCALE
    3. Локаль хоста (LC_ALL / LC_* / LANG через babel.default_locale)
    4. en_US

    Неизвестная локаль из окружения не считается ошибкой вызывающего кода:
    она пропускается с warning, как и непригодная локаль хоста.

    Args:
        locale: Явная локаль или None

    Returns:
        babel.Locale

    Raises:
        ValueError: Если явно переданная локаль неизвестна
    """
    if isinstance(locale, Locale):
        return locale

    if locale:
        try:
            return Locale.parse(locale.replace("-", "_"))
        except (UnknownLocaleError, ValueError) as e:
            raise ValueError(f"Unknown locale: {locale!r}") from e

    override = LocaleSettings.from_env().locale
    if override:
        try:
            return Locale.parse(override.replace("-", "_"))
        except (UnknownLocaleError, ValueError):
            logger.warning("%s=%r is not a known locale, ignoring it", LOCALE_ENV_VAR, override)

    host = default_locale()
    if host:
        try:
            return Locale.parse(host)
        except (UnknownLocaleError, ValueError):
            logger.warning("Host locale %r is not usable, falling back to %s", host, FALLBACK_LOCALE)

    return Locale.parse(FALLBACK_LOCALE)


def resolve_currency(locale: Locale, currency: Optional[str] = None) -> Optional[str]:
    """
    Определение ISO-кода валюты.

    Порядок: явный аргумент → VALUECODECS_CURRENCY → первая платёжная
    валюта территории локали.

    Returns:
        Код валюты (например, "USD") или None, если у локали нет территории
    """
    explicit = currency or LocaleSettings.from_env().currency
    if explicit:
        return explicit.upper()

    if not locale.territory:
        return None

    currencies = get_territory_currencies(locale.territory, tender=True)
    return currencies[0] if currencies else None


# =============================================================================
# NUMBER PATTERNS
# =============================================================================


def currency_pattern(locale: Locale) -> NumberPattern:
    """
    Стандартный денежный шаблон локали с ровно 2 знаками после запятой.

    Возвращает копию: шаблоны из данных локали кэшируются Babel и не
    должны изменяться.
    """
    standard = locale.currency_formats["standard"]
    pattern = copy.copy(parse_pattern(standard.pattern))
    pattern.frac_prec = (CURRENCY_FRACTION_DIGITS, CURRENCY_FRACTION_DIGITS)
    return pattern


# =============================================================================
# DATE PATTERNS
# =============================================================================


def date_pattern_tokens(pattern: str) -> List[Tuple[str, object]]:
    """
    Токенизация LDML-шаблона даты.

    Returns:
        Список ("chars", "текст") и ("field", (символ, длина))
    """
    return tokenize_pattern(pattern)


def calendar_names(locale: Locale, table: str, width: str) -> Dict[int, List[str]]:
    """
    Названия месяцев, дней недели или кварталов в формате и stand-alone форме.

    Args:
        locale: Локаль
        table: "months", "days" или "quarters"
        width: "abbreviated", "wide" или "narrow"

    Returns:
        {ключ: [варианты названия]}. Ключи как у Babel: месяцы 1..12,
        кварталы 1..4, дни недели 0..6 (0 = понедельник, как date.weekday())
    """
    names: Dict[int, List[str]] = {}
    data = getattr(locale, table)
    for context in ("format", "stand-alone"):
        for key, name in data.get(context, {}).get(width, {}).items():
            variants = names.setdefault(int(key), [])
            if name not in variants:
                variants.append(name)
    return names
