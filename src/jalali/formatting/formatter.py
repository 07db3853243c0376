"""
Pattern Formatter — Рендер даты Solar Hijri по шаблону

Шаблон сканируется слева направо; в каждой позиции сопоставляется самый
длинный токен, который заменяется отрендеренным значением. Символы вне
словаря копируются без изменений.

Вход:
- CalendarDate (время 00:00:00.000)
- datetime.date / datetime.datetime хоста (конверсия через to_jalali)

Невалидный вход → пустая строка, исключений нет.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from functools import cached_property
from typing import Any, Callable, Final, Optional

from jalali.converter.calendar import day_of_week, day_of_year, to_jalali
from jalali.core.domain.dates import CalendarDate
from jalali.core.domain.locale import PERSIAN_LOCALE, LocaleNames
from jalali.formatting.tokens import FormatToken, tokenize

logger = logging.getLogger(__name__)


@dataclass
class FormatContext:
    """Компоненты одной даты для рендера; производные значения кэшируются."""

    calendar_date: CalendarDate
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    locale: LocaleNames = PERSIAN_LOCALE

    @cached_property
    def day_of_year(self) -> int:
        return day_of_year(self.calendar_date)

    @cached_property
    def weekday(self) -> int:
        return day_of_week(self.calendar_date)

    @property
    def hour_12(self) -> int:
        return self.hour % 12 or 12

    @property
    def meridiem(self) -> str:
        return self.locale.pm_marker if self.hour >= 12 else self.locale.am_marker

    @property
    def quarter(self) -> int:
        return (self.calendar_date.month - 1) // 3 + 1


_RENDERERS: Final[dict[FormatToken, Callable[[FormatContext], str]]] = {
    FormatToken.YEAR: lambda c: f"{c.calendar_date.year:04d}",
    FormatToken.YEAR_2: lambda c: f"{c.calendar_date.year % 100:02d}",
    FormatToken.MONTH_NAME: lambda c: c.locale.month_names[c.calendar_date.month - 1],
    FormatToken.MONTH_NAME_SHORT: lambda c: c.locale.month_names_short[c.calendar_date.month - 1],
    FormatToken.MONTH_PADDED: lambda c: f"{c.calendar_date.month:02d}",
    FormatToken.MONTH: lambda c: str(c.calendar_date.month),
    FormatToken.DAY_PADDED: lambda c: f"{c.calendar_date.day:02d}",
    FormatToken.DAY_ORDINAL: lambda c: c.locale.ordinal(c.calendar_date.day),
    FormatToken.DAY: lambda c: str(c.calendar_date.day),
    FormatToken.HOUR_24_PADDED: lambda c: f"{c.hour:02d}",
    FormatToken.HOUR_24: lambda c: str(c.hour),
    FormatToken.HOUR_12_PADDED: lambda c: f"{c.hour_12:02d}",
    FormatToken.HOUR_12: lambda c: str(c.hour_12),
    FormatToken.MINUTE_PADDED: lambda c: f"{c.minute:02d}",
    FormatToken.MINUTE: lambda c: str(c.minute),
    FormatToken.SECOND_PADDED: lambda c: f"{c.second:02d}",
    FormatToken.SECOND: lambda c: str(c.second),
    FormatToken.MILLISECOND: lambda c: f"{c.millisecond:03d}",
    FormatToken.AMPM_LOWER: lambda c: c.meridiem.lower(),
    FormatToken.AMPM_UPPER: lambda c: c.meridiem,
    FormatToken.QUARTER: lambda c: str(c.quarter),
    FormatToken.DAY_OF_YEAR_3: lambda c: f"{c.day_of_year:03d}",
    FormatToken.DAY_OF_YEAR_2: lambda c: f"{c.day_of_year:02d}",
    FormatToken.DAY_OF_YEAR_ORDINAL: lambda c: c.locale.ordinal(c.day_of_year),
    FormatToken.DAY_OF_YEAR: lambda c: str(c.day_of_year),
    FormatToken.LOCAL_WEEKDAY_SHORT: lambda c: c.locale.weekday_names_short[c.weekday],
    FormatToken.LOCAL_WEEKDAY_NARROW: lambda c: c.locale.weekday_names_narrow[c.weekday],
    FormatToken.LOCAL_WEEKDAY_LONG: lambda c: c.locale.weekday_names[c.weekday],
    FormatToken.LOCAL_WEEKDAY_ABBR: lambda c: c.locale.weekday_names_abbreviated[c.weekday],
    FormatToken.LOCAL_WEEKDAY_INDEX_PADDED: lambda c: f"{c.weekday:02d}",
    FormatToken.LOCAL_WEEKDAY_INDEX: lambda c: str(c.weekday),
    FormatToken.WEEKDAY_SHORT: lambda c: c.locale.weekday_names_short[c.weekday],
    FormatToken.WEEKDAY_NARROW: lambda c: c.locale.weekday_names_narrow[c.weekday],
    FormatToken.WEEKDAY_LONG: lambda c: c.locale.weekday_names[c.weekday],
    FormatToken.WEEKDAY_ABBR: lambda c: c.locale.weekday_names_abbreviated[c.weekday],
}


def build_context(value: Any, locale: LocaleNames = PERSIAN_LOCALE) -> Optional[FormatContext]:
    """
    Контекст рендера из значения хоста или CalendarDate.

    Returns:
        FormatContext или None для невалидного значения
    """
    if isinstance(value, CalendarDate):
        return FormatContext(calendar_date=value, locale=locale)

    if not isinstance(value, date):
        return None

    jalali = to_jalali(value)
    if not isinstance(jalali, CalendarDate):
        return None

    if isinstance(value, datetime):
        return FormatContext(
            calendar_date=jalali,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
            locale=locale,
        )
    return FormatContext(calendar_date=jalali, locale=locale)


def format_date(value: Any, pattern: str, locale: LocaleNames = PERSIAN_LOCALE) -> str:
    """
    Рендер значения по шаблону.

    Args:
        value: CalendarDate, datetime.date или datetime.datetime
        pattern: Шаблон из словаря FormatToken и литералов
        locale: Таблицы имён

    Returns:
        Строка; "" для невалидного значения или шаблона

    Examples:
        >>> format_date(CalendarDate(year=1403, month=1, day=1), "yyyy/MM/dd")
        '1403/01/01'
    """
    if not isinstance(pattern, str):
        logger.debug("format_date: pattern is not a string: %r", pattern)
        return ""

    context = build_context(value, locale)
    if context is None:
        logger.debug("format_date: invalid value %r", value)
        return ""

    return "".join(
        _RENDERERS[segment.token](context) if segment.token is not None else segment.text
        for segment in tokenize(pattern)
    )
