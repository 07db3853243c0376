"""
JalaliDateAdapter — Адаптер для datetime.datetime хоста

Дата хоста хранится в григорианском календаре; компоненты Solar Hijri
вычисляются через converter при каждом обращении. Время суток и tzinfo
сохраняются при календарной арифметике.

Невалидная дата хоста — sentinel INVALID_DATE.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Callable, Optional, Union

from jalali.adapter.base import DateAdapter
from jalali.converter.calendar import (
    add_months,
    add_years,
    create_date,
    day_of_week,
    days_in_month,
    to_datetime,
    to_gregorian,
    to_jalali,
)
from jalali.core.domain.dates import INVALID_DATE, CalendarDate, InvalidDate
from jalali.core.domain.locale import JALALI_DATE_FORMATS, DateFormats, NameStyle
from jalali.core.errors import InvalidInput
from jalali.formatting.engine import DEFAULT_FORMATTER, JalaliFormatter

logger = logging.getLogger(__name__)

HostDate = Union[datetime, InvalidDate]

# Первый день недели: суббота
FIRST_DAY_OF_WEEK = 0

# Дни месяца в пикере: 1..31
DATE_NAMES = tuple(str(day) for day in range(1, 32))


def timestamp_to_datetime(value: Union[int, float]) -> Optional[datetime]:
    """Unix timestamp в миллисекундах → локальный naive datetime или None."""
    try:
        return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug("timestamp_to_datetime: %r: %s", value, e)
        return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JalaliDateAdapter(DateAdapter[HostDate]):
    """
    Адаптер Solar Hijri поверх datetime.datetime.

    Args:
        formatter: Formatter/parser (по умолчанию общий DEFAULT_FORMATTER)
        formats: Именованные шаблоны для deserialize и отображения
    """

    def __init__(
        self,
        formatter: JalaliFormatter = DEFAULT_FORMATTER,
        formats: DateFormats = JALALI_DATE_FORMATS,
    ) -> None:
        self.formatter = formatter
        self.formats = formats

    def _jalali(self, value: Any) -> CalendarDate:
        if not isinstance(value, datetime):
            raise InvalidInput(f"Not a valid host date: {value!r}")
        jalali = to_jalali(value)
        if not isinstance(jalali, CalendarDate):
            raise InvalidInput(f"{value!r} is outside the Solar Hijri range")
        return jalali

    # -------------------------------------------------------------------------
    # Компоненты
    # -------------------------------------------------------------------------

    def get_year(self, date: HostDate) -> int:
        return self._jalali(date).year

    def get_month(self, date: HostDate) -> int:
        return self._jalali(date).month - 1

    def get_date(self, date: HostDate) -> int:
        return self._jalali(date).day

    def get_day_of_week(self, date: HostDate) -> int:
        return day_of_week(self._jalali(date))

    def get_num_days_in_month(self, date: HostDate) -> int:
        jalali = self._jalali(date)
        return days_in_month(jalali.year, jalali.month)

    # -------------------------------------------------------------------------
    # Имена
    # -------------------------------------------------------------------------

    def get_month_names(self, style: NameStyle = "long") -> list[str]:
        return list(self.formatter.locale.get_month_names(style))

    def get_date_names(self) -> list[str]:
        return list(DATE_NAMES)

    def get_day_of_week_names(self, style: NameStyle = "long") -> list[str]:
        return list(self.formatter.locale.get_weekday_names(style))

    def get_year_name(self, date: HostDate) -> str:
        return str(self.get_year(date))

    def get_first_day_of_week(self) -> int:
        return FIRST_DAY_OF_WEEK

    # -------------------------------------------------------------------------
    # Построение, разбор, формат
    # -------------------------------------------------------------------------

    def clone(self, date: HostDate) -> HostDate:
        if isinstance(date, datetime):
            return date.replace()
        return INVALID_DATE

    def create_date(self, year: int, month: int, date: int) -> HostDate:
        """
        Полночь даты Solar Hijri year/(month + 1)/date.

        Examples:
            >>> JalaliDateAdapter().create_date(1403, 0, 1)
            datetime.datetime(2024, 3, 20, 0, 0)
        """
        month = month + 1 if isinstance(month, int) and not isinstance(month, bool) else month
        jalali = create_date(year, month, date)
        if isinstance(jalali, InvalidDate):
            return INVALID_DATE
        return to_datetime(jalali)

    def today(self) -> HostDate:
        return datetime.now()

    def parse(self, value: Any, parse_format: str) -> Optional[HostDate]:
        """
        Разбор значения хоста или строки по шаблону.

        Returns:
            datetime, либо None для пустого значения или неразборчивой строки
        """
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return self.clone(value)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if _is_number(value):
            return timestamp_to_datetime(value)
        return self.formatter.parse(value, parse_format)

    def format(self, date: HostDate, display_format: str) -> str:
        if not self.is_valid(date):
            logger.debug("format: invalid date %r", date)
            return ""
        return self.formatter.format(date, display_format)

    def to_iso8601(self, date: HostDate) -> str:
        return date.isoformat() if self.is_valid(date) else ""

    def deserialize(self, value: Any) -> Optional[HostDate]:
        """
        Значение из модели формы → datetime или None.

        Строки разбираются шаблоном parse_date_input, числа трактуются как
        Unix timestamp в миллисекундах.
        """
        if value is None or value == "":
            return None
        if isinstance(value, str):
            trimmed = value.strip()
            return self.parse(trimmed, self.formats.parse_date_input) if trimmed else None
        if _is_number(value):
            return timestamp_to_datetime(value)
        if isinstance(value, (datetime, date)):
            return self.parse(value, self.formats.parse_date_input)
        return None

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _shift(self, date: HostDate, shift: Callable[[CalendarDate], Any]) -> HostDate:
        if not isinstance(date, datetime):
            return INVALID_DATE
        jalali = to_jalali(date)
        if not isinstance(jalali, CalendarDate):
            return INVALID_DATE

        shifted = shift(jalali)
        if not isinstance(shifted, CalendarDate):
            return INVALID_DATE

        gregorian = to_gregorian(shifted.year, shifted.month, shifted.day)
        if isinstance(gregorian, InvalidDate):
            return INVALID_DATE
        return datetime.combine(gregorian.to_date(), date.timetz())

    def add_calendar_years(self, date: HostDate, years: int) -> HostDate:
        return self._shift(date, lambda jalali: add_years(jalali, years))

    def add_calendar_months(self, date: HostDate, months: int) -> HostDate:
        """
        Сдвиг на months месяцев Solar Hijri с clamp дня.

        Examples:
            >>> adapter = JalaliDateAdapter()
            >>> adapter.format(adapter.add_calendar_months(adapter.create_date(1403, 5, 31), 1), "yyyy/MM/dd")
            '1403/07/30'
        """
        return self._shift(date, lambda jalali: add_months(jalali, months))

    def add_calendar_days(self, date: HostDate, days: int) -> HostDate:
        """Дневная арифметика хоста: date + timedelta(days)."""
        if not isinstance(date, datetime):
            return INVALID_DATE
        try:
            return date + timedelta(days=days)
        except (OverflowError, TypeError) as e:
            logger.debug("add_calendar_days: %s", e)
            return INVALID_DATE

    # -------------------------------------------------------------------------
    # Валидность
    # -------------------------------------------------------------------------

    def is_date_instance(self, obj: Any) -> bool:
        return isinstance(obj, (datetime, InvalidDate))

    def is_valid(self, date: Any) -> bool:
        """datetime в пределах диапазона Solar Hijri (годы -61..3177)."""
        return isinstance(date, datetime) and isinstance(to_jalali(date), CalendarDate)

    def invalid(self) -> HostDate:
        return INVALID_DATE
