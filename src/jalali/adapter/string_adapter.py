"""
JalaliStringDateAdapter — Адаптер для строк Solar Hijri

Дата хоста — строка в шаблоне parse_date_input ("yyyy/MM/dd"). Разбор
идёт через общий pattern parser, длины месяцев — по таблице BREAKS:
специальных случаев для отдельных лет нет.

Невалидная дата хоста — строка "INVALID_DATE".
"""

import logging
from datetime import date, datetime
from typing import Any, Callable, Final, Optional

from jalali.adapter.base import DateAdapter
from jalali.adapter.datetime_adapter import DATE_NAMES, FIRST_DAY_OF_WEEK, timestamp_to_datetime
from jalali.converter.calendar import (
    add_days,
    add_months,
    add_years,
    create_date,
    day_of_week,
    days_in_month,
    to_datetime,
)
from jalali.core.domain.dates import CalendarDate
from jalali.core.domain.locale import JALALI_DATE_FORMATS, DateFormats, NameStyle
from jalali.core.errors import InvalidInput
from jalali.formatting.engine import DEFAULT_FORMATTER, JalaliFormatter

logger = logging.getLogger(__name__)

INVALID_DATE_STRING: Final[str] = "INVALID_DATE"


class JalaliStringDateAdapter(DateAdapter[str]):
    """
    Адаптер Solar Hijri поверх строк "yyyy/MM/dd".

    Args:
        formatter: Formatter/parser (по умолчанию общий DEFAULT_FORMATTER)
        formats: Именованные шаблоны; parse_date_input задаёт каноническую форму строки
    """

    def __init__(
        self,
        formatter: JalaliFormatter = DEFAULT_FORMATTER,
        formats: DateFormats = JALALI_DATE_FORMATS,
    ) -> None:
        self.formatter = formatter
        self.formats = formats

    def _to_calendar_date(self, value: Any) -> Optional[CalendarDate]:
        components = self.formatter.parse_components(value, self.formats.parse_date_input)
        return components.to_calendar_date() if components is not None else None

    def _jalali(self, value: Any) -> CalendarDate:
        jalali = self._to_calendar_date(value)
        if jalali is None:
            raise InvalidInput(f"Not a valid Solar Hijri date string: {value!r}")
        return jalali

    def _to_string(self, value: Any) -> str:
        """CalendarDate или дата хоста → каноническая строка либо "INVALID_DATE"."""
        rendered = self.formatter.format(value, self.formats.parse_date_input)
        return rendered or INVALID_DATE_STRING

    # -------------------------------------------------------------------------
    # Компоненты
    # -------------------------------------------------------------------------

    def get_year(self, date: str) -> int:
        return self._jalali(date).year

    def get_month(self, date: str) -> int:
        return self._jalali(date).month - 1

    def get_date(self, date: str) -> int:
        return self._jalali(date).day

    def get_day_of_week(self, date: str) -> int:
        return day_of_week(self._jalali(date))

    def get_num_days_in_month(self, date: str) -> int:
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

    def get_year_name(self, date: str) -> str:
        return str(self.get_year(date))

    def get_first_day_of_week(self) -> int:
        return FIRST_DAY_OF_WEEK

    # -------------------------------------------------------------------------
    # Построение, разбор, формат
    # -------------------------------------------------------------------------

    def clone(self, date: str) -> str:
        return date

    def create_date(self, year: int, month: int, date: int) -> str:
        """
        Строка даты Solar Hijri year/(month + 1)/date.

        Компоненты вне диапазона не подрезаются: результат "INVALID_DATE".

        Examples:
            >>> JalaliStringDateAdapter().create_date(1403, 11, 30)
            '1403/12/30'
            >>> JalaliStringDateAdapter().create_date(1404, 11, 30)
            'INVALID_DATE'
        """
        month = month + 1 if isinstance(month, int) and not isinstance(month, bool) else month
        return self._to_string(create_date(year, month, date))

    def today(self) -> str:
        return self._to_string(datetime.now())

    def parse(self, value: Any, parse_format: str) -> Optional[str]:
        """
        Разбор строки по шаблону parse_format в каноническую строку.

        Returns:
            "yyyy/MM/dd", либо None для пустого значения или неразборчивой строки
        """
        if value is None or value == "":
            return None
        if isinstance(value, (datetime, date)):
            return self._to_string(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            host = timestamp_to_datetime(value)
            return self._to_string(host) if host is not None else None

        components = self.formatter.parse_components(value, parse_format)
        jalali = components.to_calendar_date() if components is not None else None
        if jalali is None:
            logger.debug("parse: %r does not match %r", value, parse_format)
            return None
        return self._to_string(jalali)

    def format(self, date: str, display_format: str) -> str:
        jalali = self._to_calendar_date(date)
        if jalali is None:
            logger.debug("format: invalid date %r", date)
            return ""
        return self.formatter.format(jalali, display_format)

    def to_iso8601(self, date: str) -> str:
        """ISO 8601 григорианской полуночи; "" для невалидной строки."""
        jalali = self._to_calendar_date(date)
        if jalali is None:
            return ""
        host = to_datetime(jalali)
        return host.isoformat() if isinstance(host, datetime) else ""

    def deserialize(self, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        if isinstance(value, str):
            trimmed = value.strip()
            return self.parse(trimmed, self.formats.parse_date_input) if trimmed else None
        return self.parse(value, self.formats.parse_date_input)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _shift(self, date: str, shift: Callable[[CalendarDate], Any]) -> str:
        jalali = self._to_calendar_date(date)
        if jalali is None:
            return INVALID_DATE_STRING
        return self._to_string(shift(jalali))

    def add_calendar_years(self, date: str, years: int) -> str:
        return self._shift(date, lambda jalali: add_years(jalali, years))

    def add_calendar_months(self, date: str, months: int) -> str:
        return self._shift(date, lambda jalali: add_months(jalali, months))

    def add_calendar_days(self, date: str, days: int) -> str:
        return self._shift(date, lambda jalali: add_days(jalali, days))

    # -------------------------------------------------------------------------
    # Валидность
    # -------------------------------------------------------------------------

    def is_date_instance(self, obj: Any) -> bool:
        return isinstance(obj, str)

    def is_valid(self, date: Any) -> bool:
        return self._to_calendar_date(date) is not None

    def invalid(self) -> str:
        return INVALID_DATE_STRING
