"""
jalali — Solar Hijri (Jalali) календарь

Конверсия Solar Hijri ↔ Gregorian по алгоритму 33-летних подциклов
(таблица BREAKS, годы -61..3177), календарная арифметика, formatter/parser
по шаблонам и адаптеры для компонентов выбора даты.
"""

from jalali.adapter import DateAdapter, JalaliDateAdapter, JalaliStringDateAdapter
from jalali.converter import (
    add_days,
    add_months,
    add_years,
    create_date,
    day_of_week,
    day_of_year,
    days_in_month,
    is_leap_year,
    is_valid_input,
    to_datetime,
    to_gregorian,
    to_jalali,
)
from jalali.core.domain import (
    INVALID_DATE,
    JALALI_DATE_FORMATS,
    PERSIAN_LOCALE,
    CalendarDate,
    DateFormats,
    GregorianDate,
    InvalidDate,
    LocaleNames,
    is_valid,
)
from jalali.core.errors import (
    CalendarError,
    InvalidComponents,
    InvalidInput,
    InvalidMonth,
    OutOfRange,
    ParseMismatch,
)
from jalali.formatting import DEFAULT_FORMATTER, JalaliFormatter, format_date, parse_date

__version__ = "0.1.0"

__all__ = [
    # Models
    "CalendarDate",
    "GregorianDate",
    "InvalidDate",
    "INVALID_DATE",
    "is_valid",
    # Locale
    "LocaleNames",
    "PERSIAN_LOCALE",
    "DateFormats",
    "JALALI_DATE_FORMATS",
    # Errors
    "CalendarError",
    "OutOfRange",
    "InvalidComponents",
    "InvalidMonth",
    "ParseMismatch",
    "InvalidInput",
    # Converter
    "to_gregorian",
    "to_jalali",
    "to_datetime",
    "create_date",
    "is_valid_input",
    "days_in_month",
    "is_leap_year",
    "day_of_week",
    "day_of_year",
    "add_days",
    "add_months",
    "add_years",
    # Formatting
    "JalaliFormatter",
    "DEFAULT_FORMATTER",
    "format_date",
    "parse_date",
    # Adapters
    "DateAdapter",
    "JalaliDateAdapter",
    "JalaliStringDateAdapter",
]
