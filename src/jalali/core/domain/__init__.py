"""
Domain models and value objects.

Модели дат Solar Hijri / Gregorian, sentinel невалидной даты,
статические таблицы имён локали и именованные шаблоны.
"""

from jalali.core.domain.dates import (
    INVALID_DATE,
    CalendarDate,
    GregorianDate,
    InvalidDate,
    is_valid,
)
from jalali.core.domain.locale import (
    JALALI_DATE_FORMATS,
    PERSIAN_LOCALE,
    DateFormats,
    LocaleNames,
    NameStyle,
)

__all__ = [
    # Dates
    "CalendarDate",
    "GregorianDate",
    "InvalidDate",
    "INVALID_DATE",
    "is_valid",
    # Locale
    "LocaleNames",
    "NameStyle",
    "PERSIAN_LOCALE",
    "DateFormats",
    "JALALI_DATE_FORMATS",
]
