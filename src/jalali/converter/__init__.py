"""Calendar Converter — конверсия Solar Hijri ↔ Gregorian и календарная арифметика."""

from jalali.converter.calendar import (
    GregorianResult,
    JalaliResult,
    add_days,
    add_months,
    add_years,
    create_date,
    day_of_week,
    day_of_year,
    days_in_month,
    is_leap_year,
    is_valid_input,
    jalali_to_jdn,
    jdn_to_jalali,
    to_datetime,
    to_gregorian,
    to_jalali,
)

__all__ = [
    # Types
    "GregorianResult",
    "JalaliResult",
    # Conversion
    "to_gregorian",
    "to_jalali",
    "to_datetime",
    "jalali_to_jdn",
    "jdn_to_jalali",
    # Construction
    "create_date",
    "is_valid_input",
    # Calendar facts
    "days_in_month",
    "is_leap_year",
    "day_of_week",
    "day_of_year",
    # Arithmetic
    "add_days",
    "add_months",
    "add_years",
]
