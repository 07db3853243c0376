"""
Core math modules для jalali

Целочисленные календарные алгоритмы: JDN, подциклы високосности, длины месяцев.
"""

# Julian Day Bridge
from jalali.core.math.julian_day import (
    DateTriple,
    div,
    gregorian_to_jdn,
    jdn_to_gregorian,
    mod,
)

# Leap-Cycle Calculator
from jalali.core.math.leap_cycle import (
    BREAKS,
    MAX_YEAR,
    MIN_YEAR,
    CycleInfo,
    YearAnchor,
    is_leap_year,
    leap_index,
    locate_cycle,
    march_equinox_offset,
    validate_year,
    year_anchor,
)

# Month Lengths
from jalali.core.math.month_lengths import (
    MONTHS_PER_YEAR,
    gregorian_days_in_month,
    is_gregorian_leap_year,
    jalali_days_in_month,
    month_start_offset,
    validate_month,
)

__all__ = [
    # Julian Day Bridge
    "DateTriple",
    "div",
    "mod",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    # Leap-Cycle Calculator: Constants
    "BREAKS",
    "MIN_YEAR",
    "MAX_YEAR",
    # Leap-Cycle Calculator: Types
    "CycleInfo",
    "YearAnchor",
    # Leap-Cycle Calculator: Functions
    "is_leap_year",
    "leap_index",
    "locate_cycle",
    "march_equinox_offset",
    "validate_year",
    "year_anchor",
    # Month Lengths
    "MONTHS_PER_YEAR",
    "gregorian_days_in_month",
    "is_gregorian_leap_year",
    "jalali_days_in_month",
    "month_start_offset",
    "validate_month",
]
