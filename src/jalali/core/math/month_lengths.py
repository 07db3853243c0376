"""
Month Lengths — Длины месяцев Solar Hijri и Gregorian

Solar Hijri: месяцы 1–6 по 31 дню, 7–11 по 30, месяц 12 — 29 или 30
(30 только в високосный год).
"""

from typing import Final

from jalali.core.errors import InvalidMonth
from jalali.core.math.leap_cycle import is_leap_year

MONTHS_PER_YEAR: Final[int] = 12

# Длины григорианских месяцев в невисокосный год
_GREGORIAN_MONTH_LENGTHS: Final[tuple[int, ...]] = (
    31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)


def validate_month(month: int) -> None:
    """
    Raises:
        InvalidMonth: Если month вне [1, 12]
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidMonth(f"Month must be in [1, {MONTHS_PER_YEAR}], got {month}")


def jalali_days_in_month(year: int, month: int) -> int:
    """
    Число дней в месяце Solar Hijri.

    Args:
        year: Год Solar Hijri (нужен только для месяца 12)
        month: Месяц 1..12

    Returns:
        31, 30 или 29

    Raises:
        InvalidMonth: Если month вне [1, 12]
        OutOfRange: Если month == 12 и год вне таблицы BREAKS
    """
    validate_month(month)

    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_year(year) else 29


def month_start_offset(month: int) -> int:
    """
    Смещение первого дня месяца от начала года Solar Hijri (в днях).

    (month - 1) * 31 - div(month, 7) * (month - 7): первые шесть месяцев
    по 31 дню, остальные по 30, без ветвления по месяцам.
    """
    validate_month(month)
    return (month - 1) * 31 - (month // 7) * (month - 7)


def is_gregorian_leap_year(year: int) -> bool:
    """Пролептическое григорианское правило високосности."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_days_in_month(year: int, month: int) -> int:
    """
    Число дней в месяце пролептического григорианского календаря.

    Raises:
        InvalidMonth: Если month вне [1, 12]
    """
    validate_month(month)

    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_LENGTHS[month - 1]
