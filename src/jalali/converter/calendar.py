"""
Calendar Converter — Solar Hijri ↔ Gregorian и календарная арифметика

Композиция Julian Day Bridge и Leap-Cycle Calculator:
- to_gregorian / to_jalali через опорный JDN
- длины месяцев и високосность
- add_days / add_months / add_years с clamp дня при переполнении

Публичная граница НЕ бросает исключений: невалидный вход и внутренние
CalendarError превращаются в INVALID_DATE. Единственное исключение —
days_in_month, который по контракту бросает InvalidMonth.

ФОРМУЛЫ:
    jdn(y, m, d) = gregorian_to_jdn(gy, 3, march_day)
                 + (m - 1) * 31 - div(m, 7) * (m - 7) + d - 1

    Обратно: k = jdn - jdn(Nowruz)
        0 <= k <= 185 → месяцы 1–6 по 31 дню
        k > 185       → месяцы 7–12 по 30 дней (k -= 186)
        k < 0         → предыдущий год: k += 179 (+1 если он високосный)
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Final, Union

from pydantic import ValidationError

from jalali.core.domain.dates import INVALID_DATE, CalendarDate, GregorianDate, InvalidDate
from jalali.core.errors import CalendarError, OutOfRange
from jalali.core.math import leap_cycle
from jalali.core.math.julian_day import gregorian_to_jdn, jdn_to_gregorian
from jalali.core.math.leap_cycle import GREGORIAN_EPOCH_OFFSET, MAX_YEAR, MIN_YEAR
from jalali.core.math.month_lengths import (
    MONTHS_PER_YEAR,
    jalali_days_in_month,
    month_start_offset,
)

logger = logging.getLogger(__name__)

# Дней в первой половине года (6 месяцев по 31)
FIRST_HALF_DAYS: Final[int] = 186

# Дней от 1 Mehr до конца невисокосного года
MEHR_TO_YEAR_END_DAYS: Final[int] = 179

# Максимальный сдвиг в месяцах, после которого результат гарантированно вне таблицы
MAX_MONTH_DELTA: Final[int] = (MAX_YEAR - MIN_YEAR + 1) * MONTHS_PER_YEAR

JalaliResult = Union[CalendarDate, InvalidDate]
GregorianResult = Union[GregorianDate, InvalidDate]


# =============================================================================
# ОПОРНЫЕ ПРЕОБРАЗОВАНИЯ (бросают CalendarError)
# =============================================================================


def jalali_to_jdn(year: int, month: int, day: int) -> int:
    """
    JDN даты Solar Hijri.

    Raises:
        OutOfRange: Если год вне таблицы BREAKS
        InvalidMonth: Если month вне [1, 12]
    """
    anchor = leap_cycle.year_anchor(year, with_leap=False)
    nowruz = gregorian_to_jdn(anchor.gregorian_year, 3, anchor.march_day)
    return nowruz + month_start_offset(month) + day - 1


def _date_from_nowruz_offset(year: int, k: int) -> CalendarDate:
    """Дата по числу дней k (0-based) от Nowruz года."""
    if k < FIRST_HALF_DAYS:
        return CalendarDate(year=year, month=1 + k // 31, day=k % 31 + 1)
    k -= FIRST_HALF_DAYS
    return CalendarDate(year=year, month=7 + k // 30, day=k % 30 + 1)


def jdn_to_jalali(jdn: int) -> CalendarDate:
    """
    Дата Solar Hijri для JDN.

    Год выводится из григорианского (gy - 621), затем из JDN вычитается
    JDN Nowruz этого года. Январь–март последнего григорианского года
    диапазона принадлежит MAX_YEAR: Nowruz следующего года вне таблицы,
    поэтому отсчёт идёт от Nowruz MAX_YEAR.

    Raises:
        OutOfRange: Если результат вне таблицы BREAKS
    """
    gregorian_year = jdn_to_gregorian(jdn).year
    year = gregorian_year - GREGORIAN_EPOCH_OFFSET

    if year > MAX_YEAR:
        k = jdn - jalali_to_jdn(MAX_YEAR, 1, 1)
        year_length = month_start_offset(12) + jalali_days_in_month(MAX_YEAR, 12)
        if not 0 <= k < year_length:
            raise OutOfRange(f"JDN {jdn} is after the end of Jalali year {MAX_YEAR}")
        return _date_from_nowruz_offset(MAX_YEAR, k)

    anchor = leap_cycle.year_anchor(year)
    k = jdn - gregorian_to_jdn(gregorian_year, 3, anchor.march_day)

    if k >= 0:
        return _date_from_nowruz_offset(year, k)

    year -= 1
    leap_cycle.validate_year(year)
    k += MEHR_TO_YEAR_END_DAYS
    # leap == 1: предыдущий год был високосным, в Esfand 30 дней
    if anchor.leap == 1:
        k += 1

    return CalendarDate(year=year, month=7 + k // 30, day=k % 30 + 1)


# =============================================================================
# ВАЛИДАЦИЯ И ПОСТРОЕНИЕ
# =============================================================================


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_input(year: Any, month: Any, day: Any) -> bool:
    """
    Проверка компонентов даты Solar Hijri.

    Год в диапазоне таблицы, месяц 1..12, день в пределах длины месяца.
    """
    if not (_is_int(year) and _is_int(month) and _is_int(day)):
        return False
    if not (MIN_YEAR <= year <= MAX_YEAR and 1 <= month <= MONTHS_PER_YEAR):
        return False
    return 1 <= day <= jalali_days_in_month(year, month)


def create_date(year: Any, month: Any, day: Any) -> JalaliResult:
    """
    Построение CalendarDate; INVALID_DATE при невалидных компонентах.

    Молчаливого clamp нет: 1403/07/31 — невалидная дата, а не 1403/08/01.
    """
    if not is_valid_input(year, month, day):
        logger.debug("Invalid Jalali components: %r/%r/%r", year, month, day)
        return INVALID_DATE
    return CalendarDate(year=year, month=month, day=day)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_gregorian(year: Any, month: Any, day: Any) -> GregorianResult:
    """
    Solar Hijri → Gregorian.

    Args:
        year: Год Solar Hijri
        month: Месяц 1..12
        day: День месяца

    Returns:
        GregorianDate или INVALID_DATE

    Examples:
        >>> to_gregorian(1403, 1, 1)
        GregorianDate(year=2024, month=3, day=20)
    """
    if not is_valid_input(year, month, day):
        logger.debug("to_gregorian: invalid input %r/%r/%r", year, month, day)
        return INVALID_DATE

    try:
        return GregorianDate.from_triple(jdn_to_gregorian(jalali_to_jdn(year, month, day)))
    except (CalendarError, ValidationError) as e:
        logger.debug("to_gregorian failed for %s/%s/%s: %s", year, month, day, e)
        return INVALID_DATE


def to_jalali(value: Any) -> JalaliResult:
    """
    Gregorian → Solar Hijri.

    Args:
        value: GregorianDate, datetime.date или datetime.datetime
               (время суток игнорируется)

    Returns:
        CalendarDate или INVALID_DATE

    Examples:
        >>> to_jalali(date(2025, 3, 20))
        CalendarDate(year=1403, month=12, day=30)
    """
    if isinstance(value, GregorianDate):
        triple = value.as_triple()
    elif isinstance(value, date):
        triple = (value.year, value.month, value.day)
    else:
        logger.debug("to_jalali: unsupported value %r", value)
        return INVALID_DATE

    try:
        return jdn_to_jalali(gregorian_to_jdn(*triple))
    except (CalendarError, ValidationError) as e:
        logger.debug("to_jalali failed for %s: %s", value, e)
        return INVALID_DATE


def to_datetime(
    value: Any,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> Union[datetime, InvalidDate]:
    """
    CalendarDate + время суток → naive datetime.datetime хоста.

    Returns:
        datetime или INVALID_DATE (невалидная дата или время)
    """
    if not isinstance(value, CalendarDate):
        return INVALID_DATE

    gregorian = to_gregorian(value.year, value.month, value.day)
    if isinstance(gregorian, InvalidDate):
        return INVALID_DATE

    try:
        return datetime(
            gregorian.year,
            gregorian.month,
            gregorian.day,
            hour,
            minute,
            second,
            millisecond * 1000,
        )
    except (TypeError, ValueError) as e:
        logger.debug("to_datetime: invalid time %s:%s:%s.%s: %s", hour, minute, second, millisecond, e)
        return INVALID_DATE


# =============================================================================
# ДЛИНЫ МЕСЯЦЕВ И ВИСОКОСНОСТЬ
# =============================================================================


def days_in_month(year: int, month: int) -> int:
    """
    Число дней в месяце Solar Hijri: 31 (1–6), 30 (7–11), 29/30 (12).

    Raises:
        InvalidMonth: Если month вне [1, 12]
        OutOfRange: Если month == 12 и год вне таблицы
    """
    return jalali_days_in_month(year, month)


def is_leap_year(year: int) -> bool:
    """Високосность года; False для лет вне таблицы BREAKS."""
    try:
        return leap_cycle.is_leap_year(year)
    except OutOfRange as e:
        logger.debug("is_leap_year: %s", e)
        return False


def day_of_week(value: CalendarDate) -> int:
    """
    День недели: 0 = суббота ... 6 = пятница.

    JDN mod 7 == 0 соответствует понедельнику.
    """
    return (jalali_to_jdn(value.year, value.month, value.day) + 2) % 7


def day_of_year(value: CalendarDate) -> int:
    """Порядковый номер дня в году (1..366): разница JDN с 1 Farvardin + 1."""
    first = jalali_to_jdn(value.year, 1, 1)
    return jalali_to_jdn(value.year, value.month, value.day) - first + 1


# =============================================================================
# КАЛЕНДАРНАЯ АРИФМЕТИКА
# =============================================================================


def add_months(value: Any, delta: int) -> JalaliResult:
    """
    Сдвиг на delta месяцев с clamp дня.

    Месяц нормализуется повторной коррекцией переполнения/недополнения,
    день ограничивается длиной целевого месяца (никогда не переносится
    в следующий месяц).

    Examples:
        >>> add_months(CalendarDate(year=1403, month=12, day=30), 1)
        CalendarDate(year=1404, month=1, day=30)
        >>> add_months(CalendarDate(year=1403, month=6, day=31), 1)
        CalendarDate(year=1403, month=7, day=30)
    """
    if not isinstance(value, CalendarDate) or not _is_int(delta):
        return INVALID_DATE
    if abs(delta) > MAX_MONTH_DELTA:
        logger.debug("add_months: delta %s leaves supported range", delta)
        return INVALID_DATE

    year = value.year
    month = value.month + delta

    while month > MONTHS_PER_YEAR:
        month -= MONTHS_PER_YEAR
        year += 1
    while month < 1:
        month += MONTHS_PER_YEAR
        year -= 1

    if not MIN_YEAR <= year <= MAX_YEAR:
        logger.debug("add_months: year %s out of range", year)
        return INVALID_DATE

    day = min(value.day, jalali_days_in_month(year, month))
    return create_date(year, month, day)


def add_years(value: Any, delta: int) -> JalaliResult:
    """Сдвиг на delta лет: add_months(value, delta * 12)."""
    if not _is_int(delta):
        return INVALID_DATE
    return add_months(value, delta * MONTHS_PER_YEAR)


def add_days(value: Any, delta: int) -> JalaliResult:
    """
    Сдвиг на delta дней через григорианскую арифметику хоста.

    Дневная арифметика не зависит от календаря: конверсия в Gregorian,
    date + timedelta, конверсия обратно.
    """
    if not isinstance(value, CalendarDate) or not _is_int(delta):
        return INVALID_DATE

    gregorian = to_gregorian(value.year, value.month, value.day)
    if isinstance(gregorian, InvalidDate):
        return INVALID_DATE

    try:
        shifted = gregorian.to_date() + timedelta(days=delta)
    except OverflowError as e:
        logger.debug("add_days: %s", e)
        return INVALID_DATE

    return to_jalali(shifted)
