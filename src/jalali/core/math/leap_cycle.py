"""
Leap-Cycle Calculator — Високосность Solar Hijri по таблице break-points

Високосные годы Solar Hijri не следуют фиксированному правилу «раз в 4 года».
Они отслеживают истинный солнечный год, чей дрейф относительно среднего
григорианского года неравномерен на масштабе столетий. Поэтому используется
астрономическая аппроксимация: подциклы нерегулярной длины (около 33 лет),
границы которых заданы таблицей BREAKS.

Таблица авторитетна: она не вычисляется, только читается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Год вне [BREAKS[0], BREAKS[-1]) → OutOfRange (никогда не молчаливый ответ)
2. Интервалы между високосными годами всегда 4 или 5 лет
3. Все операции детерминированы и не зависят от глобального состояния

ФОРМУЛЫ:
    leap_adder = -14 + Σ (8 * div(len, 33) + div(mod(len, 33), 4))   (полные подциклы)
               + 8 * div(n, 33) + div(mod(n, 33) + 3, 4)             (текущий подцикл)
               + 1, если mod(len, 33) == 4 и len - n == 4
    leap_g     = div(gy, 4) - div((div(gy, 100) + 1) * 3, 4) - 150
    march_day  = 20 + leap_adder - leap_g
"""

from typing import Final, NamedTuple

from jalali.core.errors import OutOfRange
from jalali.core.math.julian_day import div, mod

# =============================================================================
# ТАБЛИЦА BREAK-POINTS
# =============================================================================

# Границы подциклов (годы Solar Hijri), строго возрастающие
BREAKS: Final[tuple[int, ...]] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

# Поддерживаемый диапазон лет (включительно)
MIN_YEAR: Final[int] = BREAKS[0]
MAX_YEAR: Final[int] = BREAKS[-1] - 1

# Разница эпох Solar Hijri и Gregorian
GREGORIAN_EPOCH_OFFSET: Final[int] = 621

# Начальное значение накопителя leap adder
LEAP_ADDER_SEED: Final[int] = -14

# День марта, от которого отсчитывается Nowruz
MARCH_BASE_DAY: Final[int] = 20

# Значение leap_index, обозначающее «не високосный, 4 года до следующего»
NOT_LEAP_MARKER: Final[int] = 4


class CycleInfo(NamedTuple):
    """Подцикл, содержащий год."""

    start_year: int
    length: int
    leap_adder: int  # поправка, накопленная по всем завершённым подциклам


class YearAnchor(NamedTuple):
    """Привязка года Solar Hijri к григорианскому календарю."""

    gregorian_year: int  # григорианский год, в котором начинается год SH
    march_day: int  # день марта, на который приходится Nowruz
    leap: int  # лет с последнего високосного (0 = високосный)


# =============================================================================
# ПОИСК ПОДЦИКЛА
# =============================================================================


def validate_year(year: int) -> None:
    """
    Проверка, что год покрыт таблицей BREAKS.

    Raises:
        OutOfRange: Если year < BREAKS[0] или year >= BREAKS[-1]
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRange(
            f"Jalali year {year} outside supported range [{MIN_YEAR}, {MAX_YEAR}]"
        )


def locate_cycle(year: int) -> CycleInfo:
    """
    Подцикл таблицы BREAKS, которому принадлежит год.

    Наибольший break-point <= year открывает подцикл, следующий — закрывает.

    Args:
        year: Год Solar Hijri

    Returns:
        CycleInfo(start_year, length, leap_adder)

    Raises:
        OutOfRange: Если год вне таблицы

    Examples:
        >>> locate_cycle(1403)
        CycleInfo(start_year=1210, length=425, leap_adder=294)
    """
    validate_year(year)

    leap_adder = LEAP_ADDER_SEED
    start = BREAKS[0]
    length = 0

    for boundary in BREAKS[1:]:
        length = boundary - start
        if year < boundary:
            break
        leap_adder += div(length, 33) * 8 + div(mod(length, 33), 4)
        start = boundary

    return CycleInfo(start, length, leap_adder)


# =============================================================================
# LEAP ADDER И ПРИВЯЗКА К МАРТУ
# =============================================================================


def march_equinox_offset(year: int) -> int:
    """
    Накопленный leap adder для года.

    Сумма поправок всех завершённых подциклов плюс поправка за годы,
    прошедшие с начала текущего подцикла. Одна эмпирическая поправка +1
    применяется, когда mod(len, 33) == 4 и до конца подцикла ровно 4 года.

    Args:
        year: Год Solar Hijri

    Returns:
        leap adder (целое)

    Raises:
        OutOfRange: Если год вне таблицы
    """
    cycle = locate_cycle(year)
    elapsed = year - cycle.start_year

    leap_adder = cycle.leap_adder + div(elapsed, 33) * 8 + div(mod(elapsed, 33) + 3, 4)
    if mod(cycle.length, 33) == 4 and cycle.length - elapsed == 4:
        leap_adder += 1

    return leap_adder


def gregorian_leap_correction(gregorian_year: int) -> int:
    """Число григорианских високосных дней, нормированное к эпохе SH."""
    return (
        div(gregorian_year, 4)
        - div((div(gregorian_year, 100) + 1) * 3, 4)
        - 150
    )


def leap_index(year: int) -> int:
    """
    Число лет с последнего високосного года (0..4).

    0 — год високосный; 4 — не високосный, до следующего 4 года
    (нормализация значения -1).

    Raises:
        OutOfRange: Если год вне таблицы
    """
    cycle = locate_cycle(year)
    elapsed = year - cycle.start_year

    if cycle.length - elapsed < 6:
        elapsed = elapsed - cycle.length + div(cycle.length + 4, 33) * 33

    leap = mod(mod(elapsed + 1, 33) - 1, 4)
    if leap == -1:
        leap = NOT_LEAP_MARKER

    return leap


def is_leap_year(year: int) -> bool:
    """
    Високосен ли год Solar Hijri.

    Raises:
        OutOfRange: Если год вне таблицы

    Examples:
        >>> is_leap_year(1403)
        True
        >>> is_leap_year(1404)
        False
    """
    return leap_index(year) == 0


def year_anchor(year: int, with_leap: bool = True) -> YearAnchor:
    """
    Привязка года Solar Hijri: григорианский год и день марта Nowruz.

    Args:
        year: Год Solar Hijri
        with_leap: Вычислять ли leap_index (иначе leap = -1)

    Returns:
        YearAnchor(gregorian_year, march_day, leap)

    Raises:
        OutOfRange: Если год вне таблицы

    Examples:
        >>> year_anchor(1403)
        YearAnchor(gregorian_year=2024, march_day=20, leap=0)
    """
    gregorian_year = year + GREGORIAN_EPOCH_OFFSET
    march_day = (
        MARCH_BASE_DAY
        + march_equinox_offset(year)
        - gregorian_leap_correction(gregorian_year)
    )
    leap = leap_index(year) if with_leap else -1

    return YearAnchor(gregorian_year, march_day, leap)
