"""
Julian Day Bridge — Gregorian ↔ Julian Day Number

Чистые функции перевода (year, month, day) пролептического григорианского
календаря в непрерывный номер юлианского дня (JDN) и обратно.

JDN — опорное представление для всех конверсий: не несёт календарной
семантики и строго монотонен во времени.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Только целочисленная арифметика (никакого float)
2. div усекает к нулю, mod — остаток с знаком делимого
3. jdn_to_gregorian(gregorian_to_jdn(y, m, d)) == (y, m, d) для реальных дат
4. gregorian_to_jdn не проверяет диапазон дня — это ответственность вызывающего

ФОРМУЛЫ:
    jdn = div((y + div(m - 8, 6) + 100100) * 1461, 4)
        + div(153 * mod(m + 9, 12) + 2, 5) + d - 34840408
        - div(div(y + 100100 + div(m - 8, 6), 100) * 3, 4) + 752
"""

from typing import Final, NamedTuple

# =============================================================================
# КОНСТАНТЫ ФОРМУЛЫ
# =============================================================================

# Сдвиг лет, делающий все промежуточные значения положительными
YEAR_SHIFT: Final[int] = 100100

# Сдвиг JDN прямой формулы
JDN_SHIFT: Final[int] = 34840408

# Дней в 4-летнем юлианском цикле и 400-летнем григорианском цикле
DAYS_PER_4_YEARS: Final[int] = 1461
DAYS_PER_400_YEARS: Final[int] = 146097


class DateTriple(NamedTuple):
    """Компоненты даты (year, month, day) без календарной валидации."""

    year: int
    month: int
    day: int


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от оператора //, который округляет к минус бесконечности.

    Examples:
        >>> div(7, 2)
        3
        >>> div(-7, 2)
        -3
        >>> div(-5, 6)
        0
    """
    if b == 0:
        raise ZeroDivisionError("div by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def mod(a: int, b: int) -> int:
    """
    Остаток, согласованный с div: a - div(a, b) * b.

    Знак результата совпадает со знаком делимого.

    Examples:
        >>> mod(7, 4)
        3
        >>> mod(-1, 4)
        -1
        >>> mod(-4, 33)
        -4
    """
    return a - div(a, b) * b


# =============================================================================
# GREGORIAN ↔ JDN
# =============================================================================


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    Номер юлианского дня для даты пролептического григорианского календаря.

    Args:
        year: Григорианский год
        month: Месяц 1..12
        day: День месяца (не проверяется)

    Returns:
        JDN (целое)

    Examples:
        >>> gregorian_to_jdn(2024, 3, 20)
        2460390
        >>> gregorian_to_jdn(2000, 1, 1)
        2451545
    """
    month_shift = div(month - 8, 6)
    jdn = (
        div((year + month_shift + YEAR_SHIFT) * DAYS_PER_4_YEARS, 4)
        + div(153 * mod(month + 9, 12) + 2, 5)
        + day
        - JDN_SHIFT
    )
    return jdn - div(div(year + YEAR_SHIFT + month_shift, 100) * 3, 4) + 752


def jdn_to_gregorian(jdn: int) -> DateTriple:
    """
    Обратное преобразование JDN → григорианская дата.

    Args:
        jdn: Номер юлианского дня

    Returns:
        DateTriple(year, month, day)

    Examples:
        >>> jdn_to_gregorian(2460390)
        DateTriple(year=2024, month=3, day=20)
    """
    j = 4 * jdn + 139361631
    j = j + div(div(4 * jdn + 183187720, DAYS_PER_400_YEARS) * 3, 4) * 4 - 3908
    i = div(mod(j, DAYS_PER_4_YEARS), 4) * 5 + 308

    day = div(mod(i, 153), 5) + 1
    month = mod(div(i, 153), 12) + 1
    year = div(j, DAYS_PER_4_YEARS) - YEAR_SHIFT + div(8 - month, 6)

    return DateTriple(year, month, day)
