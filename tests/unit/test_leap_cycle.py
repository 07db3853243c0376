"""
Тесты для Leap-Cycle Calculator — високосность по таблице BREAKS

Проверяемые инварианты:
1. Год вне [BREAKS[0], BREAKS[-1]) → OutOfRange
2. Интервалы между високосными годами — 4 или 5 лет
3. Известные високосные годы современной эпохи
4. Длина года (по JDN) совпадает с високосностью
"""

import pytest

from jalali.core.errors import CalendarError, OutOfRange
from jalali.core.math.julian_day import gregorian_to_jdn
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


# =============================================================================
# ТЕСТЫ: Диапазон таблицы
# =============================================================================


class TestSupportedRange:
    """Тесты границ таблицы BREAKS."""

    def test_range_constants(self) -> None:
        assert MIN_YEAR == -61
        assert MAX_YEAR == 3177
        assert list(BREAKS) == sorted(BREAKS)

    def test_boundaries_accepted(self) -> None:
        validate_year(MIN_YEAR)
        validate_year(MAX_YEAR)

    def test_below_range(self) -> None:
        with pytest.raises(OutOfRange, match="outside supported range"):
            validate_year(MIN_YEAR - 1)

    def test_above_range(self) -> None:
        with pytest.raises(OutOfRange, match="outside supported range"):
            is_leap_year(BREAKS[-1])

    def test_out_of_range_is_calendar_error(self) -> None:
        with pytest.raises(CalendarError):
            year_anchor(5000)
        with pytest.raises(ValueError):
            locate_cycle(-1000)


# =============================================================================
# ТЕСТЫ: Подциклы и leap adder
# =============================================================================


class TestCycle:
    """Тесты locate_cycle и march_equinox_offset."""

    def test_locate_cycle_modern(self) -> None:
        assert locate_cycle(1403) == CycleInfo(start_year=1210, length=425, leap_adder=294)

    def test_locate_cycle_on_break(self) -> None:
        """Break-point открывает новый подцикл."""
        assert locate_cycle(1210).start_year == 1210
        assert locate_cycle(1209).start_year == 1181

    def test_march_equinox_offset(self) -> None:
        assert march_equinox_offset(1403) == 341
        assert march_equinox_offset(1404) == 342

    def test_year_anchor(self) -> None:
        """Nowruz 1403 — 20 марта 2024, Nowruz 1404 — 21 марта 2025."""
        assert year_anchor(1403) == YearAnchor(gregorian_year=2024, march_day=20, leap=0)
        assert year_anchor(1404).march_day == 21
        assert year_anchor(1404, with_leap=False).leap == -1


# =============================================================================
# ТЕСТЫ: Високосность
# =============================================================================


class TestLeapYears:
    """Тесты is_leap_year / leap_index."""

    def test_known_leap_years(self) -> None:
        leap_years = [year for year in range(1380, 1415) if is_leap_year(year)]
        assert leap_years == [1383, 1387, 1391, 1395, 1399, 1403, 1408, 1412]

    def test_leap_index_values(self) -> None:
        assert leap_index(1403) == 0
        assert leap_index(1404) == 1
        assert leap_index(1407) == 4  # нормализация -1 → 4
        assert leap_index(1408) == 0

    def test_leap_index_bounds(self) -> None:
        for year in range(MIN_YEAR, MAX_YEAR + 1, 7):
            assert 0 <= leap_index(year) <= 4

    def test_gaps_are_four_or_five(self) -> None:
        """Интервалы между соседними високосными годами — 4 или 5."""
        leap_years = [year for year in range(MIN_YEAR, MAX_YEAR + 1) if is_leap_year(year)]
        gaps = {b - a for a, b in zip(leap_years, leap_years[1:])}
        assert gaps <= {4, 5}

    def test_year_length_matches_leap(self) -> None:
        """JDN(Nowruz y+1) - JDN(Nowruz y) == 366 для високосного, 365 иначе."""
        for year in range(1300, 1500):
            current = year_anchor(year)
            following = year_anchor(year + 1)
            length = gregorian_to_jdn(following.gregorian_year, 3, following.march_day) - gregorian_to_jdn(
                current.gregorian_year, 3, current.march_day
            )
            assert length == (366 if is_leap_year(year) else 365), year
