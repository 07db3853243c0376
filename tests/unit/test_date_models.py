"""
Тесты для доменных моделей: CalendarDate, GregorianDate, INVALID_DATE, LocaleNames

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Sentinel невалидной даты и предикат is_valid
4. Таблицы имён локали и порядковые формы
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from jalali.core.domain import (
    INVALID_DATE,
    JALALI_DATE_FORMATS,
    PERSIAN_LOCALE,
    CalendarDate,
    GregorianDate,
    InvalidDate,
    LocaleNames,
    is_valid,
)
from jalali.core.math.julian_day import DateTriple


# =============================================================================
# CALENDAR DATE
# =============================================================================


class TestCalendarDate:
    """Тесты модели CalendarDate."""

    @pytest.fixture
    def nowruz_1403(self) -> CalendarDate:
        return CalendarDate(year=1403, month=1, day=1)

    def test_valid(self, nowruz_1403: CalendarDate) -> None:
        assert nowruz_1403.year == 1403
        assert nowruz_1403.as_triple() == DateTriple(1403, 1, 1)
        assert str(nowruz_1403) == "1403/01/01"

    def test_leap_esfand(self) -> None:
        assert CalendarDate(year=1403, month=12, day=30).day == 30

    def test_non_leap_esfand_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exceeds 29 days"):
            CalendarDate(year=1404, month=12, day=30)

    def test_second_half_day_31_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CalendarDate(year=1403, month=7, day=31)

    def test_field_bounds(self) -> None:
        with pytest.raises(ValidationError):
            CalendarDate(year=3178, month=1, day=1)
        with pytest.raises(ValidationError):
            CalendarDate(year=1403, month=13, day=1)
        with pytest.raises(ValidationError):
            CalendarDate(year=1403, month=1, day=0)

    def test_immutable(self, nowruz_1403: CalendarDate) -> None:
        with pytest.raises(ValidationError):
            nowruz_1403.day = 2  # type: ignore[misc]

    def test_equality_and_hash(self, nowruz_1403: CalendarDate) -> None:
        same = CalendarDate(year=1403, month=1, day=1)
        assert nowruz_1403 == same
        assert len({nowruz_1403, same}) == 1


# =============================================================================
# GREGORIAN DATE
# =============================================================================


class TestGregorianDate:
    """Тесты модели GregorianDate."""

    def test_from_date(self) -> None:
        value = GregorianDate.from_date(date(2024, 3, 20))
        assert value.to_date() == date(2024, 3, 20)
        assert str(value) == "2024-03-20"

    def test_from_triple(self) -> None:
        assert GregorianDate.from_triple(DateTriple(2000, 1, 1)).as_triple() == (2000, 1, 1)

    def test_invalid_february(self) -> None:
        with pytest.raises(ValidationError, match="exceeds 28 days"):
            GregorianDate(year=2023, month=2, day=29)

    def test_year_bounds(self) -> None:
        with pytest.raises(ValidationError):
            GregorianDate(year=0, month=1, day=1)


# =============================================================================
# INVALID SENTINEL
# =============================================================================


class TestInvalidSentinel:
    """Тесты INVALID_DATE и is_valid."""

    def test_sentinel(self) -> None:
        assert isinstance(INVALID_DATE, InvalidDate)
        assert str(INVALID_DATE) == "Invalid Date"

    def test_is_valid(self) -> None:
        assert is_valid(CalendarDate(year=1403, month=1, day=1))
        assert is_valid(GregorianDate(year=2024, month=3, day=20))
        assert is_valid(date(2024, 3, 20))
        assert is_valid(datetime(2024, 3, 20, 12, 0))

    def test_is_invalid(self) -> None:
        assert not is_valid(INVALID_DATE)
        assert not is_valid(None)
        assert not is_valid("1403/01/01")


# =============================================================================
# LOCALE
# =============================================================================


class TestLocaleNames:
    """Тесты таблиц имён fa-IR."""

    def test_month_names(self) -> None:
        assert len(PERSIAN_LOCALE.month_names) == 12
        assert PERSIAN_LOCALE.month_names[0] == "فروردین"
        assert PERSIAN_LOCALE.month_names[11] == "اسفند"

    def test_month_short_names(self) -> None:
        assert PERSIAN_LOCALE.get_month_names("short")[0] == "فرو"
        assert PERSIAN_LOCALE.get_month_names("narrow")[0] == "ف"
        assert PERSIAN_LOCALE.get_month_names() is PERSIAN_LOCALE.month_names

    def test_week_starts_on_saturday(self) -> None:
        assert PERSIAN_LOCALE.weekday_names[0] == "شنبه"
        assert PERSIAN_LOCALE.weekday_names[6] == "جمعه"

    def test_weekday_truncation(self) -> None:
        assert PERSIAN_LOCALE.get_weekday_names("short")[4] == "چه"
        assert PERSIAN_LOCALE.weekday_names_abbreviated[4] == "چها"
        assert PERSIAN_LOCALE.get_weekday_names("narrow")[4] == "چ"

    def test_truncation_drops_trailing_zwnj(self) -> None:
        """سه‌شنبه: третий символ — ZWNJ, он отбрасывается."""
        assert PERSIAN_LOCALE.weekday_names_abbreviated[3] == "سه"

    def test_short_names_are_distinct(self) -> None:
        for names in (
            PERSIAN_LOCALE.month_names_short,
            PERSIAN_LOCALE.weekday_names_short,
            PERSIAN_LOCALE.weekday_names_abbreviated,
            PERSIAN_LOCALE.weekday_names_narrow,
        ):
            assert len(set(names)) == len(names)

    def test_ordinal(self) -> None:
        assert PERSIAN_LOCALE.ordinal(1) == "اول"
        assert PERSIAN_LOCALE.ordinal(3) == "سوم"
        assert PERSIAN_LOCALE.ordinal(21) == "21ام"

    def test_parse_ordinal(self) -> None:
        assert PERSIAN_LOCALE.parse_ordinal("دوم") == 2
        assert PERSIAN_LOCALE.parse_ordinal("12ام") == 12
        assert PERSIAN_LOCALE.parse_ordinal("twelfth") is None

    def test_table_sizes_validated(self) -> None:
        with pytest.raises(ValueError, match="Expected 12 month names"):
            LocaleNames(locale="xx", month_names=("a",) * 11, weekday_names=("b",) * 7)
        with pytest.raises(ValueError, match="Expected 7 weekday names"):
            LocaleNames(locale="xx", month_names=("a",) * 12, weekday_names=("b",) * 6)

    def test_named_formats(self) -> None:
        assert JALALI_DATE_FORMATS.parse_date_input == "yyyy/MM/dd"
        assert JALALI_DATE_FORMATS.month_year_label == "yyyy MMMM"
