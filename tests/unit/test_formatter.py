"""
Тесты для Pattern Formatter — рендер дат Solar Hijri по шаблону

Проверяет:
1. Числовые токены с дополнением нулями
2. Имена месяцев и дней недели (long/short/abbreviated/narrow)
3. 12/24-часовое время и маркеры AM/PM
4. Квартал, день года, порядковые формы
5. Невалидный вход → пустая строка
"""

from datetime import date, datetime

import pytest

from jalali.core.domain.dates import INVALID_DATE, CalendarDate
from jalali.formatting.engine import DEFAULT_FORMATTER, JalaliFormatter
from jalali.formatting.formatter import FormatContext, build_context, format_date


@pytest.fixture
def nowruz() -> CalendarDate:
    """1403/01/01 — среда, 2024-03-20."""
    return CalendarDate(year=1403, month=1, day=1)


@pytest.fixture
def afternoon() -> datetime:
    """1403/01/01 15:05:09.123."""
    return datetime(2024, 3, 20, 15, 5, 9, 123456)


# =============================================================================
# ТЕСТЫ: Дата
# =============================================================================


class TestDateTokens:
    """Тесты токенов года, месяца и дня."""

    def test_default_pattern(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "yyyy/MM/dd") == "1403/01/01"

    def test_unpadded(self) -> None:
        assert format_date(CalendarDate(year=1403, month=7, day=5), "yyyy/M/d") == "1403/7/5"

    def test_two_digit_year(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "yy") == "03"

    def test_month_names(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "d MMMM yyyy") == "1 فروردین 1403"
        assert format_date(nowruz, "MMM") == "فرو"
        assert format_date(CalendarDate(year=1403, month=12, day=30), "MMMM") == "اسفند"

    def test_host_date_converted(self) -> None:
        assert format_date(date(2025, 3, 20), "yyyy/MM/dd") == "1403/12/30"

    def test_literals_copied(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "yyyy-MM-dd [x]") == "1403-01-01 [x]"


# =============================================================================
# ТЕСТЫ: Время
# =============================================================================


class TestTimeTokens:
    """Тесты токенов времени."""

    def test_24_hour(self, afternoon: datetime) -> None:
        assert format_date(afternoon, "HH:mm:ss.SSS") == "15:05:09.123"
        assert format_date(afternoon, "H:m:s") == "15:5:9"

    def test_12_hour(self, afternoon: datetime) -> None:
        assert format_date(afternoon, "hh:mm a") == "03:05 pm"
        assert format_date(afternoon, "h A") == "3 PM"

    def test_midnight_and_noon(self) -> None:
        assert format_date(datetime(2024, 3, 20, 0, 0), "h A") == "12 AM"
        assert format_date(datetime(2024, 3, 20, 12, 0), "h A") == "12 PM"

    def test_calendar_date_is_midnight(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "HH:mm:ss") == "00:00:00"


# =============================================================================
# ТЕСТЫ: Квартал, день года, дни недели
# =============================================================================


class TestDerivedTokens:
    """Тесты производных токенов."""

    def test_quarter(self) -> None:
        assert format_date(CalendarDate(year=1403, month=1, day=1), "Q") == "1"
        assert format_date(CalendarDate(year=1403, month=7, day=1), "Q") == "3"
        assert format_date(CalendarDate(year=1403, month=12, day=1), "Q") == "4"

    def test_day_of_year(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "DDD") == "001"
        assert format_date(CalendarDate(year=1403, month=2, day=1), "DD") == "32"
        assert format_date(CalendarDate(year=1403, month=12, day=30), "D") == "366"

    def test_ordinals(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "do") == "اول"
        assert format_date(CalendarDate(year=1403, month=1, day=5), "do") == "5ام"
        assert format_date(CalendarDate(year=1403, month=1, day=3), "Do") == "سوم"

    def test_weekday_names(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "EEEE") == "چهارشنبه"
        assert format_date(nowruz, "EEE") == "چها"
        assert format_date(nowruz, "EEEEEE") == "چه"
        assert format_date(nowruz, "EEEEE") == "چ"
        assert format_date(nowruz, "eeee") == "چهارشنبه"

    def test_weekday_index(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, "e") == "4"
        assert format_date(nowruz, "ee") == "04"


# =============================================================================
# ТЕСТЫ: Невалидный вход
# =============================================================================


class TestInvalidFormatting:
    """Невалидный вход → пустая строка."""

    def test_invalid_values(self) -> None:
        assert format_date(INVALID_DATE, "yyyy") == ""
        assert format_date(None, "yyyy") == ""
        assert format_date("1403/01/01", "yyyy") == ""

    def test_host_date_outside_range(self) -> None:
        assert format_date(date(9999, 1, 1), "yyyy") == ""

    def test_pattern_not_string(self, nowruz: CalendarDate) -> None:
        assert format_date(nowruz, None) == ""  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ: Контекст и engine
# =============================================================================


class TestContextAndEngine:
    """Тесты build_context и JalaliFormatter."""

    def test_context_from_datetime(self, afternoon: datetime) -> None:
        context = build_context(afternoon)
        assert isinstance(context, FormatContext)
        assert context.calendar_date == CalendarDate(year=1403, month=1, day=1)
        assert context.millisecond == 123
        assert context.hour_12 == 3
        assert context.meridiem == "PM"

    def test_context_invalid(self) -> None:
        assert build_context(INVALID_DATE) is None

    def test_default_formatter(self, nowruz: CalendarDate) -> None:
        assert DEFAULT_FORMATTER.format(nowruz, "yyyy MMMM") == "1403 فروردین"

    def test_formatter_is_immutable(self) -> None:
        formatter = JalaliFormatter()
        with pytest.raises(AttributeError):
            formatter.locale = None  # type: ignore[misc]
