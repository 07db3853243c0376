"""
Pattern Parser — Разбор строки по шаблону в компоненты даты Solar Hijri

Алгоритм:
1. Цифры персидского (۰-۹) и арабо-индийского (٠-٩) письма → ASCII
2. Шаблон токенизируется (самый длинный токен первым), литералы
   экранируются, каждый токен заменяется группой захвата фиксированной
   или ограниченной ширины
3. Требуется совпадение всей строки
4. Группы интерпретируются позиционно по токену, который их породил

Двузначный год: value < 40 → 1400 + value, иначе 1300 + value.

Токены только для отображения (Q, D*, дни недели) совпадают со своей
отрендеренной формой и игнорируются.

Невалидный вход → None, исключений нет.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Final, Optional

from jalali.converter.calendar import create_date, to_datetime
from jalali.core.domain.dates import CalendarDate, InvalidDate
from jalali.core.domain.locale import PERSIAN_LOCALE, LocaleNames
from jalali.core.errors import CalendarError, InvalidInput, ParseMismatch
from jalali.formatting.tokens import FormatToken, tokenize

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Порог двузначного года: < 40 → 14xx, иначе 13xx
TWO_DIGIT_YEAR_PIVOT: Final[int] = 40
TWO_DIGIT_YEAR_LOW_CENTURY: Final[int] = 1400
TWO_DIGIT_YEAR_HIGH_CENTURY: Final[int] = 1300

_DIGIT_TRANSLATION: Final[dict[int, int]] = str.maketrans(
    "۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789"
)

# Числовые токены: ширина группы захвата
_NUMERIC_SOURCE: Final[dict[FormatToken, str]] = {
    # Годы до эпохи рендерятся со знаком: -061
    FormatToken.YEAR: r"-\d{3}|\d{4}",
    FormatToken.YEAR_2: r"\d{2}",
    FormatToken.MONTH_PADDED: r"\d{2}",
    FormatToken.MONTH: r"\d{1,2}",
    FormatToken.DAY_PADDED: r"\d{2}",
    FormatToken.DAY: r"\d{1,2}",
    FormatToken.HOUR_24_PADDED: r"\d{2}",
    FormatToken.HOUR_24: r"\d{1,2}",
    FormatToken.HOUR_12_PADDED: r"\d{2}",
    FormatToken.HOUR_12: r"\d{1,2}",
    FormatToken.MINUTE_PADDED: r"\d{2}",
    FormatToken.MINUTE: r"\d{1,2}",
    FormatToken.SECOND_PADDED: r"\d{2}",
    FormatToken.SECOND: r"\d{1,2}",
    FormatToken.MILLISECOND: r"\d{3}",
    FormatToken.QUARTER: r"[1-4]",
    FormatToken.DAY_OF_YEAR_3: r"\d{3}",
    FormatToken.DAY_OF_YEAR_2: r"\d{2}",
    FormatToken.DAY_OF_YEAR: r"\d{1,3}",
    FormatToken.LOCAL_WEEKDAY_INDEX_PADDED: r"\d{2}",
    FormatToken.LOCAL_WEEKDAY_INDEX: r"\d",
}


@dataclass(frozen=True)
class ParsedComponents:
    """Результат разбора: компоненты Solar Hijri (None = отсутствует) и время суток."""

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def has_date(self) -> bool:
        """Все три компонента даты присутствуют (год 0 допустим)."""
        return self.year is not None and self.month is not None and self.day is not None

    def to_calendar_date(self) -> Optional[CalendarDate]:
        if not self.has_date():
            return None
        result = create_date(self.year, self.month, self.day)
        return result if isinstance(result, CalendarDate) else None


# =============================================================================
# ПОСТРОЕНИЕ REGEX
# =============================================================================


def normalize_digits(text: str) -> str:
    """
    Персидские и арабо-индийские цифры → ASCII.

    Examples:
        >>> normalize_digits("۱۴۰۳/۰۱/۰۱")
        '1403/01/01'
    """
    return text.translate(_DIGIT_TRANSLATION)


def _alternation(options: tuple[str, ...]) -> str:
    # Длинные варианты первыми: префикс не должен перехватить совпадение
    return "|".join(re.escape(option) for option in sorted(options, key=len, reverse=True))


def _token_source(token: FormatToken, locale: LocaleNames) -> str:
    if token in _NUMERIC_SOURCE:
        return _NUMERIC_SOURCE[token]

    if token == FormatToken.MONTH_NAME:
        return _alternation(locale.month_names)
    if token == FormatToken.MONTH_NAME_SHORT:
        return _alternation(locale.month_names_short)
    if token == FormatToken.AMPM_LOWER:
        return _alternation((locale.am_marker.lower(), locale.pm_marker.lower()))
    if token == FormatToken.AMPM_UPPER:
        return _alternation((locale.am_marker, locale.pm_marker))
    if token in (FormatToken.DAY_ORDINAL, FormatToken.DAY_OF_YEAR_ORDINAL):
        return locale.ordinal_pattern()
    if token in (FormatToken.LOCAL_WEEKDAY_SHORT, FormatToken.WEEKDAY_SHORT):
        return _alternation(locale.weekday_names_short)
    if token in (FormatToken.LOCAL_WEEKDAY_NARROW, FormatToken.WEEKDAY_NARROW):
        return _alternation(locale.weekday_names_narrow)
    if token in (FormatToken.LOCAL_WEEKDAY_LONG, FormatToken.WEEKDAY_LONG):
        return _alternation(locale.weekday_names)
    return _alternation(locale.weekday_names_abbreviated)


def build_pattern_regex(
    pattern: str, locale: LocaleNames = PERSIAN_LOCALE
) -> tuple[re.Pattern[str], list[FormatToken]]:
    """
    Регулярное выражение шаблона и токены в порядке групп захвата.

    Examples:
        >>> regex, tokens = build_pattern_regex("yyyy/MM/dd")
        >>> regex.pattern
        '^(-\\\\d{3}|\\\\d{4})/(\\\\d{2})/(\\\\d{2})$'
    """
    parts: list[str] = []
    tokens: list[FormatToken] = []

    for segment in tokenize(pattern):
        if segment.token is None:
            parts.append(re.escape(segment.text))
        else:
            parts.append(f"({_token_source(segment.token, locale)})")
            tokens.append(segment.token)

    return re.compile("^" + "".join(parts) + "$", re.ASCII), tokens


# =============================================================================
# РАЗБОР
# =============================================================================


def _match_components(text: Any, pattern: Any, locale: LocaleNames) -> ParsedComponents:
    """
    Разбор строки по шаблону.

    Raises:
        InvalidInput: Если text/pattern не строка или пустые
        ParseMismatch: Если строка не соответствует шаблону или поле вне диапазона
    """
    if not isinstance(text, str) or not isinstance(pattern, str):
        raise InvalidInput(f"Expected strings, got {type(text).__name__}/{type(pattern).__name__}")

    text = normalize_digits(text.strip())
    if not text or not pattern:
        raise InvalidInput("Empty text or pattern")

    regex, tokens = build_pattern_regex(pattern, locale)
    match = regex.match(text)
    if match is None:
        raise ParseMismatch(f"{text!r} does not match pattern {pattern!r}")

    values: dict[str, int] = {}
    hour_12: Optional[int] = None
    meridiem: Optional[str] = None

    for token, raw in zip(tokens, match.groups()):
        if token == FormatToken.YEAR:
            values["year"] = int(raw)
        elif token == FormatToken.YEAR_2:
            short_year = int(raw)
            values["year"] = (
                TWO_DIGIT_YEAR_LOW_CENTURY + short_year
                if short_year < TWO_DIGIT_YEAR_PIVOT
                else TWO_DIGIT_YEAR_HIGH_CENTURY + short_year
            )
        elif token == FormatToken.MONTH_NAME:
            values["month"] = locale.month_names.index(raw) + 1
        elif token == FormatToken.MONTH_NAME_SHORT:
            values["month"] = locale.month_names_short.index(raw) + 1
        elif token in (FormatToken.MONTH_PADDED, FormatToken.MONTH):
            values["month"] = int(raw)
        elif token in (FormatToken.DAY_PADDED, FormatToken.DAY):
            values["day"] = int(raw)
        elif token == FormatToken.DAY_ORDINAL:
            day = locale.parse_ordinal(raw)
            if day is None:
                raise ParseMismatch(f"Unrecognized ordinal day {raw!r}")
            values["day"] = day
        elif token in (FormatToken.HOUR_24_PADDED, FormatToken.HOUR_24):
            values["hour"] = int(raw)
        elif token in (FormatToken.HOUR_12_PADDED, FormatToken.HOUR_12):
            hour_12 = int(raw)
        elif token in (FormatToken.MINUTE_PADDED, FormatToken.MINUTE):
            values["minute"] = int(raw)
        elif token in (FormatToken.SECOND_PADDED, FormatToken.SECOND):
            values["second"] = int(raw)
        elif token == FormatToken.MILLISECOND:
            values["millisecond"] = int(raw)
        elif token in (FormatToken.AMPM_LOWER, FormatToken.AMPM_UPPER):
            meridiem = raw.upper()
        # Остальные токены только для отображения

    if hour_12 is not None:
        if not 1 <= hour_12 <= 12:
            raise ParseMismatch(f"12-hour value out of range: {hour_12}")
        if meridiem == locale.pm_marker.upper():
            values["hour"] = hour_12 % 12 + 12
        elif meridiem == locale.am_marker.upper():
            values["hour"] = hour_12 % 12
        else:
            values["hour"] = hour_12

    if values.get("hour", 0) > 23 or values.get("minute", 0) > 59 or values.get("second", 0) > 59:
        raise ParseMismatch(f"Time of day out of range in {text!r}")

    return ParsedComponents(**values)


def parse_components(
    text: Any, pattern: Any, locale: LocaleNames = PERSIAN_LOCALE
) -> Optional[ParsedComponents]:
    """
    Разбор строки в компоненты Solar Hijri без конверсии.

    Returns:
        ParsedComponents или None, если строка не соответствует шаблону

    Examples:
        >>> parse_components("13/01/01", "yy/MM/dd").year
        1413
    """
    try:
        return _match_components(text, pattern, locale)
    except CalendarError as e:
        logger.debug("parse_components: %s", e)
        return None


def parse_date(
    text: Any, pattern: Any, locale: LocaleNames = PERSIAN_LOCALE
) -> Optional[datetime]:
    """
    Разбор строки в naive datetime.datetime хоста.

    Шаблон без токенов года, месяца или дня — отказ.

    Returns:
        datetime или None
    """
    components = parse_components(text, pattern, locale)
    if components is None:
        return None

    calendar_date = components.to_calendar_date()
    if calendar_date is None:
        logger.debug("parse_date: no valid date in %r for pattern %r", text, pattern)
        return None

    result = to_datetime(
        calendar_date,
        components.hour,
        components.minute,
        components.second,
        components.millisecond,
    )
    return None if isinstance(result, InvalidDate) else result
