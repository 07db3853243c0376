"""
Format Tokens — Словарь токенов шаблона и токенизатор

Токены регистрозависимы и сопоставляются жадно, самый длинный первым:
MMMM раньше MMM, MMM раньше MM, MM раньше M. Любой символ вне словаря
копируется как литерал (разделители '/', '-', ' ', ':').

EEE+ — три и более 'E' подряд. Серии длиннее шести делятся на EEEEEE
и остаток, который сопоставляется заново.
"""

import re
from enum import Enum
from typing import Final, NamedTuple, Optional


class FormatToken(str, Enum):
    """Атомарный токен шаблона. Значение — литерал токена в шаблоне."""

    # Год
    YEAR = "yyyy"
    YEAR_2 = "yy"

    # Месяц
    MONTH_NAME = "MMMM"
    MONTH_NAME_SHORT = "MMM"
    MONTH_PADDED = "MM"
    MONTH = "M"

    # День месяца
    DAY_PADDED = "dd"
    DAY_ORDINAL = "do"
    DAY = "d"

    # Время
    HOUR_24_PADDED = "HH"
    HOUR_24 = "H"
    HOUR_12_PADDED = "hh"
    HOUR_12 = "h"
    MINUTE_PADDED = "mm"
    MINUTE = "m"
    SECOND_PADDED = "ss"
    SECOND = "s"
    MILLISECOND = "SSS"
    AMPM_LOWER = "a"
    AMPM_UPPER = "A"

    # Квартал и день года
    QUARTER = "Q"
    DAY_OF_YEAR_3 = "DDD"
    DAY_OF_YEAR_2 = "DD"
    DAY_OF_YEAR_ORDINAL = "Do"
    DAY_OF_YEAR = "D"

    # День недели (локальный вариант e)
    LOCAL_WEEKDAY_SHORT = "eeeeee"
    LOCAL_WEEKDAY_NARROW = "eeeee"
    LOCAL_WEEKDAY_LONG = "eeee"
    LOCAL_WEEKDAY_ABBR = "eee"
    LOCAL_WEEKDAY_INDEX_PADDED = "ee"
    LOCAL_WEEKDAY_INDEX = "e"

    # День недели (имя)
    WEEKDAY_SHORT = "EEEEEE"
    WEEKDAY_NARROW = "EEEEE"
    WEEKDAY_LONG = "EEEE"
    WEEKDAY_ABBR = "EEE+"


# Регулярное выражение каждого токена внутри шаблона
_TOKEN_SOURCE: Final[dict[FormatToken, str]] = {
    token: re.escape(token.value) for token in FormatToken
}
_TOKEN_SOURCE[FormatToken.WEEKDAY_ABBR] = "E{3,}"

# Порядок альтернатив: длинные литералы раньше коротких.
# EEE+ идёт после EEEE, поэтому на практике ловит ровно три 'E'.
_ORDERED_TOKENS: Final[tuple[FormatToken, ...]] = tuple(
    sorted(
        FormatToken,
        key=lambda t: len(t.value.rstrip("+")),
        reverse=True,
    )
)

TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    "|".join(f"(?P<{t.name}>{_TOKEN_SOURCE[t]})" for t in _ORDERED_TOKENS)
)


class PatternSegment(NamedTuple):
    """Фрагмент шаблона: токен или литерал (token is None)."""

    token: Optional[FormatToken]
    text: str


def tokenize(pattern: str) -> list[PatternSegment]:
    """
    Разбор шаблона слева направо на токены и литералы.

    Examples:
        >>> [s.token.value if s.token else s.text for s in tokenize("yyyy/MM/dd")]
        ['yyyy', '/', 'MM', '/', 'dd']
    """
    segments: list[PatternSegment] = []
    position = 0

    for match in TOKEN_RE.finditer(pattern):
        if match.start() > position:
            segments.append(PatternSegment(None, pattern[position : match.start()]))
        segments.append(PatternSegment(FormatToken[match.lastgroup], match.group()))
        position = match.end()

    if position < len(pattern):
        segments.append(PatternSegment(None, pattern[position:]))

    return segments
