"""
Тесты для токенизатора шаблонов
"""

from jalali.formatting.tokens import FormatToken, PatternSegment, tokenize


def tokens_of(pattern: str) -> list:
    return [segment.token for segment in tokenize(pattern) if segment.token is not None]


class TestTokenize:
    """Тесты tokenize: самый длинный токен первым."""

    def test_date_pattern(self) -> None:
        assert tokenize("yyyy/MM/dd") == [
            PatternSegment(FormatToken.YEAR, "yyyy"),
            PatternSegment(None, "/"),
            PatternSegment(FormatToken.MONTH_PADDED, "MM"),
            PatternSegment(None, "/"),
            PatternSegment(FormatToken.DAY_PADDED, "dd"),
        ]

    def test_longest_month_token_wins(self) -> None:
        assert tokens_of("MMMM") == [FormatToken.MONTH_NAME]
        assert tokens_of("MMM") == [FormatToken.MONTH_NAME_SHORT]
        assert tokens_of("MMMMM") == [FormatToken.MONTH_NAME, FormatToken.MONTH]

    def test_case_sensitive(self) -> None:
        assert tokens_of("mm MM") == [FormatToken.MINUTE_PADDED, FormatToken.MONTH_PADDED]
        assert tokens_of("hh HH") == [FormatToken.HOUR_12_PADDED, FormatToken.HOUR_24_PADDED]
        assert tokens_of("D d") == [FormatToken.DAY_OF_YEAR, FormatToken.DAY]

    def test_ordinals(self) -> None:
        assert tokens_of("do") == [FormatToken.DAY_ORDINAL]
        assert tokens_of("Do") == [FormatToken.DAY_OF_YEAR_ORDINAL]

    def test_weekday_runs(self) -> None:
        assert tokens_of("EEEEEE") == [FormatToken.WEEKDAY_SHORT]
        assert tokens_of("EEEEE") == [FormatToken.WEEKDAY_NARROW]
        assert tokens_of("EEEE") == [FormatToken.WEEKDAY_LONG]
        assert tokens_of("EEE") == [FormatToken.WEEKDAY_ABBR]
        assert tokens_of("eee") == [FormatToken.LOCAL_WEEKDAY_ABBR]
        assert tokens_of("e") == [FormatToken.LOCAL_WEEKDAY_INDEX]

    def test_long_weekday_run_splits(self) -> None:
        """Семь 'E': EEEEEE и литерал 'E'."""
        assert tokenize("EEEEEEE") == [
            PatternSegment(FormatToken.WEEKDAY_SHORT, "EEEEEE"),
            PatternSegment(None, "E"),
        ]

    def test_short_e_runs_are_literal(self) -> None:
        assert tokenize("EE") == [PatternSegment(None, "EE")]

    def test_literals_preserved(self) -> None:
        assert tokenize("[x]") == [PatternSegment(None, "[x]")]
        assert tokenize("") == []

    def test_time_pattern(self) -> None:
        assert tokens_of("HH:mm:ss.SSS") == [
            FormatToken.HOUR_24_PADDED,
            FormatToken.MINUTE_PADDED,
            FormatToken.SECOND_PADDED,
            FormatToken.MILLISECOND,
        ]
