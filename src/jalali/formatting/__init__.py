"""
Pattern Formatter/Parser — рендер и разбор дат Solar Hijri по шаблонам.

Словарь токенов фиксирован и регистрозависим, см. FormatToken.
"""

from jalali.formatting.engine import DEFAULT_FORMATTER, JalaliFormatter
from jalali.formatting.formatter import FormatContext, build_context, format_date
from jalali.formatting.parser import (
    ParsedComponents,
    build_pattern_regex,
    normalize_digits,
    parse_components,
    parse_date,
)
from jalali.formatting.tokens import FormatToken, PatternSegment, tokenize

__all__ = [
    # Tokens
    "FormatToken",
    "PatternSegment",
    "tokenize",
    # Formatter
    "FormatContext",
    "build_context",
    "format_date",
    # Parser
    "ParsedComponents",
    "build_pattern_regex",
    "normalize_digits",
    "parse_components",
    "parse_date",
    # Engine
    "JalaliFormatter",
    "DEFAULT_FORMATTER",
]
