"""
Formatter Engine — Разделяемый экземпляр formatter/parser

JalaliFormatter связывает таблицы имён локали с функциями рендера и
разбора. Экземпляр неизменяем: DEFAULT_FORMATTER создаётся один раз при
импорте и передаётся адаптерам по ссылке.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from jalali.core.domain.locale import PERSIAN_LOCALE, LocaleNames
from jalali.formatting.formatter import format_date
from jalali.formatting.parser import ParsedComponents, parse_components, parse_date


@dataclass(frozen=True)
class JalaliFormatter:
    """Formatter/parser дат Solar Hijri для одной локали."""

    locale: LocaleNames = PERSIAN_LOCALE

    def format(self, value: Any, pattern: str) -> str:
        return format_date(value, pattern, self.locale)

    def parse(self, text: Any, pattern: str) -> Optional[datetime]:
        return parse_date(text, pattern, self.locale)

    def parse_components(self, text: Any, pattern: str) -> Optional[ParsedComponents]:
        return parse_components(text, pattern, self.locale)


DEFAULT_FORMATTER = JalaliFormatter()
