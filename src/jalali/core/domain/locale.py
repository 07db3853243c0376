"""
Locale — Статические таблицы имён и именованные шаблоны

Таблицы месяцев и дней недели фиксированы для локали и отдаются только
как кортежи (read-only). Экземпляры создаются один раз при импорте и
передаются по ссылке: ленивой инициализации и скрытого состояния нет.
"""

import re
from dataclasses import dataclass, field
from typing import Literal, Optional

NameStyle = Literal["long", "short", "narrow"]

ZWNJ = "\u200c"


@dataclass(frozen=True)
class LocaleNames:
    """
    Таблицы имён локали.

    Неделя начинается с субботы: индекс 0 = суббота, 6 = пятница.
    Короткие формы выводятся из длинных усечением: short — 2 символа,
    abbreviated — 3, narrow — 1.
    """

    locale: str
    month_names: tuple[str, ...]
    weekday_names: tuple[str, ...]
    am_marker: str = "AM"
    pm_marker: str = "PM"
    ordinal_words: tuple[str, ...] = ()  # 1, 2, 3, ...
    ordinal_template: str = "{n}"

    month_names_short: tuple[str, ...] = field(init=False)
    weekday_names_short: tuple[str, ...] = field(init=False)
    weekday_names_abbreviated: tuple[str, ...] = field(init=False)
    weekday_names_narrow: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        if len(self.month_names) != 12:
            raise ValueError(f"Expected 12 month names, got {len(self.month_names)}")
        if len(self.weekday_names) != 7:
            raise ValueError(f"Expected 7 weekday names, got {len(self.weekday_names)}")

        # frozen dataclass: производные поля через object.__setattr__
        object.__setattr__(self, "month_names_short", _truncate(self.month_names, 3))
        object.__setattr__(self, "weekday_names_short", _truncate(self.weekday_names, 2))
        object.__setattr__(
            self, "weekday_names_abbreviated", _truncate(self.weekday_names, 3)
        )
        object.__setattr__(self, "weekday_names_narrow", _truncate(self.weekday_names, 1))

    def get_month_names(self, style: NameStyle = "long") -> tuple[str, ...]:
        """Имена месяцев; short — первые 3 символа, narrow — первый символ."""
        if style == "long":
            return self.month_names
        if style == "short":
            return self.month_names_short
        return _truncate(self.month_names, 1)

    def get_weekday_names(self, style: NameStyle = "long") -> tuple[str, ...]:
        if style == "long":
            return self.weekday_names
        if style == "short":
            return self.weekday_names_short
        return self.weekday_names_narrow

    def ordinal(self, n: int) -> str:
        """
        Порядковая форма числа.

        Первые len(ordinal_words) значений — отдельные слова,
        остальные — по шаблону ordinal_template.
        """
        if 1 <= n <= len(self.ordinal_words):
            return self.ordinal_words[n - 1]
        return self.ordinal_template.format(n=n)

    def ordinal_pattern(self) -> str:
        """Регулярное выражение (без групп), совпадающее с любой порядковой формой."""
        words = "|".join(re.escape(word) for word in self.ordinal_words)
        templated = re.escape(self.ordinal_template).replace(re.escape("{n}"), r"\d+")
        return f"{words}|{templated}" if words else templated

    def parse_ordinal(self, text: str) -> Optional[int]:
        """Обратное к ordinal(): число или None."""
        if text in self.ordinal_words:
            return self.ordinal_words.index(text) + 1

        templated = re.escape(self.ordinal_template).replace(re.escape("{n}"), r"(\d+)")
        match = re.fullmatch(templated, text)
        return int(match.group(1)) if match else None


def _truncate(names: tuple[str, ...], width: int) -> tuple[str, ...]:
    return tuple(name[:width].rstrip(ZWNJ) for name in names)


@dataclass(frozen=True)
class DateFormats:
    """Именованные шаблоны, которыми пользуются адаптеры."""

    parse_date_input: str = "yyyy/MM/dd"
    display_date_input: str = "yyyy/MM/dd"
    month_year_label: str = "yyyy MMMM"
    date_a11y_label: str = "yyyy/MM/dd"
    month_year_a11y_label: str = "yyyy MMMM"


# =============================================================================
# ЛОКАЛЬ fa-IR
# =============================================================================

PERSIAN_LOCALE = LocaleNames(
    locale="fa-IR",
    month_names=(
        "فروردین",
        "اردیبهشت",
        "خرداد",
        "تیر",
        "مرداد",
        "شهریور",
        "مهر",
        "آبان",
        "آذر",
        "دی",
        "بهمن",
        "اسفند",
    ),
    weekday_names=(
        "شنبه",
        "یکشنبه",
        "دوشنبه",
        "سه\u200cشنبه",
        "چهارشنبه",
        "پنجشنبه",
        "جمعه",
    ),
    am_marker="AM",
    pm_marker="PM",
    ordinal_words=("اول", "دوم", "سوم"),
    ordinal_template="{n}ام",
)

JALALI_DATE_FORMATS = DateFormats()
