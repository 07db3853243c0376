"""
Date Adapter — Контракт адаптера дат для UI-инструментария

Адаптер подставляет календарь Solar Hijri в компоненты выбора даты,
которые работают через абстракцию "дата хоста": получение компонентов,
построение, разбор, форматирование и календарная арифметика.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
- get_month и create_date используют месяц с нуля (0 = Farvardin),
  как того ожидает инструментарий
- неделя начинается с субботы: get_day_of_week → 0 = суббота
- невалидное построение и неразборчивая строка → invalid(), без исключений
- геттеры компонентов определены только для валидных дат (is_valid),
  для невалидных бросают InvalidInput
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from jalali.core.domain.locale import NameStyle

D = TypeVar("D")


class DateAdapter(ABC, Generic[D]):
    """Абстрактный адаптер для типа даты хоста D."""

    # =========================================================================
    # КОМПОНЕНТЫ
    # =========================================================================

    @abstractmethod
    def get_year(self, date: D) -> int:
        ...

    @abstractmethod
    def get_month(self, date: D) -> int:
        """Месяц с нуля: 0 = Farvardin ... 11 = Esfand."""

    @abstractmethod
    def get_date(self, date: D) -> int:
        """День месяца (1..31)."""

    @abstractmethod
    def get_day_of_week(self, date: D) -> int:
        """День недели: 0 = суббота ... 6 = пятница."""

    @abstractmethod
    def get_num_days_in_month(self, date: D) -> int:
        ...

    # =========================================================================
    # ИМЕНА
    # =========================================================================

    @abstractmethod
    def get_month_names(self, style: NameStyle = "long") -> list[str]:
        ...

    @abstractmethod
    def get_date_names(self) -> list[str]:
        ...

    @abstractmethod
    def get_day_of_week_names(self, style: NameStyle = "long") -> list[str]:
        ...

    @abstractmethod
    def get_year_name(self, date: D) -> str:
        ...

    @abstractmethod
    def get_first_day_of_week(self) -> int:
        ...

    # =========================================================================
    # ПОСТРОЕНИЕ, РАЗБОР, ФОРМАТ
    # =========================================================================

    @abstractmethod
    def clone(self, date: D) -> D:
        ...

    @abstractmethod
    def create_date(self, year: int, month: int, date: int) -> D:
        """Дата из компонентов Solar Hijri (month с нуля); invalid() при отказе."""

    @abstractmethod
    def today(self) -> D:
        ...

    @abstractmethod
    def parse(self, value: Any, parse_format: str) -> Optional[D]:
        ...

    @abstractmethod
    def format(self, date: D, display_format: str) -> str:
        ...

    @abstractmethod
    def to_iso8601(self, date: D) -> str:
        ...

    @abstractmethod
    def deserialize(self, value: Any) -> Optional[D]:
        ...

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @abstractmethod
    def add_calendar_years(self, date: D, years: int) -> D:
        ...

    @abstractmethod
    def add_calendar_months(self, date: D, months: int) -> D:
        ...

    @abstractmethod
    def add_calendar_days(self, date: D, days: int) -> D:
        ...

    # =========================================================================
    # ВАЛИДНОСТЬ
    # =========================================================================

    @abstractmethod
    def is_date_instance(self, obj: Any) -> bool:
        ...

    @abstractmethod
    def is_valid(self, date: D) -> bool:
        ...

    @abstractmethod
    def invalid(self) -> D:
        ...

    # =========================================================================
    # СРАВНЕНИЕ (общая реализация поверх геттеров)
    # =========================================================================

    def get_valid_date_or_none(self, obj: Any) -> Optional[D]:
        return obj if self.is_date_instance(obj) and self.is_valid(obj) else None

    def compare_date(self, first: D, second: D) -> int:
        """
        Сравнение по компонентам Solar Hijri (время игнорируется).

        Returns:
            0 если даты равны, < 0 если first раньше, > 0 если позже
        """
        return (
            self.get_year(first) - self.get_year(second)
            or self.get_month(first) - self.get_month(second)
            or self.get_date(first) - self.get_date(second)
        )

    def same_date(self, first: Optional[D], second: Optional[D]) -> bool:
        """Обе даты валидны и совпадают, либо обе невалидны/отсутствуют и равны."""
        if first is not None and second is not None:
            first_valid = self.is_valid(first)
            second_valid = self.is_valid(second)
            if first_valid and second_valid:
                return self.compare_date(first, second) == 0
            return first_valid == second_valid
        return first == second

    def clamp_date(self, date: D, minimum: Optional[D] = None, maximum: Optional[D] = None) -> D:
        """Ограничение даты диапазоном [minimum, maximum]."""
        if minimum is not None and self.compare_date(date, minimum) < 0:
            return minimum
        if maximum is not None and self.compare_date(date, maximum) > 0:
            return maximum
        return date
