"""
Dates — Модели дат Solar Hijri и Gregorian

Immutable Pydantic модели (frozen=True). Операции календаря никогда
не изменяют экземпляр на месте, а возвращают новый.

Sentinel INVALID_DATE обозначает невалидную дату на всех публичных
границах (converter, formatter/parser, адаптеры): исключения через них
не проходят, невалидность проверяется предикатом is_valid().
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, model_validator

from jalali.core.math.julian_day import DateTriple
from jalali.core.math.leap_cycle import MAX_YEAR, MIN_YEAR
from jalali.core.math.month_lengths import (
    gregorian_days_in_month,
    jalali_days_in_month,
)


# =============================================================================
# SOLAR HIJRI
# =============================================================================


class CalendarDate(BaseModel):
    """
    Дата Solar Hijri.

    Инварианты:
    - year в диапазоне таблицы BREAKS [-61, 3177]
    - month в [1, 12]
    - day <= jalali_days_in_month(year, month)
    """

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, description="Год Solar Hijri")
    month: int = Field(..., ge=1, le=12, description="Месяц 1..12")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "CalendarDate":
        """Проверка дня против реальной длины месяца (Esfand 29/30)."""
        max_day = jalali_days_in_month(self.year, self.month)
        if self.day > max_day:
            raise ValueError(
                f"day {self.day} exceeds {max_day} days of {self.year}/{self.month:02d}"
            )
        return self

    def as_triple(self) -> DateTriple:
        return DateTriple(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


# =============================================================================
# GREGORIAN
# =============================================================================


class GregorianDate(BaseModel):
    """
    Дата пролептического григорианского календаря.

    Соответствует datetime.date один к одному; используется только как
    цель/источник конверсии.
    """

    year: int = Field(..., ge=1, le=9999, description="Григорианский год")
    month: int = Field(..., ge=1, le=12, description="Месяц 1..12")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "GregorianDate":
        max_day = gregorian_days_in_month(self.year, self.month)
        if self.day > max_day:
            raise ValueError(
                f"day {self.day} exceeds {max_day} days of {self.year}-{self.month:02d}"
            )
        return self

    @classmethod
    def from_date(cls, value: date) -> "GregorianDate":
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def from_triple(cls, triple: DateTriple) -> "GregorianDate":
        return cls(year=triple.year, month=triple.month, day=triple.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def as_triple(self) -> DateTriple:
        return DateTriple(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


# =============================================================================
# INVALID SENTINEL
# =============================================================================


class InvalidDate(BaseModel):
    """
    Sentinel невалидной даты.

    Возвращается вместо исключения при невалидном построении, невалидной
    арифметике или неразборчивой строке.
    """

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return "Invalid Date"


# Единственный экземпляр sentinel
INVALID_DATE = InvalidDate()


def is_valid(value: Any) -> bool:
    """
    Предикат валидности даты.

    True для CalendarDate, GregorianDate, datetime.date/datetime.datetime;
    False для None, INVALID_DATE и любых других объектов.
    """
    return isinstance(value, (CalendarDate, GregorianDate, date))
