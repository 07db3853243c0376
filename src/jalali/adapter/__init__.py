"""
Date Adapter Boundary — адаптеры Solar Hijri для компонентов выбора даты.

Два варианта хоста: datetime.datetime и строка "yyyy/MM/dd".
"""

from jalali.adapter.base import DateAdapter
from jalali.adapter.datetime_adapter import JalaliDateAdapter, timestamp_to_datetime
from jalali.adapter.string_adapter import INVALID_DATE_STRING, JalaliStringDateAdapter

__all__ = [
    "DateAdapter",
    # datetime host
    "JalaliDateAdapter",
    "timestamp_to_datetime",
    # string host
    "JalaliStringDateAdapter",
    "INVALID_DATE_STRING",
]
