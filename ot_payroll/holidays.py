from __future__ import annotations
from datetime import date
from typing import AbstractSet

from .models import DayType

WEEKEND = (5, 6)  # Saturday, Sunday


def is_holiday(day: date, custom_days: AbstractSet[int]) -> bool:
    """Weekends and any day-of-month listed in ``custom_days``.

    Custom days carry no month or year, so day 13 is a holiday in every month.
    """

    return day.weekday() in WEEKEND or day.day in custom_days


def classify_day(day: date, custom_days: AbstractSet[int]) -> DayType:
    return DayType.HOLIDAY if is_holiday(day, custom_days) else DayType.REGULAR
