from __future__ import annotations

from calendar import monthrange
from datetime import date

BUDDHIST_ERA_OFFSET = 543

MONTH_NAMES = [
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
]


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return MONTH_NAMES[month - 1]


def buddhist_year(year: int) -> int:
    return year + BUDDHIST_ERA_OFFSET


def format_thai_date(value: date) -> str:
    return f"{value.day} {month_name(value.month)} {buddhist_year(value.year)}"


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]
