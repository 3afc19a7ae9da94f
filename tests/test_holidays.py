from datetime import date

from ot_payroll.holidays import classify_day, is_holiday
from ot_payroll.models import DayType


def test_weekends_are_holidays():
    assert is_holiday(date(2025, 11, 1), set())  # Saturday
    assert is_holiday(date(2025, 11, 2), set())  # Sunday


def test_weekday_is_regular_without_custom_days():
    assert not is_holiday(date(2025, 11, 4), set())
    assert classify_day(date(2025, 11, 4), set()) is DayType.REGULAR


def test_custom_day_applies_to_every_month():
    custom = {13}

    assert classify_day(date(2025, 11, 13), custom) is DayType.HOLIDAY
    assert classify_day(date(2026, 1, 13), custom) is DayType.HOLIDAY
    assert classify_day(date(2025, 11, 14), custom) is DayType.REGULAR


def test_day_type_labels_are_thai():
    assert DayType.HOLIDAY.label == "วันหยุด"
    assert DayType.REGULAR.label == "วันปกติ"
