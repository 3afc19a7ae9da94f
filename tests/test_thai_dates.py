from datetime import date

import pytest

from ot_reports.thai_dates import buddhist_year, days_in_month, format_thai_date, month_name


def test_format_thai_date_uses_buddhist_era():
    assert format_thai_date(date(2025, 11, 13)) == "13 พฤศจิกายน 2568"
    assert buddhist_year(2024) == 2567


def test_month_name_bounds():
    assert month_name(1) == "มกราคม"
    with pytest.raises(ValueError):
        month_name(13)


def test_days_in_month_handles_leap_years():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
