import math
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from ot_payroll.grouping import group_events, normalize_name, parse_timestamp
from ot_payroll.models import RawAttendanceEvent


def test_parse_timestamp_accepts_iso_strings_and_datetimes():
    stamp = datetime(2025, 11, 4, 8, 5)

    assert parse_timestamp(stamp) == stamp
    assert parse_timestamp("2025-11-04T08:05:00") == stamp
    assert parse_timestamp(" 2025-11-04 08:05 ") == stamp


def test_parse_timestamp_shifts_aware_values_into_zone():
    bangkok = ZoneInfo("Asia/Bangkok")

    assert parse_timestamp("2025-11-04T13:10:00Z", bangkok) == datetime(2025, 11, 4, 20, 10)
    assert parse_timestamp("2025-11-04T13:10:00.000Z", bangkok) == datetime(2025, 11, 4, 20, 10)
    assert parse_timestamp(datetime(2025, 11, 4, 1, 0, tzinfo=timezone.utc), bangkok) == datetime(2025, 11, 4, 8, 0)


def test_parse_timestamp_reads_numbers_as_epoch_milliseconds():
    assert parse_timestamp(0, timezone.utc) == datetime(1970, 1, 1)
    assert parse_timestamp(1_762_236_000_000, timezone.utc) == datetime(2025, 11, 4, 6, 0)


def test_parse_timestamp_rejects_garbage():
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("not a date") is None
    assert parse_timestamp("2025-13-40T99:00") is None
    assert parse_timestamp(True) is None
    assert parse_timestamp(math.nan) is None
    assert parse_timestamp(math.inf) is None
    assert parse_timestamp(10**400) is None
    assert parse_timestamp(date(2025, 11, 4)) is None
    assert parse_timestamp(["2025-11-04"]) is None


def test_normalize_name_strips_and_rejects_blank():
    assert normalize_name("  Anan  ") == "Anan"
    assert normalize_name("   ") is None
    assert normalize_name("") is None
    assert normalize_name(42) is None


def test_group_events_filters_month_year_and_malformed():
    events = [
        RawAttendanceEvent("Anan", datetime(2025, 11, 4, 8, 0)),
        RawAttendanceEvent("Anan", "2025-11-04T19:00:00"),
        RawAttendanceEvent("Anan", datetime(2025, 10, 31, 8, 0)),
        RawAttendanceEvent("Anan", datetime(2024, 11, 4, 8, 0)),
        RawAttendanceEvent("", datetime(2025, 11, 4, 8, 0)),
        RawAttendanceEvent(None, datetime(2025, 11, 4, 8, 0)),
        RawAttendanceEvent("Anan", "garbage"),
        RawAttendanceEvent("Anan", None),
    ]

    grouped = group_events(events, 11, 2025)

    assert list(grouped) == ["Anan"]
    assert grouped["Anan"] == {
        date(2025, 11, 4): (datetime(2025, 11, 4, 8, 0), datetime(2025, 11, 4, 19, 0)),
    }


def test_group_events_accepts_mappings_and_odd_objects():
    events = [
        {"name": "Bee", "timestamp": "2025-11-05T08:00:00"},
        {"name": "Bee", "timestamp": "2025-11-05T20:00:00"},
        {"timestamp": "2025-11-05T20:00:00"},
        object(),
        None,
    ]

    grouped = group_events(events, 11, 2025)

    assert list(grouped) == ["Bee"]
    assert len(grouped["Bee"][date(2025, 11, 5)]) == 2


def test_group_events_keys_by_stripped_name():
    events = [
        RawAttendanceEvent("Anan ", datetime(2025, 11, 4, 8, 0)),
        RawAttendanceEvent(" Anan", datetime(2025, 11, 4, 19, 0)),
    ]

    grouped = group_events(events, 11, 2025)

    assert len(grouped["Anan"][date(2025, 11, 4)]) == 2


def test_group_events_of_nothing_is_empty():
    assert group_events([], 11, 2025) == {}
