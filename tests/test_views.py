from datetime import datetime

from ot_payroll.calculator import calculate_ot
from ot_payroll.models import RawAttendanceEvent
from ot_payroll.roster import StaffRoster
from ot_payroll.views import EMPTY_MESSAGE, format_summary

ROSTER = StaffRoster(special_staff=frozenset())


def sample_result():
    events = [
        RawAttendanceEvent("Anan", datetime(2025, 11, 4, 8, 0)),
        RawAttendanceEvent("Anan", datetime(2025, 11, 4, 20, 0)),
        RawAttendanceEvent("Bee", datetime(2025, 11, 1, 8, 0)),
        RawAttendanceEvent("Bee", datetime(2025, 11, 1, 11, 0)),
    ]
    return calculate_ot(11, 2025, [], events, roster=ROSTER)


def test_summary_lines_and_total():
    lines = format_summary(sample_result()).splitlines()

    assert lines == [
        "Anan  150.00 บาท",
        "Bee  180.00 บาท",
        "รวมทั้งสิ้น  330.00 บาท",
    ]


def test_summary_with_details():
    lines = format_summary(sample_result(), details=True).splitlines()

    assert lines[0] == "Anan  150.00 บาท"
    assert lines[1].strip().startswith("4/11/2025")
    assert "16:30 - 20:00" in lines[1]
    assert "3 ชม." in lines[1]
    assert "วันหยุด" in lines[3]


def test_empty_result_message():
    assert format_summary(calculate_ot(11, 2025, [], [])) == EMPTY_MESSAGE
