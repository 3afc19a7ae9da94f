from datetime import datetime

from ot_payroll.calculator import OvertimeCalculator
from ot_payroll.models import RawAttendanceEvent, StaffTier
from ot_payroll.roster import StaffRoster
from ot_reports.sign_sheet import GENERAL_SUBTITLE, SPECIAL_SUBTITLE, build_sign_sheet, export_sign_sheet_pdf

ROSTER = StaffRoster(special_staff=frozenset({"Somchai"}))


def build_result(*sessions: tuple[str, str, str]):
    events = []
    for name, start, end in sessions:
        events.append(RawAttendanceEvent(name, datetime.fromisoformat(start)))
        events.append(RawAttendanceEvent(name, datetime.fromisoformat(end)))
    return OvertimeCalculator(roster=ROSTER).calculate(11, 2025, set(), events)


def test_pages_split_by_tier_and_sorted_by_ot_start():
    result = build_result(
        ("Bee", "2025-11-04T08:00", "2025-11-04T19:00"),
        ("Anan", "2025-11-04T08:00", "2025-11-04T20:00"),
        ("Anan", "2025-11-01T09:00", "2025-11-01T12:00"),
        ("Somchai", "2025-11-05T08:00", "2025-11-05T20:00"),
    )

    general, special = build_sign_sheet(result, 11, 2025, ROSTER)

    assert general.tier is StaffTier.STANDARD
    assert general.subtitle == GENERAL_SUBTITLE
    assert general.month_name == "พฤศจิกายน"
    assert general.buddhist_year == 2568
    assert [(row.staff_name, row.date_label) for row in general.rows] == [
        ("Anan", "1 พฤศจิกายน 2568"),
        ("Anan", "4 พฤศจิกายน 2568"),
        ("Bee", "4 พฤศจิกายน 2568"),
    ]
    assert general.rows[0].note == "วันหยุด"
    assert general.rows[0].start_label == "09:00"
    assert general.rows[1].note == ""
    assert general.rows[1].start_label == "16:30"
    assert general.rows[1].end_label == "20:00"

    assert special.subtitle == SPECIAL_SUBTITLE
    assert [row.start_label for row in special.rows] == ["17:00"]


def test_empty_groups_are_omitted():
    result = build_result(("Somchai", "2025-11-05T08:00", "2025-11-05T20:00"))

    pages = build_sign_sheet(result, 11, 2025, ROSTER)

    assert [page.tier for page in pages] == [StaffTier.SPECIAL]
    assert build_sign_sheet(build_result(), 11, 2025, ROSTER) == ()


def test_export_sign_sheet_pdf(tmp_path):
    result = build_result(
        ("Anan", "2025-11-04T08:00", "2025-11-04T20:00"),
        ("Somchai", "2025-11-05T08:00", "2025-11-05T20:00"),
    )
    output = tmp_path / "sheets" / "sign.pdf"

    path = export_sign_sheet_pdf(build_sign_sheet(result, 11, 2025, ROSTER), output, department="AV")

    assert path == output
    assert output.read_bytes().startswith(b"%PDF")
