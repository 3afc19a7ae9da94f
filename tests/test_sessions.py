from datetime import date, datetime

from ot_payroll.sessions import extract_session, extract_sessions

DAY = date(2025, 11, 4)


def test_single_clock_event_is_not_a_session():
    assert extract_session("Anan", DAY, [datetime(2025, 11, 4, 8, 0)]) is None


def test_repeated_identical_punch_is_not_a_session():
    stamp = datetime(2025, 11, 4, 19, 0)

    assert extract_session("Anan", DAY, [stamp, stamp]) is None


def test_session_spans_earliest_to_latest_event():
    stamps = [
        datetime(2025, 11, 4, 12, 0),
        datetime(2025, 11, 4, 19, 30),
        datetime(2025, 11, 4, 7, 55),
        datetime(2025, 11, 4, 13, 0),
    ]

    session = extract_session("Anan", DAY, stamps)

    assert session.staff_name == "Anan"
    assert session.work_date == DAY
    assert session.start == datetime(2025, 11, 4, 7, 55)
    assert session.end == datetime(2025, 11, 4, 19, 30)


def test_extract_sessions_yields_one_per_staff_and_date():
    groups = {
        "Anan": {
            date(2025, 11, 5): (datetime(2025, 11, 5, 8, 0), datetime(2025, 11, 5, 18, 0)),
            date(2025, 11, 4): (datetime(2025, 11, 4, 8, 0), datetime(2025, 11, 4, 18, 0)),
        },
        "Bee": {date(2025, 11, 4): (datetime(2025, 11, 4, 8, 0),)},
    }

    sessions = extract_sessions(groups)

    assert [(s.staff_name, s.work_date) for s in sessions] == [
        ("Anan", date(2025, 11, 4)),
        ("Anan", date(2025, 11, 5)),
    ]
