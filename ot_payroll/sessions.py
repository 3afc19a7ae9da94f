from __future__ import annotations
from datetime import date, datetime
from typing import Iterable, Mapping, Optional, Tuple

from .models import WorkSession


def extract_session(staff_name: str, work_date: date, stamps: Iterable[datetime]) -> Optional[WorkSession]:
    # a repeated punch is still a single clock event
    stamps = set(stamps)
    if len(stamps) < 2:
        return None
    return WorkSession(staff_name=staff_name, work_date=work_date, start=min(stamps), end=max(stamps))


def extract_sessions(groups: Mapping[str, Mapping[date, Iterable[datetime]]]) -> Tuple[WorkSession, ...]:
    """One session per staff/date, spanning the earliest to latest clock event."""

    sessions = []
    for staff_name, days in groups.items():
        for work_date, stamps in sorted(days.items()):
            session = extract_session(staff_name, work_date, stamps)
            if session is not None:
                sessions.append(session)
    return tuple(sessions)
