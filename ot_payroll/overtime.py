from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from typing import Mapping, Optional, Tuple

from .models import DayType, OvertimeRecord, StaffTier, WorkSession

MINUTES_PER_HOUR = 60


def format_clock(value: datetime) -> str:
    return value.strftime("%H:%M")


def minute_of_day(value: datetime | time) -> int:
    return value.hour * MINUTES_PER_HOUR + value.minute


def _build_record(session: WorkSession, day_type: DayType, start: datetime, end: datetime, hours: int, rate: int, pay: int) -> OvertimeRecord:
    return OvertimeRecord(
        work_date=session.work_date,
        day_type=day_type,
        ot_period=f"{format_clock(start)} - {format_clock(end)}",
        ot_start=start,
        ot_end=end,
        hours=hours,
        rate=rate,
        pay=pay,
    )


@dataclass(frozen=True)
class OvertimeRule:
    """Base overtime rule interface."""

    rate: int = 50
    min_hours: int = 2

    def accrue(self, session: WorkSession) -> Optional[OvertimeRecord]:
        raise NotImplementedError


@dataclass(frozen=True)
class HolidayRule(OvertimeRule):
    """The whole session counts, paid per whole hour up to a flat ``cap``."""

    cap: int = 420

    def accrue(self, session: WorkSession) -> Optional[OvertimeRecord]:
        hours = (session.end - session.start) // timedelta(hours=1)
        if hours < self.min_hours:
            return None
        pay = min(hours * self.rate, self.cap)
        return _build_record(session, DayType.HOLIDAY, session.start, session.end, hours, self.rate, pay)


@dataclass(frozen=True)
class RegularDayRule(OvertimeRule):
    """Only time after ``window_start`` counts, clamped to ``max_hours`` before the minimum check."""

    window_start: time = time(16, 30)
    max_hours: int = 4

    def accrue(self, session: WorkSession) -> Optional[OvertimeRecord]:
        minutes = minute_of_day(session.end) - minute_of_day(self.window_start)
        hours = min(max(minutes // MINUTES_PER_HOUR, 0), self.max_hours)
        if hours < self.min_hours:
            return None
        ot_start = datetime.combine(session.end.date(), self.window_start)
        return _build_record(session, DayType.REGULAR, ot_start, session.end, hours, self.rate, hours * self.rate)


RuleKey = Tuple[StaffTier, DayType]


@dataclass(frozen=True)
class RuleTable:
    rules: Mapping[RuleKey, OvertimeRule] = field(default_factory=dict)

    def __post_init__(self) -> None:
        missing = [(tier.value, day_type.value) for tier in StaffTier for day_type in DayType if (tier, day_type) not in self.rules]
        if missing:
            raise ValueError(f"Rule table is missing rules for {missing}")

    def rule_for(self, tier: StaffTier, day_type: DayType) -> OvertimeRule:
        return self.rules[(tier, day_type)]

    def rate_for(self, tier: StaffTier, day_type: DayType) -> int:
        return self.rule_for(tier, day_type).rate


DEFAULT_RULES = RuleTable(
    rules={
        (StaffTier.SPECIAL, DayType.HOLIDAY): HolidayRule(rate=50, cap=400),
        (StaffTier.STANDARD, DayType.HOLIDAY): HolidayRule(rate=60, cap=420),
        (StaffTier.SPECIAL, DayType.REGULAR): RegularDayRule(window_start=time(17, 0)),
        (StaffTier.STANDARD, DayType.REGULAR): RegularDayRule(window_start=time(16, 30)),
    }
)


class OvertimeEngine:
    def __init__(self, rules: RuleTable = DEFAULT_RULES) -> None:
        self.rules = rules

    def accrue(self, session: WorkSession, day_type: DayType, tier: StaffTier) -> Optional[OvertimeRecord]:
        return self.rules.rule_for(tier, day_type).accrue(session)
