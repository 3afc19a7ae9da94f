from __future__ import annotations

from collections import defaultdict
from datetime import tzinfo
from typing import Any, Dict, Iterable, List, Optional

from .aggregator import aggregate
from .grouping import group_events
from .holidays import classify_day
from .logging import get_logger
from .models import CalculationResult, OvertimeRecord
from .overtime import DEFAULT_RULES, OvertimeEngine, RuleTable
from .roster import DEFAULT_ROSTER, StaffRoster
from .sessions import extract_sessions

logger = get_logger(__name__)


class OvertimeCalculator:
    """Runs the month pipeline: group, extract sessions, accrue OT, aggregate.

    Holds configuration only, so one instance can serve any number of
    concurrent calculations.
    """

    def __init__(
        self,
        roster: StaffRoster = DEFAULT_ROSTER,
        rules: RuleTable = DEFAULT_RULES,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self.roster = roster
        self.engine = OvertimeEngine(rules)
        self.tz = tz

    def calculate(
        self,
        month: int,
        year: int,
        custom_holidays: Iterable[int],
        events: Iterable[Any],
    ) -> CalculationResult:
        holidays = frozenset(custom_holidays)
        sessions = extract_sessions(group_events(events, month, year, self.tz))

        records: Dict[str, List[OvertimeRecord]] = defaultdict(list)
        for session in sessions:
            day_type = classify_day(session.work_date, holidays)
            tier = self.roster.tier_for(session.staff_name)
            record = self.engine.accrue(session, day_type, tier)
            if record is not None:
                records[session.staff_name].append(record)

        result = aggregate(records)
        logger.info(
            "ot_calculated",
            month=month,
            year=year,
            sessions=len(sessions),
            qualifying=sum(len(items) for items in records.values()),
            staff=len(result.summary),
            total_pay=result.total_pay,
        )
        return result


def calculate_ot(
    month: int,
    year: int,
    custom_holidays: Iterable[int],
    events: Iterable[Any],
    *,
    roster: StaffRoster = DEFAULT_ROSTER,
    rules: RuleTable = DEFAULT_RULES,
    tz: Optional[tzinfo] = None,
) -> CalculationResult:
    return OvertimeCalculator(roster=roster, rules=rules, tz=tz).calculate(month, year, custom_holidays, events)
