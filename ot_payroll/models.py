from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple


class StaffTier(str, Enum):
    SPECIAL = "special"
    STANDARD = "standard"


class DayType(str, Enum):
    HOLIDAY = "holiday"
    REGULAR = "regular"

    @property
    def label(self) -> str:
        return _DAY_TYPE_LABELS[self]


_DAY_TYPE_LABELS = {
    DayType.HOLIDAY: "วันหยุด",
    DayType.REGULAR: "วันปกติ",
}


@dataclass(frozen=True)
class RawAttendanceEvent:
    """A clock event as delivered by the attendance source.

    Both fields are untrusted: the name may be blank and the timestamp may be
    a string, a number or garbage. Validation happens during grouping.
    """

    name: Any
    timestamp: Any


@dataclass(frozen=True)
class WorkSession:
    staff_name: str
    work_date: date
    start: datetime
    end: datetime


@dataclass(frozen=True)
class OvertimeRecord:
    work_date: date
    day_type: DayType
    ot_period: str
    ot_start: datetime
    ot_end: datetime
    hours: int
    rate: int
    pay: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.work_date.isoformat(),
            "day_type": self.day_type.value,
            "day_type_label": self.day_type.label,
            "ot_period": self.ot_period,
            "ot_start": self.ot_start.isoformat(),
            "ot_end": self.ot_end.isoformat(),
            "hours": self.hours,
            "rate": self.rate,
            "pay": self.pay,
        }


@dataclass(frozen=True)
class StaffSummary:
    name: str
    total_pay: int


@dataclass(frozen=True)
class CalculationResult:
    summary: Tuple[StaffSummary, ...] = ()
    details: Mapping[str, Tuple[OvertimeRecord, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def total_pay(self) -> int:
        return sum(item.total_pay for item in self.summary)

    def records_for(self, name: str) -> Tuple[OvertimeRecord, ...]:
        return self.details.get(name, ())

    def to_dict(self) -> Dict[str, Any]:
        summary: List[Dict[str, Any]] = [{"name": item.name, "total_pay": item.total_pay} for item in self.summary]
        details = {name: [record.to_dict() for record in records] for name, records in self.details.items()}
        return {"summary": summary, "details": details}
