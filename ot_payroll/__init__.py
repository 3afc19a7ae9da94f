from .calculator import OvertimeCalculator, calculate_ot
from .models import CalculationResult, DayType, OvertimeRecord, RawAttendanceEvent, StaffSummary, StaffTier, WorkSession

__all__ = [
    "CalculationResult",
    "DayType",
    "OvertimeCalculator",
    "OvertimeRecord",
    "RawAttendanceEvent",
    "StaffSummary",
    "StaffTier",
    "WorkSession",
    "calculate_ot",
]
