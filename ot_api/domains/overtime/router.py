from datetime import date, datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ot_payroll.calculator import OvertimeCalculator
from ot_payroll.config import Settings, get_settings, load_configured_roster
from ot_payroll.csv_io import import_attendance
from ot_payroll.logging import get_logger
from ot_payroll.models import CalculationResult, RawAttendanceEvent

router = APIRouter(prefix="/overtime", tags=["overtime"])
logger = get_logger(__name__)

HolidayDay = Annotated[int, Field(ge=1, le=31)]


class AttendanceEventIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    timestamp: Any = None


class CalculateRequest(BaseModel):
    month: Annotated[int, Field(ge=1, le=12)]
    year: Annotated[int, Field(ge=1, le=9999)]
    holidays: list[HolidayDay] = []
    events: list[AttendanceEventIn] = []

    @field_validator("holidays")
    @classmethod
    def unique_days(cls, value: list[int]) -> list[int]:
        return sorted(set(value))


class OvertimeRecordOut(BaseModel):
    work_date: date = Field(alias="date")
    day_type: str
    day_type_label: str
    ot_period: str
    ot_start: datetime
    ot_end: datetime
    hours: int
    rate: int
    pay: int


class StaffSummaryOut(BaseModel):
    name: str
    total_pay: int


class CalculationOut(BaseModel):
    month: int
    year: int
    holidays: list[int]
    total_pay: int
    summary: list[StaffSummaryOut]
    details: dict[str, list[OvertimeRecordOut]]


def get_calculator(settings: Settings = Depends(get_settings)) -> OvertimeCalculator:
    return OvertimeCalculator(roster=load_configured_roster(settings), tz=settings.tzinfo)


def _to_response(result: CalculationResult, month: int, year: int, holidays: list[int]) -> CalculationOut:
    return CalculationOut(month=month, year=year, holidays=holidays, total_pay=result.total_pay, **result.to_dict())


@router.post("/calculate", response_model=CalculationOut)
def calculate(payload: CalculateRequest, calculator: OvertimeCalculator = Depends(get_calculator)) -> CalculationOut:
    events = [RawAttendanceEvent(name=event.name, timestamp=event.timestamp) for event in payload.events]
    result = calculator.calculate(payload.month, payload.year, payload.holidays, events)
    return _to_response(result, payload.month, payload.year, payload.holidays)


@router.get("", response_model=CalculationOut)
def monthly_overtime(
    month: Annotated[int, Query(ge=1, le=12)],
    year: Annotated[int, Query(ge=1, le=9999)],
    holiday: Annotated[list[HolidayDay], Query()] = [],
    settings: Settings = Depends(get_settings),
    calculator: OvertimeCalculator = Depends(get_calculator),
) -> CalculationOut:
    if settings.attendance_path is None:
        raise HTTPException(status_code=503, detail="Attendance source unavailable")
    try:
        events = import_attendance(settings.attendance_path)
    except (FileNotFoundError, ValueError) as exc:
        logger.warning("attendance_source_failed", path=str(settings.attendance_path), error=str(exc))
        raise HTTPException(status_code=503, detail="Attendance source unavailable") from exc

    holidays = sorted(set(holiday))
    result = calculator.calculate(month, year, holidays, events)
    return _to_response(result, month, year, holidays)
