from __future__ import annotations

from .models import CalculationResult, OvertimeRecord

EMPTY_MESSAGE = "ไม่พบข้อมูลโอทีในเดือนที่เลือก"


def format_record_date(record: OvertimeRecord) -> str:
    day = record.work_date
    return f"{day.day}/{day.month}/{day.year}"


def format_summary(result: CalculationResult, details: bool = False) -> str:
    if not result.summary:
        return EMPTY_MESSAGE

    rows = []
    for item in result.summary:
        rows.append(f"{item.name}  {item.total_pay:.2f} บาท")
        if not details:
            continue
        for record in result.records_for(item.name):
            rows.append(
                f"    {format_record_date(record):<10}  {record.day_type.label:<7}  {record.ot_period}  {record.hours:>2} ชม.  {record.pay:>4} บาท"
            )
    rows.append(f"รวมทั้งสิ้น  {result.total_pay:.2f} บาท")
    return "\n".join(rows)
