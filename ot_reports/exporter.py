from __future__ import annotations

import csv
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ot_payroll.models import CalculationResult

ReportRow = Dict[str, Any]


def _stringify(value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def result_rows(result: CalculationResult) -> List[ReportRow]:
    """One row per OT record, staff in summary order."""

    rows: List[ReportRow] = []
    for item in result.summary:
        for record in result.records_for(item.name):
            rows.append(
                {
                    "name": item.name,
                    "date": record.work_date,
                    "day_type": record.day_type.label,
                    "ot_period": record.ot_period,
                    "ot_start": record.ot_start,
                    "ot_end": record.ot_end,
                    "hours": record.hours,
                    "rate": record.rate,
                    "pay": record.pay,
                }
            )
    return rows


def export_csv(rows: Iterable[ReportRow], output_path: Path) -> Path:
    if output_path.suffix.lower() != ".csv":
        raise ValueError("Unsupported export format. Use .csv")
    rows = list(rows)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8-sig") as handle:
        if not rows:
            return output_path
        writer = csv.DictWriter(handle, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _stringify(value) for key, value in row.items()})
    return output_path
