from __future__ import annotations
import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from .models import RawAttendanceEvent


CSV_HEADERS = ["name", "timestamp"]


def export_attendance(path: Path, events: Iterable[RawAttendanceEvent]) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_HEADERS)
        writer.writeheader()
        for event in events:
            timestamp = event.timestamp.isoformat() if isinstance(event.timestamp, datetime) else event.timestamp
            writer.writerow({"name": event.name, "timestamp": timestamp})


def _import_csv(path: Path) -> list[RawAttendanceEvent]:
    events: list[RawAttendanceEvent] = []
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            events.append(RawAttendanceEvent(name=row.get("name"), timestamp=row.get("timestamp")))
    return events


def _import_json(path: Path) -> list[RawAttendanceEvent]:
    with path.open(encoding="utf-8") as handle:
        try:
            rows = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Attendance file {path} is not valid JSON: {exc}") from exc
    if not isinstance(rows, list):
        raise ValueError(f"Attendance file {path} must contain a JSON list")
    return [
        RawAttendanceEvent(name=row.get("name"), timestamp=row.get("timestamp"))
        for row in rows
        if isinstance(row, dict)
    ]


def import_attendance(path: Path) -> list[RawAttendanceEvent]:
    """Read raw clock events; timestamps are left for the engine to validate."""

    if not path.exists():
        raise FileNotFoundError(f"Attendance data not found at {path}")
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return _import_csv(path)
    if suffix == ".json":
        return _import_json(path)
    raise ValueError("Unsupported attendance format. Use .csv or .json")
