from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from .collation import thai_sort_key
from .models import CalculationResult, OvertimeRecord, StaffSummary


def aggregate(records_by_staff: Mapping[str, Iterable[OvertimeRecord]]) -> CalculationResult:
    """Fold per-staff OT records into the month result.

    Staff whose pay sums to zero are left out of both the summary and the
    details. Details run in OT start order; the summary is in Thai name order.
    """

    details: Dict[str, Tuple[OvertimeRecord, ...]] = {}
    summary = []
    for name, records in records_by_staff.items():
        ordered = tuple(sorted(records, key=lambda record: record.ot_start))
        total_pay = sum(record.pay for record in ordered)
        if total_pay <= 0:
            continue
        summary.append(StaffSummary(name=name, total_pay=total_pay))
        details[name] = ordered

    summary.sort(key=lambda item: thai_sort_key(item.name))
    ordered_details = {item.name: details[item.name] for item in summary}
    return CalculationResult(summary=tuple(summary), details=MappingProxyType(ordered_details))
