from __future__ import annotations
import math
from collections import defaultdict
from datetime import date, datetime, tzinfo
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .logging import get_logger

logger = get_logger(__name__)

GroupedTimestamps = Dict[str, Dict[date, Tuple[datetime, ...]]]


def normalize_name(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    name = value.strip()
    return name or None


def parse_timestamp(value: Any, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Coerce a raw timestamp into a naive wall-clock datetime.

    Accepts datetimes, ISO-8601 strings and epoch milliseconds. Aware values
    are shifted into ``tz`` (system local time when ``tz`` is None) before the
    zone is dropped. Anything else yields None.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        try:
            if not math.isfinite(value):
                return None
            parsed = datetime.fromtimestamp(value / 1000, tz)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz).replace(tzinfo=None)
    return parsed


def _event_fields(event: Any) -> Tuple[Any, Any]:
    if isinstance(event, Mapping):
        return event.get("name"), event.get("timestamp")
    return getattr(event, "name", None), getattr(event, "timestamp", None)


def group_events(
    events: Iterable[Any],
    month: int,
    year: int,
    tz: Optional[tzinfo] = None,
) -> GroupedTimestamps:
    """Bucket clock events by staff name and calendar date for one month.

    Events without a usable name or timestamp, or outside ``month``/``year``,
    are skipped.
    """

    buckets: Dict[str, Dict[date, List[datetime]]] = defaultdict(lambda: defaultdict(list))
    dropped = 0
    for event in events:
        raw_name, raw_timestamp = _event_fields(event)
        name = normalize_name(raw_name)
        stamp = parse_timestamp(raw_timestamp, tz)
        if name is None or stamp is None or stamp.month != month or stamp.year != year:
            dropped += 1
            continue
        buckets[name][stamp.date()].append(stamp)

    logger.debug("events_grouped", month=month, year=year, staff=len(buckets), dropped=dropped)
    return {name: {day: tuple(stamps) for day, stamps in days.items()} for name, days in buckets.items()}
