from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Tuple

from .models import StaffTier

DEFAULT_POSITION = "พนักงาน"


@dataclass(frozen=True)
class StaffRoster:
    """Static staff configuration: tier membership, position titles and sheet ordering."""

    special_staff: FrozenSet[str] = frozenset()
    positions: Mapping[str, str] = field(default_factory=dict)
    default_position: str = DEFAULT_POSITION
    display_order: Tuple[str, ...] = ()

    def tier_for(self, name: str) -> StaffTier:
        return StaffTier.SPECIAL if name in self.special_staff else StaffTier.STANDARD

    def position_for(self, name: str) -> str:
        return self.positions.get(name, self.default_position)

    def display_rank(self, name: str) -> int | None:
        try:
            return self.display_order.index(name)
        except ValueError:
            return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StaffRoster":
        special = data.get("special_staff", [])
        positions = data.get("positions", {})
        order = data.get("display_order", [])
        if not isinstance(special, list) or not isinstance(order, list) or not isinstance(positions, dict):
            raise ValueError("Roster expects lists for special_staff/display_order and an object for positions")
        return cls(
            special_staff=frozenset(str(name) for name in special),
            positions={str(name): str(title) for name, title in positions.items()},
            default_position=str(data.get("default_position", DEFAULT_POSITION)),
            display_order=tuple(str(name) for name in order),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "special_staff": sorted(self.special_staff),
            "positions": dict(self.positions),
            "default_position": self.default_position,
            "display_order": list(self.display_order),
        }


DEFAULT_ROSTER = StaffRoster(
    special_staff=frozenset({"นายวิทวัส แปงใจ", "นายปรพัฒน์ ขัตวงษ์"}),
    positions={
        "นางสาวปพิชญา เอี้ยงหมี": "เจ้าพนักงานโสตทัศนศึกษา\nชำนาญงาน",
        "นางสาวกนกวรรณ วงษ์กล่ำ": "นักวิชาการโสตทัศนศึกษา",
        "นายศุภฤกษ์ เนตรแก้ว": "นักวิชาการโสตทัศนศึกษา",
        "นายกฤชณัท เทพมงคล": "นักวิชาการโสตทัศนศึกษา",
    },
    display_order=(
        "นางสาวปพิชญา เอี้ยงหมี",
        "นางสาวกนกวรรณ วงษ์กล่ำ",
        "นายศุภฤกษ์ เนตรแก้ว",
        "นายกฤชณัท เทพมงคล",
    ),
)


def load_roster(path: Path) -> StaffRoster:
    if not path.exists():
        raise FileNotFoundError(f"Roster file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Roster file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Roster file {path} must contain a JSON object")
    return StaffRoster.from_dict(data)
