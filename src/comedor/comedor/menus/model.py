from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Mapping, Optional

from ..core.enums import MenuStatus, WeekdayId


@dataclass(frozen=True)
class MenuItem:
    """Platillo del menú. Identity is positional within its day."""

    name: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"name": self.name}
        if self.description:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class DayMenu:
    items: tuple[MenuItem, ...] = ()

    def to_dict(self) -> dict:
        return {"items": [item.to_dict() for item in self.items]}

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class WeeklyMenu:
    """Domain entity: the menu of one week (Monday-identified).

    ``days`` always holds the seven weekdays once loaded through reconciliation.
    """

    week_start: date
    status: MenuStatus
    days: Mapping[WeekdayId, DayMenu] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    published_by: Optional[str] = None

    @property
    def is_published(self) -> bool:
        return self.status == MenuStatus.PUBLISHED

    def day(self, day: WeekdayId) -> DayMenu:
        return self.days.get(day) or DayMenu()

    def with_day(self, day: WeekdayId, menu: DayMenu) -> "WeeklyMenu":
        days = dict(self.days)
        days[day] = menu
        return replace(self, days=days)
