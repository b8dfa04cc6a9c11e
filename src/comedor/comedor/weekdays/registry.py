"""Canonical weekday table.

One read-only table maps each ``WeekdayId`` to its accented Spanish display
name and its ASCII key. Built once at import time and shared everywhere, so
every call site resolves labels against the same data.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from ..common.text import normalize
from ..core.enums import WeekdayId
from ..core.exceptions import NotAWeekday


_DISPLAY_NAMES: Mapping[WeekdayId, str] = {
    WeekdayId.SUNDAY: "Domingo",
    WeekdayId.MONDAY: "Lunes",
    WeekdayId.TUESDAY: "Martes",
    WeekdayId.WEDNESDAY: "Miércoles",
    WeekdayId.THURSDAY: "Jueves",
    WeekdayId.FRIDAY: "Viernes",
    WeekdayId.SATURDAY: "Sábado",
}


@dataclass(frozen=True)
class WeekdayEntry:
    id: WeekdayId
    display_name: str
    normalized_key: str


def _compact(value: object) -> str:
    return "".join(normalize(value).split())


class WeekdayRegistry:
    """Bidirectional lookup between day labels and ``WeekdayId``."""

    def __init__(self, display_names: Mapping[WeekdayId, str] = _DISPLAY_NAMES):
        entries = tuple(
            WeekdayEntry(id=day, display_name=display_names[day], normalized_key=normalize(display_names[day]))
            for day in WeekdayId
        )
        self._entries: tuple[WeekdayEntry, ...] = entries
        self._by_id: Mapping[WeekdayId, WeekdayEntry] = MappingProxyType({e.id: e for e in entries})
        self._by_key: Mapping[str, WeekdayId] = MappingProxyType({e.normalized_key: e.id for e in entries})
        self._ordered: tuple[WeekdayId, ...] = tuple(e.id for e in entries)

    @property
    def entries(self) -> Sequence[WeekdayEntry]:
        return self._entries

    def resolve(self, raw: object) -> Optional[WeekdayId]:
        """Resolve any day label; ``None`` means "not a weekday".

        Tolerates case, accents, surrounding and internal whitespace
        ("MIÉRCOLES", " miercoles", "Mier coles"). Never guesses.
        """
        if isinstance(raw, WeekdayId):
            return raw
        if raw is None:
            return None
        return self._by_key.get(_compact(raw))

    def require(self, raw: object) -> WeekdayId:
        """Like ``resolve`` but raises ``NotAWeekday`` for direct user input."""
        day = self.resolve(raw)
        if day is None:
            raise NotAWeekday(raw)
        return day

    def display_name_of(self, day: WeekdayId) -> str:
        return self._by_id[day].display_name

    def normalized_key_of(self, day: WeekdayId) -> str:
        return self._by_id[day].normalized_key

    def ordered_ids(self) -> tuple[WeekdayId, ...]:
        return self._ordered

    def for_date(self, value: date) -> WeekdayId:
        # date.weekday() is Monday=0; the table is Sunday=0
        return self._ordered[(value.weekday() + 1) % 7]


WEEKDAYS = WeekdayRegistry()


def resolve(raw: object) -> Optional[WeekdayId]:
    return WEEKDAYS.resolve(raw)


def display_name_of(day: WeekdayId) -> str:
    return WEEKDAYS.display_name_of(day)


def ordered_ids() -> tuple[WeekdayId, ...]:
    return WEEKDAYS.ordered_ids()
