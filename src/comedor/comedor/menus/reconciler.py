"""Collapse weekday-keyed menu data into the canonical seven-day mapping.

Persisted menus, spreadsheet imports and UI state spell day names in every
possible way ("Miércoles", "miercoles", "MIERCOLES"). Every load and save
goes through ``reconcile`` so the rest of the code only ever sees
``WeekdayId`` keys, exactly seven of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from loguru import logger

from ..core.enums import WeekdayId
from ..core.exceptions import MalformedMenuInput
from ..weekdays.registry import WEEKDAYS, WeekdayRegistry
from .model import DayMenu, MenuItem


@dataclass(frozen=True)
class KeyCollision:
    day: WeekdayId
    overwritten_key: Any
    kept_key: Any


@dataclass(frozen=True)
class Reconciliation:
    days: dict[WeekdayId, DayMenu]
    dropped_keys: tuple[Any, ...] = ()
    collisions: tuple[KeyCollision, ...] = field(default_factory=tuple)
    dropped_items: int = 0


def coerce_item(value: Any) -> Optional[MenuItem]:
    """Accept ``MenuItem``, ``{"name", "description"?}`` or a bare name string."""
    if isinstance(value, MenuItem):
        return value
    if isinstance(value, str):
        return MenuItem(name=value) if value.strip() else None
    if isinstance(value, Mapping):
        name = value.get("name")
        if not isinstance(name, str) or not name.strip():
            return None
        description = value.get("description")
        if not isinstance(description, str) or not description:
            description = None
        return MenuItem(name=name, description=description)
    return None


def _coerce_items(values: Any) -> tuple[tuple[MenuItem, ...], int]:
    items: list[MenuItem] = []
    dropped = 0
    for value in values:
        item = coerce_item(value)
        if item is None:
            dropped += 1
        else:
            items.append(item)
    return tuple(items), dropped


def _coerce_day(value: Any) -> tuple[DayMenu, int]:
    if isinstance(value, DayMenu):
        return DayMenu(items=tuple(value.items)), 0
    if isinstance(value, Mapping):
        items = value.get("items")
        if isinstance(items, (list, tuple)):
            coerced, dropped = _coerce_items(items)
            return DayMenu(items=coerced), dropped
        return DayMenu(), 0
    if isinstance(value, (list, tuple)):
        # legacy shape: the day is just a list of dish names
        coerced, dropped = _coerce_items(value)
        return DayMenu(items=coerced), dropped
    return DayMenu(), 0


def reconcile_with_report(raw: Any, *, registry: WeekdayRegistry = WEEKDAYS) -> Reconciliation:
    """Reconcile and return what was discarded along the way.

    - Unresolvable keys are dropped (never fatal).
    - Two keys naming the same day: the later one in iteration order wins.
    - Missing days get an empty ``DayMenu``.
    - ``raw`` is never mutated; a non-mapping raises ``MalformedMenuInput``.
    """
    if not isinstance(raw, Mapping):
        raise MalformedMenuInput(f"Menu day data must be a mapping, got {type(raw).__name__}")

    slots: dict[WeekdayId, DayMenu] = {}
    source_keys: dict[WeekdayId, Any] = {}
    dropped_keys: list[Any] = []
    collisions: list[KeyCollision] = []
    dropped_items = 0

    for raw_key, raw_value in raw.items():
        day = registry.resolve(raw_key)
        if day is None:
            dropped_keys.append(raw_key)
            continue

        if day in slots:
            # TODO: last-write-wins pending product decision; merging items is the alternative
            collisions.append(KeyCollision(day=day, overwritten_key=source_keys[day], kept_key=raw_key))

        menu, dropped = _coerce_day(raw_value)
        slots[day] = menu
        source_keys[day] = raw_key
        dropped_items += dropped

    days = {day: slots.get(day) or DayMenu() for day in registry.ordered_ids()}

    if dropped_keys:
        logger.warning("Dropped {} unresolvable day key(s): {!r}", len(dropped_keys), dropped_keys)
    for c in collisions:
        logger.warning("Day keys {!r} and {!r} both name {}; keeping {!r}", c.overwritten_key, c.kept_key, c.day.value, c.kept_key)
    if dropped_items:
        logger.warning("Dropped {} menu item(s) without a usable name", dropped_items)

    return Reconciliation(
        days=days,
        dropped_keys=tuple(dropped_keys),
        collisions=tuple(collisions),
        dropped_items=dropped_items,
    )


def reconcile(raw: Any, *, registry: WeekdayRegistry = WEEKDAYS) -> dict[WeekdayId, DayMenu]:
    return reconcile_with_report(raw, registry=registry).days


def to_document_days(days: Mapping[WeekdayId, DayMenu], *, registry: WeekdayRegistry = WEEKDAYS) -> dict[str, dict]:
    """Seven ASCII keys (``domingo`` ... ``sabado``), each ``{"items": [...]}``."""
    return {
        registry.normalized_key_of(day): (days.get(day) or DayMenu()).to_dict()
        for day in registry.ordered_ids()
    }
