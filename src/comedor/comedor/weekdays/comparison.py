from __future__ import annotations

from .registry import WEEKDAYS, WeekdayRegistry


def are_equal(a: object, b: object, *, registry: WeekdayRegistry = WEEKDAYS) -> bool:
    """True iff both labels resolve to the same weekday.

    Labels are never compared as strings: two identical unresolvable labels
    ("Xyzzy", "Xyzzy") are not the same day.
    """
    day_a = registry.resolve(a)
    if day_a is None:
        return False
    return day_a == registry.resolve(b)
