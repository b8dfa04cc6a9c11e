from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role taken from the identity provider's custom claims."""

    ADMIN = "admin"
    COORDINATOR = "coordinator"


class MenuStatus(str, Enum):
    """Publication status of a weekly menu."""

    DRAFT = "draft"
    PUBLISHED = "published"


class WeekdayId(str, Enum):
    """Closed set of weekday identifiers, Sunday first.

    Only ``WeekdayRegistry.resolve`` turns untrusted labels into these values.
    """

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @property
    def index(self) -> int:
        # Sunday=0 ... Saturday=6, same as Date.getDay()
        return _WEEKDAY_ORDER.index(self)


_WEEKDAY_ORDER = tuple(WeekdayId)
