from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import WeeklyMenu


class MenuRepository(Protocol):
    """Repository interface for weekly menus.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get(self, week_start: date) -> Optional[WeeklyMenu]:
        raise NotImplementedError

    def save(self, menu: WeeklyMenu) -> WeeklyMenu:
        """Persist days and status. Returns the stored menu (with backend timestamps)."""

        raise NotImplementedError

    def mark_published(self, *, week_start: date, published_by: str) -> WeeklyMenu:
        raise NotImplementedError
