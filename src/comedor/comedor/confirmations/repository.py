from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Confirmation


class ConfirmationRepository(Protocol):
    def get_for_department(self, work_date: date, department_id: str) -> Optional[Confirmation]:
        raise NotImplementedError

    def upsert(self, confirmation: Confirmation) -> Confirmation:
        """Create or replace the confirmation of (work_date, department_id)."""

        raise NotImplementedError

    def list_range(self, start: date, end: date) -> Sequence[Confirmation]:
        """Confirmations with ``start <= work_date <= end``, ordered by date."""

        raise NotImplementedError
