from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Confirmation:
    """Asistencia confirmada por un coordinador para un día y departamento."""

    confirmation_id: Optional[str]
    work_date: date
    department_id: str
    department_name: str
    coordinator_id: str
    coordinator_name: str
    employee_ids: tuple[str, ...] = ()
    comments: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def confirmed_count(self) -> int:
        return len(self.employee_ids)
