from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    department_id: str
    name: str
    branch_id: Optional[str] = None


@dataclass(frozen=True)
class Employee:
    """Empleado that may eat at the cafeteria; confirmed by its coordinator."""

    employee_id: str
    name: str
    department_id: str
    position: Optional[str] = None
    active: bool = True
