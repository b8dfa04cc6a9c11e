from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department, Employee


class DepartmentRepository(Protocol):
    def get(self, department_id: str) -> Optional[Department]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError


class EmployeeRepository(Protocol):
    def get(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_by_department(self, department_id: str, *, active_only: bool = False) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, department_id: str, position: Optional[str] = None) -> str:
        raise NotImplementedError

    def set_active(self, employee_id: str, *, active: bool) -> bool:
        raise NotImplementedError
