from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEPARTMENTS_COLLECTION, EMPLOYEES_COLLECTION
from ..core.exceptions import DocumentNotFound
from ..documents.store import SERVER_TIMESTAMP, DocumentStore, Filter
from .model import Department, Employee
from .repository import DepartmentRepository, EmployeeRepository


def _department(doc_id: str, data: dict) -> Department:
    return Department(department_id=doc_id, name=str(data.get("name") or doc_id), branch_id=data.get("branchId"))


def _employee(doc_id: str, data: dict) -> Employee:
    return Employee(
        employee_id=doc_id,
        name=str(data.get("name") or ""),
        department_id=str(data.get("departmentId") or ""),
        position=data.get("position") or None,
        active=bool(data.get("active", True)),
    )


class DocumentDepartmentRepository(DepartmentRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def get(self, department_id: str) -> Optional[Department]:
        data = self._store.get(DEPARTMENTS_COLLECTION, department_id)
        return _department(department_id, data) if data is not None else None

    def list_all(self) -> Sequence[Department]:
        docs = self._store.where(DEPARTMENTS_COLLECTION)
        return sorted((_department(d.id, d.data) for d in docs), key=lambda dep: dep.name)

    def upsert(self, department: Department) -> None:
        self._store.set(
            DEPARTMENTS_COLLECTION,
            department.department_id,
            {"name": department.name, "branchId": department.branch_id},
            merge=True,
        )


class DocumentEmployeeRepository(EmployeeRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def get(self, employee_id: str) -> Optional[Employee]:
        data = self._store.get(EMPLOYEES_COLLECTION, employee_id)
        return _employee(employee_id, data) if data is not None else None

    def list_by_department(self, department_id: str, *, active_only: bool = False) -> Sequence[Employee]:
        filters = [Filter("departmentId", "==", department_id)]
        if active_only:
            filters.append(Filter("active", "==", True))
        docs = self._store.where(EMPLOYEES_COLLECTION, *filters)
        return sorted((_employee(d.id, d.data) for d in docs), key=lambda e: e.name)

    def create(self, *, name: str, department_id: str, position: Optional[str] = None) -> str:
        return self._store.add(
            EMPLOYEES_COLLECTION,
            {
                "name": name,
                "departmentId": department_id,
                "position": position,
                "active": True,
                "createdAt": SERVER_TIMESTAMP,
                "updatedAt": SERVER_TIMESTAMP,
            },
        )

    def set_active(self, employee_id: str, *, active: bool) -> bool:
        try:
            self._store.update(EMPLOYEES_COLLECTION, employee_id, {"active": bool(active), "updatedAt": SERVER_TIMESTAMP})
        except DocumentNotFound:
            return False
        return True
