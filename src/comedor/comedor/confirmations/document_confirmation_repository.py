from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import CONFIRMATIONS_COLLECTION
from ..documents.store import SERVER_TIMESTAMP, DocumentStore, Filter
from .model import Confirmation
from .repository import ConfirmationRepository


def _doc_id(work_date: date, department_id: str) -> str:
    return f"{work_date.isoformat()}_{department_id}"


def _to_model(doc_id: str, data: dict) -> Confirmation:
    return Confirmation(
        confirmation_id=doc_id,
        work_date=parse_iso_date(data["date"]),
        department_id=str(data.get("departmentId") or ""),
        department_name=str(data.get("departmentName") or ""),
        coordinator_id=str(data.get("coordinatorId") or ""),
        coordinator_name=str(data.get("coordinatorName") or ""),
        employee_ids=tuple(str(e) for e in data.get("employees") or ()),
        comments=data.get("comments") or None,
        created_at=data.get("createdAt"),
        updated_at=data.get("updatedAt"),
    )


class DocumentConfirmationRepository(ConfirmationRepository):
    """Dates are stored as ISO strings so range filters compare lexically."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def get_for_department(self, work_date: date, department_id: str) -> Optional[Confirmation]:
        doc_id = _doc_id(work_date, department_id)
        data = self._store.get(CONFIRMATIONS_COLLECTION, doc_id)
        return _to_model(doc_id, data) if data is not None else None

    def upsert(self, confirmation: Confirmation) -> Confirmation:
        doc_id = _doc_id(confirmation.work_date, confirmation.department_id)
        existing = self._store.get(CONFIRMATIONS_COLLECTION, doc_id)

        data = {
            "date": confirmation.work_date.isoformat(),
            "departmentId": confirmation.department_id,
            "departmentName": confirmation.department_name,
            "coordinatorId": confirmation.coordinator_id,
            "coordinatorName": confirmation.coordinator_name,
            "employees": list(confirmation.employee_ids),
            "confirmedCount": confirmation.confirmed_count,
            "comments": confirmation.comments or "",
            "updatedAt": SERVER_TIMESTAMP,
        }
        if existing is None:
            data["createdAt"] = SERVER_TIMESTAMP

        self._store.set(CONFIRMATIONS_COLLECTION, doc_id, data, merge=True)
        return self.get_for_department(confirmation.work_date, confirmation.department_id) or confirmation

    def list_range(self, start: date, end: date) -> Sequence[Confirmation]:
        docs = self._store.where(
            CONFIRMATIONS_COLLECTION,
            Filter("date", ">=", start.isoformat()),
            Filter("date", "<=", end.isoformat()),
        )
        out = [_to_model(d.id, d.data) for d in docs]
        return sorted(out, key=lambda c: (c.work_date, c.department_name))
