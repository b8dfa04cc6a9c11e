from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, week_id
from ..core.constants import MENUS_COLLECTION
from ..core.enums import MenuStatus
from ..documents.store import SERVER_TIMESTAMP, DocumentStore
from ..weekdays.registry import WEEKDAYS, WeekdayRegistry
from .model import WeeklyMenu
from .reconciler import reconcile, to_document_days
from .repository import MenuRepository

METADATA_FIELDS = frozenset({"weekStart", "status", "createdAt", "updatedAt", "publishedAt", "publishedBy", "days"})


def menu_from_document(doc_id: str, data: Mapping[str, Any], *, registry: WeekdayRegistry = WEEKDAYS) -> WeeklyMenu:
    # Older documents keep day keys at the top level instead of under "days".
    raw_days: dict = {k: v for k, v in data.items() if k not in METADATA_FIELDS}
    if "days" in data:
        nested = data["days"]
        if not isinstance(nested, Mapping):
            raw_days = nested
        else:
            raw_days.update(nested)

    try:
        status = MenuStatus(data.get("status") or MenuStatus.DRAFT.value)
    except ValueError:
        status = MenuStatus.DRAFT

    return WeeklyMenu(
        week_start=parse_iso_date(str(data.get("weekStart") or doc_id)),
        status=status,
        days=reconcile(raw_days, registry=registry),
        created_at=data.get("createdAt"),
        updated_at=data.get("updatedAt"),
        published_at=data.get("publishedAt"),
        published_by=data.get("publishedBy"),
    )


def menu_to_document(menu: WeeklyMenu, *, registry: WeekdayRegistry = WEEKDAYS) -> dict:
    data = {
        "weekStart": menu.week_start.isoformat(),
        "status": menu.status.value,
        "days": to_document_days(reconcile(menu.days, registry=registry), registry=registry),
        "updatedAt": SERVER_TIMESTAMP,
    }
    data["createdAt"] = menu.created_at or SERVER_TIMESTAMP
    if menu.published_at:
        data["publishedAt"] = menu.published_at
    if menu.published_by:
        data["publishedBy"] = menu.published_by
    return data


class DocumentMenuRepository(MenuRepository):
    def __init__(self, store: DocumentStore, *, registry: WeekdayRegistry = WEEKDAYS):
        self._store = store
        self._registry = registry

    def get(self, week_start: date) -> Optional[WeeklyMenu]:
        doc_id = week_id(week_start)
        data = self._store.get(MENUS_COLLECTION, doc_id)
        if data is None:
            return None
        return menu_from_document(doc_id, data, registry=self._registry)

    def save(self, menu: WeeklyMenu) -> WeeklyMenu:
        doc_id = week_id(menu.week_start)
        # merge=False: stray legacy day keys must not survive a save
        self._store.set(MENUS_COLLECTION, doc_id, menu_to_document(menu, registry=self._registry))
        return self.get(menu.week_start)

    def mark_published(self, *, week_start: date, published_by: str) -> WeeklyMenu:
        self._store.update(
            MENUS_COLLECTION,
            week_id(week_start),
            {
                "status": MenuStatus.PUBLISHED.value,
                "publishedAt": SERVER_TIMESTAMP,
                "publishedBy": published_by,
                "updatedAt": SERVER_TIMESTAMP,
            },
        )
        return self.get(week_start)
