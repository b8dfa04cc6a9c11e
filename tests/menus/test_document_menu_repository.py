from __future__ import annotations

from datetime import date, datetime

from comedor.core.constants import MENUS_COLLECTION
from comedor.core.enums import MenuStatus, WeekdayId
from comedor.menus.document_menu_repository import menu_from_document
from comedor.menus.model import DayMenu, MenuItem, WeeklyMenu

MONDAY = date(2025, 1, 6)
FIXED_NOW = datetime(2025, 1, 3, 9, 30, 0)


def test_legacy_top_level_day_keys_are_loaded(store, menus_repo):
    store.set(
        MENUS_COLLECTION,
        MONDAY.isoformat(),
        {
            "status": "draft",
            "Lunes": {"items": [{"name": "Enchiladas"}]},
            "MIÉRCOLES": {"items": [{"name": "Pozole"}]},
            "Feriado": {"items": [{"name": "Nada"}]},
        },
    )

    menu = menus_repo.get(MONDAY)

    assert menu.week_start == MONDAY
    assert menu.status == MenuStatus.DRAFT
    assert set(menu.days) == set(WeekdayId)
    assert menu.day(WeekdayId.MONDAY).items == (MenuItem("Enchiladas"),)
    assert menu.day(WeekdayId.WEDNESDAY).items == (MenuItem("Pozole"),)


def test_nested_days_win_over_legacy_keys():
    menu = menu_from_document(
        "2025-01-06",
        {
            "miercoles": {"items": [{"name": "Viejo"}]},
            "days": {"Miércoles": {"items": [{"name": "Nuevo"}]}},
        },
    )

    assert menu.day(WeekdayId.WEDNESDAY).items == (MenuItem("Nuevo"),)


def test_unknown_status_falls_back_to_draft():
    menu = menu_from_document("2025-01-06", {"status": "archived", "days": {}})
    assert menu.status == MenuStatus.DRAFT


def test_save_rewrites_canonical_layout(store, menus_repo):
    store.set(MENUS_COLLECTION, MONDAY.isoformat(), {"Lunes": {"items": [{"name": "Sopa"}]}, "lunes ": []})

    menu = menus_repo.get(MONDAY)
    saved = menus_repo.save(menu)

    raw = store.get(MENUS_COLLECTION, MONDAY.isoformat())
    assert "Lunes" not in raw
    assert list(raw["days"]) == ["domingo", "lunes", "martes", "miercoles", "jueves", "viernes", "sabado"]
    assert raw["weekStart"] == "2025-01-06"
    assert raw["createdAt"] == FIXED_NOW
    assert raw["updatedAt"] == FIXED_NOW
    assert saved.created_at == FIXED_NOW


def test_mark_published_sets_metadata(menus_repo):
    menus_repo.save(
        WeeklyMenu(week_start=MONDAY, status=MenuStatus.DRAFT, days={WeekdayId.MONDAY: DayMenu((MenuItem("Sopa"),))})
    )

    published = menus_repo.mark_published(week_start=MONDAY, published_by="admin")

    assert published.is_published
    assert published.published_by == "admin"
    assert published.published_at == FIXED_NOW


def test_missing_week_is_none(menus_repo):
    assert menus_repo.get(date(2030, 1, 7)) is None
