from __future__ import annotations

import copy

import pytest

from comedor.core.enums import WeekdayId
from comedor.core.exceptions import MalformedMenuInput
from comedor.menus.model import DayMenu, MenuItem
from comedor.menus.reconciler import coerce_item, reconcile, reconcile_with_report, to_document_days


def test_empty_input_yields_seven_empty_days():
    days = reconcile({})

    assert list(days) == list(WeekdayId)
    assert all(d == DayMenu() for d in days.values())


def test_single_day_is_kept_and_others_are_filled():
    days = reconcile({"Viernes": {"items": [{"name": "Tacos"}]}})

    assert days[WeekdayId.FRIDAY].items == (MenuItem("Tacos"),)
    others = [d for day, d in days.items() if day != WeekdayId.FRIDAY]
    assert len(others) == 6
    assert all(d.is_empty for d in others)


def test_collision_last_write_wins():
    raw = {
        "Miércoles": {"items": [{"name": "A"}]},
        "miercoles": {"items": [{"name": "B"}]},
    }

    result = reconcile_with_report(raw)

    assert result.days[WeekdayId.WEDNESDAY].items == (MenuItem("B"),)
    assert len(result.collisions) == 1
    assert result.collisions[0].overwritten_key == "Miércoles"
    assert result.collisions[0].kept_key == "miercoles"


def test_unresolvable_keys_are_dropped_not_fatal():
    result = reconcile_with_report({"NotADay": {"items": [{"name": "A"}]}, "Lunes": {"items": [{"name": "B"}]}})

    assert set(result.days) == set(WeekdayId)
    assert result.days[WeekdayId.MONDAY].items == (MenuItem("B"),)
    assert result.dropped_keys == ("NotADay",)


def test_input_is_never_mutated():
    raw = {"lunes": {"items": [{"name": "Sopa", "description": "De fideo"}]}, "Xyzzy": []}
    before = copy.deepcopy(raw)

    reconcile(raw)

    assert raw == before


@pytest.mark.parametrize("raw", [None, [], "lunes", 42])
def test_non_mapping_input_raises(raw):
    with pytest.raises(MalformedMenuInput):
        reconcile(raw)


def test_legacy_shapes_are_coerced():
    days = reconcile(
        {
            "martes": ["Pozole", "Agua de jamaica"],
            "jueves": {"items": ["Mole"]},
            "sábado": "not a day menu",
            "domingo": {"no_items": True},
        }
    )

    assert days[WeekdayId.TUESDAY].items == (MenuItem("Pozole"), MenuItem("Agua de jamaica"))
    assert days[WeekdayId.THURSDAY].items == (MenuItem("Mole"),)
    assert days[WeekdayId.SATURDAY].is_empty
    assert days[WeekdayId.SUNDAY].is_empty


def test_items_without_a_name_are_dropped():
    result = reconcile_with_report({"lunes": {"items": [{"name": ""}, {"description": "x"}, 7, {"name": "Arroz"}]}})

    assert result.days[WeekdayId.MONDAY].items == (MenuItem("Arroz"),)
    assert result.dropped_items == 3


def test_coerce_item_keeps_only_string_descriptions():
    assert coerce_item({"name": "Sopa", "description": ""}) == MenuItem("Sopa")
    assert coerce_item({"name": "Sopa", "description": 5}) == MenuItem("Sopa")
    assert coerce_item({"name": "Sopa", "description": "Caliente"}) == MenuItem("Sopa", "Caliente")
    assert coerce_item("   ") is None


def test_day_menu_instances_and_weekday_ids_pass_through():
    menu = DayMenu(items=(MenuItem("Chilaquiles"),))

    days = reconcile({WeekdayId.SUNDAY: menu})

    assert days[WeekdayId.SUNDAY] == menu


def test_day_menu_items_are_copied_not_shared():
    items = [MenuItem("Chilaquiles")]
    menu = DayMenu(items=items)

    days = reconcile({"domingo": menu})
    items.append(MenuItem("Huevos"))

    assert days[WeekdayId.SUNDAY].items == (MenuItem("Chilaquiles"),)
    assert days[WeekdayId.SUNDAY].items is not items


def test_to_document_days_emits_seven_ascii_keys():
    days = reconcile({"Miércoles": {"items": [{"name": "Pozole", "description": "Rojo"}]}})

    doc = to_document_days(days)

    assert list(doc) == ["domingo", "lunes", "martes", "miercoles", "jueves", "viernes", "sabado"]
    assert doc["miercoles"] == {"items": [{"name": "Pozole", "description": "Rojo"}]}
    assert doc["lunes"] == {"items": []}
