from __future__ import annotations

from datetime import date

import pytest

from comedor.core.enums import MenuStatus, Role, WeekdayId
from comedor.core.exceptions import AuthorizationError, NotAWeekday, ValidationError
from comedor.menus.model import MenuItem
from comedor.menus.service import MenuService

MONDAY = date(2025, 1, 6)
WEDNESDAY = date(2025, 1, 8)


@pytest.fixture
def service(menus_repo):
    return MenuService(menus_repo)


def _fill_service_days(service: MenuService, any_date: date = MONDAY):
    for label in ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes"):
        service.add_item(current_role=Role.ADMIN, any_date=any_date, day_label=label, name=f"Plato {label}")


def test_get_week_returns_unsaved_empty_draft(service, menus_repo):
    menu = service.get_week(WEDNESDAY)

    assert menu.week_start == MONDAY
    assert menu.status == MenuStatus.DRAFT
    assert set(menu.days) == set(WeekdayId)
    assert menus_repo.get(MONDAY) is None


def test_initialize_week_persists_once(service):
    menu = service.initialize_week(current_role=Role.ADMIN, any_date=WEDNESDAY)
    assert menu.week_start == MONDAY

    with pytest.raises(ValidationError):
        service.initialize_week(current_role=Role.ADMIN, any_date=MONDAY)


def test_coordinator_cannot_modify_menu(service):
    with pytest.raises(AuthorizationError):
        service.add_item(current_role=Role.COORDINATOR, any_date=MONDAY, day_label="Lunes", name="Sopa")


def test_add_item_accepts_any_day_spelling(service):
    service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="MIÉRCOLES", name="  Pozole ", description=" Rojo ")
    menu = service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="miercoles", name="Tostadas")

    assert menu.day(WeekdayId.WEDNESDAY).items == (MenuItem("Pozole", "Rojo"), MenuItem("Tostadas"))


def test_add_item_rejects_unknown_day_and_blank_name(service):
    with pytest.raises(NotAWeekday):
        service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Feriado", name="Sopa")

    with pytest.raises(ValidationError):
        service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", name="   ")


def test_update_and_remove_item_by_position(service):
    service.set_day_items(
        current_role=Role.ADMIN,
        any_date=MONDAY,
        day_label="Lunes",
        items=[{"name": "Sopa"}, {"name": "Arroz"}, "Agua"],
    )

    menu = service.update_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="lunes", position=1, name="Arroz rojo")
    assert [i.name for i in menu.day(WeekdayId.MONDAY).items] == ["Sopa", "Arroz rojo", "Agua"]

    menu = service.remove_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="LUNES", position=0)
    assert [i.name for i in menu.day(WeekdayId.MONDAY).items] == ["Arroz rojo", "Agua"]

    with pytest.raises(ValidationError):
        service.remove_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", position=5)


def test_set_day_items_rejects_nameless_items(service):
    with pytest.raises(ValidationError):
        service.set_day_items(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", items=[{"description": "x"}])


def test_import_days_replaces_only_given_days(service):
    service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Martes", name="Mole")

    menu, dropped = service.import_days(
        current_role=Role.ADMIN,
        any_date=MONDAY,
        raw={"LUNES": ["Sopa"], "Feriado": ["Nada"]},
    )

    assert dropped == ("Feriado",)
    assert menu.day(WeekdayId.MONDAY).items == (MenuItem("Sopa"),)
    assert menu.day(WeekdayId.TUESDAY).items == (MenuItem("Mole"),)


def test_publish_requires_every_service_day(service):
    service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", name="Sopa")

    with pytest.raises(ValidationError) as exc:
        service.publish(current_role=Role.ADMIN, user_id="admin", any_date=MONDAY)

    assert "Miércoles" in str(exc.value)


def test_publish_and_read_published_week(service):
    assert service.get_published_week(MONDAY) is None
    _fill_service_days(service)

    menu = service.publish(current_role=Role.ADMIN, user_id="admin", any_date=WEDNESDAY)

    assert menu.is_published
    assert menu.published_by == "admin"
    assert service.get_published_week(MONDAY) is not None

    with pytest.raises(ValidationError):
        service.publish(current_role=Role.ADMIN, user_id="admin", any_date=MONDAY)


def test_publish_missing_week_fails(service):
    with pytest.raises(ValidationError):
        service.publish(current_role=Role.ADMIN, user_id="admin", any_date=MONDAY)


def test_custom_service_days(menus_repo):
    service = MenuService(menus_repo, service_days=("LUNES",))
    service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", name="Sopa")

    assert service.publish(current_role=Role.ADMIN, user_id="admin", any_date=MONDAY).is_published


def test_service_days_accept_spanish_labels_and_ids(menus_repo):
    service = MenuService(menus_repo, service_days=("miércoles", WeekdayId.FRIDAY))
    menu = service.get_week(MONDAY)

    assert service.missing_service_days(menu) == [WeekdayId.WEDNESDAY, WeekdayId.FRIDAY]


def test_unknown_service_day_is_rejected(menus_repo):
    with pytest.raises(NotAWeekday):
        MenuService(menus_repo, service_days=("lunes", "feriado"))


def test_positions_given_as_strings(service):
    service.set_day_items(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", items=["Sopa", "Arroz"])

    menu = service.update_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", position="1", name="Frijoles")
    assert [i.name for i in menu.day(WeekdayId.MONDAY).items] == ["Sopa", "Frijoles"]

    menu = service.remove_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", position="0")
    assert [i.name for i in menu.day(WeekdayId.MONDAY).items] == ["Frijoles"]

    with pytest.raises(ValidationError):
        service.remove_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", position="uno")


def test_non_string_item_fields_are_validation_errors(service):
    with pytest.raises(ValidationError):
        service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", name=5)

    with pytest.raises(ValidationError):
        service.add_item(current_role=Role.ADMIN, any_date=MONDAY, day_label="Lunes", name="Sopa", description=["x"])
