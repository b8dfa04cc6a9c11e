from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_user, json_errors, login_required, parse_path_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..weekdays.registry import WeekdayRegistry
from .model import WeeklyMenu


def menu_to_json(menu: WeeklyMenu, registry: WeekdayRegistry) -> dict:
    return {
        "weekStart": menu.week_start.isoformat(),
        "status": menu.status.value,
        "publishedAt": menu.published_at.isoformat() if menu.published_at else None,
        "days": [
            {
                "id": day.value,
                "name": registry.display_name_of(day),
                "items": [item.to_dict() for item in menu.day(day).items],
            }
            for day in registry.ordered_ids()
        ],
    }


def register(app: Flask, container: Container) -> None:
    registry = container.weekdays
    service = container.menu_service

    def _json_body() -> dict:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("Se esperaba un objeto JSON")
        return body

    @app.route("/api/menus/<value>", methods=["GET"], endpoint="get_menu")
    @login_required
    @json_errors
    def get_menu(value: str):
        user = current_user()
        any_date = parse_path_date(value)
        if user.is_admin:
            menu = service.get_week(any_date)
        else:
            menu = service.get_published_week(any_date)
            if menu is None:
                return jsonify({"error": "No hay un menú publicado para esta semana"}), 404
        return jsonify(menu_to_json(menu, registry))

    @app.route("/api/menus/<value>", methods=["POST"], endpoint="initialize_menu")
    @login_required
    @json_errors
    def initialize_menu(value: str):
        menu = service.initialize_week(current_role=current_user().role, any_date=parse_path_date(value))
        return jsonify(menu_to_json(menu, registry)), 201

    @app.route("/api/menus/<value>/days/<day>", methods=["PUT"], endpoint="set_menu_day")
    @login_required
    @json_errors
    def set_menu_day(value: str, day: str):
        items = _json_body().get("items")
        if not isinstance(items, list):
            raise ValidationError("Se esperaba una lista de platillos")
        menu = service.set_day_items(
            current_role=current_user().role,
            any_date=parse_path_date(value),
            day_label=day,
            items=items,
        )
        return jsonify(menu_to_json(menu, registry))

    @app.route("/api/menus/<value>/days/<day>/items", methods=["POST"], endpoint="add_menu_item")
    @login_required
    @json_errors
    def add_menu_item(value: str, day: str):
        body = _json_body()
        menu = service.add_item(
            current_role=current_user().role,
            any_date=parse_path_date(value),
            day_label=day,
            name=body.get("name"),
            description=body.get("description"),
        )
        return jsonify(menu_to_json(menu, registry)), 201

    @app.route("/api/menus/<value>/days/<day>/items/<int:position>", methods=["PUT"], endpoint="update_menu_item")
    @login_required
    @json_errors
    def update_menu_item(value: str, day: str, position: int):
        body = _json_body()
        menu = service.update_item(
            current_role=current_user().role,
            any_date=parse_path_date(value),
            day_label=day,
            position=position,
            name=body.get("name"),
            description=body.get("description"),
        )
        return jsonify(menu_to_json(menu, registry))

    @app.route("/api/menus/<value>/days/<day>/items/<int:position>", methods=["DELETE"], endpoint="remove_menu_item")
    @login_required
    @json_errors
    def remove_menu_item(value: str, day: str, position: int):
        menu = service.remove_item(
            current_role=current_user().role,
            any_date=parse_path_date(value),
            day_label=day,
            position=position,
        )
        return jsonify(menu_to_json(menu, registry))

    @app.route("/api/menus/<value>/publish", methods=["POST"], endpoint="publish_menu")
    @login_required
    @json_errors
    def publish_menu(value: str):
        user = current_user()
        menu = service.publish(current_role=user.role, user_id=user.uid, any_date=parse_path_date(value))
        return jsonify(menu_to_json(menu, registry))

    @app.route("/api/menus/<value>/import", methods=["POST"], endpoint="import_menu")
    @login_required
    @json_errors
    def import_menu(value: str):
        menu, dropped = service.import_days(
            current_role=current_user().role,
            any_date=parse_path_date(value),
            raw=_json_body(),
        )
        data = menu_to_json(menu, registry)
        data["droppedKeys"] = [str(k) for k in dropped]
        return jsonify(data)
