from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_user, json_errors, login_required
from ..container import Container
from .model import Employee


def employee_to_json(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "departmentId": e.department_id,
        "position": e.position,
        "active": e.active,
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    @json_errors
    def list_employees():
        rows = service.list_department(current_user=current_user(), department_id=request.args.get("department") or None)
        return jsonify([employee_to_json(e) for e in rows])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @login_required
    @json_errors
    def create_employee():
        body = request.get_json(silent=True) or {}
        employee_id = service.add_employee(
            current_user=current_user(),
            name=body.get("name"),
            position=body.get("position"),
            department_id=body.get("departmentId"),
        )
        return jsonify({"id": employee_id}), 201

    @app.route("/api/employees/<employee_id>/active", methods=["PUT"], endpoint="set_employee_active")
    @login_required
    @json_errors
    def set_employee_active(employee_id: str):
        body = request.get_json(silent=True) or {}
        service.set_active(current_user=current_user(), employee_id=employee_id, active=bool(body.get("active")))
        return "", 204
