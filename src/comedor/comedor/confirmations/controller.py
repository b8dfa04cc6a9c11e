from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_user, json_errors, login_required, parse_path_date
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Confirmation


def confirmation_to_json(c: Confirmation) -> dict:
    return {
        "id": c.confirmation_id,
        "date": c.work_date.isoformat(),
        "departmentId": c.department_id,
        "departmentName": c.department_name,
        "coordinatorId": c.coordinator_id,
        "coordinatorName": c.coordinator_name,
        "employees": list(c.employee_ids),
        "confirmedCount": c.confirmed_count,
        "comments": c.comments or "",
    }


def register(app: Flask, container: Container) -> None:
    service = container.confirmation_service

    @app.route("/api/confirmations/<value>", methods=["GET"], endpoint="get_confirmation")
    @login_required
    @json_errors
    def get_confirmation(value: str):
        confirmation = service.get_for_department(
            current_user=current_user(),
            work_date=parse_path_date(value),
            department_id=request.args.get("department") or None,
        )
        if confirmation is None:
            return jsonify({"error": "Sin confirmación para este día"}), 404
        return jsonify(confirmation_to_json(confirmation))

    @app.route("/api/confirmations/<value>", methods=["PUT"], endpoint="save_confirmation")
    @login_required
    @json_errors
    def save_confirmation(value: str):
        body = request.get_json(silent=True) or {}
        employees = body.get("employees")
        if not isinstance(employees, list):
            raise ValidationError("Se esperaba una lista de empleados")

        confirmation = service.confirm(
            current_user=current_user(),
            work_date=parse_path_date(value),
            employee_ids=employees,
            comments=body.get("comments"),
        )
        return jsonify(confirmation_to_json(confirmation))

    @app.route("/api/confirmations/week/<value>/<day>", methods=["GET"], endpoint="list_day_confirmations")
    @login_required
    @json_errors
    def list_day_confirmations(value: str, day: str):
        rows = service.confirmations_for_day(parse_path_date(value), day)
        user = current_user()
        if not user.is_admin:
            rows = [c for c in rows if c.department_id == user.department_id]
        return jsonify([confirmation_to_json(c) for c in rows])
