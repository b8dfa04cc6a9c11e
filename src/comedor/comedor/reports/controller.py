from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..common.web import current_user, error_response, json_errors, login_required, parse_path_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.route("/api/reports/<value>.csv", methods=["GET"], endpoint="export_report")
    @login_required
    @json_errors
    def export_report(value: str):
        if not current_user().is_admin:
            return error_response("Solo los administradores pueden ver reportes", 403)
        any_date = parse_path_date(value)
        body = service.export_csv(any_date, branch_id=request.args.get("branch") or None)
        return Response(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=reporte_{any_date.isoformat()}.csv"},
        )

    @app.route("/api/reports/<value>", methods=["GET"], endpoint="weekly_report")
    @login_required
    @json_errors
    def weekly_report(value: str):
        if not current_user().is_admin:
            return error_response("Solo los administradores pueden ver reportes", 403)
        summary = service.weekly_summary(parse_path_date(value), branch_id=request.args.get("branch") or None)
        return jsonify(
            {
                "weekStart": summary.week_start.isoformat(),
                "days": summary.days,
                "rows": summary.rows,
                "branches": summary.branches,
                "total": summary.total,
            }
        )
