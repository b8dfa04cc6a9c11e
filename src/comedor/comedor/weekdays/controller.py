from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/weekdays", methods=["GET"], endpoint="list_weekdays")
    def list_weekdays():
        return jsonify(
            [
                {"id": e.id.value, "name": e.display_name, "key": e.normalized_key}
                for e in container.weekdays.entries
            ]
        )
