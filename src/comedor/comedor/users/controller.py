from __future__ import annotations

from flask import Flask, jsonify, request, session
from loguru import logger

from ..common.web import SESSION_KEY, current_user, json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/session", methods=["POST"], endpoint="create_session")
    @json_errors
    def create_session():
        body = request.get_json(silent=True) or {}
        user = container.auth_service.authenticate(body.get("token"))

        session.clear()
        session[SESSION_KEY] = user.to_session()
        logger.info("User {} signed in as {}", user.uid, user.role.value)
        return jsonify(user.to_session()), 201

    @app.route("/api/session", methods=["GET"], endpoint="get_session")
    @login_required
    def get_session():
        return jsonify(current_user().to_session())

    @app.route("/api/session", methods=["DELETE"], endpoint="delete_session")
    def delete_session():
        session.clear()
        return "", 204
