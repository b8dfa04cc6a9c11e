from __future__ import annotations

from datetime import date
from functools import wraps

from flask import jsonify, session
from loguru import logger

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    MalformedMenuInput,
    ValidationError,
)
from ..users.model import SessionUser
from .datetime_utils import parse_iso_date

SESSION_KEY = "user"


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def current_user() -> SessionUser:
    return SessionUser.from_session(session[SESSION_KEY])


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if SESSION_KEY not in session:
            return error_response("Inicie sesión para continuar", 401)
        return view(*args, **kwargs)

    return wrapper


def json_errors(view):
    """Translate domain exceptions raised by services into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except AuthenticationError as e:
            return error_response(str(e), 401)
        except AuthorizationError as e:
            return error_response(str(e), 403)
        except (ValidationError, MalformedMenuInput) as e:
            return error_response(str(e), 400)
        except DomainError as e:
            logger.warning("Unhandled domain error in {}: {}", view.__name__, e)
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unexpected error in {}", view.__name__)
            return error_response("Error del sistema", 500)

    return wrapper


def parse_path_date(value: str) -> date:
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Fecha no válida (use AAAA-MM-DD)")
