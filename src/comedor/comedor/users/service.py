from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from loguru import logger

from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import SessionUser


class IdentityProvider(Protocol):
    """Opaque session issuer (hosted authentication service boundary)."""

    def verify(self, token: str) -> tuple[str, Mapping[str, Any]]:
        """Return (uid, custom claims). Raises AuthenticationError for bad tokens."""

        raise NotImplementedError


class StaticIdentityProvider(IdentityProvider):
    """Development/testing provider: fixed tokens mapped to claims from settings."""

    def __init__(self, tokens: Mapping[str, Mapping[str, Any]]):
        self._tokens = {str(k): dict(v) for k, v in tokens.items()}

    def verify(self, token: str) -> tuple[str, Mapping[str, Any]]:
        claims = self._tokens.get(token or "")
        if claims is None:
            raise AuthenticationError("Sesión inválida")
        return str(claims.get("uid") or token), claims


class AuthService:
    """Use case: turn a provider token into a SessionUser."""

    def __init__(self, identity: IdentityProvider):
        self._identity = identity

    def authenticate(self, token: Optional[str]) -> SessionUser:
        if not token or not token.strip():
            raise AuthenticationError("Sesión inválida")

        uid, claims = self._identity.verify(token.strip())
        if not uid:
            raise AuthenticationError("Sesión inválida")

        try:
            role = Role(str(claims.get("role", "")).lower())
        except ValueError:
            logger.warning("Rejected sign-in for {}: unknown role claim {!r}", uid, claims.get("role"))
            raise AuthenticationError("El usuario no tiene un rol asignado")

        department_id = claims.get("departmentId")
        if role == Role.COORDINATOR and not department_id:
            raise AuthenticationError("El coordinador no tiene un departamento asignado")

        return SessionUser(
            uid=str(uid),
            display_name=str(claims.get("name") or claims.get("email") or uid),
            role=role,
            department_id=str(department_id) if department_id else None,
        )
