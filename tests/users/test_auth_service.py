from __future__ import annotations

import pytest

from comedor.core.enums import Role
from comedor.core.exceptions import AuthenticationError
from comedor.users.model import SessionUser
from comedor.users.service import AuthService, StaticIdentityProvider


@pytest.fixture
def auth():
    return AuthService(
        StaticIdentityProvider(
            {
                "a": {"uid": "u-admin", "role": "ADMIN", "name": "Admin"},
                "c": {"uid": "u-coord", "role": "coordinator", "departmentId": "ti", "email": "c@avika.mx"},
                "c-nodept": {"uid": "u2", "role": "coordinator"},
                "x": {"uid": "u3", "role": "chef"},
            }
        )
    )


def test_admin_claims(auth):
    user = auth.authenticate("a")
    assert user == SessionUser(uid="u-admin", display_name="Admin", role=Role.ADMIN)
    assert user.is_admin


def test_coordinator_claims_and_display_fallback(auth):
    user = auth.authenticate(" c ")
    assert user.role == Role.COORDINATOR
    assert user.department_id == "ti"
    assert user.display_name == "c@avika.mx"


@pytest.mark.parametrize("token", ["", None, "   ", "unknown", "x", "c-nodept"])
def test_rejected_tokens(auth, token):
    with pytest.raises(AuthenticationError):
        auth.authenticate(token)


def test_session_round_trip():
    user = SessionUser(uid="u", display_name="Ana", role=Role.COORDINATOR, department_id="rh")
    assert SessionUser.from_session(user.to_session()) == user
