from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after sign-in.

    Built from the identity provider's user id and custom claims; never from
    form input.
    """

    uid: str
    display_name: str
    role: Role
    department_id: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_session(self) -> dict:
        return {
            "uid": self.uid,
            "name": self.display_name,
            "role": self.role.value,
            "department_id": self.department_id,
        }

    @classmethod
    def from_session(cls, data: dict) -> "SessionUser":
        return cls(
            uid=str(data["uid"]),
            display_name=str(data.get("name") or data["uid"]),
            role=Role(data["role"]),
            department_id=data.get("department_id"),
        )
