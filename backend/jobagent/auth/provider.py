# jobagent/auth/provider.py
"""
Capability interface for the auth engine.

Routes, dependencies and the dashboard shell only ever talk to an
``AuthProvider``; the concrete engine behind it can be swapped without
touching them.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from jobagent.auth.roles import Role

if TYPE_CHECKING:
    from jobagent.models.user import User


@dataclass(frozen=True)
class AuthSession:
    session_id: int
    user: "User"
    expires_at: datetime
    renewed: bool = False

    @property
    def user_id(self) -> int:
        return self.user.id


@dataclass(frozen=True)
class IssuedSession:
    # Raw opaque token; only ever returned to the client.
    token: str
    session: AuthSession


class AuthProvider(Protocol):
    def sign_up(self, email: str, password: str, *, name: str, **fields: Any) -> "User":
        ...

    def sign_in(
        self,
        email: str,
        password: str,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> IssuedSession:
        ...

    def get_session(self, token: str | None, *, now: datetime | None = None) -> AuthSession | None:
        ...

    def sign_out(self, token: str | None) -> None:
        ...

    def set_role(self, user_id: int, role: Role) -> "User":
        ...
