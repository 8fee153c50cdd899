from __future__ import annotations

from pydantic import BaseModel

from jobagent.auth.roles import Role


class RoleUpdateIn(BaseModel):
    role: Role
