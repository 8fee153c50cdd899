from __future__ import annotations

from fastapi import Depends

from jobagent.auth.errors import Forbidden
from jobagent.auth.roles import Role, parse_role
from jobagent.dependencies.auth import get_current_user
from jobagent.models.user import User


def require_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """
    Ensure the authenticated user has the admin role.
    """
    if parse_role(current_user.role) is not Role.ADMIN:
        raise Forbidden("Admin access required")
    return current_user
