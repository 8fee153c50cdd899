from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path

from jobagent.auth.provider import AuthProvider
from jobagent.dependencies.admin import require_admin_user
from jobagent.dependencies.auth import get_auth_provider, get_current_user
from jobagent.models.user import User
from jobagent.schemas.auth import UserOut
from jobagent.schemas.user import RoleUpdateIn

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/me", response_model=UserOut)
def get_me(user: User = Depends(get_current_user)) -> User:
    return user


@router.patch("/admin/users/{user_id}/role", response_model=UserOut)
def update_user_role(
    payload: RoleUpdateIn,
    user_id: int = Path(..., gt=0),
    admin_user: User = Depends(require_admin_user),
    provider: AuthProvider = Depends(get_auth_provider),
) -> User:
    logger.info("Admin %s setting role=%s on user %s", admin_user.id, payload.role.value, user_id)
    return provider.set_role(user_id, payload.role)
