# jobagent/dependencies/auth.py
from __future__ import annotations

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from jobagent.auth.config import AuthConfig, build_auth_config
from jobagent.auth.database_provider import DatabaseAuthProvider
from jobagent.auth.errors import Unauthenticated
from jobagent.auth.provider import AuthProvider, AuthSession
from jobagent.core.database import get_db
from jobagent.models.user import User
from jobagent.services.session_cookies import read_session_cookie, refresh_session_cookie


def get_auth_config(request: Request) -> AuthConfig:
    config = getattr(request.app.state, "auth_config", None)
    if config is None:
        config = build_auth_config()
        request.app.state.auth_config = config
    return config


def get_auth_provider(
    db: Session = Depends(get_db),
    config: AuthConfig = Depends(get_auth_config),
) -> AuthProvider:
    return DatabaseAuthProvider(db, config)


def get_optional_session(
    request: Request,
    response: Response,
    provider: AuthProvider = Depends(get_auth_provider),
) -> AuthSession | None:
    """
    Resolves the session cookie. Missing/unknown token -> None.
    A known but expired token raises SessionExpired.

    A renewed session re-issues its cookie on ``response``; routes that return
    their own Response object must call ``refresh_session_cookie`` themselves.
    """
    session = provider.get_session(read_session_cookie(request))
    refresh_session_cookie(request, response, session)
    return session


def get_current_session(session: AuthSession | None = Depends(get_optional_session)) -> AuthSession:
    if session is None:
        raise Unauthenticated()
    return session


def get_current_user(session: AuthSession = Depends(get_current_session)) -> User:
    return session.user
