# jobagent/routes/auth.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response

from jobagent.auth.errors import SessionExpired
from jobagent.auth.provider import AuthProvider, AuthSession
from jobagent.core.rate_limit import maybe_limit
from jobagent.dependencies.auth import get_auth_provider, get_optional_session
from jobagent.dependencies.ui_state import get_ui_registry
from jobagent.schemas.auth import SessionResponse, SignInIn, SignUpIn, SuccessOut
from jobagent.services.session_cookies import (
    clear_session_cookie,
    read_session_cookie,
    set_session_cookie,
)
from jobagent.ui.state import UiStateRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def session_payload(session: AuthSession) -> dict:
    return {
        "user": session.user,
        "session": {
            "id": session.session_id,
            "user_id": session.user_id,
            "expires_at": session.expires_at,
        },
    }


def client_meta(request: Request) -> dict:
    return {
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }


@router.post("/sign-up/email", response_model=SessionResponse)
@maybe_limit()
def sign_up_email(
    request: Request,
    payload: SignUpIn,
    response: Response,
    provider: AuthProvider = Depends(get_auth_provider),
):
    extra = dict(payload.model_extra or {})
    provider.sign_up(payload.email, payload.password, name=payload.name, **extra)

    # Registration signs the new account straight in.
    issued = provider.sign_in(payload.email, payload.password, **client_meta(request))
    set_session_cookie(response, issued.token, issued.session.expires_at)
    return session_payload(issued.session)


@router.post("/sign-in/email", response_model=SessionResponse)
@maybe_limit()
def sign_in_email(
    request: Request,
    payload: SignInIn,
    response: Response,
    provider: AuthProvider = Depends(get_auth_provider),
):
    issued = provider.sign_in(payload.email, payload.password, **client_meta(request))
    set_session_cookie(response, issued.token, issued.session.expires_at)
    return session_payload(issued.session)


@router.get("/get-session", response_model=SessionResponse | None)
def get_session(session: AuthSession | None = Depends(get_optional_session)):
    # A renewed session has its cookie re-issued by get_optional_session.
    if session is None:
        return None
    return session_payload(session)


@router.post("/sign-out", response_model=SuccessOut)
def sign_out(
    request: Request,
    response: Response,
    provider: AuthProvider = Depends(get_auth_provider),
    ui_registry: UiStateRegistry = Depends(get_ui_registry),
):
    raw = read_session_cookie(request)
    if raw:
        try:
            session = provider.get_session(raw)
        except SessionExpired as exc:
            ui_registry.discard(exc.session_id)
            session = None
        if session is not None:
            ui_registry.discard(session.session_id)
        provider.sign_out(raw)

    clear_session_cookie(response)
    return {"success": True}
