from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse

from jobagent.auth.provider import AuthSession
from jobagent.dependencies.auth import get_current_session
from jobagent.dependencies.ui_state import get_ui_state
from jobagent.schemas.ui import UiStateOut
from jobagent.services.session_cookies import refresh_session_cookie
from jobagent.ui.state import UiState

router = APIRouter(prefix="/ui/mobile-nav", tags=["ui"])


def safe_next_path(value: str | None) -> str | None:
    # Local paths only; "//host" would be an open redirect.
    if not value or not value.startswith("/") or value.startswith("//"):
        return None
    return value


def _respond(request: Request, session: AuthSession, state: UiState, next_path: str | None):
    target = safe_next_path(next_path)
    if target:
        resp = RedirectResponse(url=target, status_code=303)
        refresh_session_cookie(request, resp, session)
        return resp
    return UiStateOut(**state.to_dict())


@router.get("", response_model=UiStateOut)
def read_mobile_nav(state: UiState = Depends(get_ui_state)):
    return UiStateOut(**state.to_dict())


@router.post("/toggle", response_model=None)
def toggle_mobile_nav(
    request: Request,
    next: str | None = Query(None),
    session: AuthSession = Depends(get_current_session),
    state: UiState = Depends(get_ui_state),
):
    state.toggle_mobile_nav()
    return _respond(request, session, state, next)


@router.post("/open", response_model=None)
def open_mobile_nav(
    request: Request,
    next: str | None = Query(None),
    session: AuthSession = Depends(get_current_session),
    state: UiState = Depends(get_ui_state),
):
    state.open_mobile_nav()
    return _respond(request, session, state, next)


@router.post("/close", response_model=None)
def close_mobile_nav(
    request: Request,
    next: str | None = Query(None),
    session: AuthSession = Depends(get_current_session),
    state: UiState = Depends(get_ui_state),
):
    state.close_mobile_nav()
    return _respond(request, session, state, next)
