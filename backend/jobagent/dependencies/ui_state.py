from __future__ import annotations

from fastapi import Depends, Request

from jobagent.auth.provider import AuthSession
from jobagent.dependencies.auth import get_current_session
from jobagent.ui.state import UiState, UiStateRegistry


def get_ui_registry(request: Request) -> UiStateRegistry:
    registry = getattr(request.app.state, "ui_registry", None)
    if registry is None:
        registry = UiStateRegistry()
        request.app.state.ui_registry = registry
    return registry


def get_ui_state(
    session: AuthSession = Depends(get_current_session),
    registry: UiStateRegistry = Depends(get_ui_registry),
) -> UiState:
    return registry.for_client(session.session_id)
