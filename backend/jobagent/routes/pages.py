# jobagent/routes/pages.py
"""
Server-rendered pages.

Dashboard pages require a session; without one (or with an expired one) the
client is sent to /login. Every dashboard render counts as a navigation for
the client's UI state, so a route change closes the mobile overlay.
"""
from __future__ import annotations

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from jobagent.auth.errors import AuthError, SessionExpired
from jobagent.auth.provider import AuthProvider, AuthSession
from jobagent.dependencies.auth import get_auth_provider
from jobagent.dependencies.ui_state import get_ui_registry
from jobagent.models.user import User
from jobagent.services.session_cookies import (
    clear_session_cookie,
    read_session_cookie,
    refresh_session_cookie,
    set_session_cookie,
)
from jobagent.ui import (
    ApplicationsPage,
    AuthLayout,
    DashboardPage,
    DashboardShell,
    LoginForm,
    PlaceholderPage,
    RegisterForm,
    UiStateRegistry,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"], include_in_schema=False)

LOGIN_PATH = "/login"
HOME_PATH = "/dashboard"


class PageSession:
    """Session lookup for HTML routes: expiry means "signed out", not an error."""

    def __init__(self, session: AuthSession | None, expired: bool = False):
        self.session = session
        self.expired = expired


def get_page_session(
    request: Request,
    provider: AuthProvider = Depends(get_auth_provider),
    registry: UiStateRegistry = Depends(get_ui_registry),
) -> PageSession:
    try:
        return PageSession(provider.get_session(read_session_cookie(request)))
    except SessionExpired as exc:
        registry.discard(exc.session_id)
        return PageSession(None, expired=True)


def _user_dict(user: User) -> dict:
    return {"name": user.name, "email": user.email, "image": user.image, "role": user.role}


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


def _with_session_cookie(request: Request, page: PageSession, resp: Response) -> Response:
    refresh_session_cookie(request, resp, page.session)
    return resp


def _redirect_to_login(page: PageSession) -> RedirectResponse:
    resp = _redirect(LOGIN_PATH)
    if page.expired:
        clear_session_cookie(resp)
    return resp


def _render_dashboard(
    request: Request,
    page: PageSession,
    registry: UiStateRegistry,
    content: Callable[[User], str],
) -> Response:
    if page.session is None:
        return _redirect_to_login(page)

    path = request.url.path
    state = registry.for_client(page.session.session_id)
    state.on_navigate(path)
    html = DashboardShell(
        content(page.session.user),
        state,
        user=_user_dict(page.session.user),
        current_path=path,
    ).render()
    return _with_session_cookie(request, page, HTMLResponse(html))


# -----------------------------
# Public pages
# -----------------------------
@router.get("/")
def index(request: Request, page: PageSession = Depends(get_page_session)):
    return _with_session_cookie(request, page, _redirect(HOME_PATH if page.session else LOGIN_PATH))


@router.get("/login")
def login_page(request: Request, page: PageSession = Depends(get_page_session)):
    if page.session:
        return _with_session_cookie(request, page, _redirect(HOME_PATH))
    return HTMLResponse(AuthLayout("Sign in", LoginForm().render()).render())


@router.post("/login")
def login_submit(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    provider: AuthProvider = Depends(get_auth_provider),
):
    try:
        issued = provider.sign_in(
            email,
            password,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
    except AuthError as exc:
        html = AuthLayout("Sign in", LoginForm(error=exc.message, email=email).render()).render()
        return HTMLResponse(html, status_code=exc.status_code)

    resp = _redirect(HOME_PATH)
    set_session_cookie(resp, issued.token, issued.session.expires_at)
    return resp


@router.get("/register")
def register_page(request: Request, page: PageSession = Depends(get_page_session)):
    if page.session:
        return _with_session_cookie(request, page, _redirect(HOME_PATH))
    return HTMLResponse(AuthLayout("Create account", RegisterForm().render()).render())


@router.post("/register")
def register_submit(
    request: Request,
    name: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
    provider: AuthProvider = Depends(get_auth_provider),
):
    try:
        provider.sign_up(email, password, name=name)
        issued = provider.sign_in(
            email,
            password,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
    except AuthError as exc:
        form = RegisterForm(error=exc.message, email=email, name=name)
        return HTMLResponse(AuthLayout("Create account", form.render()).render(), status_code=exc.status_code)

    resp = _redirect(HOME_PATH)
    set_session_cookie(resp, issued.token, issued.session.expires_at)
    return resp


@router.post("/logout")
def logout(
    request: Request,
    page: PageSession = Depends(get_page_session),
    provider: AuthProvider = Depends(get_auth_provider),
    registry: UiStateRegistry = Depends(get_ui_registry),
):
    if page.session is not None:
        registry.discard(page.session.session_id)
    provider.sign_out(read_session_cookie(request))
    resp = _redirect(LOGIN_PATH)
    clear_session_cookie(resp)
    return resp


# -----------------------------
# Dashboard pages
# -----------------------------
@router.get("/dashboard")
def dashboard(
    request: Request,
    page: PageSession = Depends(get_page_session),
    registry: UiStateRegistry = Depends(get_ui_registry),
):
    return _render_dashboard(request, page, registry, lambda user: DashboardPage(user.name).render())


@router.get("/applications")
def applications(
    request: Request,
    page: PageSession = Depends(get_page_session),
    registry: UiStateRegistry = Depends(get_ui_registry),
):
    return _render_dashboard(request, page, registry, lambda user: ApplicationsPage().render())


PLACEHOLDER_PAGES = {
    "/profile": ("My profile", "Your candidate profile and CV."),
    "/searches": ("Searches", "Saved job searches."),
    "/offers": ("Offers", "Job offers found for you."),
    "/settings": ("Settings", "Account and schedule settings."),
}


def _placeholder_route(title: str, description: str):
    def handler(
        request: Request,
        page: PageSession = Depends(get_page_session),
        registry: UiStateRegistry = Depends(get_ui_registry),
    ):
        return _render_dashboard(request, page, registry, lambda user: PlaceholderPage(title, description).render())

    return handler


for _path, (_title, _description) in PLACEHOLDER_PAGES.items():
    router.add_api_route(_path, _placeholder_route(_title, _description), methods=["GET"])
