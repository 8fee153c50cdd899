# jobagent/services/session_cookies.py
from __future__ import annotations

from datetime import datetime

from fastapi import Request, Response

from jobagent.auth.provider import AuthSession
from jobagent.auth.session_policy import as_utc, utc_now
from jobagent.core.config import settings


def cookie_name() -> str:
    return str(getattr(settings, "SESSION_COOKIE_NAME", "jobagent.session_token")).strip() or "jobagent.session_token"


def cookie_path() -> str:
    return str(getattr(settings, "SESSION_COOKIE_PATH", "/")).strip() or "/"


def cookie_secure() -> bool:
    # Prod => HTTPS => Secure cookies. Dev http://localhost => must be False.
    return settings.is_prod


def cookie_samesite() -> str:
    """
    "lax" for same-site dev
    "none" ONLY if you truly need cross-site cookies (requires HTTPS + Secure=True)
    """
    v = str(getattr(settings, "SESSION_COOKIE_SAMESITE", "lax")).lower().strip()
    if v not in {"lax", "strict", "none"}:
        return "lax"
    return v


def set_session_cookie(resp: Response, raw_token: str, expires_at: datetime) -> None:
    max_age = max(0, int((as_utc(expires_at) - utc_now()).total_seconds()))
    resp.set_cookie(
        key=cookie_name(),
        value=raw_token,
        httponly=True,
        secure=cookie_secure(),
        samesite=cookie_samesite(),
        max_age=max_age,
        path=cookie_path(),
    )


def refresh_session_cookie(req: Request, resp: Response, session: AuthSession | None) -> None:
    """
    Re-issue the cookie after a sliding renewal; otherwise the browser drops
    it at the original expiry even though the session row lives on.
    """
    if session is None or not session.renewed:
        return
    raw = read_session_cookie(req)
    if raw:
        set_session_cookie(resp, raw, session.expires_at)


def clear_session_cookie(resp: Response) -> None:
    resp.delete_cookie(
        key=cookie_name(),
        path=cookie_path(),
    )


def read_session_cookie(req: Request) -> str | None:
    val = req.cookies.get(cookie_name())
    if not val:
        return None
    val = val.strip()
    return val or None
