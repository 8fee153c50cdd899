from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from jobagent.auth.config import AuthConfig
from jobagent.auth.errors import InvalidOrigin

logger = logging.getLogger(__name__)

SAFE_METHODS = frozenset(["GET", "HEAD", "OPTIONS"])

# Cookie-authenticated, state-changing endpoints that must only be called from a trusted origin.
ORIGIN_CHECKED_PREFIXES = (
    "/api/auth",
    "/login",
    "/register",
    "/logout",
    "/ui",
)


def _is_origin_checked_path(path: str) -> bool:
    path = path.rstrip("/") or "/"
    return any(path == prefix or path.startswith(prefix + "/") for prefix in ORIGIN_CHECKED_PREFIXES)


def register_origin_check_middleware(app: FastAPI, config: AuthConfig) -> None:
    @app.middleware("http")
    async def origin_check_middleware(request: Request, call_next):
        """
        Reject state-changing auth requests whose Origin header is not trusted.

        Requests without an Origin header (same-origin navigations from older
        browsers, server-to-server calls) pass through; cookies are SameSite.
        """
        if request.method.upper() in SAFE_METHODS or not _is_origin_checked_path(request.url.path):
            return await call_next(request)

        origin = request.headers.get("origin")
        if origin and not config.is_trusted_origin(origin):
            logger.warning("Rejected %s %s from untrusted origin %s", request.method, request.url.path, origin)
            exc = InvalidOrigin()
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": exc.code, "message": exc.message},
            )

        return await call_next(request)
