import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slowapi.errors import RateLimitExceeded

from jobagent.auth.config import build_auth_config
from jobagent.auth.errors import AuthError, SessionExpired
from jobagent.core.config import settings, require_auth_secret
from jobagent.core.rate_limit import limiter
from jobagent.dependencies.ui_state import get_ui_registry
from jobagent.middleware.origin import register_origin_check_middleware
from jobagent.routes.auth import router as auth_router
from jobagent.routes.pages import router as pages_router
from jobagent.routes.ui_state import router as ui_state_router
from jobagent.routes.users import router as users_router
from jobagent.services.session_cookies import clear_session_cookie
from jobagent.ui.state import UiStateRegistry

logger = logging.getLogger(__name__)

require_auth_secret()

auth_config = build_auth_config(settings)

app = FastAPI(title="JobAgent")
app.state.auth_config = auth_config
app.state.ui_registry = UiStateRegistry()
logger.info(
    "Startup config: ENV=%s trusted_origins=%s session_expires_in=%ss session_update_age=%ss email_and_password=%s",
    settings.ENV,
    ",".join(auth_config.trusted_origins),
    settings.SESSION_EXPIRES_IN_SECONDS,
    settings.SESSION_UPDATE_AGE_SECONDS,
    auth_config.email_and_password_enabled,
)

_ERROR_CODE_BY_STATUS: dict[int, str] = {
    400: "VALIDATION_ERROR",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
    429: "RATE_LIMITED",
    500: "INTERNAL_ERROR",
}


def _error_code(status_code: int) -> str:
    return _ERROR_CODE_BY_STATUS.get(int(status_code), "HTTP_ERROR")


@app.exception_handler(AuthError)
def auth_error_handler(request: Request, exc: AuthError):
    payload: dict = {"error": exc.code, "message": exc.message}
    if exc.details:
        payload["details"] = exc.details
    resp = JSONResponse(status_code=exc.status_code, content=payload)
    if isinstance(exc, SessionExpired):
        get_ui_registry(request).discard(exc.session_id)
        clear_session_cookie(resp)
    return resp


@app.exception_handler(HTTPException)
def http_exception_handler(request: Request, exc: HTTPException):  # noqa: ARG001
    detail = exc.detail
    message: str
    details: dict | None = None

    if isinstance(detail, str):
        message = detail
    elif isinstance(detail, dict):
        msg = detail.get("message")
        message = msg if isinstance(msg, str) and msg else "Request failed"
        det = detail.get("details")
        details = det if isinstance(det, dict) else None
    else:
        message = str(detail) if detail is not None else "Request failed"

    payload: dict = {"error": _error_code(exc.status_code), "message": message}
    if details:
        payload["details"] = details
    return JSONResponse(status_code=exc.status_code, content=payload, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):  # noqa: ARG001
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Invalid request payload",
            "details": {"errors": jsonable_errors(exc)},
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # Pydantic error contexts may hold exception instances; keep only the JSON-safe parts.
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


if settings.ENABLE_RATE_LIMITING:
    app.state.limiter = limiter
    # Provide our standard error shape for rate limits, instead of slowapi's default.
    app.add_exception_handler(
        RateLimitExceeded,
        lambda request, exc: JSONResponse(  # noqa: ARG005
            status_code=429,
            content={"error": "RATE_LIMITED", "message": "Too many requests"},
        ),
    )

register_origin_check_middleware(app, auth_config)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(auth_config.trusted_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(ui_state_router)
app.include_router(pages_router)

@app.get("/health")
def health_check():
    return {"status": "ok"}
