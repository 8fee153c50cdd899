# jobagent/auth/errors.py
"""
Auth engine error kinds.

Each error carries a stable machine-readable ``code`` and the HTTP status the
API layer maps it to, so the presentation layer can render an actionable
message instead of a generic failure.
"""
from __future__ import annotations

from typing import Any


class AuthError(Exception):
    """Base exception for all auth engine failures."""

    code = "AUTH_ERROR"
    status_code = 400
    default_message = "Authentication failed"

    def __init__(self, message: str | None = None, *, details: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class InvalidCredentials(AuthError):
    """Raised when the email/password pair does not match an account."""

    code = "INVALID_CREDENTIALS"
    status_code = 401
    default_message = "Invalid email or password"


class SessionExpired(AuthError):
    """Raised when a known session token is past its expiry."""

    code = "SESSION_EXPIRED"
    status_code = 401
    default_message = "Session expired"

    def __init__(
        self,
        message: str | None = None,
        *,
        session_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        # Id of the session row that was dropped, so per-session state can go with it.
        self.session_id = session_id


class DuplicateAccount(AuthError):
    """Raised when signing up with an email that is already registered."""

    code = "DUPLICATE_ACCOUNT"
    status_code = 409
    default_message = "An account with this email already exists"


class WeakPassword(AuthError):
    """Raised when a sign-up password violates the password policy."""

    code = "WEAK_PASSWORD"
    status_code = 400
    default_message = "Password does not meet requirements."


class EmailPasswordDisabled(AuthError):
    """Raised when email+password credentials are turned off."""

    code = "EMAIL_PASSWORD_DISABLED"
    status_code = 400
    default_message = "Email and password sign-in is not enabled"


class Unauthenticated(AuthError):
    code = "UNAUTHORIZED"
    status_code = 401
    default_message = "Not authenticated"


class Forbidden(AuthError):
    code = "FORBIDDEN"
    status_code = 403
    default_message = "Forbidden"


class InvalidOrigin(Forbidden):
    code = "INVALID_ORIGIN"
    default_message = "Origin is not trusted"


class UserNotFound(AuthError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "User not found"
