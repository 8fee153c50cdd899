# jobagent/core/security.py
from __future__ import annotations

import hashlib
import hmac
import secrets

from passlib.context import CryptContext

from jobagent.core.config import settings

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


# -------------------------
# Password hashing
# -------------------------
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)


# -------------------------
# Session token helpers
# -------------------------
def _require_auth_secret() -> bytes:
    secret = (settings.AUTH_SECRET or "").strip()
    if not secret:
        raise RuntimeError("AUTH_SECRET must be set to hash session tokens.")
    return secret.encode("utf-8")


def generate_session_token() -> str:
    """
    Opaque session token handed to the client exactly once.
    Backend stores ONLY a hash.
    """
    return secrets.token_urlsafe(32)


def hash_session_token(raw_token: str) -> str:
    """
    HMAC keyed by AUTH_SECRET so a leaked sessions table can't be replayed.
    """
    return hmac.new(_require_auth_secret(), raw_token.encode("utf-8"), hashlib.sha256).hexdigest()
