from __future__ import annotations

from typing import List

from jobagent.core.config import settings

COMMON_WEAK_PASSWORDS = {
    "password",
    "password123",
    "123456",
    "123456789",
    "12345678",
    "qwerty",
    "abc123",
    "letmein",
    "111111",
    "iloveyou",
    "admin",
    "welcome",
    "monkey",
    "dragon",
    "football",
    "azerty",
    "motdepasse",
    "123123",
    "qwerty123",
    "trustno1",
    "passw0rd",
    "sunshine",
    "login",
    "whatever",
}


def _normalize(value: str | None) -> str:
    return (value or "").strip().lower()


def evaluate_password(password: str, *, email: str | None = None) -> List[str]:
    """
    Returns a list of violation codes if the password does not meet policy.
    """
    pw = password or ""
    violations: list[str] = []
    min_length = max(int(getattr(settings, "PASSWORD_MIN_LENGTH", 8) or 0), 1)
    max_length = max(int(getattr(settings, "PASSWORD_MAX_LENGTH", 128) or 0), min_length)

    if len(pw) < min_length:
        violations.append("min_length")
    if len(pw) > max_length:
        violations.append("max_length")

    normalized_pw = pw.lower()

    email_norm = _normalize(email)
    local_part = email_norm.split("@")[0] if email_norm else ""
    if email_norm and (email_norm in normalized_pw or (local_part and local_part == normalized_pw)):
        violations.append("contains_email")

    if normalized_pw in COMMON_WEAK_PASSWORDS:
        violations.append("denylist_common")

    return violations
