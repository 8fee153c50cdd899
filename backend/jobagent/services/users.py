# jobagent/services/users.py
"""
User lookup helpers shared by the auth engine and admin routes.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from jobagent.models.user import User

DEFAULT_USER_NAME = "JobAgent User"


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Look up a user by email address."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def normalize_name(name: str | None, fallback: str) -> str:
    """Normalize name, falling back to email/localpart if needed."""
    if name:
        clean = name.strip()
        if clean:
            return clean[:100]

    if fallback and "@" in fallback:
        local = fallback.split("@", 1)[0]
        if local:
            return local[:100]
    return DEFAULT_USER_NAME


def initials(name: str | None) -> str:
    """Up to two upper-cased initials from the name words, '?' when there is no name."""
    parts = [p for p in (name or "").split() if p]
    if not parts:
        return "?"
    return "".join(p[0] for p in parts)[:2].upper()
