# jobagent/auth/roles.py
from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    CANDIDATE = "candidate"
    ADMIN = "admin"


DEFAULT_ROLE = Role.CANDIDATE


def parse_role(value: str | None) -> Role:
    """Map a stored role string to a Role; unknown values fall back to the least privileged role."""
    try:
        return Role((value or "").strip().lower())
    except ValueError:
        return DEFAULT_ROLE
