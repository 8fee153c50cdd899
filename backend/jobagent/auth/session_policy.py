# jobagent/auth/session_policy.py
"""
Session lifetime and sliding renewal.

A session lives for ``expires_in`` after it is issued. When it is accessed
while its remaining lifetime is strictly below ``update_age`` (the renewal
window), its expiry moves to ``now + expires_in``. Access any earlier leaves
the expiry untouched, so a burst of activity cannot keep pushing it forward.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


def as_utc(value: datetime) -> datetime:
    # SQLite may round-trip tz-aware datetimes as naive. Treat those as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SessionPolicy:
    expires_in: timedelta
    update_age: timedelta

    @classmethod
    def from_seconds(cls, expires_in: int, update_age: int) -> SessionPolicy:
        return cls(expires_in=timedelta(seconds=expires_in), update_age=timedelta(seconds=update_age))

    def initial_expiry(self, now: datetime) -> datetime:
        return as_utc(now) + self.expires_in

    def is_expired(self, expires_at: datetime, now: datetime) -> bool:
        return as_utc(expires_at) <= as_utc(now)

    def should_renew(self, expires_at: datetime, now: datetime) -> bool:
        if self.is_expired(expires_at, now):
            return False
        remaining = as_utc(expires_at) - as_utc(now)
        return remaining < self.update_age

    def renewed_expiry(self, expires_at: datetime, now: datetime) -> datetime:
        """Expiry after an access at ``now``; unchanged outside the renewal window."""
        if self.should_renew(expires_at, now):
            return as_utc(now) + self.expires_in
        return as_utc(expires_at)
