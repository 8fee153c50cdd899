# jobagent/auth/database_provider.py
"""
SQLAlchemy-backed AuthProvider.

Identities live in ``users``; sessions live in ``sessions`` keyed by an HMAC
of the opaque token the client holds in its session cookie.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobagent.auth.config import AuthConfig
from jobagent.auth.errors import (
    DuplicateAccount,
    EmailPasswordDisabled,
    InvalidCredentials,
    SessionExpired,
    UserNotFound,
    WeakPassword,
)
from jobagent.auth.provider import AuthSession, IssuedSession
from jobagent.auth.roles import Role, parse_role
from jobagent.auth.session_policy import as_utc, utc_now
from jobagent.core.password_policy import evaluate_password
from jobagent.core.security import (
    generate_session_token,
    hash_password,
    hash_session_token,
    verify_password,
)
from jobagent.models.user import User
from jobagent.models.user_session import UserSession
from jobagent.services.users import get_user_by_email, get_user_by_id, normalize_email, normalize_name

logger = logging.getLogger(__name__)


class DatabaseAuthProvider:
    def __init__(self, db: Session, config: AuthConfig) -> None:
        self.db = db
        self.config = config

    # -----------------------------
    # Identity
    # -----------------------------
    def sign_up(self, email: str, password: str, *, name: str, **fields: Any) -> User:
        self._require_email_and_password()

        normalized_email = normalize_email(email)
        violations = evaluate_password(password, email=normalized_email)
        if violations:
            raise WeakPassword(details={"code": WeakPassword.code, "violations": violations})

        if get_user_by_email(self.db, normalized_email):
            raise DuplicateAccount()

        rejected = self.config.rejected_signup_fields(fields)
        if rejected:
            # Protected attributes are set server-side only.
            logger.warning("Ignoring protected sign-up fields %s for email=%s", rejected, normalized_email)
        extra = self.config.filter_signup_fields(fields)

        user = User(
            email=normalized_email,
            name=normalize_name(name, fallback=normalized_email),
            password_hash=hash_password(password),
            email_verified=False,
            role=parse_role(extra.get("role")).value,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateAccount()
        self.db.refresh(user)

        logger.info("Registered user id=%s role=%s", user.id, user.role)
        return user

    def set_role(self, user_id: int, role: Role) -> User:
        user = get_user_by_id(self.db, user_id)
        if user is None:
            raise UserNotFound()
        previous = user.role
        user.role = Role(role).value
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info("Changed role for user id=%s from %s to %s", user.id, previous, user.role)
        return user

    # -----------------------------
    # Sessions
    # -----------------------------
    def sign_in(
        self,
        email: str,
        password: str,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> IssuedSession:
        self._require_email_and_password()

        user = get_user_by_email(self.db, email)
        if not user or not verify_password(password, user.password_hash):
            raise InvalidCredentials()

        now = utc_now()
        raw = generate_session_token()
        record = UserSession(
            user_id=user.id,
            token_hash=hash_session_token(raw),
            expires_at=self.config.session.initial_expiry(now),
            ip_address=(ip_address or None),
            user_agent=(user_agent or "")[:512] or None,
            created_at=now,
            updated_at=now,
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)

        return IssuedSession(
            token=raw,
            session=AuthSession(session_id=record.id, user=user, expires_at=as_utc(record.expires_at)),
        )

    def get_session(self, token: str | None, *, now: datetime | None = None) -> AuthSession | None:
        if not token:
            return None

        record = self._find_session(token)
        if record is None:
            return None

        now = as_utc(now or utc_now())
        policy = self.config.session

        if policy.is_expired(record.expires_at, now):
            session_id = record.id
            self.db.delete(record)
            self.db.commit()
            raise SessionExpired(session_id=session_id)

        renewed = policy.should_renew(record.expires_at, now)
        if renewed:
            record.expires_at = policy.renewed_expiry(record.expires_at, now)
            record.updated_at = now
            self.db.add(record)
            self.db.commit()
            logger.debug("Renewed session id=%s until %s", record.id, record.expires_at)

        return AuthSession(
            session_id=record.id,
            user=record.user,
            expires_at=as_utc(record.expires_at),
            renewed=renewed,
        )

    def sign_out(self, token: str | None) -> None:
        if not token:
            return
        record = self._find_session(token)
        if record is None:
            return
        self.db.delete(record)
        self.db.commit()

    # -----------------------------
    # Internals
    # -----------------------------
    def _require_email_and_password(self) -> None:
        if not self.config.email_and_password_enabled:
            raise EmailPasswordDisabled()

    def _find_session(self, token: str) -> UserSession | None:
        token_hash = hash_session_token(token.strip())
        return self.db.query(UserSession).filter(UserSession.token_hash == token_hash).first()
