from __future__ import annotations

from datetime import timedelta

import pytest

from jobagent.auth.config import build_auth_config
from jobagent.auth.database_provider import DatabaseAuthProvider
from jobagent.auth.errors import (
    DuplicateAccount,
    EmailPasswordDisabled,
    InvalidCredentials,
    SessionExpired,
    UserNotFound,
    WeakPassword,
)
from jobagent.auth.roles import Role
from jobagent.auth.session_policy import as_utc
from jobagent.core import config as app_config
from jobagent.models.user import User
from jobagent.models.user_session import UserSession

PASSWORD = "Sturdy-Password-9"


@pytest.fixture()
def provider(db_session):
    return DatabaseAuthProvider(db_session, build_auth_config(app_config.settings))


def test_sign_up_ignores_client_supplied_role(provider, db_session):
    user = provider.sign_up("Mallory@Example.com", PASSWORD, name="Mallory", role="admin")
    assert user.role == "candidate"

    stored = db_session.query(User).filter(User.email == "mallory@example.com").one()
    assert stored.role == "candidate"
    assert stored.password_hash != PASSWORD


def test_sign_up_duplicate_email(provider):
    provider.sign_up("dup@example.com", PASSWORD, name="First")
    with pytest.raises(DuplicateAccount) as exc:
        provider.sign_up(" DUP@example.com ", PASSWORD, name="Second")
    assert exc.value.code == "DUPLICATE_ACCOUNT"
    assert exc.value.status_code == 409


def test_sign_up_weak_password(provider):
    with pytest.raises(WeakPassword) as exc:
        provider.sign_up("weak@example.com", "short", name="Weak")
    assert "min_length" in exc.value.details["violations"]


def test_sign_up_blank_name_falls_back_to_local_part(provider):
    user = provider.sign_up("jeanne.doe@example.com", PASSWORD, name="   ")
    assert user.name == "jeanne.doe"


def test_email_and_password_can_be_disabled(db_session):
    app_config.settings.EMAIL_AND_PASSWORD_ENABLED = False
    provider = DatabaseAuthProvider(db_session, build_auth_config(app_config.settings))
    with pytest.raises(EmailPasswordDisabled):
        provider.sign_up("off@example.com", PASSWORD, name="Off")
    with pytest.raises(EmailPasswordDisabled):
        provider.sign_in("off@example.com", PASSWORD)


def test_sign_in_issues_opaque_session(provider, db_session):
    provider.sign_up("login@example.com", PASSWORD, name="Login")
    issued = provider.sign_in("login@example.com", PASSWORD, ip_address="10.0.0.1", user_agent="pytest")

    assert issued.token
    record = db_session.query(UserSession).one()
    # Only the hash is stored.
    assert record.token_hash != issued.token
    assert record.ip_address == "10.0.0.1"
    assert record.user_agent == "pytest"

    lifetime = issued.session.expires_at - as_utc(record.created_at)
    assert abs(lifetime - timedelta(days=7)) < timedelta(seconds=5)


@pytest.mark.parametrize(
    "email,password",
    [
        ("login@example.com", "Wrong-Password-1"),
        ("nobody@example.com", PASSWORD),
    ],
)
def test_sign_in_invalid_credentials(provider, email, password):
    provider.sign_up("login@example.com", PASSWORD, name="Login")
    with pytest.raises(InvalidCredentials) as exc:
        provider.sign_in(email, password)
    assert exc.value.code == "INVALID_CREDENTIALS"


def test_get_session_unknown_or_missing_token(provider):
    assert provider.get_session(None) is None
    assert provider.get_session("") is None
    assert provider.get_session("not-a-real-token") is None


def test_get_session_keeps_expiry_outside_renewal_window(provider):
    provider.sign_up("slide@example.com", PASSWORD, name="Slide")
    issued = provider.sign_in("slide@example.com", PASSWORD)
    original = issued.session.expires_at

    # Exactly one day left: boundary, no renewal.
    session = provider.get_session(issued.token, now=original - timedelta(days=1))
    assert session is not None
    assert session.renewed is False
    assert session.expires_at == original


def test_get_session_renews_inside_window(provider, db_session):
    provider.sign_up("slide@example.com", PASSWORD, name="Slide")
    issued = provider.sign_in("slide@example.com", PASSWORD)
    original = issued.session.expires_at

    now = original - timedelta(hours=23)
    session = provider.get_session(issued.token, now=now)
    assert session.renewed is True
    assert session.expires_at == now + timedelta(days=7)

    record = db_session.query(UserSession).one()
    assert as_utc(record.expires_at) == now + timedelta(days=7)


def test_get_session_expired_raises_and_deletes(provider, db_session):
    provider.sign_up("old@example.com", PASSWORD, name="Old")
    issued = provider.sign_in("old@example.com", PASSWORD)

    with pytest.raises(SessionExpired):
        provider.get_session(issued.token, now=issued.session.expires_at + timedelta(seconds=1))

    assert db_session.query(UserSession).count() == 0
    assert provider.get_session(issued.token) is None


def test_sign_out_is_idempotent(provider, db_session):
    provider.sign_up("bye@example.com", PASSWORD, name="Bye")
    issued = provider.sign_in("bye@example.com", PASSWORD)

    provider.sign_out(issued.token)
    provider.sign_out(issued.token)
    provider.sign_out(None)

    assert provider.get_session(issued.token) is None
    assert db_session.query(UserSession).count() == 0


def test_set_role_is_the_privileged_path(provider):
    user = provider.sign_up("promote@example.com", PASSWORD, name="Promote")
    updated = provider.set_role(user.id, Role.ADMIN)
    assert updated.role == "admin"

    with pytest.raises(UserNotFound):
        provider.set_role(999999, Role.ADMIN)
