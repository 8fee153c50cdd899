import os

# Settings are read at import time; configure the environment before importing jobagent.main.
os.environ.setdefault("AUTH_SECRET", "test_auth_secret")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("AUTH_BASE_URL", "http://localhost:3000")
os.environ.setdefault("AUTH_TRUSTED_ORIGINS", "https://jobagent.example.com, ,https://preview.jobagent.example.com")

from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobagent.core.base import Base
from jobagent.core import config as app_config
from jobagent.core.security import hash_password

# Import models so they register with SQLAlchemy metadata.
from jobagent.models.user import User  # noqa: F401
from jobagent.models.user_session import UserSession  # noqa: F401

from jobagent.core.database import get_db
from jobagent.ui.state import UiStateRegistry

TEST_PASSWORD = "Correct-Horse-42"


@pytest.fixture(scope="session")
def db_engine():
    # In-memory SQLite for fast, isolated tests.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(db_engine):
    # The in-memory DB persists across tests with StaticPool; reset schema per test.
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def _reset_mutable_settings():
    """
    Tests sometimes tweak the process-global settings object; restore after each test.
    """
    keys = [
        "PASSWORD_MIN_LENGTH",
        "PASSWORD_MAX_LENGTH",
        "EMAIL_AND_PASSWORD_ENABLED",
    ]
    original = {k: getattr(app_config.settings, k) for k in keys}
    try:
        yield
    finally:
        for k, v in original.items():
            setattr(app_config.settings, k, v)


@pytest.fixture()
def app(db_session):
    import jobagent.main as main

    fastapi_app = main.app
    fastapi_app.state.ui_registry = UiStateRegistry()

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def users(db_session):
    """
    A candidate and an admin, both able to sign in with TEST_PASSWORD.
    """
    candidate = User(
        email="candidate@example.com",
        name="Camille Martin",
        password_hash=hash_password(TEST_PASSWORD),
        role="candidate",
    )
    admin = User(
        email="admin@example.com",
        name="Ada Admin",
        password_hash=hash_password(TEST_PASSWORD),
        role="admin",
    )
    db_session.add_all([candidate, admin])
    db_session.commit()
    db_session.refresh(candidate)
    db_session.refresh(admin)
    return candidate, admin


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


def sign_in(http: TestClient, email: str, password: str = TEST_PASSWORD):
    res = http.post("/api/auth/sign-in/email", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res


@pytest.fixture()
def client_for(app):
    """
    Context manager yielding a client signed in (via the real sign-in route) as a user.

    Usage:
        with client_for(user) as c:
            ...
    """

    @contextmanager
    def _client_for(user: User):
        with TestClient(app) as c:
            sign_in(c, user.email)
            yield c

    return _client_for


@pytest.fixture()
def candidate_client(client_for, users):
    candidate, _ = users
    with client_for(candidate) as c:
        yield c


@pytest.fixture()
def sign_in_as():
    """The sign-in helper, for tests that drive their own TestClient."""
    return sign_in
