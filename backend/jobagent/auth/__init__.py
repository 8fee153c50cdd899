# jobagent/auth/__init__.py
"""
Authentication modules for JobAgent.

This package contains:
- config.py: declarative auth configuration (trusted origins, session policy, identity fields)
- provider.py: AuthProvider capability interface
- database_provider.py: SQLAlchemy-backed AuthProvider
- session_policy.py: session lifetime and sliding renewal
"""
from jobagent.auth.config import AuthConfig, build_auth_config
from jobagent.auth.errors import (
    AuthError,
    DuplicateAccount,
    InvalidCredentials,
    SessionExpired,
)
from jobagent.auth.provider import AuthProvider, AuthSession, IssuedSession
from jobagent.auth.roles import Role

__all__ = [
    "AuthConfig",
    "AuthError",
    "AuthProvider",
    "AuthSession",
    "DuplicateAccount",
    "InvalidCredentials",
    "IssuedSession",
    "Role",
    "SessionExpired",
    "build_auth_config",
]
