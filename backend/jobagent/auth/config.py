# jobagent/auth/config.py
"""
Declarative auth configuration.

Built once from settings and handed to the auth engine. Nothing here talks to
the database or the network.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from jobagent.auth.roles import DEFAULT_ROLE
from jobagent.auth.session_policy import SessionPolicy
from jobagent.core.config import Settings, normalize_origin, settings as default_settings


@dataclass(frozen=True)
class AdditionalField:
    type: str = "string"
    required: bool = False
    default_value: Any = None
    # False: the value can't be supplied by the caller at registration.
    input: bool = True


ROLE_FIELD = AdditionalField(
    type="string",
    required=False,
    default_value=DEFAULT_ROLE.value,
    input=False,
)


@dataclass(frozen=True)
class AuthConfig:
    trusted_origins: tuple[str, ...]
    session: SessionPolicy
    email_and_password_enabled: bool = True
    additional_fields: Mapping[str, AdditionalField] = field(
        default_factory=lambda: MappingProxyType({"role": ROLE_FIELD})
    )

    def __post_init__(self) -> None:
        if not self.trusted_origins:
            raise RuntimeError("Trusted origins must not be empty")
        if any(not o or o == "*" for o in self.trusted_origins):
            raise RuntimeError("Trusted origins must be explicit, non-empty origins")

    def is_trusted_origin(self, origin: str | None) -> bool:
        normalized = normalize_origin(origin)
        return bool(normalized) and normalized in self.trusted_origins

    def filter_signup_fields(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """
        Resolve additional identity fields for a registration request.

        Input-enabled fields take the caller's value when present. Fields with
        ``input=False`` always get their default, whatever the caller sent.
        """
        resolved: dict[str, Any] = {}
        for name, field_def in self.additional_fields.items():
            if field_def.input and payload.get(name) is not None:
                resolved[name] = payload[name]
            else:
                resolved[name] = field_def.default_value
        return resolved

    def rejected_signup_fields(self, payload: Mapping[str, Any]) -> list[str]:
        return sorted(
            name
            for name, field_def in self.additional_fields.items()
            if not field_def.input and payload.get(name) is not None
        )


def build_auth_config(source: Settings | None = None) -> AuthConfig:
    s = source or default_settings
    return AuthConfig(
        trusted_origins=tuple(s.TRUSTED_ORIGINS),
        session=SessionPolicy.from_seconds(s.SESSION_EXPIRES_IN_SECONDS, s.SESSION_UPDATE_AGE_SECONDS),
        email_and_password_enabled=s.EMAIL_AND_PASSWORD_ENABLED,
    )
