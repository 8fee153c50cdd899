# jobagent/core/config.py
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

DEFAULT_AUTH_BASE_URL = "http://localhost:3000"

SEVEN_DAYS_SECONDS = 60 * 60 * 24 * 7
ONE_DAY_SECONDS = 60 * 60 * 24


def str_to_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def merge_unique(items: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for v in items:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


def normalize_origin(value: str | None) -> str:
    return (value or "").strip().rstrip("/")


def build_trusted_origins(primary: str | None, supplementary: str | None, *extra: str | None) -> list[str]:
    """
    Primary origin first, then the comma-separated supplementary list.
    Entries are trimmed; empty entries and duplicates are dropped.
    """
    candidates = [normalize_origin(primary)]
    candidates.extend(normalize_origin(o) for o in parse_csv(supplementary))
    candidates.extend(normalize_origin(o) for o in extra)
    return merge_unique([o for o in candidates if o])


class Settings:
    def __init__(self) -> None:
        self.ENV = os.getenv("ENV", "dev").strip().lower()  # dev | prod
        if self.ENV != "prod":
            # Load .env only for non-prod so prod can't be accidentally influenced by local files.
            load_dotenv()

        # ----------------------------
        # Database
        # ----------------------------
        self.DATABASE_URL = os.getenv("DATABASE_URL", "").strip()
        self.DB_HOST = os.getenv("DB_HOST", "")
        self.DB_PORT = os.getenv("DB_PORT", "5432")
        self.DB_NAME = os.getenv("DB_NAME", "")
        self.DB_APP_USER = os.getenv("DB_APP_USER", "")
        self.DB_APP_PASSWORD = os.getenv("DB_APP_PASSWORD", "")
        self.DB_MIGRATOR_USER = os.getenv("DB_MIGRATOR_USER", "")
        self.DB_MIGRATOR_PASSWORD = os.getenv("DB_MIGRATOR_PASSWORD", "")
        self.DB_SSLMODE = os.getenv("DB_SSLMODE", "require").strip().lower()

        # ----------------------------
        # Auth engine
        # ----------------------------
        self.AUTH_SECRET = os.getenv("AUTH_SECRET", "")
        self.EMAIL_AND_PASSWORD_ENABLED = str_to_bool(os.getenv("EMAIL_AND_PASSWORD_ENABLED"), default=True)

        if self.ENV == "prod":
            self.AUTH_BASE_URL = normalize_origin(os.getenv("AUTH_BASE_URL"))
        else:
            self.AUTH_BASE_URL = normalize_origin(os.getenv("AUTH_BASE_URL")) or DEFAULT_AUTH_BASE_URL
        # Client-side variant; same origin unless explicitly split.
        self.PUBLIC_AUTH_BASE_URL = normalize_origin(os.getenv("PUBLIC_AUTH_BASE_URL")) or self.AUTH_BASE_URL
        self.APP_ORIGIN = normalize_origin(os.getenv("APP_ORIGIN"))
        self.AUTH_TRUSTED_ORIGINS_RAW = os.getenv("AUTH_TRUSTED_ORIGINS", "")

        self.TRUSTED_ORIGINS = build_trusted_origins(
            self.AUTH_BASE_URL,
            self.AUTH_TRUSTED_ORIGINS_RAW,
            self.APP_ORIGIN,
        )

        # ----------------------------
        # Sessions
        # ----------------------------
        self.SESSION_EXPIRES_IN_SECONDS = int(os.getenv("SESSION_EXPIRES_IN_SECONDS", str(SEVEN_DAYS_SECONDS)))
        self.SESSION_UPDATE_AGE_SECONDS = int(os.getenv("SESSION_UPDATE_AGE_SECONDS", str(ONE_DAY_SECONDS)))
        self.SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "jobagent.session_token")
        self.SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "lax")
        self.SESSION_COOKIE_PATH = os.getenv("SESSION_COOKIE_PATH", "/")

        # ----------------------------
        # Password policy
        # ----------------------------
        self.PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "8"))
        self.PASSWORD_MAX_LENGTH = int(os.getenv("PASSWORD_MAX_LENGTH", "128"))

        # ----------------------------
        # Rate limiting
        # ----------------------------
        self.ENABLE_RATE_LIMITING = str_to_bool(os.getenv("ENABLE_RATE_LIMITING", "false"))
        self.AUTH_RATE_LIMIT = os.getenv("AUTH_RATE_LIMIT", "10/minute")

        # Final: fail fast
        self._validate()

    def _validate(self) -> None:
        if not self.TRUSTED_ORIGINS:
            raise RuntimeError("AUTH_BASE_URL must be set (trusted origins would be empty)")
        if "*" in self.TRUSTED_ORIGINS:
            raise RuntimeError("AUTH_TRUSTED_ORIGINS must not contain '*'")
        if self.SESSION_EXPIRES_IN_SECONDS <= 0:
            raise RuntimeError("SESSION_EXPIRES_IN_SECONDS must be positive")
        if not 0 <= self.SESSION_UPDATE_AGE_SECONDS < self.SESSION_EXPIRES_IN_SECONDS:
            raise RuntimeError("SESSION_UPDATE_AGE_SECONDS must be between 0 and SESSION_EXPIRES_IN_SECONDS")
        self._validate_prod()

    def _validate_prod(self) -> None:
        if self.ENV != "prod":
            return

        missing: list[str] = []

        if not self.AUTH_SECRET:
            missing.append("AUTH_SECRET")
        if not self.AUTH_BASE_URL:
            missing.append("AUTH_BASE_URL")
        if not self.DATABASE_URL:
            if not self.DB_HOST:
                missing.append("DB_HOST")
            if not self.DB_NAME:
                missing.append("DB_NAME")
            if not self.DB_APP_USER:
                missing.append("DB_APP_USER")
            if not self.DB_APP_PASSWORD:
                missing.append("DB_APP_PASSWORD")
            if self.DB_SSLMODE != "require":
                raise RuntimeError("DB_SSLMODE must be 'require' in prod")

        if missing:
            raise RuntimeError(f"Missing required prod env vars: {', '.join(missing)}")

        origins_joined = ",".join(self.TRUSTED_ORIGINS)
        if "localhost" in origins_joined or "127.0.0.1" in origins_joined:
            raise RuntimeError("Trusted origins contain localhost/dev origins in prod")
        insecure = [o for o in self.TRUSTED_ORIGINS if not o.startswith("https://")]
        if insecure:
            raise RuntimeError(f"Trusted origins must be https://... in prod: {', '.join(insecure)}")

    @property
    def is_prod(self) -> bool:
        return self.ENV == "prod"

    def _build_database_url(self, user: str, password: str) -> str:
        encoded_password = quote_plus(password)
        return (
            f"postgresql+psycopg2://{user}:{encoded_password}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            f"?sslmode={self.DB_SSLMODE}"
        )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not self.DB_HOST:
            # Local dev without Postgres configured.
            return "sqlite+pysqlite:///./jobagent.db"
        return self._build_database_url(self.DB_APP_USER, self.DB_APP_PASSWORD)

    @property
    def migrations_database_url(self) -> str:
        if self.DB_MIGRATOR_USER and self.DB_MIGRATOR_PASSWORD and self.DB_HOST:
            return self._build_database_url(self.DB_MIGRATOR_USER, self.DB_MIGRATOR_PASSWORD)
        return self.database_url


settings = Settings()


def require_auth_secret() -> None:
    if not settings.AUTH_SECRET:
        raise RuntimeError("AUTH_SECRET must be set")
