"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)

DEFAULT_SESSION_SECRET = "default_secret"


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = ""
    PORT: int = 3000

    DATABASE_URL: str = "sqlite:///./ideas.db"
    # Create tables on startup (sqlite / dev). Use alembic for PostgreSQL deployments.
    DB_AUTO_CREATE: bool = True

    # Single browser client allowed to send credentialed cross-origin requests.
    CLIENT_ORIGIN: str = "http://localhost:3000"

    # Server-side sessions referenced by an opaque HTTP-only cookie
    SESSION_SECRET: SecretStr = SecretStr(DEFAULT_SESSION_SECRET)
    SESSION_COOKIE_NAME: str = "sid"
    SESSION_COOKIE_SECURE: bool = False
    SESSION_TTL_SECONDS: int = 604800

    # Email verification window for registration codes
    VERIFICATION_TTL_SECONDS: int = 180

    BCRYPT_ROUNDS: int = 12

    # Outbound mail: "http" posts to a transactional mail API, "console" only logs (dev).
    MAIL_BACKEND: Literal["http", "console"] = "console"
    MAIL_API_URL: str = "https://api.brevo.com/v3/smtp/email"
    MAIL_API_KEY: SecretStr | None = None
    MAIL_SENDER: str | None = None
    MAIL_SENDER_NAME: str = "Idea Graveyard"
    MAIL_REQUEST_TIMEOUT_SEC: float = 10.0

    # Initial superadmin, created at startup when both are set and the user is missing
    SUPERADMIN_USERNAME: str | None = None
    SUPERADMIN_PASSWORD: SecretStr | None = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must be empty or start with '/' (e.g. /api)")
        return v

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL "
                "(e.g. sqlite:///./ideas.db or postgresql+psycopg2://...)"
            )
        return v.strip()

    @field_validator("CLIENT_ORIGIN")
    @classmethod
    def validate_client_origin(cls, v: str) -> str:
        s = v.strip().rstrip("/")
        if not (s.lower().startswith("http://") or s.lower().startswith("https://")):
            raise ValueError("CLIENT_ORIGIN must use http or https (e.g. http://localhost:3000)")
        return s

    @field_validator("SESSION_SECRET")
    @classmethod
    def validate_session_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("SESSION_SECRET must be set and non-empty")
        return v

    @field_validator("SESSION_COOKIE_NAME")
    @classmethod
    def validate_session_cookie_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_COOKIE_NAME must be set and non-empty")
        return v.strip()

    @field_validator("SESSION_TTL_SECONDS")
    @classmethod
    def validate_session_ttl(cls, v: int) -> int:
        if v < 60 or v > 2592000:
            raise ValueError(
                "SESSION_TTL_SECONDS must be between 60 and 2592000 (1 minute to 30 days)"
            )
        return v

    @field_validator("VERIFICATION_TTL_SECONDS")
    @classmethod
    def validate_verification_ttl(cls, v: int) -> int:
        if v < 30 or v > 86400:
            raise ValueError("VERIFICATION_TTL_SECONDS must be between 30 and 86400")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 16:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 16")
        return v

    @field_validator("MAIL_API_URL")
    @classmethod
    def validate_mail_api_url(cls, v: str) -> str:
        s = v.strip()
        if not (s.lower().startswith("http://") or s.lower().startswith("https://")):
            raise ValueError("MAIL_API_URL must use http or https")
        return s

    @field_validator("MAIL_REQUEST_TIMEOUT_SEC")
    @classmethod
    def validate_mail_timeout(cls, v: float) -> float:
        if v <= 0 or v > 60:
            raise ValueError("MAIL_REQUEST_TIMEOUT_SEC must be greater than 0 and at most 60")
        return v

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @model_validator(mode="after")
    def validate_prod_requirements(self) -> "Settings":
        if self.APP_ENV != "prod":
            return self
        if self.SESSION_SECRET.get_secret_value() == DEFAULT_SESSION_SECRET:
            raise ValueError("SESSION_SECRET must be changed from the default in prod")
        if self.MAIL_BACKEND == "console":
            raise ValueError("MAIL_BACKEND=console is not allowed in prod")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
