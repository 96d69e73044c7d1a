"""Environment-driven settings for the portfolio API.

Values are read from the process environment, with a ``.env`` file in the
working directory loaded first when present. Settings are resolved once at
startup and passed explicitly to the components that need them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from portfolio_api.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 5000
DEFAULT_TOKEN_DAYS = 7
PRODUCTION = "production"

# Signing key used outside production when JWT_SECRET is not set.
_DEVELOPMENT_SECRET = "portfolio-api-development-secret"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime configuration.

    Attributes:
        database_url: SQLAlchemy connection string (``DB_URL``).
        jwt_secret: Token signing key (``JWT_SECRET``).
        jwt_expires_days: Token lifetime in days (``JWT_EXPIRES_DAYS``).
        port: Listen port (``PORT``).
        environment: ``development``, ``production`` or ``test`` (``APP_ENV``).
        cors_origins: Allowed CORS origins (``CORS_ORIGINS``, comma-separated).
        log_level: Root log level name (``LOG_LEVEL``).
    """

    database_url: str | None = None
    jwt_secret: str = ""
    jwt_expires_days: int = DEFAULT_TOKEN_DAYS
    port: int = DEFAULT_PORT
    environment: str = "development"
    cors_origins: tuple[str, ...] = field(default=("*",))
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> None:
        """Raise ConfigurationError if the service cannot start with these values."""
        if not self.database_url:
            raise ConfigurationError("DB_URL is not configured")
        if self.is_production and not self.jwt_secret:
            raise ConfigurationError("JWT_SECRET must be set in production")
        if self.jwt_expires_days <= 0:
            raise ConfigurationError("JWT_EXPIRES_DAYS must be positive")

    def signing_key(self) -> str:
        """Return the token signing key, falling back to a development key."""
        if self.jwt_secret:
            return self.jwt_secret
        if self.is_production:
            raise ConfigurationError("JWT_SECRET must be set in production")
        logger.warning("JWT_SECRET is not set; using the development signing key")
        return _DEVELOPMENT_SECRET


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings() -> Settings:
    """Build Settings from the environment (and ``.env`` if present)."""
    load_dotenv()

    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        database_url=os.getenv("DB_URL") or None,
        jwt_secret=os.getenv("JWT_SECRET", ""),
        jwt_expires_days=_get_int("JWT_EXPIRES_DAYS", DEFAULT_TOKEN_DAYS),
        port=_get_int("PORT", DEFAULT_PORT),
        environment=os.getenv("APP_ENV", "development").strip().lower(),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
