"""Configuration module for the invoice dashboard."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from dashboard.core.exceptions import ConfigurationError

load_dotenv()

PLACEHOLDER_AUTH_SECRET = "change_me_auth_secret"


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    AUTH_SECRET: str
    SESSION_TTL_MINUTES: int
    REFRESH_TTL_DAYS: int
    INVOICES_PATH: str
    LOGIN_REDIRECT_PATH: str
    LOG_LEVEL: str
    LOG_FILE: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=(resolved_env != "production"))

    config = Config(
        APP_NAME="Invoice Dashboard",
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        DEBUG=debug if resolved_env != "production" else False,
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///./dashboard.db"),
        AUTH_SECRET=os.getenv("AUTH_SECRET", PLACEHOLDER_AUTH_SECRET),
        SESSION_TTL_MINUTES=int(os.getenv("SESSION_TTL_MINUTES", "60")),
        REFRESH_TTL_DAYS=int(os.getenv("REFRESH_TTL_DAYS", "14")),
        INVOICES_PATH=os.getenv("INVOICES_PATH", "/dashboard/invoices"),
        LOGIN_REDIRECT_PATH=os.getenv("LOGIN_REDIRECT_PATH", "/dashboard"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
    )
    _validate_config(config)
    return config


def _validate_database_url(database_url: str) -> None:
    parsed = urlparse(database_url)
    if parsed.scheme not in {"sqlite", "postgresql", "postgresql+psycopg"}:
        raise ConfigurationError(
            "DATABASE_URL must use sqlite:// or postgresql:// style URL."
        )
    if parsed.scheme.startswith("postgresql") and not parsed.hostname:
        raise ConfigurationError("PostgreSQL DATABASE_URL is missing hostname.")


def _validate_path(name: str, value: str) -> None:
    if not value.startswith("/"):
        raise ConfigurationError(f"{name} must be an absolute route path.")


def _validate_config(config: Config) -> None:
    _validate_database_url(config.DATABASE_URL)
    _validate_path("INVOICES_PATH", config.INVOICES_PATH)
    _validate_path("LOGIN_REDIRECT_PATH", config.LOGIN_REDIRECT_PATH)

    if not config.AUTH_SECRET:
        raise ConfigurationError("AUTH_SECRET must be set.")
    if config.SESSION_TTL_MINUTES < 1:
        raise ConfigurationError("SESSION_TTL_MINUTES must be >= 1.")
    if config.REFRESH_TTL_DAYS < 1:
        raise ConfigurationError("REFRESH_TTL_DAYS must be >= 1.")
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if config.is_production and config.AUTH_SECRET == PLACEHOLDER_AUTH_SECRET:
        raise ConfigurationError("Production AUTH_SECRET uses the placeholder value.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
