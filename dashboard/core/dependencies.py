"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator

from sqlalchemy.orm import Session

from dashboard.cache.revalidation import PathCache, get_cache
from dashboard.core.config import Config, get_config
from dashboard.database.db import get_db


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()


def get_view_cache() -> PathCache:
    return get_cache()
