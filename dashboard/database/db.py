"""Database connection and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from dashboard.core.config import get_config

logger = logging.getLogger(__name__)

config = get_config()
DATABASE_URL = config.DATABASE_URL


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, **kwargs: Any) -> Engine:
    """Create an engine; SQLite connections get foreign key enforcement."""
    options: dict[str, Any] = {"echo": config.DEBUG and config.LOG_LEVEL == "DEBUG", "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        options.update(pool_recycle=3600, pool_size=10, max_overflow=20)
    options.update(kwargs)
    engine = create_engine(database_url, **options)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_active_database_url() -> str:
    return DATABASE_URL


def get_db() -> Generator[Session, None, None]:
    """Yield a session for dependency injection contexts."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Context-manager wrapper for safe DB session lifecycle."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def verify_database_connection() -> bool:
    """Verify DB connectivity during startup."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as exc:
        logger.exception("database.connection_failed", extra={"event": "database.connection_failed"})
        logger.error("database.connection_failed.details: %s", exc)
        return False
