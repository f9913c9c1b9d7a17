"""Shared base for services bound to a request-scoped session."""

from __future__ import annotations

from sqlalchemy.orm import Session


class BaseService:
    """Holds the caller's SQLAlchemy session; the caller owns its lifetime."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        """Commit current transaction and rollback on failure."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def rollback(self) -> None:
        self.db.rollback()
