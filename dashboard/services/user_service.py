"""User lookups and creation for the credentials provider."""

from __future__ import annotations

from sqlalchemy import select

from dashboard.core.security import hash_password
from dashboard.models import User
from dashboard.services.base_service import BaseService


class UserService(BaseService):
    def get_by_email(self, email: str) -> User | None:
        statement = select(User).where(User.email == email.strip().lower())
        return self.db.execute(statement).scalar_one_or_none()

    def create_user(self, name: str, email: str, password: str) -> User:
        user = User(name=name, email=email.strip().lower(), hashed_password=hash_password(password))
        self.db.add(user)
        self.commit()
        self.db.refresh(user)
        return user
