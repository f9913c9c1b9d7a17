"""Credentials sign-in provider.

Verifies an email/password payload against the ``users`` table and issues a
session token pair. Every failure is raised as :class:`AuthError` tagged with
an :class:`AuthErrorType`; lower-level causes stay chained on ``__cause__``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dashboard.auth.jwt import TokenPair, create_session_tokens
from dashboard.core.config import Config, get_config
from dashboard.core.enums import AuthErrorType
from dashboard.core.exceptions import AuthError
from dashboard.core.security import verify_password
from dashboard.schemas.auth import Credentials, SessionUser
from dashboard.services.user_service import UserService

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


@dataclass(frozen=True)
class SignInResult:
    user: SessionUser
    tokens: TokenPair


class CredentialsProvider:
    def __init__(self, db: Session, settings: Config | None = None) -> None:
        self.users = UserService(db=db)
        self.settings = settings or get_config()

    def _parse(self, form: Mapping[str, Any]) -> Credentials:
        try:
            return Credentials.model_validate(
                {"email": form.get("email"), "password": form.get("password")}
            )
        except PydanticValidationError as exc:
            raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN.value) from exc

    def authorize(self, form: Mapping[str, Any]) -> SessionUser:
        credentials = self._parse(form)
        try:
            user = self.users.get_by_email(credentials.email)
        except SQLAlchemyError as exc:
            raise AuthError(AuthErrorType.CALLBACK_ROUTE_ERROR.value) from exc

        if user is None or not verify_password(credentials.password, user.hashed_password):
            logger.info("auth.sign_in.rejected", extra={"event": "auth.sign_in.rejected"})
            raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN.value)
        return SessionUser(id=user.id, name=user.name, email=user.email)

    def sign_in(self, provider: str, form: Mapping[str, Any]) -> SignInResult:
        """Authenticate ``form`` with the named provider and issue a session."""
        if provider != CREDENTIALS_PROVIDER:
            raise AuthError(AuthErrorType.CONFIGURATION.value, f"Unknown sign-in provider: {provider}")

        user = self.authorize(form)
        tokens = create_session_tokens(
            user_id=user.id,
            email=user.email,
            secret=self.settings.AUTH_SECRET,
            access_ttl_minutes=self.settings.SESSION_TTL_MINUTES,
            refresh_ttl_days=self.settings.REFRESH_TTL_DAYS,
        )
        logger.info("auth.sign_in.succeeded", extra={"event": "auth.sign_in.succeeded", "user_id": user.id})
        return SignInResult(user=user, tokens=tokens)
