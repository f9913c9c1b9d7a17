"""Sign-in form action."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from sqlalchemy.orm import Session

from dashboard.auth.provider import CREDENTIALS_PROVIDER, CredentialsProvider
from dashboard.core.config import Config, get_config
from dashboard.core.enums import AuthErrorType
from dashboard.core.exceptions import AuthError
from dashboard.navigation import Redirect, redirect
from dashboard.schemas.forms import FormState

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_FAILURE_MESSAGE = "Something went wrong."


def _local_path(target: str) -> bool:
    """True only for same-origin absolute paths."""
    if not target.startswith("/") or "\\" in target or any(ord(ch) < 32 for ch in target):
        return False
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc


def authenticate(
    prev_state: FormState | str | None,
    form: Mapping[str, Any],
    *,
    db: Session | None = None,
    provider: CredentialsProvider | None = None,
    settings: Config | None = None,
) -> FormState | Redirect:
    """Sign in with the credentials in ``form``.

    Errors that are not :class:`AuthError` propagate unchanged.
    """
    settings = settings or get_config()
    if provider is None:
        if db is None:
            raise ValueError("authenticate needs either a db session or a provider.")
        provider = CredentialsProvider(db=db, settings=settings)

    try:
        result = provider.sign_in(CREDENTIALS_PROVIDER, form)
    except AuthError as error:
        error_type = AuthErrorType.parse(error.type)
        logger.info(
            "auth.authenticate.failed",
            extra={
                "event": "auth.authenticate.failed",
                "error_type": error_type.value,
                "cause": repr(error.__cause__) if error.__cause__ else None,
            },
        )
        if error_type is AuthErrorType.CREDENTIALS_SIGNIN:
            return FormState(message=INVALID_CREDENTIALS_MESSAGE)
        return FormState(message=GENERIC_FAILURE_MESSAGE)

    callback_url = str(form.get("redirectTo") or settings.LOGIN_REDIRECT_PATH)
    if not _local_path(callback_url):
        callback_url = settings.LOGIN_REDIRECT_PATH
    return redirect(callback_url, session=result)
