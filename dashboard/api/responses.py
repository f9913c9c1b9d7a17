"""Translate action results into HTTP responses."""

from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse

from dashboard.core.config import Config
from dashboard.navigation import Redirect
from dashboard.schemas.forms import FormState

SESSION_COOKIE = "access_token"
REFRESH_COOKIE = "refresh_token"


def redirect_response(result: Redirect, settings: Config) -> RedirectResponse:
    response = RedirectResponse(url=result.url, status_code=result.status_code)
    if result.session is not None:
        tokens = result.session.tokens
        cookie_options = {"httponly": True, "samesite": "lax", "secure": settings.is_production}
        response.set_cookie(
            SESSION_COOKIE,
            tokens.access_token,
            max_age=settings.SESSION_TTL_MINUTES * 60,
            **cookie_options,
        )
        response.set_cookie(
            REFRESH_COOKIE,
            tokens.refresh_token,
            max_age=settings.REFRESH_TTL_DAYS * 24 * 60 * 60,
            **cookie_options,
        )
    return response


def state_response(state: FormState, failure_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> JSONResponse:
    """200 for a completed in-place action, 422 for field errors, ``failure_code`` otherwise."""
    if state.succeeded:
        code = status.HTTP_200_OK
    elif state.has_errors:
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        code = failure_code
    return JSONResponse(status_code=code, content=state.model_dump())


def action_response(
    result: FormState | Redirect,
    settings: Config,
    failure_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
):
    if isinstance(result, Redirect):
        return redirect_response(result, settings)
    return state_response(result, failure_code=failure_code)
