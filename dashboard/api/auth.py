"""Login endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from dashboard.actions.auth import authenticate
from dashboard.api.responses import action_response
from dashboard.core.config import Config
from dashboard.core.dependencies import get_db_session, get_settings

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(
    request: Request,
    db: Session = Depends(get_db_session),
    settings: Config = Depends(get_settings),
):
    form = await request.form()
    result = authenticate(None, form, db=db, settings=settings)
    return action_response(result, settings, failure_code=status.HTTP_401_UNAUTHORIZED)
