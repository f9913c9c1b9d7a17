"""Auth schema module."""

from __future__ import annotations

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class Credentials(BaseModel):
    email: str = Field(pattern=EMAIL_PATTERN, max_length=320)
    password: str = Field(min_length=6, max_length=256)


class SessionUser(BaseModel):
    id: str
    name: str
    email: str

