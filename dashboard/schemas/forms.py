"""Form state returned to callers of the dashboard actions."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FormState(BaseModel):
    """Outcome of one form submission; rendered back to the caller, never stored.

    ``succeeded`` marks in-place actions that finished without redirecting and
    is not part of the rendered payload.
    """

    errors: dict[str, list[str]] | None = None
    message: str | None = None
    succeeded: bool = Field(default=False, exclude=True)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
