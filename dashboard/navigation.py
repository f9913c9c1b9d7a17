"""Redirect results returned by form actions.

An action that finishes with a :class:`Redirect` has ended; the HTTP layer
turns it into a ``303 See Other`` response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Redirect:
    url: str
    status_code: int = 303
    session: Any = field(default=None, repr=False)


def redirect(path: str, session: Any = None) -> Redirect:
    """Build the terminal result that sends the caller to ``path``."""
    if not path.startswith("/"):
        raise ValueError(f"Redirect target must be an absolute path: {path!r}")
    return Redirect(url=path, session=session)
