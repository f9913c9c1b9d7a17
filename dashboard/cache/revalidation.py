"""Path-keyed cache for rendered dashboard views.

Listing routes store their computed payload under the route path. Mutating
actions call :func:`revalidate_path` so the next read recomputes it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)


class PathCache:
    """In-process view cache keyed by route path.

    Each path carries a generation number bumped by :meth:`revalidate`; a value
    computed under an older generation is returned to its caller but never
    stored.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._generations: dict[str, int] = {}
        self._lock = Lock()

    def get(self, path: str) -> Any | None:
        with self._lock:
            return self._entries.get(path)

    def set(self, path: str, value: Any) -> None:
        with self._lock:
            self._entries[path] = value

    def get_or_compute(self, path: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if path in self._entries:
                return self._entries[path]
            generation = self._generations.get(path, 0)

        value = compute()

        with self._lock:
            if self._generations.get(path, 0) == generation:
                self._entries[path] = value
        return value

    def is_cached(self, path: str) -> bool:
        with self._lock:
            return path in self._entries

    def revalidate(self, path: str) -> bool:
        """Drop the cached value for ``path``; True when something was dropped."""
        with self._lock:
            self._generations[path] = self._generations.get(path, 0) + 1
            dropped = self._entries.pop(path, None) is not None
        logger.info(
            "cache.revalidated",
            extra={"event": "cache.revalidated", "path": path, "dropped": dropped},
        )
        return dropped


cache: PathCache = PathCache()


def set_cache(instance: PathCache) -> None:
    """Register the shared cache instance."""
    global cache
    cache = instance


def get_cache() -> PathCache:
    return cache


def revalidate_path(path: str) -> bool:
    """Mark the cached view for ``path`` stale."""
    return cache.revalidate(path)
