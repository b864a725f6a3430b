"""
In-process page cache keyed by URL path.

Holds rendered listing payloads until a mutation invalidates the path.
Every invalidation bumps the path's generation, so a render that started
before the invalidation cannot store its now-stale payload.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryPageCache:
    def __init__(self) -> None:
        self._pages: dict[str, Any] = {}
        self._generations: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Any | None:
        with self._lock:
            return self._pages.get(path)

    def generation(self, path: str) -> int:
        """Number of times ``path`` has been invalidated."""
        with self._lock:
            return self._generations.get(path, 0)

    def put(self, path: str, payload: Any) -> None:
        with self._lock:
            self._pages[path] = payload

    def put_if_fresh(self, path: str, payload: Any, generation: int) -> bool:
        """Store ``payload`` only if ``path`` was not invalidated since ``generation``."""
        with self._lock:
            if self._generations.get(path, 0) != generation:
                logger.debug("Discarded stale render of %s", path)
                return False
            self._pages[path] = payload
            return True

    def invalidate_path(self, path: str) -> None:
        """Drop the cached page for ``path`` so the next request re-renders it."""
        with self._lock:
            self._pages.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
        logger.debug("Invalidated cached page %s", path)

    def clear(self) -> None:
        with self._lock:
            self._pages.clear()
