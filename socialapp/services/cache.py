"""In-memory page cache with path-based invalidation."""

import logging
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class PageCache:
    """Process-local cache of rendered responses keyed by path.

    Each path has a generation that `invalidate` bumps. A reader takes the
    generation before rendering and passes it to `set`; the page is only
    stored if no invalidation happened in between.
    """

    def __init__(self):
        self._pages: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._pages.get(path)

    def generation(self, path: str) -> int:
        with self._lock:
            return self._generations.get(path, 0)

    def set(self, path: str, value: Any, generation: Optional[int] = None) -> bool:
        """Store a page. Returns False if `generation` is stale and nothing was stored."""
        with self._lock:
            if generation is not None and generation != self._generations.get(path, 0):
                logger.debug(f"Skipped caching stale page for path={path}")
                return False
            self._pages[path] = value
            return True

    def invalidate(self, path: str) -> None:
        """Drop the cached page for `path` so the next read recomputes it."""
        with self._lock:
            self._generations[path] = self._generations.get(path, 0) + 1
            removed = self._pages.pop(path, None) is not None
        logger.debug(f"Invalidated page cache for path={path} (was_cached={removed})")


# Singleton instance
page_cache: Optional[PageCache] = None


def get_page_cache() -> PageCache:
    """Get or create the process-wide page cache."""
    global page_cache
    if page_cache is None:
        page_cache = PageCache()
    return page_cache
