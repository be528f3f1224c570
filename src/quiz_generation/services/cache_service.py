"""In-process TTL cache service.

Stores generated quiz results for the lifetime of the process that
constructs it. Expired entries are removed lazily on read and swept
from the whole store on every write.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from quiz_generation.config import CACHE_TTL_SECONDS
from quiz_generation.entities import CacheEntryEntity

logger = logging.getLogger(__name__)


class CacheService:
    """TTL-bounded key/value store scoped to one process.

    This class satisfies the CacheStore protocol through structural
    typing. There is no eviction beyond time expiry, so the store can
    grow without bound between sweeps.

    Example:
        ```python
        cache = CacheService()
        cache.set("quiz:math", [{"question": "..."}], ttl_seconds=3600)
        cache.get("quiz:math")  # -> [{"question": "..."}]
        ```
    """

    def __init__(
        self,
        default_ttl: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache service.

        Args:
            default_ttl: TTL used when ``set`` is called without one. Defaults to one hour.
            clock: Time source in seconds. Injected in tests.
        """
        self._entries: dict[str, CacheEntryEntity] = {}
        self._default_ttl = default_ttl or CACHE_TTL_SECONDS
        self._clock = clock
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None on a miss.

        An expired entry is deleted before the miss is returned.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if entry.is_expired(self._clock()):
                del self._entries[key]
                return None

            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store a value and sweep every expired entry from the store.

        Args:
            key: The cache key
            value: The value to store
            ttl_seconds: Time-to-live in seconds. Defaults to the service default.
        """
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl
        with self._lock:
            now = self._clock()
            self._entries[key] = CacheEntryEntity(value=value, expires_at=now + ttl)
            self._sweep(now)

    def _sweep(self, now: float) -> int:
        expired = [k for k, entry in self._entries.items() if entry.is_expired(now)]
        for k in expired:
            del self._entries[k]
        if expired:
            logger.debug("Swept %d expired cache entries", len(expired))
        return len(expired)

    def delete(self, key: str) -> bool:
        """Delete an entry.

        Returns:
            True if an entry was removed, False otherwise
        """
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """Clear all entries.

        Returns:
            Number of entries deleted
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        return {
            "backend": "memory",
            "total_entries": len(self),
            "ttl": self._default_ttl,
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
