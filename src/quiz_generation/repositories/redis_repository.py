"""Redis implementation of CacheStore.

A shared TTL store for deployments that run several worker processes, where
the in-process CacheService would give each worker its own cache. Values are
stored as JSON strings and expire through Redis' native key TTL.
"""

import json
import logging
from typing import Any

import redis

from quiz_generation.config import CACHE_TTL_SECONDS, get_redis_client

logger = logging.getLogger(__name__)


class RedisCacheRepository:
    """Redis implementation of the CacheStore protocol.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        prefix: str = "quiz_cache:",
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            prefix: Key prefix for every entry written by this repository.
            ttl: Default time-to-live in seconds. Defaults to one hour.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = prefix
        self._ttl = ttl or CACHE_TTL_SECONDS

    @classmethod
    def create(cls, ttl: int | None = None) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            ttl: Entry TTL in seconds. If None, one hour.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(ttl=ttl)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Any | None:
        """Return the decoded value, or None when absent or expired."""
        raw = self._client.get(self._key(key))
        if raw is None:
            return None

        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Dropping undecodable cache entry %s", key)
            self._client.delete(self._key(key))
            return None

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store a JSON-encoded value with a Redis TTL."""
        ttl = ttl_seconds if ttl_seconds is not None else self._ttl
        self._client.set(self._key(key), json.dumps(value), ex=ttl)

    def clear(self) -> int:
        """Clear all entries written with this repository's prefix.

        Returns:
            Number of entries deleted
        """
        count = 0
        for key in self._client.scan_iter(match=f"{self._prefix}*"):
            count += self._client.delete(key)
        return count

    def count_all(self) -> int:
        """Count entries written with this repository's prefix."""
        return sum(1 for _ in self._client.scan_iter(match=f"{self._prefix}*"))

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def get_stats(self) -> dict:
        """Get repository statistics.

        Returns:
            Dictionary with stats
        """
        return {
            "backend": "redis",
            "total_entries": self.count_all(),
            "ttl": self._ttl,
        }

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
