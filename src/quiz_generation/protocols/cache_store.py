"""Cache storage protocol.

Defines the interface for any TTL-bounded key/value store the quiz
generation service can read results from and write results to.

Implementations:
- CacheService: in-process store (default)
- RedisCacheRepository: shared store for multi-worker deployments
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for TTL cache backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if absent or expired.

        Args:
            key: The cache key

        Returns:
            The cached value or None on a miss
        """
        ...

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store a value that expires after ``ttl_seconds``.

        Args:
            key: The cache key
            value: JSON-compatible value to store
            ttl_seconds: Time-to-live in seconds
        """
        ...

    def clear(self) -> int:
        """Remove all entries.

        Returns:
            Number of entries removed
        """
        ...

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
