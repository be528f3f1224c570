"""Cache entry domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntryEntity:
    """A cached value with its absolute expiry instant.

    Entries are replace-or-expire only; there is no update in place.

    Attributes:
        value: The cached value (a list of question dicts for quiz results)
        expires_at: Expiry instant in seconds, on the owning store's clock
    """

    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check whether the entry is past its expiry instant."""
        return now > self.expires_at
