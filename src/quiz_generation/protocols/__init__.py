"""Protocol interfaces for swappable implementations.

Protocols enable:
- Easy swapping of implementations (in-memory -> Redis, OpenAI -> local, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from quiz_generation.protocols import CacheStore, CompletionProvider

    store: CacheStore = CacheService()             # works
    store: CacheStore = RedisCacheRepository()     # also works
    ```
"""

from .cache_store import CacheStore
from .completion_provider import CompletionProvider

__all__ = [
    "CacheStore",
    "CompletionProvider",
]
