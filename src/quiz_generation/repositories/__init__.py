"""Repository layer for external access.

This layer wraps external dependencies (OpenAI, Redis) behind the
protocol-based interfaces in the protocols package. This enables:
- Easy swapping of implementations (in-memory -> Redis, OpenAI -> local, etc.)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from quiz_generation.protocols import CacheStore, CompletionProvider

from .local_provider import LocalQuestionProvider
from .openai_provider import OpenAICompletionProvider
from .redis_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "CompletionProvider",
    "LocalQuestionProvider",
    "OpenAICompletionProvider",
    "RedisCacheRepository",
]
