"""Service layer for business logic.

This layer contains the quiz generation pipeline and its collaborators.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (LLM / cache access)

Usage:
    ```python
    from quiz_generation.services import CacheService, QuizGenerationService

    service = QuizGenerationService.create(provider=provider, cache=CacheService())
    ```
"""

from .cache_service import CacheService
from .content_processor import ContentProcessor
from .quiz_generation_service import (
    DEFAULT_MODELS,
    ModelConfig,
    QuizGenerationService,
    build_cache_key,
)
from .retry import RetryExhausted, RetrySuccess, retry_with_backoff
from .validation_service import ValidationService

__all__ = [
    "CacheService",
    "ContentProcessor",
    "ValidationService",
    "QuizGenerationService",
    "ModelConfig",
    "DEFAULT_MODELS",
    "build_cache_key",
    "retry_with_backoff",
    "RetrySuccess",
    "RetryExhausted",
]
