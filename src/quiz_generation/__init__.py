"""Quiz Generation - AI-assisted quiz generation with caching and model fallback.

This package provides a layered architecture for quiz generation:

Layers:
    - protocols: Interface contracts (CacheStore, CompletionProvider)
    - repositories: External access implementations (OpenAI, Redis, offline)
    - services: Business logic (cache, content, validation, generation)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from quiz_generation import (
        CacheService,
        GenerationRequest,
        OpenAICompletionProvider,
        QuizGenerationService,
    )

    service = QuizGenerationService.create(
        provider=OpenAICompletionProvider.create(),
        cache=CacheService(),
    )
    result = await service.generate_quiz(
        GenerationRequest(
            topic="Photosynthesis",
            difficulty="easy",
            num_questions=3,
            question_types=("multiple-choice",),
        )
    )
    ```

For HTTP API:
    ```python
    from quiz_generation.api.app import app
    ```
"""

from quiz_generation.config import settings
from quiz_generation.dto import GenerateQuizRequest, GenerateQuizResponse
from quiz_generation.entities import GeneratedQuestion, GenerationRequest, GenerationResult
from quiz_generation.errors import (
    AllModelsExhaustedError,
    EmptyModelResponseError,
    GenerationTimeoutError,
    QuestionValidationError,
    QuizGenerationError,
    QuotaExceededError,
    RateLimitedError,
    ResponseParseError,
)
from quiz_generation.handlers import QuizHandler
from quiz_generation.protocols import CacheStore, CompletionProvider
from quiz_generation.repositories import (
    LocalQuestionProvider,
    OpenAICompletionProvider,
    RedisCacheRepository,
)
from quiz_generation.services import (
    CacheService,
    ContentProcessor,
    QuizGenerationService,
    ValidationService,
)

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "CacheStore",
    "CompletionProvider",
    # Services (business logic)
    "CacheService",
    "ContentProcessor",
    "ValidationService",
    "QuizGenerationService",
    # Handlers (HTTP)
    "QuizHandler",
    # Repositories (external access)
    "OpenAICompletionProvider",
    "LocalQuestionProvider",
    "RedisCacheRepository",
    # Entities (domain models)
    "GenerationRequest",
    "GeneratedQuestion",
    "GenerationResult",
    # DTOs (API contracts)
    "GenerateQuizRequest",
    "GenerateQuizResponse",
    # Errors
    "QuizGenerationError",
    "EmptyModelResponseError",
    "ResponseParseError",
    "QuestionValidationError",
    "AllModelsExhaustedError",
    "RateLimitedError",
    "QuotaExceededError",
    "GenerationTimeoutError",
]
