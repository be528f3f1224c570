"""HTTP handlers for quiz generation.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging

from fastapi import HTTPException, status

from quiz_generation.config import settings
from quiz_generation.dto import (
    CacheStatsResponse,
    GenerateQuizRequest,
    GenerateQuizResponse,
    GenerationMetadataItem,
    HealthCheckResponse,
    QuestionItem,
)
from quiz_generation.entities import GenerationRequest
from quiz_generation.errors import (
    AllModelsExhaustedError,
    GenerationTimeoutError,
    QuestionValidationError,
    QuizGenerationError,
    QuotaExceededError,
    RateLimitedError,
    ResponseParseError,
)
from quiz_generation.protocols import CacheStore
from quiz_generation.services import QuizGenerationService

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[QuizGenerationError], int], ...] = (
    (RateLimitedError, status.HTTP_429_TOO_MANY_REQUESTS),
    (QuotaExceededError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (GenerationTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (ResponseParseError, status.HTTP_502_BAD_GATEWAY),
    (QuestionValidationError, status.HTTP_502_BAD_GATEWAY),
    (AllModelsExhaustedError, status.HTTP_502_BAD_GATEWAY),
)


def status_for(error: QuizGenerationError) -> int:
    """HTTP status code for a generation error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class QuizHandler:
    """HTTP handlers for quiz generation and cache management.

    This handler delegates business logic to QuizGenerationService
    and handles HTTP-specific concerns like:
    - Converting DTOs to entities and results back to DTOs
    - Setting appropriate status codes
    - Turning generation errors into user-facing messages

    Example:
        ```python
        handler = QuizHandler(generation_service=service, cache=cache)

        @app.post("/quiz/generate", response_model=GenerateQuizResponse)
        async def generate(request: GenerateQuizRequest):
            return await handler.generate_quiz(request)
        ```
    """

    def __init__(self, generation_service: QuizGenerationService, cache: CacheStore) -> None:
        """Initialize the quiz handler.

        Args:
            generation_service: The generation service for business logic (required).
            cache: The cache shared with the generation service (required).
        """
        self._generation = generation_service
        self._cache = cache

    async def generate_quiz(self, request: GenerateQuizRequest) -> GenerateQuizResponse:
        """Handle POST /quiz/generate requests.

        Args:
            request: The generate quiz request DTO

        Returns:
            GenerateQuizResponse with questions and metadata

        Raises:
            HTTPException: With a status derived from the generation error
        """
        generation_request = GenerationRequest(
            topic=request.topic.strip(),
            difficulty=request.difficulty,
            num_questions=request.num_questions,
            question_types=tuple(request.question_types),
            user_id=request.user_id,
            content=request.content,
            language=request.language,
        )

        try:
            result = await self._generation.generate_quiz(generation_request)
        except QuizGenerationError as e:
            logger.error("Quiz generation failed for %s: %s", request.user_id, e.detail)
            raise HTTPException(status_code=status_for(e), detail=e.message) from e

        metadata = result.metadata
        return GenerateQuizResponse(
            questions=[QuestionItem(**q) for q in result.questions_as_dicts()],
            metadata=GenerationMetadataItem(
                generation_time_ms=metadata.generation_time_ms,
                model_used=metadata.model_used,
                cache_hit=metadata.cache_hit,
                content_length=metadata.content_length,
            ),
        )

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests."""
        stats = self._cache.get_stats()
        return CacheStatsResponse(
            backend=stats.get("backend", "unknown"),
            total_entries=stats.get("total_entries", 0),
            ttl_seconds=stats.get("ttl", 0),
        )

    async def clear_cache(self) -> dict:
        """Handle DELETE /cache requests.

        Returns:
            Dict with clear operation result
        """
        count = self._cache.clear()
        return {
            "success": True,
            "deleted_count": count,
            "message": "Cache cleared successfully",
        }

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        check = getattr(self._cache, "health_check", None)
        cache_healthy = check() if callable(check) else True

        return HealthCheckResponse(
            status="healthy" if cache_healthy else "unhealthy",
            cache_healthy=cache_healthy,
            mock_ai=settings.mock_ai,
        )
