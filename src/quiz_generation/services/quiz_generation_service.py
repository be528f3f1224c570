"""Quiz generation service.

This service orchestrates one generation call end to end:

    cache check -> content processing -> prompt build -> model attempts
    (retry with backoff across an ordered model list) -> parse/normalize
    -> validation -> cache write

Each call is independent; the only shared state is the injected cache.
"""

import asyncio
import hashlib
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from quiz_generation.config import CACHE_TTL_SECONDS, settings
from quiz_generation.entities import (
    GeneratedQuestion,
    GenerationMetadata,
    GenerationRequest,
    GenerationResult,
)
from quiz_generation.errors import (
    AllModelsExhaustedError,
    EmptyModelResponseError,
    classify_provider_error,
)
from quiz_generation.protocols import CacheStore, CompletionProvider

from .content_processor import ContentProcessor
from .prompt_builder import build_generation_prompt
from .question_parser import normalize_questions, parse_questions
from .retry import RetryExhausted, exponential_delay, retry_with_backoff
from .validation_service import ValidationService

logger = logging.getLogger(__name__)

NO_CONTENT = "no-content"
CACHE_MODEL_NAME = "cache"


@dataclass(frozen=True)
class ModelConfig:
    """One entry of the ordered model fallback list.

    Attributes:
        name: Model name sent to the provider
        max_retries: Number of attempts for this model
        temperature: Sampling temperature for this model
    """

    name: str
    max_retries: int
    temperature: float


DEFAULT_MODELS: tuple[ModelConfig, ...] = (
    ModelConfig(name="gpt-4", max_retries=2, temperature=0.7),
    ModelConfig(name="gpt-3.5-turbo", max_retries=1, temperature=0.8),
)


def build_cache_key(request: GenerationRequest) -> str:
    """Deterministic fingerprint of a request's semantic fields.

    Requester identity and language are not part of the key, so identical
    requests from different users share an entry.
    """
    if request.content:
        content_hash = hashlib.md5(request.content.encode("utf-8")).hexdigest()
    else:
        content_hash = NO_CONTENT

    types = ",".join(request.question_types)
    return f"quiz:{request.topic}:{request.difficulty}:{request.num_questions}:{types}:{content_hash}"


class QuizGenerationService:
    """End-to-end quiz generation orchestration.

    Collaborators are injected; the service owns no global state.

    Example:
        ```python
        from quiz_generation.repositories import OpenAICompletionProvider
        from quiz_generation.services import CacheService, QuizGenerationService

        service = QuizGenerationService.create(
            provider=OpenAICompletionProvider.create(),
            cache=CacheService(),
        )
        result = await service.generate_quiz(request)
        ```
    """

    def __init__(
        self,
        provider: CompletionProvider,
        cache: CacheStore,
        content_processor: ContentProcessor | None = None,
        validation_service: ValidationService | None = None,
        models: tuple[ModelConfig, ...] = DEFAULT_MODELS,
        max_tokens: int | None = None,
        cache_ttl: int = CACHE_TTL_SECONDS,
        delay: Callable[[int], float] = exponential_delay,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the generation service.

        Args:
            provider: Chat-completion backend (required).
            cache: Result cache (required).
            content_processor: Source text preparation. Defaults to ContentProcessor().
            validation_service: Question validation. Defaults to ValidationService().
            models: Ordered model fallback list.
            max_tokens: Completion token ceiling. Defaults to settings.
            cache_ttl: TTL for cached results in seconds.
            delay: Backoff delay in seconds after a failed attempt.
            sleep: Awaitable sleep used for backoff. Injected in tests.
        """
        if not models:
            raise ValueError("At least one model must be configured")

        self._provider = provider
        self._cache = cache
        self._content_processor = content_processor or ContentProcessor()
        self._validation = validation_service or ValidationService()
        self._models = models
        self._max_tokens = max_tokens or settings.quiz_max_tokens
        self._cache_ttl = cache_ttl
        self._delay = delay
        self._sleep = sleep

    @classmethod
    def create(
        cls,
        provider: CompletionProvider,
        cache: CacheStore,
        models: tuple[ModelConfig, ...] = DEFAULT_MODELS,
    ) -> "QuizGenerationService":
        """Factory method to create QuizGenerationService with default collaborators.

        Args:
            provider: Chat-completion backend (required).
            cache: Result cache (required).
            models: Ordered model fallback list.

        Returns:
            Configured QuizGenerationService instance
        """
        return cls(provider=provider, cache=cache, models=models)

    async def generate_quiz(self, request: GenerationRequest) -> GenerationResult:
        """Generate (or fetch from cache) a validated quiz.

        Args:
            request: The generation request

        Returns:
            GenerationResult with questions and metadata

        Raises:
            ResponseParseError: If the model output holds no usable JSON array
            QuestionValidationError: If a normalized question is invalid
            AllModelsExhaustedError: If every model attempt failed. Raised as
                RateLimitedError, QuotaExceededError or GenerationTimeoutError
                when the last failure was provider-side
        """
        start_time = time.perf_counter()

        cache_key = build_cache_key(request)
        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Cache hit for %s", cache_key)
            return GenerationResult(
                questions=[GeneratedQuestion.from_dict(q) for q in cached],
                metadata=GenerationMetadata(
                    generation_time_ms=self._elapsed_ms(start_time),
                    model_used=CACHE_MODEL_NAME,
                    cache_hit=True,
                ),
            )

        content: str | None = None
        if request.content:
            content = self._content_processor.process_content(request.content)

        prompt = build_generation_prompt(request, content)
        response, model_used = await self._complete_with_fallback(prompt)

        questions = normalize_questions(parse_questions(response), request.difficulty)
        self._validation.validate_questions(questions)

        self._cache.set(cache_key, [q.to_dict() for q in questions], self._cache_ttl)

        metadata = GenerationMetadata(
            generation_time_ms=self._elapsed_ms(start_time),
            model_used=model_used,
            cache_hit=False,
            content_length=len(content) if content is not None else None,
        )
        logger.info(
            "Generated %d questions on %r with %s in %.0fms",
            len(questions),
            request.topic,
            model_used,
            metadata.generation_time_ms,
        )
        return GenerationResult(questions=questions, metadata=metadata)

    async def _complete_with_fallback(self, prompt: str) -> tuple[str, str]:
        """Try each model in order until one returns non-empty content.

        Returns:
            Tuple of (response text, name of the model that produced it)
        """
        errors: list[BaseException] = []

        for model in self._models:

            async def attempt(_: int, model: ModelConfig = model) -> str:
                response = await self._provider.complete(
                    model=model.name,
                    prompt=prompt,
                    max_tokens=self._max_tokens,
                    temperature=model.temperature,
                )
                if not response:
                    raise EmptyModelResponseError(model.name)
                return response

            result = await retry_with_backoff(
                attempt,
                attempts=model.max_retries,
                delay=self._delay,
                sleep=self._sleep,
                label=model.name,
            )
            if isinstance(result, RetryExhausted):
                errors.extend(result.errors)
                continue

            return result.value, model.name

        logger.error("All %d models failed to generate quiz", len(self._models))
        kind = classify_provider_error(errors[-1]) or AllModelsExhaustedError
        raise kind(errors) from errors[-1]

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return (time.perf_counter() - start_time) * 1000

    @property
    def models(self) -> tuple[ModelConfig, ...]:
        """Get the ordered model fallback list."""
        return self._models

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache (for testing)."""
        return self._cache
