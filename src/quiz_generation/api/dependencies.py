"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from quiz_generation.config import configure_logging, settings
from quiz_generation.handlers import QuizHandler
from quiz_generation.protocols import CacheStore, CompletionProvider
from quiz_generation.repositories import (
    LocalQuestionProvider,
    OpenAICompletionProvider,
    RedisCacheRepository,
)
from quiz_generation.services import CacheService, ModelConfig, QuizGenerationService

logger = logging.getLogger(__name__)

LOCAL_MODELS = (ModelConfig(name="local", max_retries=1, temperature=0.0),)


def get_handler(request: Request) -> QuizHandler:
    """Dependency injection for QuizHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "quiz_handler", None)
    if handler is None:
        raise RuntimeError("QuizHandler not initialized. Check lifespan setup.")
    return handler


def build_cache() -> CacheStore:
    """Create the cache backend selected by QUIZ_CACHE_BACKEND."""
    if settings.cache_backend == "redis":
        return RedisCacheRepository.create()
    return CacheService()


def build_provider() -> tuple[CompletionProvider, tuple[ModelConfig, ...] | None]:
    """Create the completion provider and, for offline mode, its model list."""
    if settings.mock_ai:
        return LocalQuestionProvider(), LOCAL_MODELS
    return OpenAICompletionProvider.create(), None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Cache and completion provider - created explicitly
    2. Service (business logic) - stored in app.state.generation_service
    3. Handler (HTTP endpoints) - stored in app.state.quiz_handler

    Cleanup:
        Closes the provider and removes all services from app.state on shutdown
    """
    configure_logging()

    cache = build_cache()
    provider, models = build_provider()

    if models is None:
        generation_service = QuizGenerationService.create(provider=provider, cache=cache)
    else:
        generation_service = QuizGenerationService.create(provider=provider, cache=cache, models=models)
    quiz_handler = QuizHandler(generation_service=generation_service, cache=cache)

    app.state.cache = cache
    app.state.provider = provider
    app.state.generation_service = generation_service
    app.state.quiz_handler = quiz_handler

    logger.info("Quiz generation service initialized")
    logger.info("Cache backend: %s", settings.cache_backend)
    logger.info("Models: %s", ", ".join(m.name for m in generation_service.models))

    yield

    close = getattr(provider, "close", None)
    if close is not None:
        await close()

    del app.state.quiz_handler
    del app.state.generation_service
    del app.state.provider
    del app.state.cache
    logger.info("Quiz generation service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[QuizHandler, Depends(get_handler)]
