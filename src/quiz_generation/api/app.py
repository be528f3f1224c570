from typing import Any

from fastapi import FastAPI

from quiz_generation.api.dependencies import HandlerDep, lifespan
from quiz_generation.config import settings
from quiz_generation.dto import (
    CacheStatsResponse,
    GenerateQuizRequest,
    GenerateQuizResponse,
    HealthCheckResponse,
)

app = FastAPI(
    title="Quiz Generation API",
    description="AI-assisted quiz generation with caching and model fallback",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Quiz Generation API",
        "version": "0.1.0",
        "description": "AI-assisted quiz generation with caching and model fallback",
        "endpoints": {
            "generate": "/quiz/generate",
            "cache": "/cache",
            "stats": "/cache/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.post("/quiz/generate", response_model=GenerateQuizResponse)
async def generate_quiz(request: GenerateQuizRequest, handler: HandlerDep) -> GenerateQuizResponse:
    """
    Generate a quiz, or return a cached one for an identical request.

    Args:
        request: Topic, difficulty, question count and types, optional content.

    Returns:
        Validated questions with generation metadata.
    """
    return await handler.generate_quiz(request)


@app.get("/cache/stats", response_model=CacheStatsResponse)
async def cache_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get cache statistics."""
    return await handler.get_stats()


@app.delete("/cache")
async def clear_cache(handler: HandlerDep) -> dict[str, Any]:
    """Clear all cached quizzes."""
    return await handler.clear_cache()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "quiz_generation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
