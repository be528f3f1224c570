"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class QuestionItem(BaseModel):
    """Single generated question."""

    question: str = Field(..., description="The question text")
    options: dict[str, str] = Field(..., description="Options keyed by label A-D")
    answer: str = Field(..., description="Option label, or free text for fill-in-the-blank")
    explanation: str = Field(..., description="Why the answer is correct")
    type: str = Field(..., description="Question type")
    difficulty: str = Field(..., description="Question difficulty")


class GenerationMetadataItem(BaseModel):
    """How the questions were produced."""

    generation_time_ms: float = Field(..., description="Elapsed time in milliseconds", ge=0.0)
    model_used: str = Field(..., description="Model that produced the questions, or 'cache'")
    cache_hit: bool = Field(..., description="Whether the questions came from the cache")
    content_length: int | None = Field(
        None,
        description="Length of the processed source content, when content was given",
    )


class GenerateQuizResponse(BaseModel):
    """Response DTO for quiz generation."""

    questions: list[QuestionItem] = Field(default_factory=list)
    metadata: GenerationMetadataItem


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    backend: str = Field(..., description="Cache backend: 'memory' or 'redis'")
    total_entries: int = Field(..., description="Total number of cached entries", ge=0)
    ttl_seconds: int = Field(..., description="Default time-to-live in seconds", ge=0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    mock_ai: bool = Field(..., description="Whether offline generation is enabled")
