"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import MAX_QUESTIONS, MIN_QUESTIONS, GenerateQuizRequest
from .responses import (
    CacheStatsResponse,
    GenerateQuizResponse,
    GenerationMetadataItem,
    HealthCheckResponse,
    QuestionItem,
)

__all__ = [
    "GenerateQuizRequest",
    "MIN_QUESTIONS",
    "MAX_QUESTIONS",
    "QuestionItem",
    "GenerationMetadataItem",
    "GenerateQuizResponse",
    "CacheStatsResponse",
    "HealthCheckResponse",
]
