"""Domain entities for internal representation.

These are frozen dataclasses used by services and repositories. They are NOT
used for API contracts - use DTOs from the dto package for that.
"""

from .cache_entry import CacheEntryEntity
from .generated_question import (
    DIFFICULTIES,
    OPTION_LABELS,
    QUESTION_TYPES,
    GeneratedQuestion,
)
from .generation_request import GenerationRequest
from .generation_result import GenerationMetadata, GenerationResult

__all__ = [
    "CacheEntryEntity",
    "DIFFICULTIES",
    "OPTION_LABELS",
    "QUESTION_TYPES",
    "GeneratedQuestion",
    "GenerationRequest",
    "GenerationMetadata",
    "GenerationResult",
]
