"""Generation result domain entity."""

from dataclasses import dataclass
from typing import Any

from .generated_question import GeneratedQuestion


@dataclass(frozen=True)
class GenerationMetadata:
    """Metadata describing how a result was produced.

    Attributes:
        generation_time_ms: Elapsed time from call start in milliseconds
        model_used: Model that produced the questions, or "cache"
        cache_hit: Whether the questions came from the cache
        content_length: Length of the processed source content, when given
    """

    generation_time_ms: float
    model_used: str
    cache_hit: bool
    content_length: int | None = None


@dataclass(frozen=True)
class GenerationResult:
    """Validated questions plus generation metadata."""

    questions: list[GeneratedQuestion]
    metadata: GenerationMetadata

    def questions_as_dicts(self) -> list[dict[str, Any]]:
        return [q.to_dict() for q in self.questions]
