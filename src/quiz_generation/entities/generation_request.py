"""Generation request domain entity."""

from dataclasses import dataclass

from .generated_question import DIFFICULTIES, QUESTION_TYPES


@dataclass(frozen=True)
class GenerationRequest:
    """Parameters for one quiz generation call.

    Attributes:
        topic: Subject of the quiz
        difficulty: One of "easy", "medium", "hard"
        num_questions: How many questions to generate (positive)
        question_types: Allowed question types, in caller order
        user_id: Identifier of the requester (not part of the cache key)
        content: Optional source text the questions should be based on
        language: Optional language for the generated questions
    """

    topic: str
    difficulty: str
    num_questions: int
    question_types: tuple[str, ...]
    user_id: str = ""
    content: str | None = None
    language: str | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of types but store an immutable tuple
        object.__setattr__(self, "question_types", tuple(self.question_types))

        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"difficulty must be one of {list(DIFFICULTIES)}, got {self.difficulty!r}")
        if self.num_questions <= 0:
            raise ValueError(f"num_questions must be positive, got {self.num_questions}")
        if not self.question_types:
            raise ValueError("question_types must not be empty")
        unknown = [t for t in self.question_types if t not in QUESTION_TYPES]
        if unknown:
            raise ValueError(f"unknown question types: {unknown}")
