"""Generated question domain entity."""

from dataclasses import dataclass, field
from typing import Any

QUESTION_TYPES = ("multiple-choice", "true-false", "fill-in-the-blank")
DIFFICULTIES = ("easy", "medium", "hard")
OPTION_LABELS = ("A", "B", "C", "D")


def _empty_options() -> dict[str, str]:
    return {label: "" for label in OPTION_LABELS}


@dataclass(frozen=True)
class GeneratedQuestion:
    """A single quiz question in its normalized shape.

    Attributes:
        question: The question text
        options: Mapping of labels A-D to option text (all empty for fill-in-the-blank)
        answer: Option label for choice questions, free text for fill-in-the-blank
        explanation: Why the answer is correct
        type: One of QUESTION_TYPES
        difficulty: One of DIFFICULTIES
    """

    question: str
    answer: str
    type: str
    difficulty: str
    explanation: str = ""
    options: dict[str, str] = field(default_factory=_empty_options)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form returned to callers and stored in the cache."""
        return {
            "question": self.question,
            "options": dict(self.options),
            "answer": self.answer,
            "explanation": self.explanation,
            "type": self.type,
            "difficulty": self.difficulty,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratedQuestion":
        return cls(
            question=data["question"],
            options=dict(data.get("options") or _empty_options()),
            answer=data["answer"],
            explanation=data.get("explanation", ""),
            type=data["type"],
            difficulty=data["difficulty"],
        )
