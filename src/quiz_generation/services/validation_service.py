"""Structural validation of generated questions."""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from quiz_generation.entities import QUESTION_TYPES, GeneratedQuestion
from quiz_generation.errors import QuestionValidationError

Q = TypeVar("Q")


def _field(question: GeneratedQuestion | Mapping[str, Any], name: str) -> Any:
    if isinstance(question, Mapping):
        return question.get(name)
    return getattr(question, name, None)


class ValidationService:
    """Rejects structurally invalid questions before they are cached or returned.

    Validation is fail-fast: the first violation raises, naming the 1-based
    question index and the offending field.
    """

    def validate_questions(self, questions: Sequence[Q]) -> Sequence[Q]:
        """Validate every question in order.

        Args:
            questions: GeneratedQuestion objects or plain mappings

        Returns:
            The same sequence, unchanged

        Raises:
            QuestionValidationError: On the first invalid question
        """
        for index, question in enumerate(questions, start=1):
            text = _field(question, "question")
            if not isinstance(text, str) or not text.strip():
                raise QuestionValidationError(index, "question", "has empty question text")

            question_type = _field(question, "type")
            if question_type not in QUESTION_TYPES:
                raise QuestionValidationError(index, "type", f"has invalid type: {question_type}")

            if not _field(question, "answer"):
                raise QuestionValidationError(index, "answer", "has no answer")

        return questions
