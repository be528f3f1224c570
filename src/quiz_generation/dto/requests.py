"""Request DTOs for API endpoints."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

Difficulty = Literal["easy", "medium", "hard"]
QuestionType = Literal["multiple-choice", "true-false", "fill-in-the-blank"]

MIN_QUESTIONS = 1
MAX_QUESTIONS = 50


class GenerateQuizRequest(BaseModel):
    """Request DTO for quiz generation.

    The handler will convert this to a GenerationRequest entity.
    """

    topic: str = Field("", description="Quiz topic (required unless content is given)")
    difficulty: Difficulty = Field("easy", description="Question difficulty")
    num_questions: int = Field(
        5,
        description="Number of questions to generate",
        ge=MIN_QUESTIONS,
        le=MAX_QUESTIONS,
    )
    question_types: list[QuestionType] = Field(
        default_factory=lambda: ["multiple-choice"],
        description="Allowed question types",
        min_length=1,
    )
    content: str | None = Field(None, description="Optional source text to base questions on")
    language: str | None = Field(None, description="Optional language for the questions")
    user_id: str = Field("anonymous", description="Identifier of the requester")

    @model_validator(mode="after")
    def require_topic_or_content(self) -> "GenerateQuizRequest":
        if not self.topic.strip() and not (self.content and self.content.strip()):
            raise ValueError("Either topic or content must be provided")
        return self
