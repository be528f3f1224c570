"""Error taxonomy for quiz generation.

Every error carries a user-facing ``message`` that the HTTP layer can return
as-is. Provider-side kinds (rate limit, quota, timeout) are subclasses of
AllModelsExhaustedError, picked from the last underlying SDK error by
:func:`classify_provider_error`.
"""

from typing import Any

GENERIC_FAILURE_MESSAGE = "Failed to generate quiz. Please try again with different parameters."


class QuizGenerationError(Exception):
    """Base class for all quiz generation failures."""

    message: str = GENERIC_FAILURE_MESSAGE

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.message
        super().__init__(self.detail)


class EmptyModelResponseError(QuizGenerationError):
    """The model returned a completion without text content."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(f"Empty response from {model}")


class ResponseParseError(QuizGenerationError):
    """The model output did not contain a usable JSON array of questions."""

    message = "Invalid response format from AI"


class QuestionValidationError(QuizGenerationError):
    """A generated question failed structural validation."""

    def __init__(self, index: int, field: str, reason: str) -> None:
        self.index = index
        self.field = field
        super().__init__(f"Question {index} {reason}")


class AllModelsExhaustedError(QuizGenerationError):
    """Every configured model used up its attempts without a response."""

    def __init__(self, errors: list[BaseException] | None = None) -> None:
        self.errors = list(errors or [])
        super().__init__("All AI models failed to generate quiz")

    @property
    def last_error(self) -> BaseException | None:
        return self.errors[-1] if self.errors else None


class RateLimitedError(AllModelsExhaustedError):
    """Attempts ran out and the last failure was a provider rate limit."""

    message = "Rate limit exceeded. Please try again in a moment."


class QuotaExceededError(AllModelsExhaustedError):
    message = "Service temporarily unavailable. Please try again later."


class GenerationTimeoutError(AllModelsExhaustedError):
    message = "Request timeout. Please try again."


_QUOTA_MARKERS = ("exceeded your current quota", "check your plan and billing details")


def classify_provider_error(error: BaseException) -> type[AllModelsExhaustedError] | None:
    """Map an underlying provider error to a provider-side error kind.

    Inspects the error's ``code``/``status_code`` attributes, its class name
    (``openai.RateLimitError``, ``openai.APITimeoutError``) and its message.

    Returns:
        The matching error class, or None when the error is not provider-side.
    """
    code: Any = getattr(error, "code", None)
    status_code: Any = getattr(error, "status_code", None)
    name = type(error).__name__
    text = str(error).lower()

    if code == "insufficient_quota" or any(marker in text for marker in _QUOTA_MARKERS):
        return QuotaExceededError
    if code == "rate_limit_exceeded" or status_code == 429 or name == "RateLimitError":
        return RateLimitedError
    if name in ("APITimeoutError", "TimeoutError", "TimeoutException") or "timeout" in text:
        return GenerationTimeoutError
    return None
