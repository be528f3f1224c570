"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (LLM / cache access)
"""

from .quiz_handler import QuizHandler, status_for

__all__ = [
    "QuizHandler",
    "status_for",
]
