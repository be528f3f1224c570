"""Completion provider protocol.

Defines the interface for an LLM chat-completion backend. The quiz
generation service sends one user-role prompt per attempt and expects the
completion text back.

Implementations:
- OpenAICompletionProvider: OpenAI chat completions API (default)
- LocalQuestionProvider: deterministic offline output (MOCK_AI mode)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CompletionProvider(Protocol):
    """Protocol for chat-completion services."""

    async def complete(
        self,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Run a single chat completion.

        Args:
            model: Model name (e.g. "gpt-4")
            prompt: Content of the single user-role message
            max_tokens: Completion token ceiling
            temperature: Sampling temperature

        Returns:
            The completion text, or None if the model returned no content
        """
        ...
