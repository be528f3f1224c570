"""OpenAI chat-completion provider.

Sends one user-role message per call through the official ``openai`` SDK.
SDK-level retries are disabled: retry and model fallback are the generation
service's job, and provider errors are left to propagate so it can classify
them (rate limit, quota, timeout).
"""

import logging

from openai import AsyncOpenAI

from quiz_generation.config import settings

logger = logging.getLogger(__name__)


class OpenAICompletionProvider:
    """OpenAI implementation of the CompletionProvider protocol.

    This class satisfies the CompletionProvider protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        provider = OpenAICompletionProvider.create()
        text = await provider.complete("gpt-4", "Say hi", max_tokens=16, temperature=0.7)
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key. Defaults to settings.openai_api_key.
            timeout: Per-request network timeout in seconds. Defaults to settings.
            client: Preconfigured AsyncOpenAI client. Built lazily when None.
        """
        self._api_key = api_key or settings.openai_api_key
        self._timeout = timeout or settings.openai_timeout
        self._client = client

    @classmethod
    def create(cls, api_key: str | None = None) -> "OpenAICompletionProvider":
        """Factory method to create OpenAICompletionProvider with defaults.

        Args:
            api_key: API key. If None, uses settings.

        Returns:
            Configured OpenAICompletionProvider
        """
        if not (api_key or settings.openai_api_key):
            logger.error("OpenAI API key is not configured")
        return cls(api_key=api_key)

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy-load the async OpenAI client."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def complete(
        self,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Run a chat completion and return the first choice's text.

        Raises:
            openai.OpenAIError: Any SDK error, unchanged
        """
        completion = await self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
            temperature=temperature,
        )
        if not completion.choices:
            return None
        return completion.choices[0].message.content

    async def close(self) -> None:
        """Close the underlying HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.close()
            self._client = None
