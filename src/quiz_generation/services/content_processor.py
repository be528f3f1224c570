"""Source content preparation for generation prompts."""

import re

MAX_CONTENT_LENGTH = 10_000
TRUNCATION_MARKER = "..."

_WHITESPACE_RE = re.compile(r"\s+")


class ContentProcessor:
    """Normalizes user-supplied source text before it is embedded in a prompt."""

    def __init__(self, max_length: int = MAX_CONTENT_LENGTH) -> None:
        self._max_length = max_length

    def process_content(self, text: str) -> str:
        """Collapse whitespace, trim, and truncate to the maximum length.

        Truncated text gets TRUNCATION_MARKER appended, so the result can be
        up to ``max_length + 3`` characters long.

        Args:
            text: Raw source text (may be empty)

        Returns:
            The normalized text
        """
        processed = _WHITESPACE_RE.sub(" ", text).strip()

        if len(processed) > self._max_length:
            processed = processed[: self._max_length] + TRUNCATION_MARKER

        return processed
