"""Generic retry with exponential backoff.

The retry policy is kept separate from model selection: the generation
service walks its ordered model descriptors and calls
:func:`retry_with_backoff` once per model.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetrySuccess(Generic[T]):
    """The operation succeeded.

    Attributes:
        value: What the operation returned
        attempts: Number of attempts used (1-based)
    """

    value: T
    attempts: int


@dataclass(frozen=True)
class RetryExhausted:
    """Every attempt failed.

    Attributes:
        errors: The exception raised by each attempt, in order
    """

    errors: list[BaseException] = field(default_factory=list)


RetryResult = RetrySuccess[T] | RetryExhausted


def exponential_delay(attempt: int) -> float:
    """Backoff of ``2 ** attempt`` seconds after the given 1-based attempt."""
    return float(2**attempt)


async def retry_with_backoff(
    operation: Callable[[int], Awaitable[T]],
    attempts: int,
    delay: Callable[[int], float] = exponential_delay,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    label: str = "operation",
) -> "RetryResult[T]":
    """Run ``operation`` until it succeeds or ``attempts`` run out.

    The operation receives the 1-based attempt number. Between attempts the
    coroutine sleeps for ``delay(attempt)`` seconds; there is no sleep after
    the last attempt. Exceptions from the operation are collected, never
    raised.

    Args:
        operation: Async callable taking the attempt number
        attempts: Maximum number of attempts (at least 1)
        delay: Seconds to wait after a failed attempt
        sleep: Awaitable sleep function. Injected in tests.
        label: Name used in log messages

    Returns:
        RetrySuccess with the value, or RetryExhausted with every error
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    errors: list[BaseException] = []
    for attempt in range(1, attempts + 1):
        try:
            value = await operation(attempt)
            return RetrySuccess(value=value, attempts=attempt)
        except Exception as e:
            errors.append(e)
            logger.warning("Attempt %d with %s failed: %s", attempt, label, e)

            if attempt < attempts:
                await sleep(delay(attempt))

    return RetryExhausted(errors=errors)
