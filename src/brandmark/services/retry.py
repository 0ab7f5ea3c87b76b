"""Retry with exponential backoff for generative collaborator calls.

Only transient failures are retried: HTTP 503, an "UNAVAILABLE" status, or
"overloaded" in the error message. Everything else fails immediately.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import structlog

from brandmark.exceptions import PermanentServiceError, TransientServiceError

logger = structlog.get_logger("brandmark")

T = TypeVar("T")


def is_transient_error(error: BaseException) -> bool:
    """Check an exception for a transient overload/unavailable signature."""
    if isinstance(error, TransientServiceError):
        return True
    status = getattr(error, "status", None)
    if status is None:
        status = getattr(error, "status_code", None)
    if status == 503 or status == "UNAVAILABLE":
        return True
    return "overloaded" in str(error)


async def with_retry(
    fn: Callable[[], Awaitable[T]],
    retries: int = 3,
    base_delay: float = 1.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Call fn, retrying transient failures with doubling delays.

    Args:
        fn: Zero-argument coroutine factory performing one attempt
        retries: Retries allowed after the first attempt
        base_delay: Delay before the first retry, in seconds
        sleep: Awaitable sleep, replaceable in tests

    Returns:
        The first successful result

    Raises:
        TransientServiceError: If every attempt failed transiently
        PermanentServiceError: On the first non-transient failure
    """
    delay = base_delay
    attempt = 0

    while True:
        attempt += 1
        try:
            return await fn()
        except Exception as e:
            if not is_transient_error(e):
                if isinstance(e, PermanentServiceError):
                    raise
                raise PermanentServiceError(str(e) or type(e).__name__) from e
            if attempt > retries:
                reason = e.reason if isinstance(e, TransientServiceError) else str(e)
                raise TransientServiceError(attempt, reason) from e

            logger.warning(
                "Request failed, retrying",
                attempt=attempt,
                retries_left=retries - attempt + 1,
                delay_ms=round(delay * 1000),
                error=str(e),
            )
            await sleep(delay)
            delay *= 2
