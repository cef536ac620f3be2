"""Retry policy for idempotent use cases."""

from typing import Awaitable, Callable, TypeVar

import logfire
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from senatus.domain.error import StorageUnavailableError

T = TypeVar("T")


async def retry_idempotent(
    operation: str, action: Callable[[], Awaitable[T]], max_attempts: int
) -> T:
    """Run an idempotent action, retrying on transient storage failures.

    Only use this for operations that are safe to repeat (vote, unvote,
    reads). Creates must surface the first failure instead. Any other
    error is raised immediately.

    Args:
        operation: Operation name for logging
        action: Zero-argument coroutine factory
        max_attempts: Total attempts including the first

    Returns:
        The action's result

    Raises:
        StorageUnavailableError: If every attempt failed
    """

    def log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logfire.warn(
            "Storage unavailable, retrying",
            operation=operation,
            attempt=retry_state.attempt_number,
            error=str(error),
        )

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=0.05, max=0.5),
        retry=retry_if_exception_type(StorageUnavailableError),
        before_sleep=log_retry,
        reraise=True,
    )

    try:
        async for attempt in retrying:
            with attempt:
                result = await action()
    except StorageUnavailableError as e:
        logfire.error(
            "Storage unavailable, giving up",
            operation=operation,
            attempts=retrying.statistics.get("attempt_number", max_attempts),
            error=str(e),
        )
        raise

    return result
