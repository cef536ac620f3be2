"""Unit tests for the idempotent retry policy."""

import pytest

from senatus.application.usecase.retry import retry_idempotent
from senatus.domain.error import NotFoundError, StorageUnavailableError


class Flaky:
    """Fails a fixed number of times before succeeding."""

    def __init__(self, failures: int, error: Exception | None = None) -> None:
        self.failures = failures
        self.error = error or StorageUnavailableError("vote.upsert")
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return "ok"


class TestRetryIdempotent:
    @pytest.mark.asyncio
    async def test_recovers_from_transient_failures(self):
        action = Flaky(failures=2)

        assert await retry_idempotent("vote", action, max_attempts=3) == "ok"
        assert action.calls == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        action = Flaky(failures=5)

        with pytest.raises(StorageUnavailableError):
            await retry_idempotent("vote", action, max_attempts=3)

        assert action.calls == 3

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self):
        action = Flaky(failures=1, error=NotFoundError("Question", "x"))

        with pytest.raises(NotFoundError):
            await retry_idempotent("vote", action, max_attempts=3)

        assert action.calls == 1

    @pytest.mark.asyncio
    async def test_reraises_the_last_storage_error(self):
        action = Flaky(failures=5)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await retry_idempotent("unvote", action, max_attempts=2)

        assert exc_info.value is action.error
        assert action.calls == 2

    @pytest.mark.asyncio
    async def test_single_attempt_does_not_retry(self):
        action = Flaky(failures=1)

        with pytest.raises(StorageUnavailableError):
            await retry_idempotent("view_topic", action, max_attempts=1)

        assert action.calls == 1
