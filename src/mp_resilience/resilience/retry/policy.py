"""Resilience – RetryPolicy."""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from mp_resilience.resilience.cancellation import CancellationToken, is_token_canceled, sleep_async
from mp_resilience.resilience.ports import ErrorPredicate, T, Work, handle_all_errors
from mp_resilience.resilience.retry.sleep_duration import SleepDuration, SleepDurationProvider
from mp_resilience.resilience.validators import (
    assert_is_callable,
    assert_is_optional_callable,
    validate_retry_count,
    validate_sleep_duration_provider,
)

logger = logging.getLogger(__name__)


def _always_valid(result: Any) -> bool:  # noqa: ARG001
    return True


class RetryPolicy:
    """Invoke work up to ``retry_count`` times in total, sleeping between attempts.

    ``retry_count=None`` retries forever (until success, an unhandled error
    or cancellation).  The last attempt is not guarded: whatever it returns
    or raises reaches the caller unchanged.
    """

    def __init__(
        self,
        retry_count: int | None = 3,
        sleep_duration_provider: SleepDurationProvider | None = None,
        should_handle_error: ErrorPredicate | None = None,
    ) -> None:
        if retry_count is not None:
            validate_retry_count(retry_count)
        validate_sleep_duration_provider(sleep_duration_provider)
        assert_is_optional_callable(should_handle_error, "should_handle_error")

        self._retry_count = retry_count
        self._sleep_duration = SleepDuration.of(sleep_duration_provider)
        self._should_handle_error = should_handle_error or handle_all_errors
        self._is_valid_result: Callable[[Any], bool] = _always_valid

    @property
    def retry_count(self) -> int | None:
        return self._retry_count

    @property
    def sleep_duration(self) -> SleepDuration:
        return self._sleep_duration

    def until_valid_result(self, predicate: Callable[[Any], bool]) -> "RetryPolicy":
        """Treat results rejected by *predicate* like handled failures."""
        assert_is_callable(
            predicate, "If provided, the result validator must be callable.", "predicate"
        )
        self._is_valid_result = predicate
        return self

    def execute_async(
        self, work: Work[T], token: CancellationToken | None = None
    ) -> Awaitable[T | None]:
        """Run *work* under this policy.

        Argument validation happens here, before anything is awaited.
        Resolves to ``None`` when *token* is canceled before an attempt.
        """
        assert_is_callable(work, "work must be an async callable.", "work")
        return self._execute_async(work, token)

    async def _execute_async(self, work: Work[T], token: CancellationToken | None) -> T | None:
        attempt = 1
        while self._retry_count is None or attempt < self._retry_count:
            if is_token_canceled(token):
                return None

            try:
                result = await work(token)
            except Exception as exc:
                if not self._should_handle_error(exc):
                    raise
                logger.debug("retry.attempt_failed attempt=%d exc=%r", attempt, exc)
            else:
                if self._is_valid_result(result):
                    return result
                logger.debug("retry.invalid_result attempt=%d", attempt)

            delay_ms = self._sleep_duration.resolve(attempt)
            logger.debug("retry.sleep attempt=%d delay_ms=%.1f", attempt, delay_ms)
            await sleep_async(delay_ms, token)
            attempt += 1

        if is_token_canceled(token):
            return None
        return await work(token)


__all__ = ["RetryPolicy"]
