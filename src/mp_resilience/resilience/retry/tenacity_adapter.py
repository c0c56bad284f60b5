"""Resilience – TenacityRetryPolicy adapter.

Optional dependency: ``tenacity``.  Install with::

    pip install mp-resilience[tenacity]
"""
from __future__ import annotations

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

_CANCELED = object()


class TenacityRetryPolicy:
    """Retry policy backed by the ``tenacity`` library.

    Honours the same contract as
    :class:`~mp_resilience.resilience.retry.policy.RetryPolicy` so the two
    are interchangeable: ``retry_count`` total invocations (``None`` for no
    limit), sleep duration providers in milliseconds, an error predicate,
    :meth:`until_valid_result`, and a cancellation token that stops further
    attempts and wakes pending sleeps.

    Example
    -------
    ::

        from mp_resilience.resilience.retry import TenacityRetryPolicy, full_jitter

        policy = TenacityRetryPolicy(retry_count=5, sleep_duration_provider=full_jitter)
        result = await policy.execute_async(fetch, cts.token)
    """

    def __init__(
        self,
        retry_count: int | None = 3,
        sleep_duration_provider: SleepDurationProvider | None = None,
        should_handle_error: ErrorPredicate | None = None,
        **kwargs: Any,
    ) -> None:
        try:
            import tenacity  # noqa: F401
        except ImportError as exc:
            raise ImportError(
                "Install 'tenacity' (pip install tenacity) to use TenacityRetryPolicy"
            ) from exc

        if retry_count is not None:
            validate_retry_count(retry_count)
        validate_sleep_duration_provider(sleep_duration_provider)
        assert_is_optional_callable(should_handle_error, "should_handle_error")

        self._retry_count = retry_count
        self._sleep_duration = SleepDuration.of(sleep_duration_provider)
        self._should_handle_error = should_handle_error or handle_all_errors
        self._is_valid_result: Callable[[Any], bool] = lambda _result: True
        self._extra_kwargs = kwargs

    def until_valid_result(self, predicate: Callable[[Any], bool]) -> "TenacityRetryPolicy":
        assert_is_callable(
            predicate, "If provided, the result validator must be callable.", "predicate"
        )
        self._is_valid_result = predicate
        return self

    def _build_async_retrying(self, token: CancellationToken | None) -> Any:
        import tenacity as ten

        async def sleep(seconds: float) -> None:
            await sleep_async(seconds * 1000, token)

        def is_handled(error: BaseException) -> bool:
            # asyncio.CancelledError must never be retried
            return isinstance(error, Exception) and self._should_handle_error(error)

        def is_invalid(result: Any) -> bool:
            return result is not _CANCELED and not self._is_valid_result(result)

        def give_up(retry_state: Any) -> Any:
            # last attempt: surface its outcome as-is instead of a RetryError
            return retry_state.outcome.result()

        return ten.AsyncRetrying(
            stop=(
                ten.stop_after_attempt(self._retry_count)
                if self._retry_count is not None
                else ten.stop_never
            ),
            wait=lambda retry_state: self._sleep_duration.resolve(retry_state.attempt_number) / 1000,
            retry=ten.retry_if_exception(is_handled) | ten.retry_if_result(is_invalid),
            sleep=sleep,
            retry_error_callback=give_up,
            **self._extra_kwargs,
        )

    def execute_async(
        self, work: Work[T], token: CancellationToken | None = None
    ) -> Awaitable[T | None]:
        assert_is_callable(work, "work must be an async callable.", "work")
        return self._execute_async(work, token)

    async def _execute_async(self, work: Work[T], token: CancellationToken | None) -> T | None:
        async def attempt(attempt_token: CancellationToken | None) -> Any:
            if is_token_canceled(attempt_token):
                return _CANCELED
            return await work(attempt_token)

        result = await self._build_async_retrying(token)(attempt, token)
        return None if result is _CANCELED else result


__all__ = ["TenacityRetryPolicy"]
