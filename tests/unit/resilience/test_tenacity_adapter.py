"""Unit tests for TenacityRetryPolicy."""

from __future__ import annotations

import asyncio
import time

import pytest

pytest.importorskip("tenacity")

from mp_resilience.kernel.errors import InvalidArgumentError  # noqa: E402
from mp_resilience.resilience.cancellation import (  # noqa: E402
    CancellationToken,
    CancellationTokenSource,
)
from mp_resilience.resilience.retry import TenacityRetryPolicy  # noqa: E402


class Flaky:
    def __init__(self, failures: int, error: Exception | None = None) -> None:
        self.failures = failures
        self.error = error or RuntimeError("fail")
        self.calls = 0

    async def __call__(self, _token: CancellationToken | None) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return "ok"


class TestTenacityRetryPolicy:
    def test_invokes_retry_count_times_then_raises_last_error(self) -> None:
        async def run() -> None:
            work = Flaky(failures=10)
            policy = TenacityRetryPolicy(retry_count=4)
            with pytest.raises(RuntimeError, match="fail"):
                await policy.execute_async(work)
            assert work.calls == 4

        asyncio.run(run())

    def test_returns_first_success(self) -> None:
        async def run() -> None:
            work = Flaky(failures=2)
            policy = TenacityRetryPolicy(retry_count=5)
            assert await policy.execute_async(work) == "ok"
            assert work.calls == 3

        asyncio.run(run())

    def test_unhandled_error_is_not_retried(self) -> None:
        async def run() -> None:
            work = Flaky(failures=10, error=KeyError("k"))
            policy = TenacityRetryPolicy(
                retry_count=5, should_handle_error=lambda e: isinstance(e, RuntimeError)
            )
            with pytest.raises(KeyError):
                await policy.execute_async(work)
            assert work.calls == 1

        asyncio.run(run())

    def test_asyncio_cancellation_is_not_retried(self) -> None:
        calls = 0

        async def work(_token: CancellationToken | None) -> None:
            nonlocal calls
            calls += 1
            raise asyncio.CancelledError()

        async def run() -> None:
            await TenacityRetryPolicy(retry_count=5).execute_async(work)

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(run())
        assert calls == 1

    def test_until_valid_result_retries_invalid_results(self) -> None:
        async def run() -> None:
            results = iter([1, 2, 3, 4])

            async def work(_token: CancellationToken | None) -> int:
                return next(results)

            policy = TenacityRetryPolicy(retry_count=5).until_valid_result(lambda r: r >= 3)
            assert await policy.execute_async(work) == 3

        asyncio.run(run())

    def test_last_invalid_result_is_returned(self) -> None:
        async def run() -> None:
            calls = 0

            async def work(_token: CancellationToken | None) -> int:
                nonlocal calls
                calls += 1
                return -1

            policy = TenacityRetryPolicy(retry_count=3).until_valid_result(lambda r: r > 0)
            assert await policy.execute_async(work) == -1
            assert calls == 3

        asyncio.run(run())

    def test_canceled_token_skips_work(self) -> None:
        async def run() -> None:
            cts = CancellationTokenSource()
            cts.cancel()
            work = Flaky(failures=0)
            assert await TenacityRetryPolicy().execute_async(work, cts.token) is None
            assert work.calls == 0

        asyncio.run(run())

    def test_cancel_during_sleep_stops_retrying(self) -> None:
        async def run() -> None:
            cts = CancellationTokenSource()
            work = Flaky(failures=10)
            policy = TenacityRetryPolicy(retry_count=5, sleep_duration_provider=5_000)
            asyncio.get_running_loop().call_later(0.02, cts.cancel)

            started = time.monotonic()
            assert await policy.execute_async(work, cts.token) is None
            assert time.monotonic() - started < 1
            assert work.calls == 1

        asyncio.run(run())

    def test_sleep_provider_receives_attempt_numbers(self) -> None:
        async def run() -> None:
            seen: list[int] = []

            def provider(retry_attempt: int) -> float:
                seen.append(retry_attempt)
                return 0

            with pytest.raises(RuntimeError):
                await TenacityRetryPolicy(
                    retry_count=4, sleep_duration_provider=provider
                ).execute_async(Flaky(failures=10))
            assert seen == [1, 2, 3]

        asyncio.run(run())

    def test_unbounded_retries_until_success(self) -> None:
        async def run() -> None:
            work = Flaky(failures=20)
            assert await TenacityRetryPolicy(retry_count=None).execute_async(work) == "ok"
            assert work.calls == 21

        asyncio.run(run())

    @pytest.mark.parametrize("retry_count", [0, -1, 1.5, True, "3"])
    def test_rejects_invalid_retry_count(self, retry_count: object) -> None:
        with pytest.raises(InvalidArgumentError):
            TenacityRetryPolicy(retry_count=retry_count)  # type: ignore[arg-type]

    def test_rejects_non_callable_work(self) -> None:
        with pytest.raises(InvalidArgumentError):
            TenacityRetryPolicy().execute_async("work")  # type: ignore[arg-type]
