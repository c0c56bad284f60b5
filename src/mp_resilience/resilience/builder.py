"""Resilience – PolicyBuilder, the fluent entry point for creating policies.

Usage::

    from mp_resilience.resilience import Policy, full_jitter

    retry = Policy.handle_error(lambda e: isinstance(e, IOError)).wait_and_retry(
        retry_count=5, sleep_duration_provider=full_jitter,
    )
    breaker = Policy.circuit_breaker(
        sampling_duration_ms=10_000,
        failure_threshold=0.5,
        minimum_throughput=10,
        break_duration_ms=30_000,
    )
    result = await retry.execute_async(
        lambda token: breaker.execute_async(call_remote, token), cts.token
    )
"""
from __future__ import annotations

from typing import Callable

from mp_resilience.kernel.time import Clock
from mp_resilience.resilience.circuit_breaker import CircuitBreaker, CircuitBreakerPolicy
from mp_resilience.resilience.ports import ErrorPredicate
from mp_resilience.resilience.retry import RetryPolicy, SleepDurationProvider
from mp_resilience.resilience.settings import CircuitBreakerSettings, RetrySettings
from mp_resilience.resilience.validators import (
    assert_is_callable,
    assert_is_optional_callable,
    validate_retry_count,
    validate_sleep_duration_provider,
)


class PolicyBuilder:
    """Immutable builder; :meth:`handle_error` returns a new builder."""

    def __init__(self, error_predicate: ErrorPredicate | None = None) -> None:
        self._error_predicate = error_predicate

    def handle_error(self, error_predicate: ErrorPredicate) -> "PolicyBuilder":
        """Only errors accepted by *error_predicate* are retried / counted."""
        assert_is_callable(
            error_predicate, "Error predicate must be callable.", "error_predicate"
        )
        return PolicyBuilder(error_predicate)

    def wait_and_retry(
        self,
        retry_count: int,
        sleep_duration_provider: SleepDurationProvider | None = None,
    ) -> RetryPolicy:
        """Invoke the work at most *retry_count* times in total."""
        validate_retry_count(retry_count)
        validate_sleep_duration_provider(sleep_duration_provider)
        return RetryPolicy(retry_count, sleep_duration_provider, self._error_predicate)

    def wait_and_retry_forever(
        self, sleep_duration_provider: SleepDurationProvider | None = None
    ) -> RetryPolicy:
        validate_sleep_duration_provider(sleep_duration_provider)
        return RetryPolicy(None, sleep_duration_provider, self._error_predicate)

    def circuit_breaker(
        self,
        sampling_duration_ms: float,
        failure_threshold: float,
        minimum_throughput: int,
        break_duration_ms: float,
        on_open: Callable[[], object] | None = None,
        on_close: Callable[[], object] | None = None,
        *,
        name: str = "circuit",
        clock: Clock | None = None,
    ) -> CircuitBreaker:
        assert_is_optional_callable(on_open, "on_open")
        assert_is_optional_callable(on_close, "on_close")
        policy = CircuitBreakerPolicy(
            sampling_duration_ms=sampling_duration_ms,
            failure_threshold=failure_threshold,
            minimum_throughput=minimum_throughput,
            break_duration_ms=break_duration_ms,
            on_open=on_open,
            on_close=on_close,
            should_handle_error=self._error_predicate,
        )
        return CircuitBreaker(policy, name=name, clock=clock)

    def retry_from_settings(self, settings: RetrySettings) -> RetryPolicy:
        sleep_duration = settings.sleep_duration_ms or None
        if settings.forever:
            return self.wait_and_retry_forever(sleep_duration)
        return self.wait_and_retry(settings.retry_count, sleep_duration)

    def circuit_breaker_from_settings(
        self,
        settings: CircuitBreakerSettings,
        on_open: Callable[[], object] | None = None,
        on_close: Callable[[], object] | None = None,
    ) -> CircuitBreaker:
        return self.circuit_breaker(
            settings.sampling_duration_ms,
            settings.failure_threshold,
            settings.minimum_throughput,
            settings.break_duration_ms,
            on_open,
            on_close,
            name=settings.name,
        )


Policy = PolicyBuilder()
"""Default builder that handles every error."""

__all__ = ["Policy", "PolicyBuilder"]
