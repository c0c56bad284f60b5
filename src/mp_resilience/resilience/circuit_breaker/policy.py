"""Resilience – CircuitBreakerPolicy."""
from __future__ import annotations

import dataclasses
from typing import Callable

from mp_resilience.resilience.ports import ErrorPredicate
from mp_resilience.resilience.validators import (
    assert_is_optional_callable,
    validate_break_duration_ms,
    validate_failure_threshold,
    validate_minimum_throughput,
    validate_sampling_duration_ms,
)


@dataclasses.dataclass(frozen=True)
class CircuitBreakerPolicy:
    """Configuration for a circuit breaker.

    The circuit opens when, within the last ``sampling_duration_ms``, more
    than ``minimum_throughput`` calls were recorded and more than
    ``failure_threshold`` of them failed.  It stays open for
    ``break_duration_ms`` before letting a single probe through.
    """

    sampling_duration_ms: float = 10_000
    failure_threshold: float = 0.5
    minimum_throughput: int = 10
    break_duration_ms: float = 30_000
    on_open: Callable[[], object] | None = None
    on_close: Callable[[], object] | None = None
    should_handle_error: ErrorPredicate | None = None

    def __post_init__(self) -> None:
        validate_sampling_duration_ms(self.sampling_duration_ms)
        validate_failure_threshold(self.failure_threshold)
        validate_minimum_throughput(self.minimum_throughput)
        validate_break_duration_ms(self.break_duration_ms)
        assert_is_optional_callable(self.on_open, "on_open")
        assert_is_optional_callable(self.on_close, "on_close")
        assert_is_optional_callable(self.should_handle_error, "should_handle_error")


__all__ = ["CircuitBreakerPolicy"]
