"""Resilience – cancellation, retry, circuit breaker and the policy builder."""

from mp_resilience.resilience.cancellation import (
    CancellationRegistration,
    CancellationToken,
    CancellationTokenSource,
    sleep_async,
)
from mp_resilience.resilience.retry import (
    BackoffStrategy,
    EqualJitter,
    ExponentialBackoff,
    FullJitter,
    JitterStrategy,
    NoJitter,
    RetryPolicy,
    TenacityRetryPolicy,
    equal_jitter,
    full_jitter,
)
from mp_resilience.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerPolicy,
    CircuitBreakerState,
    CircuitOpenError,
)
from mp_resilience.resilience.settings import CircuitBreakerSettings, RetrySettings
from mp_resilience.resilience.builder import Policy, PolicyBuilder
from mp_resilience.resilience.ports import AsyncExecutor

__all__ = [
    "AsyncExecutor",
    "BackoffStrategy",
    "CancellationRegistration",
    "CancellationToken",
    "CancellationTokenSource",
    "CircuitBreaker",
    "CircuitBreakerPolicy",
    "CircuitBreakerSettings",
    "CircuitBreakerState",
    "CircuitOpenError",
    "EqualJitter",
    "ExponentialBackoff",
    "FullJitter",
    "JitterStrategy",
    "NoJitter",
    "Policy",
    "PolicyBuilder",
    "RetryPolicy",
    "RetrySettings",
    "TenacityRetryPolicy",
    "equal_jitter",
    "full_jitter",
    "sleep_async",
]
