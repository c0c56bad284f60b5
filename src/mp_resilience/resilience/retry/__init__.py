"""Resilience – retry with configurable backoff and jitter strategies."""
from mp_resilience.resilience.retry.jitter import EqualJitter, FullJitter, JitterStrategy, NoJitter
from mp_resilience.resilience.retry.backoff import (
    BackoffStrategy,
    ExponentialBackoff,
    equal_jitter,
    full_jitter,
)
from mp_resilience.resilience.retry.sleep_duration import (
    ComputedSleepDuration,
    FixedSleepDuration,
    SleepDuration,
    SleepDurationProvider,
)
from mp_resilience.resilience.retry.policy import RetryPolicy
from mp_resilience.resilience.retry.tenacity_adapter import TenacityRetryPolicy

__all__ = [
    "BackoffStrategy",
    "ComputedSleepDuration",
    "EqualJitter",
    "ExponentialBackoff",
    "FixedSleepDuration",
    "FullJitter",
    "JitterStrategy",
    "NoJitter",
    "RetryPolicy",
    "SleepDuration",
    "SleepDurationProvider",
    "TenacityRetryPolicy",
    "equal_jitter",
    "full_jitter",
]
