"""Resilience – exponential backoff with jitter.

Strategies follow https://aws.amazon.com/blogs/architecture/exponential-backoff-and-jitter/.
Every strategy is callable with the 1-based ``retry_attempt`` so it can be
passed directly as a retry ``sleep_duration_provider``.
"""
from __future__ import annotations

import abc

from mp_resilience.resilience.retry.jitter import EqualJitter, FullJitter, JitterStrategy, NoJitter

DEFAULT_MAX_DELAY_MS = 10_000
DEFAULT_SEED_DELAY_MS = 1_000

# 2.0 ** 1024 overflows a float
_MAX_EXPONENT = 1023


class BackoffStrategy(abc.ABC):
    """Compute the wait duration (milliseconds) after the *retry_attempt*-th failure."""

    @abc.abstractmethod
    def compute(self, retry_attempt: int) -> float: ...

    def __call__(self, retry_attempt: int) -> float:
        return self.compute(retry_attempt)


class ExponentialBackoff(BackoffStrategy):
    """Delay grows exponentially: ``min(max_delay, seed_delay * 2^attempt)``, then jittered."""

    def __init__(
        self,
        seed_delay_ms: float = DEFAULT_SEED_DELAY_MS,
        max_delay_ms: float = DEFAULT_MAX_DELAY_MS,
        jitter: JitterStrategy | None = None,
    ) -> None:
        self._seed = seed_delay_ms
        self._max = max_delay_ms
        self._jitter = jitter or NoJitter()

    def unjittered(self, retry_attempt: int) -> float:
        exponent = min(max(retry_attempt, 0), _MAX_EXPONENT)
        return min(self._max, self._seed * 2.0 ** exponent)

    def compute(self, retry_attempt: int) -> float:
        return self._jitter.apply(self.unjittered(retry_attempt))


def full_jitter(
    retry_attempt: int,
    max_delay_ms: float = DEFAULT_MAX_DELAY_MS,
    seed_delay_ms: float = DEFAULT_SEED_DELAY_MS,
) -> float:
    """Exponential backoff, uniformly jittered over the whole range."""
    return ExponentialBackoff(seed_delay_ms, max_delay_ms, FullJitter()).compute(retry_attempt)


def equal_jitter(
    retry_attempt: int,
    max_delay_ms: float = DEFAULT_MAX_DELAY_MS,
    seed_delay_ms: float = DEFAULT_SEED_DELAY_MS,
) -> float:
    """Exponential backoff, jittered over the upper half of the range."""
    return ExponentialBackoff(seed_delay_ms, max_delay_ms, EqualJitter()).compute(retry_attempt)


__all__ = [
    "DEFAULT_MAX_DELAY_MS",
    "DEFAULT_SEED_DELAY_MS",
    "BackoffStrategy",
    "ExponentialBackoff",
    "equal_jitter",
    "full_jitter",
]
