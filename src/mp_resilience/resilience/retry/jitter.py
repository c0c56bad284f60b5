"""Resilience – jitter strategies."""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    """Apply randomness to a backoff delay to spread thundering-herd.

    An explicit :class:`random.Random` may be passed for reproducible delays.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @abc.abstractmethod
    def apply(self, delay_ms: float) -> float: ...


class NoJitter(JitterStrategy):
    def apply(self, delay_ms: float) -> float:
        return delay_ms


class FullJitter(JitterStrategy):
    """Uniform random in [0, delay]."""

    def apply(self, delay_ms: float) -> float:
        return self._rng.uniform(0, delay_ms)


class EqualJitter(JitterStrategy):
    """Half the delay, plus uniform random in [0, delay/2]."""

    def apply(self, delay_ms: float) -> float:
        half = delay_ms / 2
        return half + self._rng.uniform(0, half)


__all__ = ["EqualJitter", "FullJitter", "JitterStrategy", "NoJitter"]
