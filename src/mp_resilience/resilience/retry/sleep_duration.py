"""Resilience – sleep duration providers for retry policies."""
from __future__ import annotations

import abc
import dataclasses
from typing import Callable, Union


class SleepDuration(abc.ABC):
    """How long to wait (milliseconds) before the next retry."""

    @abc.abstractmethod
    def resolve(self, retry_attempt: int) -> float: ...

    def __call__(self, retry_attempt: int) -> float:
        return self.resolve(retry_attempt)

    @staticmethod
    def of(provider: "SleepDurationProvider | None") -> "SleepDuration":
        """Wrap a bare number or callable; ``None`` means no delay."""
        if provider is None:
            return FixedSleepDuration(0)
        if isinstance(provider, SleepDuration):
            return provider
        if callable(provider):
            return ComputedSleepDuration(provider)
        return FixedSleepDuration(provider)


@dataclasses.dataclass(frozen=True)
class FixedSleepDuration(SleepDuration):
    """The same delay before every retry."""

    duration_ms: float

    def resolve(self, retry_attempt: int) -> float:  # noqa: ARG002
        return self.duration_ms


@dataclasses.dataclass(frozen=True)
class ComputedSleepDuration(SleepDuration):
    """Delay computed from the 1-based number of the attempt that just failed."""

    compute: Callable[[int], float]

    def resolve(self, retry_attempt: int) -> float:
        return self.compute(retry_attempt) or 0


SleepDurationProvider = Union[float, Callable[[int], float], SleepDuration]

__all__ = ["ComputedSleepDuration", "FixedSleepDuration", "SleepDuration", "SleepDurationProvider"]
