"""Resilience – SlidingTimeWindow."""
from __future__ import annotations

import collections
import dataclasses
from typing import Generic, TypeVar

from mp_resilience.kernel.time import Clock, SystemClock

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class _Entry(Generic[T]):
    timestamp_ms: float
    value: T


class SlidingTimeWindow(Generic[T]):
    """Append-only record of values that only remembers the last ``sampling_duration_ms``.

    Entries are appended in timestamp order, so expired entries always form a
    prefix; they are evicted before every read and every append.
    """

    def __init__(self, sampling_duration_ms: float, clock: Clock | None = None) -> None:
        self.sampling_duration_ms = sampling_duration_ms
        self._clock = clock or SystemClock()
        self._entries: collections.deque[_Entry[T]] = collections.deque()

    @property
    def items(self) -> list[T]:
        self._remove_old_entries()
        return [entry.value for entry in self._entries]

    @property
    def item_count(self) -> int:
        self._remove_old_entries()
        return len(self._entries)

    def add_item(self, value: T) -> None:
        self._remove_old_entries()
        self._entries.append(_Entry(self._clock.monotonic_ms(), value))

    def _remove_old_entries(self) -> None:
        cutoff = self._clock.monotonic_ms() - self.sampling_duration_ms
        while self._entries and self._entries[0].timestamp_ms <= cutoff:
            self._entries.popleft()


__all__ = ["SlidingTimeWindow"]
