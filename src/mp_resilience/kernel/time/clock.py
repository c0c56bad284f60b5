"""Kernel time – monotonic Clock protocol + implementations."""
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Port: monotonic millisecond clock for deterministic testing."""

    def monotonic_ms(self) -> float: ...


class SystemClock:
    """Production clock that delegates to :func:`time.monotonic`."""

    def monotonic_ms(self) -> float:
        return time.monotonic() * 1000


class ManualClock:
    """Test clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now_ms = start_ms

    def monotonic_ms(self) -> float:
        return self._now_ms

    def advance(self, ms: float) -> None:
        """Move the clock forward by *ms* milliseconds."""
        if ms < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now_ms += ms


__all__ = ["Clock", "ManualClock", "SystemClock"]
