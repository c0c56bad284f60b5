"""Unit tests for kernel time utilities."""

from __future__ import annotations

import pytest

from mp_resilience.kernel.time import Clock, ManualClock, SystemClock


class TestSystemClock:
    def test_is_monotonic(self) -> None:
        clk = SystemClock()
        first = clk.monotonic_ms()
        second = clk.monotonic_ms()
        assert isinstance(first, float)
        assert second >= first

    def test_satisfies_protocol(self) -> None:
        clk: Clock = SystemClock()
        assert clk.monotonic_ms() > 0


class TestManualClock:
    def test_starts_at_given_time(self) -> None:
        assert ManualClock().monotonic_ms() == 0.0
        assert ManualClock(start_ms=500).monotonic_ms() == 500

    def test_only_moves_when_advanced(self) -> None:
        clk = ManualClock()
        assert clk.monotonic_ms() == clk.monotonic_ms()
        clk.advance(25)
        clk.advance(5)
        assert clk.monotonic_ms() == 30

    def test_cannot_move_backwards(self) -> None:
        with pytest.raises(ValueError):
            ManualClock().advance(-1)
