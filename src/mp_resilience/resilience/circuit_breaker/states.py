"""Resilience – the three circuit breaker states.

Each state owns its private data and decides how a call is executed while it
is active.  Transitions are requested through the owning breaker's
``open_circuit`` / ``half_open_circuit`` / ``close_circuit`` hooks.
"""
from __future__ import annotations

import abc
import asyncio
import dataclasses
from typing import TYPE_CHECKING, Any, ClassVar

from mp_resilience.kernel.time import Clock
from mp_resilience.resilience.cancellation import CancellationToken
from mp_resilience.resilience.circuit_breaker.errors import CircuitOpenError
from mp_resilience.resilience.circuit_breaker.policy import CircuitBreakerPolicy
from mp_resilience.resilience.circuit_breaker.state import CircuitBreakerState
from mp_resilience.resilience.circuit_breaker.window import SlidingTimeWindow
from mp_resilience.resilience.ports import Work

if TYPE_CHECKING:
    from mp_resilience.resilience.circuit_breaker.breaker import CircuitBreaker


@dataclasses.dataclass(frozen=True)
class InvocationRecord:
    did_fail: bool


class CircuitState(abc.ABC):
    kind: ClassVar[CircuitBreakerState]

    def __init__(self, breaker: CircuitBreaker) -> None:
        self._breaker = breaker

    def enter(self) -> None:
        """Called once each time the breaker switches to this state."""

    def exit(self) -> None:
        """Called once each time the breaker switches away from this state."""

    @abc.abstractmethod
    async def execute_async(self, work: Work[Any], token: CancellationToken | None) -> Any: ...


class ClosedState(CircuitState):
    kind = CircuitBreakerState.CLOSED

    def __init__(self, breaker: CircuitBreaker, policy: CircuitBreakerPolicy, clock: Clock) -> None:
        super().__init__(breaker)
        self._failure_threshold = policy.failure_threshold
        self._minimum_throughput = policy.minimum_throughput
        self._records: SlidingTimeWindow[InvocationRecord] = SlidingTimeWindow(
            policy.sampling_duration_ms, clock
        )
        self._has_opened_circuit = False

    def enter(self) -> None:
        self._has_opened_circuit = False

    async def execute_async(self, work: Work[Any], token: CancellationToken | None) -> Any:
        try:
            result = await work(token)
        except Exception as exc:
            if self._breaker.should_handle_error(exc):
                self._record_failure()
            raise

        self._records.add_item(InvocationRecord(did_fail=False))
        return result

    def _record_failure(self) -> None:
        self._records.add_item(InvocationRecord(did_fail=True))
        # calls still in flight after the circuit left CLOSED must not re-open it
        if self._has_opened_circuit or not self._breaker.is_in(self):
            return

        records = self._records.items
        attempts = len(records)
        if attempts <= self._minimum_throughput:
            return

        failed = sum(1 for record in records if record.did_fail)
        if failed / attempts > self._failure_threshold:
            self._has_opened_circuit = True
            self._breaker.open_circuit()


class OpenState(CircuitState):
    """Rejects calls until ``break_duration_ms`` has elapsed.

    The move to HALF_OPEN is driven by a timer on the running loop.  The
    elapsed time is also checked on every rejected call, so the breaker still
    recovers when the timer could not be scheduled or its loop has closed.
    """

    kind = CircuitBreakerState.OPEN

    def __init__(self, breaker: CircuitBreaker, break_duration_ms: float, clock: Clock) -> None:
        super().__init__(breaker)
        self._break_duration_ms = break_duration_ms
        self._clock = clock
        self._opened_at_ms = 0.0
        self._timer: asyncio.TimerHandle | None = None

    def enter(self) -> None:
        self._opened_at_ms = self._clock.monotonic_ms()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # no loop to schedule on; execute_async checks the elapsed break
            return
        self._timer = loop.call_later(self._break_duration_ms / 1000, self._on_break_elapsed)

    def exit(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def execute_async(self, work: Work[Any], token: CancellationToken | None) -> Any:
        if self._clock.monotonic_ms() - self._opened_at_ms >= self._break_duration_ms:
            self._breaker.half_open_circuit()
            return await self._breaker.execute_in_current_state(work, token)
        raise CircuitOpenError(self._breaker.name, self.kind)

    def _on_break_elapsed(self) -> None:
        self._timer = None
        self._breaker.half_open_circuit()


class HalfOpenState(CircuitState):
    kind = CircuitBreakerState.HALF_OPEN

    def __init__(self, breaker: CircuitBreaker) -> None:
        super().__init__(breaker)
        self._is_probing = False

    def enter(self) -> None:
        self._is_probing = False

    async def execute_async(self, work: Work[Any], token: CancellationToken | None) -> Any:
        if self._is_probing:
            raise CircuitOpenError(
                self._breaker.name,
                self.kind,
                f"Circuit breaker '{self._breaker.name}' is HALF_OPEN and already probing",
            )

        self._is_probing = True
        try:
            result = await work(token)
        except asyncio.CancelledError:
            self._is_probing = False
            raise
        except Exception:
            if self._breaker.is_in(self):
                self._breaker.open_circuit()
            raise

        if self._breaker.is_in(self):
            self._breaker.close_circuit()
        return result


__all__ = ["CircuitState", "ClosedState", "HalfOpenState", "InvocationRecord", "OpenState"]
