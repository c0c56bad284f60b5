"""Resilience – CircuitBreaker implementation."""
from __future__ import annotations

import logging
from typing import Awaitable

from mp_resilience.kernel.time import Clock, SystemClock
from mp_resilience.resilience.cancellation import CancellationToken, is_token_canceled
from mp_resilience.resilience.circuit_breaker.policy import CircuitBreakerPolicy
from mp_resilience.resilience.circuit_breaker.state import CircuitBreakerState
from mp_resilience.resilience.circuit_breaker.states import (
    CircuitState,
    ClosedState,
    HalfOpenState,
    OpenState,
)
from mp_resilience.resilience.ports import T, Work, handle_all_errors
from mp_resilience.resilience.validators import assert_is_callable

logger = logging.getLogger(__name__)


class CircuitBreaker:
    """Failure-rate circuit breaker guarding one logical operation.

    Starts CLOSED.  Opens once the handled-failure rate inside the sampling
    window crosses the policy threshold, rejects every call with
    :class:`CircuitOpenError` for ``break_duration_ms``, then goes HALF_OPEN
    and lets exactly one probe decide between CLOSED and OPEN again.

    Meant to be shared by all callers of the guarded operation on a single
    event loop; no locking is performed.
    """

    def __init__(
        self,
        policy: CircuitBreakerPolicy | None = None,
        *,
        name: str = "circuit",
        clock: Clock | None = None,
    ) -> None:
        self.name = name
        self._policy = policy or CircuitBreakerPolicy()
        self._should_handle_error = self._policy.should_handle_error or handle_all_errors

        clock = clock or SystemClock()
        self._closed = ClosedState(self, self._policy, clock)
        self._open = OpenState(self, self._policy.break_duration_ms, clock)
        self._half_open = HalfOpenState(self)
        self._state: CircuitState = self._closed

    @property
    def state(self) -> CircuitBreakerState:
        return self._state.kind

    @property
    def policy(self) -> CircuitBreakerPolicy:
        return self._policy

    def should_handle_error(self, error: Exception) -> bool:
        return self._should_handle_error(error)

    def is_in(self, state: CircuitState) -> bool:
        return self._state is state

    def execute_async(
        self, work: Work[T], token: CancellationToken | None = None
    ) -> Awaitable[T | None]:
        """Run *work* through the active state.

        Argument validation happens here, before anything is awaited.
        Resolves to ``None`` without touching the circuit when *token* is
        already canceled.
        """
        assert_is_callable(work, "work must be an async callable.", "work")
        return self._execute_async(work, token)

    async def _execute_async(self, work: Work[T], token: CancellationToken | None) -> T | None:
        if is_token_canceled(token):
            return None
        return await self.execute_in_current_state(work, token)

    def execute_in_current_state(
        self, work: Work[T], token: CancellationToken | None
    ) -> Awaitable[T | None]:
        return self._state.execute_async(work, token)

    def open_circuit(self) -> None:
        if self._transition_to(self._open):
            logger.warning(
                "circuit_breaker.opened name=%s break_duration_ms=%s",
                self.name, self._policy.break_duration_ms,
            )
            if self._policy.on_open is not None:
                self._policy.on_open()

    def half_open_circuit(self) -> None:
        if self._transition_to(self._half_open):
            logger.info("circuit_breaker.half_open name=%s", self.name)

    def close_circuit(self) -> None:
        if self._transition_to(self._closed):
            logger.info("circuit_breaker.closed name=%s", self.name)
            if self._policy.on_close is not None:
                self._policy.on_close()

    def _transition_to(self, new_state: CircuitState) -> bool:
        if self._state is new_state:
            return False
        self._state.exit()
        self._state = new_state
        new_state.enter()
        return True

    def __repr__(self) -> str:
        return f"CircuitBreaker(name={self.name!r}, state={self.state.value})"


__all__ = ["CircuitBreaker"]
