"""Resilience – circuit-breaker specific errors."""
from __future__ import annotations

from typing import Any

from mp_resilience.kernel.errors import InfrastructureError
from mp_resilience.resilience.circuit_breaker.state import CircuitBreakerState


class CircuitOpenError(InfrastructureError):
    """Raised instead of invoking work while a :class:`CircuitBreaker` rejects calls.

    That is the case while the circuit is OPEN, and while it is HALF_OPEN with
    a probe already in flight.  The wrapped work is never invoked.

    Attributes
    ----------
    circuit_name:
        Name of the circuit breaker that rejected the call.
    state:
        State the breaker was in when it rejected the call.
    """

    default_code = "circuit_open"

    def __init__(
        self,
        circuit_name: str,
        state: CircuitBreakerState = CircuitBreakerState.OPEN,
        message: str | None = None,
    ) -> None:
        self.circuit_name = circuit_name
        self.state = state
        super().__init__(message or f"Circuit breaker '{circuit_name}' is {state.value}")

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["circuit_name"] = self.circuit_name
        base["state"] = self.state.value
        return base


__all__ = ["CircuitOpenError"]
