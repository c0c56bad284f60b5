"""Resilience – Circuit Breaker pattern."""
from mp_resilience.resilience.circuit_breaker.state import CircuitBreakerState
from mp_resilience.resilience.circuit_breaker.errors import CircuitOpenError
from mp_resilience.resilience.circuit_breaker.policy import CircuitBreakerPolicy
from mp_resilience.resilience.circuit_breaker.window import SlidingTimeWindow
from mp_resilience.resilience.circuit_breaker.breaker import CircuitBreaker

__all__ = [
    "CircuitBreaker",
    "CircuitBreakerPolicy",
    "CircuitBreakerState",
    "CircuitOpenError",
    "SlidingTimeWindow",
]
