"""Resilience – the public names of a circuit breaker's states.

Exposed through :attr:`CircuitBreaker.state`; the behaviour behind each name
lives in :mod:`mp_resilience.resilience.circuit_breaker.states`.
"""
from __future__ import annotations
from enum import Enum


class CircuitBreakerState(str, Enum):
    CLOSED = "CLOSED"  # calls run and outcomes are sampled
    OPEN = "OPEN"  # calls are rejected until the break elapses
    HALF_OPEN = "HALF_OPEN"  # a single probe decides the next state


__all__ = ["CircuitBreakerState"]
