"""Resilience – cooperative cancellation (token sources, tokens, sleep)."""
from mp_resilience.resilience.cancellation.token import (
    CancellationRegistration,
    CancellationToken,
    is_token_canceled,
)
from mp_resilience.resilience.cancellation.source import CancellationTokenSource
from mp_resilience.resilience.cancellation.sleep import sleep_async

__all__ = [
    "CancellationRegistration",
    "CancellationToken",
    "CancellationTokenSource",
    "is_token_canceled",
    "sleep_async",
]
