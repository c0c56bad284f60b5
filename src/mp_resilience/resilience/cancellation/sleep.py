"""Resilience – cancellation-aware sleep."""
from __future__ import annotations

import asyncio

from mp_resilience.resilience.cancellation.token import (
    CancellationRegistration,
    CancellationToken,
)


async def sleep_async(duration_ms: float, token: CancellationToken | None = None) -> None:
    """Sleep for *duration_ms*, waking early when *token* is canceled.

    Whichever way the sleep ends, the timer is cancelled and the cancellation
    callback is unregistered.  A falsy duration returns without yielding.
    """
    if not duration_ms:
        return

    loop = asyncio.get_running_loop()
    waiter: asyncio.Future[None] = loop.create_future()
    registration: CancellationRegistration | None = None

    def wake() -> None:
        timer.cancel()
        if registration is not None:
            registration.unregister()
        if not waiter.done():
            waiter.set_result(None)

    timer = loop.call_later(duration_ms / 1000, wake)
    if token is not None:
        # may call wake() synchronously when the token is already canceled
        registration = token.register(wake)

    try:
        await waiter
    finally:
        timer.cancel()
        if registration is not None:
            registration.unregister()


__all__ = ["sleep_async"]
