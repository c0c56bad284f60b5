"""Resilience – CancellationTokenSource.

A one-shot, broadcastable cancel flag.  All operations are expected to run on
a single event loop thread, so no locking is performed.

Listener failures are not isolated: the first callback that raises during
:meth:`CancellationTokenSource.cancel` propagates out of ``cancel()`` and the
callbacks registered after it are not invoked.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from mp_resilience.kernel.errors import InvalidArgumentError, ObjectDisposedError
from mp_resilience.resilience.cancellation.token import (
    CancellationRegistration,
    CancellationToken,
)

logger = logging.getLogger(__name__)


class CancellationTokenSource:
    """Owns the cancellation state observed through :attr:`token`.

    Parameters
    ----------
    delay_ms:
        When given, the source cancels itself after this many milliseconds.
        The timer is scheduled on the running event loop and is cleared by
        :meth:`cancel` and :meth:`dispose`.
    """

    def __init__(self, delay_ms: float | None = None) -> None:
        self._registrations: list[CancellationRegistration] = []
        self._linked_registrations: list[CancellationRegistration] = []
        self._is_canceled = False
        self._is_disposed = False
        self._token = CancellationToken(self)
        self._cancel_timer: asyncio.TimerHandle | None = None

        if delay_ms is not None:
            if isinstance(delay_ms, bool) or not isinstance(delay_ms, (int, float)) or delay_ms < 0:
                raise InvalidArgumentError(
                    "If provided, the cancellation delay must be a non-negative number.",
                    argument="delay_ms",
                )
            loop = asyncio.get_running_loop()
            self._cancel_timer = loop.call_later(delay_ms / 1000, self._cancel_after_delay)

    @classmethod
    def create_linked_token_source(cls, *tokens: CancellationToken) -> "CancellationTokenSource":
        """Return a source that is canceled as soon as any of *tokens* is.

        When one of *tokens* is already canceled the new source starts out
        canceled and nothing is registered on any of them.
        """
        for token in tokens:
            if not isinstance(token, CancellationToken):
                raise InvalidArgumentError(
                    f"Expected a CancellationToken, got {type(token).__name__}.",
                    argument="tokens",
                )

        linked = cls()
        if any(token.is_cancellation_requested for token in tokens):
            linked.cancel()
            return linked

        try:
            for token in tokens:
                linked._linked_registrations.append(token.register(linked.cancel))
        except BaseException:
            linked.dispose()
            raise
        return linked

    @property
    def token(self) -> CancellationToken:
        self._assert_not_disposed()
        return self._token

    @property
    def is_cancellation_requested(self) -> bool:
        return self._is_canceled

    @property
    def is_disposed(self) -> bool:
        return self._is_disposed

    def cancel(self) -> None:
        """Request cancellation and run the registered callbacks in order."""
        self._assert_not_disposed()
        if self._is_canceled:
            return

        self._is_canceled = True
        self._clear_timer()
        self._detach_linked()
        registrations, self._registrations = self._registrations, []
        for registration in registrations:
            registration._owner = None

        logger.debug("cancellation.canceled listeners=%d", len(registrations))
        for registration in registrations:
            registration.callback()

    def dispose(self) -> None:
        """Release callbacks, parent links and the pending timer.

        Does not request cancellation.  Afterwards only
        :attr:`is_cancellation_requested` may be read.
        """
        if self._is_disposed:
            return
        self._is_disposed = True
        self._clear_timer()
        self._detach_linked()
        for registration in self._registrations:
            registration._owner = None
        self._registrations = []

    def __enter__(self) -> "CancellationTokenSource":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return (
            f"CancellationTokenSource(canceled={self._is_canceled}, "
            f"disposed={self._is_disposed})"
        )

    def _register(self, callback: Callable[[], object]) -> CancellationRegistration:
        if not callable(callback):
            raise InvalidArgumentError(
                "The registered callback must be callable.", argument="callback"
            )
        self._assert_not_disposed()

        if self._is_canceled:
            callback()
            return CancellationRegistration(callback, None)

        registration = CancellationRegistration(callback, self)
        self._registrations.append(registration)
        return registration

    def _remove_registration(self, registration: CancellationRegistration) -> None:
        for index, candidate in enumerate(self._registrations):
            if candidate is registration:
                del self._registrations[index]
                return

    def _cancel_after_delay(self) -> None:
        self._cancel_timer = None
        if not self._is_disposed:
            self.cancel()

    def _clear_timer(self) -> None:
        if self._cancel_timer is not None:
            self._cancel_timer.cancel()
            self._cancel_timer = None

    def _detach_linked(self) -> None:
        linked, self._linked_registrations = self._linked_registrations, []
        for registration in linked:
            registration.unregister()

    def _assert_not_disposed(self) -> None:
        if self._is_disposed:
            raise ObjectDisposedError("CancellationTokenSource")


__all__ = ["CancellationTokenSource"]
