"""Resilience – CancellationToken and CancellationRegistration."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from mp_resilience.kernel.errors import OperationCanceledError

if TYPE_CHECKING:
    from mp_resilience.resilience.cancellation.source import CancellationTokenSource


class CancellationRegistration:
    """Handle returned by :meth:`CancellationToken.register`.

    Unregistering removes exactly this registration (matched by identity),
    even when the same callback was registered more than once.  A handle for
    a callback that already ran, or was already removed, unregisters as a
    no-op.
    """

    __slots__ = ("_callback", "_owner")

    def __init__(
        self,
        callback: Callable[[], object],
        owner: CancellationTokenSource | None,
    ) -> None:
        self._callback = callback
        self._owner = owner

    @property
    def callback(self) -> Callable[[], object]:
        return self._callback

    @property
    def is_active(self) -> bool:
        """``True`` while the callback is still waiting for cancellation."""
        return self._owner is not None

    def unregister(self) -> None:
        owner, self._owner = self._owner, None
        if owner is not None:
            owner._remove_registration(self)


class CancellationToken:
    """Read-only view of a :class:`CancellationTokenSource` handed to work."""

    __slots__ = ("_source",)

    def __init__(self, source: CancellationTokenSource) -> None:
        self._source = source

    @property
    def is_cancellation_requested(self) -> bool:
        return self._source.is_cancellation_requested

    def raise_if_cancellation_requested(self) -> None:
        """Raise :class:`OperationCanceledError` once cancellation was requested."""
        if self._source.is_cancellation_requested:
            raise OperationCanceledError()

    def register(self, callback: Callable[[], object]) -> CancellationRegistration:
        """Run *callback* when the source is canceled.

        If cancellation was already requested the callback runs right away,
        synchronously, and an inactive registration is returned.
        """
        return self._source._register(callback)

    def unregister(self, registration: CancellationRegistration) -> None:
        registration.unregister()

    def __repr__(self) -> str:
        return f"CancellationToken(canceled={self.is_cancellation_requested})"


def is_token_canceled(token: CancellationToken | None) -> bool:
    """``True`` when *token* is given and cancellation was requested."""
    return token is not None and token.is_cancellation_requested


__all__ = ["CancellationRegistration", "CancellationToken", "is_token_canceled"]
