"""Application-layer errors – misuse of the policy API by the caller."""

from __future__ import annotations

from typing import Any

from mp_resilience.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidArgumentError(ApplicationError):
    """A configuration value or argument is invalid (e.g. not callable).

    Raised synchronously at call time and never retried.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument


class ObjectDisposedError(ApplicationError):
    """A disposed object was used."""

    default_code = "object_disposed"

    def __init__(self, object_name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Using the {object_name} after disposal is prohibited.", **kwargs
        )
        self.object_name = object_name


class OperationCanceledError(ApplicationError):
    """Cancellation was requested on the observed token."""

    default_code = "operation_canceled"

    def __init__(self, message: str = "canceled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "InvalidArgumentError",
    "ObjectDisposedError",
    "OperationCanceledError",
]
