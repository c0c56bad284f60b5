"""Kernel – framework-agnostic building blocks (errors, time)."""

from mp_resilience.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    InvalidArgumentError,
    ObjectDisposedError,
    OperationCanceledError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "InvalidArgumentError",
    "ObjectDisposedError",
    "OperationCanceledError",
]
