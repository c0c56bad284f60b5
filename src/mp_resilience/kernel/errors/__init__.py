"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   ├── InvalidArgumentError
    │   ├── ObjectDisposedError
    │   └── OperationCanceledError
    └── InfrastructureError  (infrastructure.py)

Errors raised by the wrapped work are never part of this hierarchy; they
pass through the policies unchanged.
"""

from mp_resilience.kernel.errors.application import (
    ApplicationError,
    InvalidArgumentError,
    ObjectDisposedError,
    OperationCanceledError,
)
from mp_resilience.kernel.errors.base import BaseError
from mp_resilience.kernel.errors.infrastructure import InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "InvalidArgumentError",
    "ObjectDisposedError",
    "OperationCanceledError",
]
