"""Infrastructure errors – failures of, or protection from, external resources."""

from __future__ import annotations

from mp_resilience.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not caused by caller misuse."""

    default_code = "infrastructure_error"


__all__ = ["InfrastructureError"]
