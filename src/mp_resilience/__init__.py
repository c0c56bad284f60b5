"""
mp_resilience – composable fault-tolerance policies for asyncio work.

Import path convention::

    from mp_resilience import Policy, CancellationTokenSource
    from mp_resilience.resilience.retry import full_jitter
    from mp_resilience.kernel.errors import InvalidArgumentError
    from mp_resilience.observability.logging import JsonLoggerFactory
"""

from mp_resilience.resilience import (
    CancellationToken,
    CancellationTokenSource,
    CircuitBreaker,
    CircuitOpenError,
    Policy,
    PolicyBuilder,
    RetryPolicy,
)
from mp_resilience.resilience.retry import backoff as backoffs

__version__ = "0.1.0"
__all__ = [
    "CancellationToken",
    "CancellationTokenSource",
    "CircuitBreaker",
    "CircuitOpenError",
    "Policy",
    "PolicyBuilder",
    "RetryPolicy",
    "__version__",
    "backoffs",
]
