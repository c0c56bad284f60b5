"""Resilience – ports shared by every policy."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, TypeVar

from mp_resilience.resilience.cancellation import CancellationToken

T = TypeVar("T")

Work = Callable[[CancellationToken | None], Awaitable[T]]
"""An asynchronous unit of work; receives the caller's token (or ``None``)."""

ErrorPredicate = Callable[[Exception], bool]


class AsyncExecutor(Protocol):
    """Anything that runs a :data:`Work` under a resilience policy."""

    def execute_async(
        self, work: Work[Any], token: CancellationToken | None = None
    ) -> Awaitable[Any]: ...


def handle_all_errors(error: Exception) -> bool:  # noqa: ARG001
    return True


__all__ = ["AsyncExecutor", "ErrorPredicate", "T", "Work", "handle_all_errors"]
