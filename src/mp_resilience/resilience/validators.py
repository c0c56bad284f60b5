"""Resilience – argument validation shared by the builder, settings and policies.

Every check raises :class:`~mp_resilience.kernel.errors.InvalidArgumentError`.
"""
from __future__ import annotations

from typing import Any, Callable

from mp_resilience.kernel.errors import InvalidArgumentError

MIN_SAMPLING_DURATION_MS = 20
MIN_BREAK_DURATION_MS = 20
MIN_MINIMUM_THROUGHPUT = 2

Validator = Callable[[Any], None]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def assert_is_callable(value: Any, message: str, argument: str | None = None) -> None:
    if not callable(value):
        raise InvalidArgumentError(message, argument=argument)


def assert_is_optional_callable(value: Any, argument: str) -> None:
    if value is not None and not callable(value):
        raise InvalidArgumentError(f"If provided, {argument} must be callable.", argument=argument)


def assert_is_number(value: Any, name: str, argument: str) -> None:
    if not _is_number(value):
        raise InvalidArgumentError(f"{name} must be a number.", argument=argument)


def validate_retry_count(retry_count: Any) -> None:
    if not isinstance(retry_count, int) or isinstance(retry_count, bool):
        raise InvalidArgumentError("Retry count must be an integer.", argument="retry_count")
    if retry_count <= 0:
        raise InvalidArgumentError("Retry count must be greater than 0.", argument="retry_count")


def validate_sleep_duration_provider(provider: Any) -> None:
    if provider is None or callable(provider):
        return
    if not _is_number(provider):
        raise InvalidArgumentError(
            "If provided, the sleep duration provider must be a callable or a number.",
            argument="sleep_duration_provider",
        )
    if provider < 0:
        raise InvalidArgumentError(
            "A fixed sleep duration must not be negative.",
            argument="sleep_duration_provider",
        )


def validate_sampling_duration_ms(sampling_duration_ms: Any) -> None:
    assert_is_number(sampling_duration_ms, "Sampling duration", "sampling_duration_ms")
    if sampling_duration_ms < MIN_SAMPLING_DURATION_MS:
        raise InvalidArgumentError(
            f"Sampling duration must be greater than or equal to "
            f"{MIN_SAMPLING_DURATION_MS} milliseconds.",
            argument="sampling_duration_ms",
        )


def validate_failure_threshold(failure_threshold: Any) -> None:
    assert_is_number(failure_threshold, "Failure threshold", "failure_threshold")
    if failure_threshold <= 0 or failure_threshold >= 1:
        raise InvalidArgumentError(
            "Failure threshold must be in the range (0, 1).", argument="failure_threshold"
        )


def validate_minimum_throughput(minimum_throughput: Any) -> None:
    if not isinstance(minimum_throughput, int) or isinstance(minimum_throughput, bool):
        raise InvalidArgumentError(
            "Minimum throughput must be an integer.", argument="minimum_throughput"
        )
    if minimum_throughput < MIN_MINIMUM_THROUGHPUT:
        raise InvalidArgumentError(
            "Minimum throughput must be greater than or equal to two.",
            argument="minimum_throughput",
        )


def validate_break_duration_ms(break_duration_ms: Any) -> None:
    assert_is_number(break_duration_ms, "Break duration", "break_duration_ms")
    if break_duration_ms < MIN_BREAK_DURATION_MS:
        raise InvalidArgumentError(
            f"Break duration must be greater than or equal to "
            f"{MIN_BREAK_DURATION_MS} milliseconds.",
            argument="break_duration_ms",
        )


__all__ = [
    "MIN_BREAK_DURATION_MS",
    "MIN_MINIMUM_THROUGHPUT",
    "MIN_SAMPLING_DURATION_MS",
    "Validator",
    "assert_is_callable",
    "assert_is_number",
    "assert_is_optional_callable",
    "validate_break_duration_ms",
    "validate_failure_threshold",
    "validate_minimum_throughput",
    "validate_retry_count",
    "validate_sampling_duration_ms",
    "validate_sleep_duration_provider",
]
