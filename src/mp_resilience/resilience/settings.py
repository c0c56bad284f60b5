"""Resilience – environment-driven settings for retry and circuit breaker policies.

Example::

    from mp_resilience.config import EnvSettingsLoader
    from mp_resilience.resilience import CircuitBreakerSettings, Policy

    settings = EnvSettingsLoader().load(CircuitBreakerSettings)
    breaker = Policy.circuit_breaker_from_settings(settings)
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_resilience.config.settings import Settings
from mp_resilience.config.validation import InvalidSettingValueError
from mp_resilience.kernel.errors import InvalidArgumentError
from mp_resilience.resilience import validators


def _check(setting_name: str, value: object, validator: validators.Validator) -> None:
    try:
        validator(value)
    except InvalidArgumentError as exc:
        raise InvalidSettingValueError(setting_name, value, exc.message) from exc


@dataclasses.dataclass
class RetrySettings(Settings):
    """``RETRY_RETRY_COUNT``, ``RETRY_SLEEP_DURATION_MS``, ``RETRY_FOREVER``."""

    _prefix: ClassVar[str] = "RETRY"

    retry_count: int = 3
    sleep_duration_ms: float = 0.0
    forever: bool = False

    def _validate(self) -> None:
        _check("retry_count", self.retry_count, validators.validate_retry_count)
        _check(
            "sleep_duration_ms",
            self.sleep_duration_ms,
            validators.validate_sleep_duration_provider,
        )


@dataclasses.dataclass
class CircuitBreakerSettings(Settings):
    """``CIRCUIT_BREAKER_*`` variables, one per :class:`CircuitBreakerPolicy` threshold."""

    _prefix: ClassVar[str] = "CIRCUIT_BREAKER"

    sampling_duration_ms: float = 10_000
    failure_threshold: float = 0.5
    minimum_throughput: int = 10
    break_duration_ms: float = 30_000
    name: str = "circuit"

    def _validate(self) -> None:
        _check(
            "sampling_duration_ms",
            self.sampling_duration_ms,
            validators.validate_sampling_duration_ms,
        )
        _check("failure_threshold", self.failure_threshold, validators.validate_failure_threshold)
        _check(
            "minimum_throughput", self.minimum_throughput, validators.validate_minimum_throughput
        )
        _check("break_duration_ms", self.break_duration_ms, validators.validate_break_duration_ms)


__all__ = ["CircuitBreakerSettings", "RetrySettings"]
