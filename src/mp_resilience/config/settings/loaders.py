"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from mp_resilience.config.settings.base import Settings
from mp_resilience.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Field ``retry_count`` of a class with ``_prefix = "RETRY"`` is read from
    ``RETRY_RETRY_COUNT``.  Absent variables fall back to field defaults.
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, env_key: str, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        try:
            if hint == "bool":
                lowered = value.strip().lower()
                if lowered in _TRUTHY:
                    return True
                if lowered in _FALSY:
                    return False
                raise ValueError("expected a boolean")
            if hint == "int":
                return int(value)
            if hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(env_key, value, str(exc)) from exc
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'python-dotenv' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
