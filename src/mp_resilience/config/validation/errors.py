"""Config validation – errors raised while loading :class:`Settings`.

Both leaf errors carry the offending setting name, e.g. ``RETRY_RETRY_COUNT``
when read from the environment, or the field name when a resilience settings
object rejects a value.
"""
from mp_resilience.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without default has no matching environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value could not be coerced to its field type or is out of range."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
