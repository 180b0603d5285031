"""Config validation errors.

Raised while building :class:`~sheetgen_client.config.SheetGenSettings` or a
client config, before any request is sent. They never surface from a call to
the service.
"""
from sheetgen_client.kernel.errors import BaseError


class ConfigError(BaseError):
    """The service location or timeout could not be established."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable is not set."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Environment variable '{setting_name}' is not set")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable (empty URL, non-positive timeout, ...)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r} {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
