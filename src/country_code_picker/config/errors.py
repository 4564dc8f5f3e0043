"""Config errors – raised while reading ``PICKER_*`` settings."""
from __future__ import annotations

from country_code_picker.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Picker settings could not be loaded or built."""
    default_code = "picker_config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default was not provided by any source."""
    default_code = "picker_config_missing"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Setting {setting_name} is required and has no default",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was provided but cannot be used (e.g. an unknown log level)."""
    default_code = "picker_config_invalid"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting {setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
