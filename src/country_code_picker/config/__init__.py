"""Config – env-based picker settings and loaders."""

from country_code_picker.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from country_code_picker.config.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from country_code_picker.config.settings import PickerSettings, configure_logging

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PickerSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "configure_logging",
]
