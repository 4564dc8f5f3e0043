"""Config – PickerSettings and logging setup."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Final

from country_code_picker.catalog.data import FALLBACK_COUNTRY_CODE
from country_code_picker.config.errors import InvalidSettingValueError
from country_code_picker.config.loaders import EnvSettingsLoader, Settings, SettingsFactory
from country_code_picker.observability.logging import JsonLoggerFactory

_LOG_LEVELS: Final = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class PickerSettings(Settings):
    """Defaults applied when a picker state is created.

    Environment variables: ``PICKER_FALLBACK_COUNTRY_CODE``,
    ``PICKER_SHOW_COUNTRY_CODE``, ``PICKER_SHOW_COUNTRY_FLAG``,
    ``PICKER_LOG_LEVEL``.
    """

    _prefix: ClassVar[str] = "PICKER"

    fallback_country_code: str = FALLBACK_COUNTRY_CODE
    show_country_code: bool = True
    show_country_flag: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.fallback_country_code = self.fallback_country_code.strip().lower()
        if not self.fallback_country_code:
            raise InvalidSettingValueError(
                self.env_key("fallback_country_code"), self.fallback_country_code, "must not be empty"
            )
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                self.env_key("log_level"), self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls) -> "PickerSettings":
        return SettingsFactory.create(cls, [EnvSettingsLoader()])


def configure_logging(settings: PickerSettings | None = None) -> PickerSettings:
    """Install JSON logging at ``settings.log_level`` (read from the environment if omitted)."""
    settings = settings or PickerSettings.from_env()
    JsonLoggerFactory.configure(settings.log_level)
    return settings


__all__ = ["PickerSettings", "configure_logging"]
