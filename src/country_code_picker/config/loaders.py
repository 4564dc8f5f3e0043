"""Config – settings base class, environment / dotenv loaders and SettingsFactory.

Settings are plain dataclasses.  Each field ``name`` of a class with
``_prefix = "PICKER"`` is read from the environment variable
``PICKER_NAME``; ``bool`` fields accept ``1/true/yes/on`` (anything else is
false).
"""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, ClassVar, Sequence, TypeVar

from dotenv import load_dotenv

from country_code_picker.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from country_code_picker.observability.logging import get_logger

logger = get_logger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclasses.dataclass
class Settings:
    """Base class for env-backed settings; override ``_validate`` to check values."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]


T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: build a settings instance from one external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` environment variables."""

    def load(self, settings_class: type[T]) -> T:
        required = set(settings_class.required_fields())
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)
            if raw is None:
                if field.name in required:
                    raise MissingRequiredSettingError(env_key)
                continue
            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        return _build(settings_class, kwargs)

    @staticmethod
    def _coerce(env_key: str, raw: str, type_hint: Any) -> Any:
        if type_hint in (bool, "bool"):
            return raw.strip().lower() in _TRUTHY
        if type_hint in (int, "int"):
            try:
                return int(raw)
            except ValueError:
                raise InvalidSettingValueError(env_key, raw, "expected an integer") from None
        return raw


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``.

    Variables already set in the environment win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


class SettingsFactory:
    """Merge loader outputs and overrides into one settings instance.

    Later loaders win over earlier ones and *overrides* win over all.  A
    loader failing with :class:`ConfigError` is logged and skipped.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        merged: dict[str, Any] = {}
        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError as exc:
                logger.warning("settings.loader_failed", loader=type(loader).__name__, error=exc.code)
                continue
            merged.update(dataclasses.asdict(instance))

        merged.update(overrides or {})
        for name in settings_cls.required_fields():
            if name not in merged:
                raise MissingRequiredSettingError(settings_cls.env_key(name))
        return _build(settings_cls, merged)


def _build(settings_cls: type[T], values: dict[str, Any]) -> T:
    try:
        return settings_cls(**values)
    except ConfigError:
        raise
    except TypeError as exc:
        raise ConfigError(f"Cannot build {settings_cls.__name__}: {exc}") from exc


__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
