"""Locale providers – where the default country comes from when none is given."""

from __future__ import annotations

import locale
from typing import Protocol, runtime_checkable


@runtime_checkable
class LocaleProvider(Protocol):
    """Port: supply the host's current region identifier."""

    def region(self) -> str | None: ...


class SystemLocaleProvider:
    """Read the region from the process locale (``en_KE.UTF-8`` -> ``"ke"``)."""

    def region(self) -> str | None:
        name, _encoding = locale.getlocale()
        if not name:
            return None
        language_region = name.split(".", 1)[0]
        if "_" not in language_region:
            return None
        return language_region.rsplit("_", 1)[1].lower() or None


class StaticLocaleProvider:
    """Fixed region, for hosts that resolve the locale themselves (and tests)."""

    def __init__(self, region: str | None) -> None:
        self._region = region

    def region(self) -> str | None:
        return self._region


__all__ = ["LocaleProvider", "StaticLocaleProvider", "SystemLocaleProvider"]
