"""Country value object."""

from __future__ import annotations

import dataclasses
import re
from typing import Final

from country_code_picker.kernel.errors import ValidationError

_PHONE_CODE_PATTERN: Final = re.compile(r"^\+\d+$")
_REGIONAL_INDICATOR_A: Final = 0x1F1E6


@dataclasses.dataclass(frozen=True, slots=True)
class Country:
    """A selectable country: region identifier, display name and dialing prefix.

    ``code`` is the lower-case ISO 3166-1 alpha-2 identifier (``"ke"``) and is
    also the key hosts use to resolve flag images and localized names.
    """

    code: str
    name: str
    phone_no_code: str

    def __post_init__(self) -> None:
        if not self.code:
            raise ValidationError(
                "Country code must not be empty",
                errors=[{"field": "code", "value": self.code}],
            )
        if not _PHONE_CODE_PATTERN.match(self.phone_no_code):
            raise ValidationError(
                f"Invalid dialing code for {self.code!r}: {self.phone_no_code!r}",
                errors=[{"field": "phone_no_code", "value": self.phone_no_code}],
            )

    def __str__(self) -> str:
        return f"{self.display_name} ({self.phone_no_code})"

    @property
    def region(self) -> str:
        """Upper-case region code, as used by numbering metadata (``"KE"``)."""
        return self.code.upper()

    @property
    def display_name(self) -> str:
        """Name with its first character upper-cased."""
        return self.name[:1].upper() + self.name[1:]

    @property
    def flag_emoji(self) -> str:
        """Flag emoji built from regional indicator symbols; ``""`` if not alpha-2."""
        region = self.region
        if len(region) != 2 or not all("A" <= c <= "Z" for c in region):
            return ""
        return "".join(chr(_REGIONAL_INDICATOR_A + ord(c) - ord("A")) for c in region)


__all__ = ["Country"]
