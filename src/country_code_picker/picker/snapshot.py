"""PickerSnapshot – the serialisable state of a picker across UI recreation."""

from __future__ import annotations

import dataclasses
from typing import Any, Final

from country_code_picker.kernel.errors import ValidationError

_REQUIRED_KEYS: Final = (
    "default_country_code",
    "allowed_countries",
    "show_country_code",
    "show_country_flag",
    "raw_digits",
    "selected_country_code",
)
_STR_KEYS: Final = ("default_country_code", "raw_digits", "selected_country_code")
_BOOL_KEYS: Final = ("show_country_code", "show_country_flag")


@dataclasses.dataclass(frozen=True)
class PickerSnapshot:
    """Constructor inputs plus the two mutable fields of a picker state."""

    default_country_code: str
    allowed_countries: tuple[str, ...]
    show_country_code: bool
    show_country_flag: bool
    raw_digits: str
    selected_country_code: str

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form suitable for a host's saved-state bundle."""
        payload = dataclasses.asdict(self)
        payload["allowed_countries"] = list(self.allowed_countries)
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PickerSnapshot":
        """Rebuild a snapshot from :meth:`to_dict` output.

        Raises:
            ValidationError: keys are missing or hold values of the wrong
                type; ``errors`` has one entry per offending field.
        """
        errors = [{"field": key, "error": "missing"} for key in _REQUIRED_KEYS if key not in data]
        if errors:
            missing = ", ".join(e["field"] for e in errors)
            raise ValidationError(f"Picker snapshot is missing keys: {missing}", errors=errors)

        for key in _STR_KEYS:
            if not isinstance(data[key], str):
                errors.append({"field": key, "error": "expected a string", "value": data[key]})
        for key in _BOOL_KEYS:
            if not isinstance(data[key], bool):
                errors.append({"field": key, "error": "expected a boolean", "value": data[key]})
        allowed = data["allowed_countries"]
        if not isinstance(allowed, (list, tuple)) or not all(isinstance(c, str) for c in allowed):
            errors.append(
                {"field": "allowed_countries", "error": "expected a list of strings", "value": allowed}
            )
        if errors:
            invalid = ", ".join(e["field"] for e in errors)
            raise ValidationError(f"Picker snapshot has invalid values: {invalid}", errors=errors)

        return cls(
            default_country_code=data["default_country_code"],
            allowed_countries=tuple(allowed),
            show_country_code=data["show_country_code"],
            show_country_flag=data["show_country_flag"],
            raw_digits=data["raw_digits"],
            selected_country_code=data["selected_country_code"],
        )


__all__ = ["PickerSnapshot"]
