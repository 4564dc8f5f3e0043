"""Picker – phone number state, formatting, validation and factory."""

from country_code_picker.picker.factory import create
from country_code_picker.picker.formatting import PhoneNumberFormatter, TransformedText
from country_code_picker.picker.locales import (
    LocaleProvider,
    StaticLocaleProvider,
    SystemLocaleProvider,
)
from country_code_picker.picker.snapshot import PickerSnapshot
from country_code_picker.picker.state import PhoneNumberState, normalize_local_number
from country_code_picker.picker.validation import PhoneNumberValidator

__all__ = [
    "LocaleProvider",
    "PhoneNumberFormatter",
    "PhoneNumberState",
    "PhoneNumberValidator",
    "PickerSnapshot",
    "StaticLocaleProvider",
    "SystemLocaleProvider",
    "TransformedText",
    "create",
    "normalize_local_number",
]
