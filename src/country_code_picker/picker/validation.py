"""Structural phone number validation against per-region numbering metadata."""

from __future__ import annotations

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat, PhoneNumberType


class PhoneNumberValidator:
    """Length/pattern validation for one region.

    Uses the static numbering-plan tables shipped with ``phonenumbers``; no
    carrier or network lookup is involved.
    """

    def __init__(self, region: str) -> None:
        self.region = region.upper()

    def is_valid(self, candidate: str) -> bool:
        """Return ``True`` when *candidate* is a valid number of this region.

        A well-formed number of another country (``+256...`` for ``KE``) is
        invalid.  Unparsable input is reported as invalid, never raised.
        """
        try:
            parsed = phonenumbers.parse(candidate, self.region)
        except NumberParseException:
            return False
        return phonenumbers.is_valid_number_for_region(parsed, self.region)

    def example_number(self) -> str:
        """National-format example mobile number, or ``""`` if none is known."""
        example = phonenumbers.example_number_for_type(self.region, PhoneNumberType.MOBILE)
        if example is None:
            return ""
        return phonenumbers.format_number(example, PhoneNumberFormat.NATIONAL)


__all__ = ["PhoneNumberValidator"]
