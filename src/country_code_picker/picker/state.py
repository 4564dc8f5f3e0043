"""PhoneNumberState – raw input and selected country, with derived numbers.

The state owns two mutable fields, ``raw_digits`` and
``selected_country_code``, changed only through :meth:`set_raw_digits` and
:meth:`set_country`.  Everything else is derived on demand.  Observing
changes (re-rendering, events) is left to the caller.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

from country_code_picker.catalog.catalog import DEFAULT_CATALOG, CountryCatalog
from country_code_picker.catalog.country import Country
from country_code_picker.kernel.errors import NotFoundError
from country_code_picker.observability.logging import get_logger
from country_code_picker.picker.formatting import PhoneNumberFormatter, strip_trailing_separators
from country_code_picker.picker.snapshot import PickerSnapshot
from country_code_picker.picker.validation import PhoneNumberValidator

_NON_DIGITS: Final = re.compile(r"\D")
_TRUNK_PREFIX: Final = "0"

logger = get_logger(__name__)


def normalize_local_number(text: str) -> str:
    """Keep only digits and make sure the result starts with the trunk ``0``.

    Input without digits yields ``"0"``.
    """
    digits = _NON_DIGITS.sub("", text)
    if digits.startswith(_TRUNK_PREFIX):
        return digits
    return _TRUNK_PREFIX + digits


class PhoneNumberState:
    """Single-owner phone field state.

    Args:
        default_country_code: Initially selected country; must be in the
            active subset.
        allowed_countries: Allow-list restricting the selectable countries
            (see :meth:`CountryCatalog.filter`).  Empty means all.
        show_country_code: Host hint – render the dialing code.
        show_country_flag: Host hint – render the flag.
        catalog: Country source, the shared default catalog unless given.

    Raises:
        NotFoundError: *default_country_code* is not in the active subset.
    """

    def __init__(
        self,
        default_country_code: str,
        allowed_countries: Iterable[str] = (),
        show_country_code: bool = True,
        show_country_flag: bool = True,
        *,
        catalog: CountryCatalog = DEFAULT_CATALOG,
    ) -> None:
        self.default_country_code = default_country_code
        self.allowed_countries: tuple[str, ...] = tuple(allowed_countries)
        self.show_country_code = show_country_code
        self.show_country_flag = show_country_flag
        self._catalog = catalog
        self._countries = catalog.filter(self.allowed_countries)
        self._active_codes = frozenset(c.code for c in self._countries)
        self.raw_digits = ""
        self.selected_country_code = default_country_code

        self._require_active(default_country_code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(country={self.selected_country_code!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_raw_digits(self, text: str) -> None:
        self.raw_digits = text

    def set_country(self, code: str) -> None:
        """Select *code*.

        Raises:
            NotFoundError: *code* is not in the active subset; the current
                selection is kept.
        """
        self._require_active(code)
        previous, self.selected_country_code = self.selected_country_code, code
        logger.debug("picker.country_changed", previous=previous, country=code)

    def _require_active(self, code: str) -> None:
        if code not in self._active_codes:
            logger.warning(
                "picker.country_rejected",
                country=code,
                restricted=bool(self.allowed_countries),
            )
            raise NotFoundError("Country", code, restricted=bool(self.allowed_countries))

    # ------------------------------------------------------------------
    # Countries
    # ------------------------------------------------------------------

    @property
    def countries(self) -> tuple[Country, ...]:
        """The selectable countries, in catalog order."""
        return self._countries

    @property
    def country(self) -> Country:
        return self._catalog.lookup(self.selected_country_code)

    def country_name(self) -> str:
        return self.country.display_name

    # ------------------------------------------------------------------
    # Derived numbers
    # ------------------------------------------------------------------

    def normalized_local_number(self) -> str:
        return normalize_local_number(self.raw_digits)

    def phone_code_with_prefix(self) -> str:
        """Dialing code of the selected country, e.g. ``+254``."""
        return self.country.phone_no_code

    def phone_code_without_prefix(self) -> str:
        """Dialing code without the plus, e.g. ``254``."""
        return self.phone_code_with_prefix().removeprefix("+")

    def local_number_without_prefix(self) -> str:
        """Local number without its trunk ``0``, e.g. ``712345678``."""
        return self.normalized_local_number().removeprefix(_TRUNK_PREFIX)

    def full_number_without_country_prefix(self) -> str:
        """E.g. ``254712345678``."""
        return self.phone_code_without_prefix() + self.local_number_without_prefix()

    def full_number(self) -> str:
        """E.164-style number, e.g. ``+254712345678``."""
        return self.phone_code_with_prefix() + self.local_number_without_prefix()

    def is_valid(self, candidate: str | None = None) -> bool:
        """Validate *candidate* (default: :meth:`full_number`) for the selected region."""
        if candidate is None:
            candidate = self.full_number()
        return PhoneNumberValidator(self.country.region).is_valid(candidate)

    def formatted_full_number(self) -> str:
        """:meth:`full_number` grouped for display, e.g. ``+254 712 345678``.

        Trailing separators are dropped, so an empty local number gives ``+254``.
        """
        formatted = PhoneNumberFormatter(self.country.region).format(self.full_number())
        return strip_trailing_separators(formatted)

    def example_number(self) -> str:
        """Placeholder hint for the selected region (national format).

        Typed back in, the hint reproduces the example number for regions
        whose national numbers keep at most one trunk ``0``.  Where the
        national significant number itself starts with ``0`` (e.g. ``CI``,
        ``BJ``) that digit is dropped with the trunk prefix by
        :meth:`local_number_without_prefix`.
        """
        return PhoneNumberValidator(self.country.region).example_number()

    # ------------------------------------------------------------------
    # Save / restore
    # ------------------------------------------------------------------

    def snapshot(self) -> PickerSnapshot:
        return PickerSnapshot(
            default_country_code=self.default_country_code,
            allowed_countries=self.allowed_countries,
            show_country_code=self.show_country_code,
            show_country_flag=self.show_country_flag,
            raw_digits=self.raw_digits,
            selected_country_code=self.selected_country_code,
        )

    @classmethod
    def restore(
        cls,
        snapshot: PickerSnapshot,
        *,
        catalog: CountryCatalog = DEFAULT_CATALOG,
    ) -> "PhoneNumberState":
        """Rebuild a state from :meth:`snapshot` output.

        Raises:
            NotFoundError: a stored country is no longer in the active subset.
        """
        state = cls(
            snapshot.default_country_code,
            snapshot.allowed_countries,
            snapshot.show_country_code,
            snapshot.show_country_flag,
            catalog=catalog,
        )
        state.set_raw_digits(snapshot.raw_digits)
        state.set_country(snapshot.selected_country_code)
        return state


__all__ = ["PhoneNumberState", "normalize_local_number"]
