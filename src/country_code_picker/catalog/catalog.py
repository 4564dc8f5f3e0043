"""CountryCatalog – immutable country list with lookup and allow-list filtering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from country_code_picker.catalog.country import Country
from country_code_picker.catalog.data import COUNTRY_ROWS
from country_code_picker.kernel.errors import NotFoundError, ValidationError


class CountryCatalog:
    """Ordered, immutable collection of :class:`Country` records.

    The default instance (:data:`DEFAULT_CATALOG`) is built once at import
    from the static table and shared by every picker state.

    Allow-list matching is deliberately asymmetric: an entry matches a
    country's ``code`` after being lower-cased and trimmed, but must equal its
    ``phone_no_code`` or ``name`` exactly.
    """

    def __init__(self, countries: Iterable[Country]) -> None:
        self._countries: tuple[Country, ...] = tuple(countries)
        self._by_code: dict[str, Country] = {}
        for country in self._countries:
            if country.code in self._by_code:
                raise ValidationError(f"Duplicate country code {country.code!r}")
            self._by_code[country.code] = country

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[str, str, str]]) -> "CountryCatalog":
        return cls(Country(code, name, phone_no_code) for code, name, phone_no_code in rows)

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self._countries)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def all(self) -> tuple[Country, ...]:
        """Return every country in canonical order."""
        return self._countries

    def filter(self, allow_list: Iterable[str] | None = None) -> tuple[Country, ...]:
        """Return the countries selected by *allow_list*, preserving catalog order.

        An empty or ``None`` allow-list selects the whole catalog.  Each entry
        may be a region code (any case, surrounding whitespace ignored), a
        dialing code such as ``"+254"`` or an exact country name.
        """
        entries = list(allow_list or ())
        if not entries:
            return self._countries
        codes = {entry.strip().lower() for entry in entries}
        exact = set(entries)
        return tuple(
            country
            for country in self._countries
            if country.code in codes
            or country.phone_no_code in exact
            or country.name in exact
        )

    def lookup(self, code: str) -> Country:
        """Return the country whose ``code`` equals *code* exactly.

        Raises:
            NotFoundError: no entry has that code.  Case is not normalized.
        """
        try:
            return self._by_code[code]
        except KeyError:
            raise NotFoundError("Country", code) from None

    def find(self, code: str) -> Country | None:
        """Non-raising :meth:`lookup`."""
        return self._by_code.get(code)

    def by_phone_code(self, phone_no_code: str) -> tuple[Country, ...]:
        """All countries sharing the dialing prefix *phone_no_code* (e.g. ``"+1"``)."""
        return tuple(c for c in self._countries if c.phone_no_code == phone_no_code)


DEFAULT_CATALOG: CountryCatalog = CountryCatalog.from_rows(COUNTRY_ROWS)


__all__ = ["DEFAULT_CATALOG", "CountryCatalog"]
