"""Unit tests for CountryCatalog."""

from __future__ import annotations

import pytest

from country_code_picker.catalog import (
    COUNTRY_ROWS,
    DEFAULT_CATALOG,
    FALLBACK_COUNTRY_CODE,
    Country,
    CountryCatalog,
)
from country_code_picker.kernel.errors import NotFoundError, ValidationError


def _is_subsequence(sub: tuple[Country, ...], full: tuple[Country, ...]) -> bool:
    it = iter(full)
    return all(any(c is f for f in it) for c in sub)


# ---------------------------------------------------------------------------
# Static table
# ---------------------------------------------------------------------------


class TestStaticTable:
    def test_has_a_few_hundred_countries(self) -> None:
        assert 200 <= len(DEFAULT_CATALOG) <= 300

    def test_codes_are_unique(self) -> None:
        codes = [row[0] for row in COUNTRY_ROWS]
        assert len(codes) == len(set(codes))

    def test_codes_are_lower_case(self) -> None:
        assert all(c.code == c.code.lower() for c in DEFAULT_CATALOG)

    def test_all_dialing_codes_well_formed(self) -> None:
        for c in DEFAULT_CATALOG:
            assert c.phone_no_code.startswith("+")
            assert c.phone_no_code[1:].isdigit()

    def test_fallback_country_exists(self) -> None:
        assert FALLBACK_COUNTRY_CODE in DEFAULT_CATALOG

    def test_kenya_entry(self) -> None:
        assert DEFAULT_CATALOG.lookup("ke") == Country("ke", "Kenya", "+254")

    def test_duplicate_codes_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CountryCatalog.from_rows([("ke", "Kenya", "+254"), ("ke", "Kenya again", "+254")])


# ---------------------------------------------------------------------------
# all / lookup
# ---------------------------------------------------------------------------


class TestAllAndLookup:
    def test_all_preserves_table_order(self) -> None:
        assert [c.code for c in DEFAULT_CATALOG.all()] == [row[0] for row in COUNTRY_ROWS]

    def test_all_is_immutable_and_restartable(self) -> None:
        first = DEFAULT_CATALOG.all()
        assert isinstance(first, tuple)
        assert DEFAULT_CATALOG.all() == first
        assert list(DEFAULT_CATALOG) == list(first)

    def test_lookup_every_entry(self) -> None:
        for country in DEFAULT_CATALOG.all():
            assert DEFAULT_CATALOG.lookup(country.code) == country

    def test_lookup_missing_raises(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            DEFAULT_CATALOG.lookup("zz")
        assert exc_info.value.identifier == "zz"

    def test_lookup_does_not_normalise_case(self) -> None:
        with pytest.raises(NotFoundError):
            DEFAULT_CATALOG.lookup("KE")
        with pytest.raises(NotFoundError):
            DEFAULT_CATALOG.lookup(" ke")

    def test_find_returns_none_when_missing(self) -> None:
        assert DEFAULT_CATALOG.find("zz") is None
        assert DEFAULT_CATALOG.find("ke") is not None

    def test_contains(self) -> None:
        assert "ke" in DEFAULT_CATALOG
        assert "zz" not in DEFAULT_CATALOG

    def test_by_phone_code_shared_prefix(self) -> None:
        nanp = DEFAULT_CATALOG.by_phone_code("+1")
        codes = {c.code for c in nanp}
        assert {"us", "ca", "jm"} <= codes
        assert _is_subsequence(nanp, DEFAULT_CATALOG.all())

    def test_by_phone_code_unknown(self) -> None:
        assert DEFAULT_CATALOG.by_phone_code("+999") == ()


# ---------------------------------------------------------------------------
# filter
# ---------------------------------------------------------------------------


class TestFilter:
    def test_empty_allow_list_returns_all(self) -> None:
        assert DEFAULT_CATALOG.filter(set()) == DEFAULT_CATALOG.all()
        assert DEFAULT_CATALOG.filter([]) == DEFAULT_CATALOG.all()
        assert DEFAULT_CATALOG.filter(None) == DEFAULT_CATALOG.all()

    def test_filter_by_code(self) -> None:
        result = DEFAULT_CATALOG.filter({"ke", "ug", "tz"})
        assert [c.code for c in result] == ["ke", "tz", "ug"]

    def test_code_match_is_case_insensitive_and_trimmed(self) -> None:
        result = DEFAULT_CATALOG.filter({" KE ", "Ug"})
        assert [c.code for c in result] == ["ke", "ug"]

    def test_filter_by_phone_code(self) -> None:
        result = DEFAULT_CATALOG.filter({"+254"})
        assert [c.code for c in result] == ["ke"]

    def test_phone_code_match_is_exact(self) -> None:
        assert DEFAULT_CATALOG.filter({" +254"}) == ()

    def test_filter_by_name(self) -> None:
        result = DEFAULT_CATALOG.filter({"Kenya"})
        assert [c.code for c in result] == ["ke"]

    def test_name_match_is_case_sensitive(self) -> None:
        assert DEFAULT_CATALOG.filter({"kenya"}) == ()
        assert DEFAULT_CATALOG.filter({"KENYA"}) == ()

    def test_shared_dialing_code_selects_every_member(self) -> None:
        result = DEFAULT_CATALOG.filter({"+1"})
        assert result == DEFAULT_CATALOG.by_phone_code("+1")

    def test_mixed_allow_list_preserves_catalog_order(self) -> None:
        result = DEFAULT_CATALOG.filter(["Uganda", "+254", "TZ"])
        assert [c.code for c in result] == ["ke", "tz", "ug"]
        assert _is_subsequence(result, DEFAULT_CATALOG.all())

    def test_unknown_entries_select_nothing(self) -> None:
        assert DEFAULT_CATALOG.filter({"zz", "Atlantis"}) == ()
