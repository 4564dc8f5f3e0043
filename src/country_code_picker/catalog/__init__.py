"""Catalog – static country records and lookup/filter operations."""

from country_code_picker.catalog.catalog import DEFAULT_CATALOG, CountryCatalog
from country_code_picker.catalog.country import Country
from country_code_picker.catalog.data import COUNTRY_ROWS, FALLBACK_COUNTRY_CODE

__all__ = [
    "COUNTRY_ROWS",
    "Country",
    "CountryCatalog",
    "DEFAULT_CATALOG",
    "FALLBACK_COUNTRY_CODE",
]
