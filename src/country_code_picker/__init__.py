"""
country_code_picker – framework-agnostic core of a country-code phone field.

Import path convention::

    from country_code_picker.catalog import CountryCatalog, Country
    from country_code_picker.picker import PhoneNumberState, create
    from country_code_picker.kernel.errors import NotFoundError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
