"""create() – build a PhoneNumberState with locale and settings defaults."""

from __future__ import annotations

from collections.abc import Iterable

from country_code_picker.catalog.catalog import DEFAULT_CATALOG, CountryCatalog
from country_code_picker.catalog.country import Country
from country_code_picker.config.settings import PickerSettings
from country_code_picker.observability.logging import get_logger
from country_code_picker.picker.locales import LocaleProvider, SystemLocaleProvider
from country_code_picker.picker.state import PhoneNumberState

logger = get_logger(__name__)


def create(
    default_country_code: str | None = None,
    allowed_countries: Iterable[str] | None = None,
    show_code: bool | None = None,
    show_flag: bool | None = None,
    *,
    locale_provider: LocaleProvider | None = None,
    settings: PickerSettings | None = None,
    catalog: CountryCatalog = DEFAULT_CATALOG,
) -> PhoneNumberState:
    """Create a picker state.

    An explicit *default_country_code* is trimmed and lower-cased and must
    belong to the active subset.  Without one the region reported by
    *locale_provider* is used; when that is missing or not selectable the
    configured fallback country is used, and failing that the first
    selectable country.  *show_code* / *show_flag* default to the settings.

    Raises:
        NotFoundError: the explicit default country is not selectable.
    """
    settings = settings or PickerSettings.from_env()
    allowed = tuple(allowed_countries or ())

    if default_country_code is not None:
        country_code = default_country_code.strip().lower()
    else:
        country_code = _resolve_default(
            catalog,
            catalog.filter(allowed),
            locale_provider or SystemLocaleProvider(),
            settings.fallback_country_code,
        )

    state = PhoneNumberState(
        country_code,
        allowed,
        settings.show_country_code if show_code is None else show_code,
        settings.show_country_flag if show_flag is None else show_flag,
        catalog=catalog,
    )
    logger.info(
        "picker.created",
        country=state.selected_country_code,
        selectable=len(state.countries),
    )
    return state


def _resolve_default(
    catalog: CountryCatalog,
    countries: tuple[Country, ...],
    locale_provider: LocaleProvider,
    fallback_code: str,
) -> str:
    region = (locale_provider.region() or "").strip().lower()
    if region and catalog.find(region) in countries:
        return region
    if catalog.find(fallback_code) in countries or not countries:
        chosen = fallback_code
    else:
        chosen = countries[0].code
    logger.info("picker.locale_fallback", locale_region=region or None, country=chosen)
    return chosen


__all__ = ["create"]
