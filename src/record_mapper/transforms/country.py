"""Country name transforms."""

from functools import lru_cache
from typing import Any
from babel import Locale, UnknownLocaleError
from ..types import MISSING

DISPLAY_LOCALE = "en"

FALLBACK_COUNTRY_NAMES = {
    "GB": "United Kingdom",
    "US": "United States",
    "PH": "Philippines",
    "CA": "Canada",
    "AU": "Australia",
}


@lru_cache(maxsize=1)
def _territory_names() -> dict:
    try:
        return dict(Locale.parse(DISPLAY_LOCALE).territories)
    except (UnknownLocaleError, ValueError):
        return {}


def country_from_iso(code: Any = None) -> Any:
    """
    Convert an ISO 3166-1 alpha-2 code to its English country name.

    The CLDR territory names shipped with Babel are consulted first, then a
    small built-in table. Codes that neither knows are returned normalised
    but otherwise unchanged.

    Args:
        code: Country code such as "GB" (case and surrounding spaces ignored)

    Returns:
        Country name, the normalised code, or MISSING for an empty code
    """
    if code is None or code == "":
        return MISSING

    normalized = str(code).strip().upper()

    name = _territory_names().get(normalized)
    if name and name != normalized:
        return name

    return FALLBACK_COUNTRY_NAMES.get(normalized, normalized)
