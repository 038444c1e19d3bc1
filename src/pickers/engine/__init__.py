"""List generation, filtering, paging and selection for the picker screens."""

from .countries import country_flag, country_name, generate_country_list, iso_country_codes
from .engine import ListFilterEngine, build_country_engine, build_language_engine
from .filtering import PageOutOfRangeError, filter_items, matches, set_page
from .languages import generate_language_groups
from .selection import SelectionCoordinator


__all__ = [
    "ListFilterEngine",
    "PageOutOfRangeError",
    "SelectionCoordinator",
    "build_country_engine",
    "build_language_engine",
    "country_flag",
    "country_name",
    "filter_items",
    "generate_country_list",
    "generate_language_groups",
    "iso_country_codes",
    "matches",
    "set_page",
]
