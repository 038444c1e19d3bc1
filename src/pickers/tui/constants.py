"""TUI constants shared by screens and widgets."""

from __future__ import annotations


COUNTRIES_SCREEN = "countries"
LANGUAGES_SCREEN = "languages"

SEARCH_INPUT_ID = "search-input"
ITEM_LIST_ID = "item-list"
BANNER_ID = "banner"
STATUS_ID = "status"

COUNTRY_SEARCH_PLACEHOLDER = "Search countries"
LANGUAGE_SEARCH_PLACEHOLDER = "Search languages"

ACTIVE_DOT = "●"
INACTIVE_DOT = "○"

__all__ = [
    "ACTIVE_DOT",
    "BANNER_ID",
    "COUNTRIES_SCREEN",
    "COUNTRY_SEARCH_PLACEHOLDER",
    "INACTIVE_DOT",
    "ITEM_LIST_ID",
    "LANGUAGES_SCREEN",
    "LANGUAGE_SEARCH_PLACEHOLDER",
    "SEARCH_INPUT_ID",
    "STATUS_ID",
]
