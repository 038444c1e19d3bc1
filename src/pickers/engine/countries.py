"""Country list generation from the ISO 3166-1 table."""

from __future__ import annotations

import random
from collections.abc import Sequence

import pycountry

from pickers.log import log_debug, timed
from pickers.logging_config import get_logger
from pickers.models import Item, ItemList


__all__ = [
    "FLAG_OFFSET",
    "LABEL_SEPARATOR",
    "country_flag",
    "country_name",
    "generate_country_list",
    "iso_country_codes",
]

logger = get_logger(__name__)

# 0x1F1E6 (REGIONAL INDICATOR SYMBOL LETTER A) - ord("A")
FLAG_OFFSET = 127397

# Gap between flag and name on the unshuffled list.
LABEL_SEPARATOR = " " * 8

NOT_FOUND_TEMPLATE = "Country not found for code: {code}"


def country_flag(code: str) -> str:
    """Return the flag emoji for an upper-case two-letter country code.

    Each letter maps to its regional indicator symbol, so ``"FR"`` becomes
    U+1F1EB U+1F1F7. Lower-case input is not normalised.
    """
    return "".join(chr(FLAG_OFFSET + ord(letter)) for letter in code)


def iso_country_codes() -> list[str]:
    """All alpha-2 codes known to the locale table, in alphabetical order."""
    return sorted(country.alpha_2 for country in pycountry.countries)


def country_name(code: str) -> str:
    """English display name for ``code``, or a placeholder if the table has none."""
    try:
        country = pycountry.countries.lookup(code)
    except LookupError:
        log_debug(logger, "countries.name_missing", code=code)
        return NOT_FOUND_TEMPLATE.format(code=code)
    return getattr(country, "common_name", None) or country.name


def generate_country_list(shuffle: bool = False, codes: Sequence[str] | None = None) -> ItemList:
    """Build one item per country code.

    Labels read ``"<flag>        <name>"``. With ``shuffle`` the code order is
    randomised and labels switch to ``"<name> <flag>"``.
    """
    ordered = list(codes) if codes is not None else iso_country_codes()
    if shuffle:
        random.shuffle(ordered)

    items: ItemList = []
    with timed(logger, "countries.generate", shuffle=shuffle, count=len(ordered)):
        for code in ordered:
            flag = country_flag(code)
            name = country_name(code)
            label = f"{name} {flag}" if shuffle else f"{flag}{LABEL_SEPARATOR}{name}"
            items.append(Item(label=label, icon=flag))
    return items
