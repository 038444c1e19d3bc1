"""Synthetic language list for the language picker."""

from __future__ import annotations

from pickers.log import timed
from pickers.logging_config import get_logger
from pickers.models import Item, ItemGroups


__all__ = ["DEFAULT_LANGUAGE_ICONS", "generate_language_groups"]

logger = get_logger(__name__)

DEFAULT_LANGUAGE_ICONS = ("image4", "image5")


def generate_language_groups(
    count: int,
    group_size: int,
    icons: tuple[str, str] = DEFAULT_LANGUAGE_ICONS,
) -> ItemGroups:
    """Create ``count`` items named ``Language 1..count`` split into pages of ``group_size``.

    Even (0-based) rows use ``icons[0]`` and odd rows ``icons[1]``. Only the
    last page can be shorter than ``group_size``.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if group_size < 1:
        raise ValueError(f"group_size must be >= 1, got {group_size}")

    with timed(logger, "languages.generate", count=count, page_count=-(-count // group_size)):
        languages = [
            Item(label=f"Language {index + 1}", icon=icons[index % 2]) for index in range(count)
        ]
        return [languages[start : start + group_size] for start in range(0, count, group_size)]
