"""Search filtering and page selection over item lists."""

from __future__ import annotations

from collections.abc import Sequence

from pickers.models import Item, ItemList


__all__ = ["PageOutOfRangeError", "filter_items", "matches", "set_page"]


class PageOutOfRangeError(IndexError):
    """Raised when a page index falls outside ``[0, page_count - 1]``."""

    def __init__(self, index: int, page_count: int) -> None:
        self.index = index
        self.page_count = page_count
        if page_count:
            detail = f"expected 0..{page_count - 1}"
        else:
            detail = "there are no pages"
        super().__init__(f"Page index {index} out of range ({detail})")


def matches(item: Item, query: str) -> bool:
    """Case-insensitive substring test of ``query`` against the item label."""
    return query.casefold() in item.label.casefold()


def filter_items(source: ItemList, query: str) -> ItemList:
    """Items of ``source`` whose label contains ``query``, in their original order.

    An empty query means "no filter" and returns ``source`` itself.
    """
    if not query:
        return source
    return [item for item in source if matches(item, query)]


def set_page(index: int, groups: Sequence[ItemList]) -> ItemList:
    """Return page ``index`` of ``groups``; negative indices are rejected."""
    if not 0 <= index < len(groups):
        raise PageOutOfRangeError(index, len(groups))
    return groups[index]
