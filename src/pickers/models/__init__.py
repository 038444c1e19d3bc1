"""Data models for picker items."""

from pickers.models.item import Item, ItemGroups, ItemList


__all__ = [
    "Item",
    "ItemGroups",
    "ItemList",
]
