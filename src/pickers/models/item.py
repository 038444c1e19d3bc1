"""Pydantic models for picker rows."""

from pydantic import BaseModel, ConfigDict, Field


__all__ = ["Item", "ItemGroups", "ItemList"]


class Item(BaseModel):
    """One row of a picker: the text shown to the user and an opaque icon token."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="User-visible text, e.g. a flag and country name")
    icon: str = Field(description="Flag glyph or image identifier; never interpreted")

    def __str__(self) -> str:
        return self.label


# Display order is insertion order.
ItemList = list[Item]

# Consecutive fixed-size pages of one ItemList.
ItemGroups = list[ItemList]
