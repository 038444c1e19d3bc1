"""Tests for data models."""

import pytest
from pydantic import ValidationError

from pickers.models import Item


class TestItem:
    """Tests for Item model."""

    def test_create_item(self) -> None:
        item = Item(label="Language 12", icon="image5")

        assert item.label == "Language 12"
        assert item.icon == "image5"
        assert str(item) == "Language 12"

    def test_item_is_immutable(self) -> None:
        item = Item(label="France", icon="🇫🇷")

        with pytest.raises(ValidationError):
            item.label = "Germany"  # type: ignore[misc]

    def test_value_equality_and_hash(self) -> None:
        a = Item(label="France", icon="🇫🇷")
        b = Item(label="France", icon="🇫🇷")
        c = Item(label="France", icon="flag")

        assert a == b
        assert a != c
        assert len({a, b, c}) == 2

    def test_fields_are_required(self) -> None:
        with pytest.raises(ValidationError):
            Item(label="No icon")  # type: ignore[call-arg]
