"""Tests for filtering and page selection."""

import pytest

import pickers.engine.filtering as filtering
from pickers.engine import PageOutOfRangeError, filter_items, matches, set_page
from pickers.models import Item, ItemGroups, ItemList


def _is_subsequence(sub: ItemList, full: ItemList) -> bool:
    it = iter(full)
    return all(any(candidate is item for candidate in it) for item in sub)


class TestFilterItems:
    """Tests for filter_items."""

    def test_empty_query_returns_source(self, sample_items: ItemList) -> None:
        assert filter_items(sample_items, "") is sample_items

    @pytest.mark.parametrize("query", ["alp", "ALP", "Alp", "a", "beta", "MM", "zz", "  "])
    def test_matches_exactly_the_containing_labels(
        self, sample_items: ItemList, query: str
    ) -> None:
        result = filter_items(sample_items, query)

        expected = [item for item in sample_items if query.lower() in item.label.lower()]
        assert result == expected
        assert _is_subsequence(result, sample_items)

    def test_case_insensitive_preserves_order(self, sample_items: ItemList) -> None:
        labels = [item.label for item in filter_items(sample_items, "alp")]
        assert labels == ["Alpha", "alphabet", "ALPINE"]

    @pytest.mark.parametrize("query", ["", "alp", "a", "zz"])
    def test_idempotent(self, sample_items: ItemList, query: str) -> None:
        once = filter_items(sample_items, query)
        assert filter_items(once, query) == once

    def test_casefold_handles_sharp_s(self) -> None:
        items = [Item(label="Straße", icon="x"), Item(label="Strasse", icon="y")]
        assert filter_items(items, "STRASSE") == items

    def test_matches_helper(self) -> None:
        assert matches(Item(label="Language 12", icon="image4"), "GUAGE 1")
        assert not matches(Item(label="Language 12", icon="image4"), "13")

    def test_country_scenario(self, france_germany: ItemList) -> None:
        france, _germany = france_germany

        assert filter_items(france_germany, "fr") == [france]
        assert filter_items(france_germany, "zz") == []


class TestSetPage:
    """Tests for set_page bounds checking."""

    def test_valid_page(self, language_groups: ItemGroups) -> None:
        assert set_page(0, language_groups) is language_groups[0]
        assert set_page(2, language_groups)[0].label == "Language 41"

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_out_of_range(self, language_groups: ItemGroups, index: int) -> None:
        with pytest.raises(IndexError):
            set_page(index, language_groups)

    def test_error_carries_context(self, language_groups: ItemGroups) -> None:
        with pytest.raises(PageOutOfRangeError) as excinfo:
            set_page(len(language_groups), language_groups)

        assert excinfo.value.index == 3
        assert excinfo.value.page_count == 3
        assert "0..2" in str(excinfo.value)

    def test_no_pages(self) -> None:
        with pytest.raises(PageOutOfRangeError, match="no pages"):
            set_page(0, [])

    def test_filter_only_sees_selected_page(self, language_groups: ItemGroups) -> None:
        page = set_page(0, language_groups)
        labels = [item.label for item in filter_items(page, "Language 4")]
        assert labels == ["Language 4"]


class TestMatchesAgreesWithFilter:
    """filter_items keeps exactly the items matches() accepts."""

    @pytest.mark.parametrize("query", ["alp", "BET", "a", "zz"])
    def test_same_selection(self, sample_items: ItemList, query: str) -> None:
        expected = [item for item in sample_items if matches(item, query)]
        assert filter_items(sample_items, query) == expected

    def test_filter_uses_matches(
        self, sample_items: ItemList, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[str] = []

        def spy(item: Item, query: str) -> bool:
            calls.append(item.label)
            return True

        monkeypatch.setattr(filtering, "matches", spy)

        assert filtering.filter_items(sample_items, "q") == sample_items
        assert calls == [item.label for item in sample_items]
