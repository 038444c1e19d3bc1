"""Shared carousel and search actions for the picker screens."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Input

from .constants import SEARCH_INPUT_ID
from .widgets import BannerCarousel


if TYPE_CHECKING:
    from .typing import PickerScreenProtocol


class PickerActions:
    """Keyboard actions common to both picker screens."""

    def action_next_banner(self: PickerScreenProtocol) -> None:
        """Scroll the carousel one banner to the right."""
        carousel = self.query_one(BannerCarousel)
        target = min(carousel.index + 1, self.banner_limit() - 1)
        if target != carousel.index:
            self.move_carousel(target)

    def action_prev_banner(self: PickerScreenProtocol) -> None:
        """Scroll the carousel one banner to the left."""
        carousel = self.query_one(BannerCarousel)
        target = max(carousel.index - 1, 0)
        if target != carousel.index:
            self.move_carousel(target)

    def action_cancel_search(self: PickerScreenProtocol) -> None:
        """Clear the search field and show the whole current page again."""
        self.engine.cancel_search()
        search = self.query_one(f"#{SEARCH_INPUT_ID}", Input)
        search.value = ""
        self.refresh_items()
