"""Search and selection state shared by a picker screen and its detail view."""

from __future__ import annotations

from pickers.log import log_debug
from pickers.logging_config import get_logger
from pickers.models import Item


__all__ = ["SelectionCoordinator"]

logger = get_logger(__name__)


class SelectionCoordinator:
    """Tracks the active query and at most one selected item.

    Selecting overwrites the previous selection. ``consume_selection`` hands
    the item over to navigation and, unless ``clear_on_consume`` is off,
    forgets it so a second call returns ``None``.
    """

    def __init__(self, *, clear_on_consume: bool = True) -> None:
        self._clear_on_consume = clear_on_consume
        self._selection: Item | None = None
        self._query = ""

    @property
    def current(self) -> Item | None:
        return self._selection

    @property
    def query(self) -> str:
        return self._query

    @property
    def searching(self) -> bool:
        return bool(self._query)

    def set_query(self, text: str) -> None:
        self._query = text

    def select(self, item: Item) -> None:
        previous = self._selection
        self._selection = item
        log_debug(
            logger,
            "selection.select",
            label=item.label,
            replaced=previous.label if previous else None,
        )

    def consume_selection(self) -> Item | None:
        item = self._selection
        if self._clear_on_consume:
            self._selection = None
        log_debug(
            logger,
            "selection.consume",
            label=item.label if item else None,
            cleared=self._clear_on_consume,
        )
        return item

    def clear_on_cancel(self) -> None:
        """Drop the search query; the selection is kept."""
        self._query = ""
        log_debug(logger, "selection.cancel_search")
