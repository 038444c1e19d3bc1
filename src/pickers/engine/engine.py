"""Stateful list engine that a picker screen drives with user events."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from pickers.log import log_debug, log_info
from pickers.logging_config import get_logger
from pickers.models import Item, ItemGroups, ItemList

from .countries import generate_country_list
from .filtering import PageOutOfRangeError, filter_items, set_page
from .languages import generate_language_groups
from .selection import SelectionCoordinator


if TYPE_CHECKING:
    from pickers.config import Settings


__all__ = ["ListFilterEngine", "build_country_engine", "build_language_engine"]

logger = get_logger(__name__)


class ListFilterEngine:
    """Holds the pages of one picker and answers "what is visible right now".

    The visible set is always ``filter_items(current page, query)``; nothing
    is cached, so regenerating the pages or changing the query is reflected
    on the next ``current_visible_items()`` call.

    Args:
        groups: Pages of items. A picker without paging passes a single page.
        page: Initial page index.
        selection: Coordinator for query and selection; a clearing one is created if omitted.
        regenerate: Builds a replacement list when the carousel reaches ``regenerate_at``.
        regenerate_at: Carousel position that triggers ``regenerate``.
        name: Screen name, used only for log lines.
    """

    def __init__(
        self,
        groups: ItemGroups,
        *,
        page: int = 0,
        selection: SelectionCoordinator | None = None,
        regenerate: Callable[[], ItemList] | None = None,
        regenerate_at: int | None = None,
        name: str = "picker",
    ) -> None:
        self._groups: ItemGroups = list(groups)
        if self._groups:
            set_page(page, self._groups)
        elif page != 0:
            raise PageOutOfRangeError(page, 0)
        self._page = page
        self._position = 0
        self._selection = selection or SelectionCoordinator()
        self._regenerate = regenerate
        self._regenerate_at = regenerate_at
        self.name = name

    @property
    def groups(self) -> ItemGroups:
        return list(self._groups)

    @property
    def page(self) -> int:
        return self._page

    @property
    def position(self) -> int:
        return self._position

    @property
    def query(self) -> str:
        return self._selection.query

    @property
    def selection(self) -> SelectionCoordinator:
        return self._selection

    def current_page_items(self) -> ItemList:
        """The unfiltered items of the current page."""
        if not self._groups:
            return []
        return self._groups[self._page]

    # Input events

    def query_changed(self, text: str) -> None:
        self._selection.set_query(text)
        log_debug(
            logger,
            "engine.query",
            screen=self.name,
            query=text,
            visible=len(self.current_visible_items()),
        )

    def page_changed(self, index: int) -> None:
        """Switch to page ``index``; raises ``PageOutOfRangeError`` and keeps state if invalid."""
        set_page(index, self._groups)
        self._page = index
        log_debug(logger, "engine.page", screen=self.name, page=index, page_count=len(self._groups))

    def item_tapped(self, item: Item) -> None:
        self._selection.select(item)

    def cancel_search(self) -> None:
        self._selection.clear_on_cancel()

    def carousel_position_reached(self, index: int) -> bool:
        """Record the carousel position and regenerate the list at the trigger position.

        Returns True when the list was replaced.
        """
        self._position = index
        if self._regenerate is None or index != self._regenerate_at:
            return False

        # The old pages stay in place if the generator raises.
        fresh = self._regenerate()
        self._groups = [fresh]
        self._page = 0
        log_info(logger, "engine.regenerate", screen=self.name, position=index, count=len(fresh))
        return True

    # Outputs

    def current_visible_items(self) -> ItemList:
        return filter_items(self.current_page_items(), self._selection.query)

    def current_page_count(self) -> int:
        return len(self._groups)

    def current_selection(self) -> Item | None:
        return self._selection.current

    def consume_selection(self) -> Item | None:
        return self._selection.consume_selection()


def build_country_engine(settings: Settings, codes: Sequence[str] | None = None) -> ListFilterEngine:
    """Country picker: one page of flag-first labels, reshuffled at the configured banner."""
    return ListFilterEngine(
        [generate_country_list(shuffle=False, codes=codes)],
        selection=SelectionCoordinator(clear_on_consume=settings.clear_selection_on_consume),
        regenerate=lambda: generate_country_list(shuffle=True, codes=codes),
        regenerate_at=settings.reshuffle_banner_index,
        name="countries",
    )


def build_language_engine(settings: Settings) -> ListFilterEngine:
    """Language picker: synthetic languages paged by banner index."""
    groups = generate_language_groups(
        settings.language_count,
        settings.language_group_size,
        icons=settings.language_icons,
    )
    return ListFilterEngine(
        groups,
        selection=SelectionCoordinator(clear_on_consume=settings.clear_selection_on_consume),
        name="languages",
    )
