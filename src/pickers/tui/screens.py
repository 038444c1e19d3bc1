"""Picker screens and the detail modal."""

from __future__ import annotations

from typing import ClassVar

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Input, OptionList, Static
from textual.widgets.option_list import Option

from pickers.config import Settings
from pickers.engine import ListFilterEngine, build_country_engine, build_language_engine
from pickers.log import bind_log_context, log_debug
from pickers.logging_config import get_logger
from pickers.models import Item, ItemList

from .actions import PickerActions
from .constants import (
    COUNTRIES_SCREEN,
    COUNTRY_SEARCH_PLACEHOLDER,
    ITEM_LIST_ID,
    LANGUAGE_SEARCH_PLACEHOLDER,
    LANGUAGES_SCREEN,
    SEARCH_INPUT_ID,
    STATUS_ID,
)
from .widgets import BannerCarousel


logger = get_logger(__name__)


class DetailScreen(ModalScreen[None]):
    """Shows the item handed over by a picker selection."""

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "close", "Back"),
    ]

    def __init__(self, item: Item) -> None:
        super().__init__()
        self.item = item

    def compose(self) -> ComposeResult:
        yield Container(
            Static(self.item.label, id="detail-label", markup=False),
            Static(self.item.icon, id="detail-icon", markup=False),
            Horizontal(
                Button("Back", id="btn-back", variant="primary"),
                classes="detail-buttons",
            ),
            id="detail-dialog",
        )

    @on(Button.Pressed, "#btn-back")
    def on_back_pressed(self) -> None:
        self.dismiss()

    def action_close(self) -> None:
        self.dismiss()


class PickerScreen(PickerActions, Screen[None]):
    """Banner carousel, search field and item list over a ``ListFilterEngine``."""

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("pageup", "prev_banner", "Prev banner", priority=True),
        Binding("pagedown", "next_banner", "Next banner", priority=True),
        Binding("escape", "cancel_search", "Cancel search"),
        Binding("f2", f"app.switch_screen('{COUNTRIES_SCREEN}')", "Countries"),
        Binding("f3", f"app.switch_screen('{LANGUAGES_SCREEN}')", "Languages"),
    ]

    screen_name: ClassVar[str] = "picker"
    placeholder: ClassVar[str] = "Search"

    def __init__(self, engine: ListFilterEngine, banners: list[str]) -> None:
        super().__init__()
        self.engine = engine
        self.banners = banners
        self.visible_items: ItemList = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield BannerCarousel(self.banners)
        with Horizontal(classes="search-row"):
            yield Input(placeholder=self.placeholder, id=SEARCH_INPUT_ID)
            yield Button("Cancel", id="btn-cancel", variant="default")
        yield OptionList(id=ITEM_LIST_ID)
        yield Static("", id=STATUS_ID)
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_items()
        self.query_one(f"#{SEARCH_INPUT_ID}", Input).focus()

    def banner_limit(self) -> int:
        return len(self.banners)

    def row_prompt(self, item: Item) -> Text:
        return Text(item.label)

    def banner_reached(self, index: int) -> None:
        """Forward a carousel move to the engine."""
        self.engine.carousel_position_reached(index)

    def move_carousel(self, index: int) -> None:
        self.query_one(BannerCarousel).show(index)
        with bind_log_context(screen=self.screen_name):
            self.banner_reached(index)
        self.refresh_items()

    def refresh_items(self) -> None:
        """Re-render the list from the engine's visible items."""
        self.visible_items = self.engine.current_visible_items()
        option_list = self.query_one(f"#{ITEM_LIST_ID}", OptionList)
        option_list.clear_options()
        option_list.add_options([Option(self.row_prompt(item)) for item in self.visible_items])

        total = len(self.engine.current_page_items())
        status = self.query_one(f"#{STATUS_ID}", Static)
        status.update(Text(f"Showing {len(self.visible_items)} of {total}"))

    @on(Input.Changed, f"#{SEARCH_INPUT_ID}")
    def on_search_changed(self, event: Input.Changed) -> None:
        with bind_log_context(screen=self.screen_name):
            self.engine.query_changed(event.value)
        self.refresh_items()

    @on(Button.Pressed, "#btn-cancel")
    def on_cancel_pressed(self) -> None:
        self.action_cancel_search()

    @on(OptionList.OptionSelected, f"#{ITEM_LIST_ID}")
    def on_item_selected(self, event: OptionList.OptionSelected) -> None:
        item = self.visible_items[event.option_index]
        with bind_log_context(screen=self.screen_name):
            self.engine.item_tapped(item)
            selected = self.engine.consume_selection()
        if selected is None:
            return
        log_debug(logger, "tui.detail", screen=self.screen_name, label=selected.label)
        self.query_one(f"#{SEARCH_INPUT_ID}", Input).blur()
        self.app.push_screen(DetailScreen(selected))


class CountryPickerScreen(PickerScreen):
    """Every ISO country; the reshuffle banner regenerates the list."""

    screen_name = COUNTRIES_SCREEN
    placeholder = COUNTRY_SEARCH_PLACEHOLDER

    def __init__(self, settings: Settings) -> None:
        super().__init__(build_country_engine(settings), settings.country_banners)


class LanguagePickerScreen(PickerScreen):
    """Synthetic languages; the banner index is the page index."""

    screen_name = LANGUAGES_SCREEN
    placeholder = LANGUAGE_SEARCH_PLACEHOLDER

    def __init__(self, settings: Settings) -> None:
        super().__init__(build_language_engine(settings), settings.language_banners)

    def banner_limit(self) -> int:
        return min(len(self.banners), self.engine.current_page_count())

    def row_prompt(self, item: Item) -> Text:
        return Text.assemble((f"{item.icon:<8}", "dim"), item.label)

    def banner_reached(self, index: int) -> None:
        super().banner_reached(index)
        self.engine.page_changed(index)
