"""TUI application implementation."""

from __future__ import annotations

import logging
from typing import ClassVar

from textual.app import App
from textual.binding import Binding, BindingType

from pickers.config import Settings, get_settings
from pickers.log import log_info, set_log_context
from pickers.logging_config import get_logger, setup_logging

from .constants import COUNTRIES_SCREEN, LANGUAGES_SCREEN
from .screens import CountryPickerScreen, LanguagePickerScreen
from .styles import TUI_CSS


logger = get_logger(__name__)


class PickerApp(App[None]):
    """Country and language pickers in one terminal app."""

    CSS = TUI_CSS

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+t", "toggle_dark", "Toggle Dark Mode", priority=True),
    ]

    TITLE: str | None = "Pickers"
    SUB_TITLE = "Countries & Languages"

    def __init__(self, settings: Settings | None = None, start: str = COUNTRIES_SCREEN) -> None:
        super().__init__()
        self._settings = settings or get_settings()
        self._start = start
        # Console logging would draw over the terminal UI.
        setup_logging(
            level=logging.DEBUG,
            log_dir=self._settings.log_dir,
            log_to_file=self._settings.log_to_file,
            log_to_console=False,
            force=True,
        )
        set_log_context(run_id=self._settings.run_id)

    def on_mount(self) -> None:
        """Create both picker screens once; switching keeps their state."""
        self.install_screen(CountryPickerScreen(self._settings), name=COUNTRIES_SCREEN)
        self.install_screen(LanguagePickerScreen(self._settings), name=LANGUAGES_SCREEN)
        self.push_screen(self._start)
        log_info(logger, "tui.start", screen=self._start)

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-dark" if self.theme == "textual-light" else "textual-light"


def main() -> None:
    """Entry point for the TUI."""
    app = PickerApp()
    app.run()
