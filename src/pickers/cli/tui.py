"""CLI command: tui."""

from __future__ import annotations

from typing import Annotated

import typer

from pickers.tui import PickerApp
from pickers.tui.constants import COUNTRIES_SCREEN, LANGUAGES_SCREEN

from .app import app
from .shared import console


@app.command()
def tui(
    start: Annotated[
        str,
        typer.Option("--start", help="Screen to open first: 'countries' or 'languages'"),
    ] = COUNTRIES_SCREEN,
) -> None:
    """Launch the interactive TUI (Terminal User Interface)."""
    if start not in (COUNTRIES_SCREEN, LANGUAGES_SCREEN):
        console.print(f"[red]Invalid screen: {start}. Use 'countries' or 'languages'[/red]")
        raise typer.Exit(1)

    app_instance = PickerApp(start=start)
    app_instance.run()
