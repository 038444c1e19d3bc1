"""CLI command: countries."""

from __future__ import annotations

from typing import Annotated

import typer

from pickers.engine import ListFilterEngine, generate_country_list
from pickers.log import bind_log_context

from .app import app
from .shared import render_items


@app.command()
def countries(
    query: Annotated[
        str,
        typer.Option("--query", "-q", help="Case-insensitive text to search for"),
    ] = "",
    shuffle: Annotated[
        bool,
        typer.Option("--shuffle", "-s", help="Random order, name before flag"),
    ] = False,
) -> None:
    """
    List countries with their flags.

    Example:
        pickers countries --query united
    """
    with bind_log_context(op="cli.countries", screen="countries"):
        engine = ListFilterEngine([generate_country_list(shuffle=shuffle)], name="countries")
        engine.query_changed(query)
        render_items(
            "Countries",
            engine.current_visible_items(),
            total=len(engine.current_page_items()),
        )
