"""CLI command: languages."""

from __future__ import annotations

from typing import Annotated

import typer

from pickers.config import get_settings
from pickers.engine import ListFilterEngine, PageOutOfRangeError, generate_language_groups
from pickers.log import bind_log_context, log_warning
from pickers.logging_config import get_logger

from .app import app
from .shared import console, render_items


logger = get_logger(__name__)


@app.command()
def languages(
    page: Annotated[
        int,
        typer.Option("--page", "-p", help="Page (banner) index, starting at 0"),
    ] = 0,
    query: Annotated[
        str,
        typer.Option("--query", "-q", help="Case-insensitive text to search for"),
    ] = "",
    count: Annotated[
        int | None,
        typer.Option("--count", help="Number of languages to generate"),
    ] = None,
    group_size: Annotated[
        int | None,
        typer.Option("--group-size", help="Languages per page"),
    ] = None,
) -> None:
    """
    List one page of languages.

    Example:
        pickers languages --page 1 --query 3
    """
    settings = get_settings()
    total_count = settings.language_count if count is None else count
    size = settings.language_group_size if group_size is None else group_size

    with bind_log_context(op="cli.languages", screen="languages"):
        try:
            groups = generate_language_groups(total_count, size, icons=settings.language_icons)
        except ValueError as err:
            console.print(f"[red]Invalid generation parameters: {err}[/red]")
            raise typer.Exit(1) from err

        engine = ListFilterEngine(groups, name="languages")
        try:
            engine.page_changed(page)
        except PageOutOfRangeError as err:
            log_warning(logger, "cli.languages.bad_page", page=page, page_count=err.page_count)
            console.print(
                f"[red]Invalid page: {page}. Choose 0..{err.page_count - 1}[/red]"
                if err.page_count
                else f"[red]Invalid page: {page}. There are no pages[/red]"
            )
            raise typer.Exit(1) from err

        engine.query_changed(query)
        render_items(
            f"Languages - page {page + 1} of {engine.current_page_count()}",
            engine.current_visible_items(),
            total=len(engine.current_page_items()),
            show_icon=True,
        )
