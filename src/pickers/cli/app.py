"""CLI application setup."""

from __future__ import annotations

import logging
import os
import sys
from typing import Annotated

import typer

from pickers import __version__
from pickers.config import get_settings
from pickers.log import log_debug, set_log_context
from pickers.logging_config import setup_logging

from .shared import console


app = typer.Typer(
    name="pickers",
    help="Searchable country and language pickers",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pickers[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Pickers - browse and search countries and languages."""
    settings = get_settings()
    level = logging.DEBUG if verbose else logging.INFO
    setup_logging(level=level, log_dir=settings.log_dir, log_to_file=settings.log_to_file)

    set_log_context(run_id=settings.run_id, pid=os.getpid())
    log_debug(
        logging.getLogger("pickers.cli"),
        "cli.start",
        argv=" ".join(sys.argv),
        verbose=verbose,
        log_dir=settings.log_dir,
    )
