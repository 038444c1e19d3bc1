"""Logging configuration for the application."""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


__all__ = ["get_logger", "setup_logging"]

_initialized: bool = False


def setup_logging(
    level: int = logging.INFO,
    log_dir: Path | None = None,
    log_to_file: bool = True,
    log_to_console: bool = True,
    force: bool = False,
) -> None:
    """
    Configure application-wide logging with Rich console and optional file output.

    Args:
        level: Logging level (default: INFO)
        log_dir: Directory for log files
        log_to_file: Whether to write logs to file
        log_to_console: Whether to attach the Rich console handler (off inside the TUI)
        force: Replace an earlier configuration instead of keeping it
    """
    global _initialized  # noqa: PLW0603
    if _initialized and not force:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers; file handlers from an earlier call are closed.
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    if log_to_console:
        console = Console(stderr=True)
        console_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
        )
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    if log_to_file and log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"pickers_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    # Textual and asyncio chatter is not useful next to picker events.
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("textual").setLevel(logging.WARNING)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
