"""CLI entry point for the pickers."""

from . import countries as _countries  # noqa: F401
from . import languages as _languages  # noqa: F401
from . import tui as _tui  # noqa: F401
from .app import app


__all__ = ["app"]
