"""Allow ``python -m pickers``."""

from pickers.cli import app


app()
