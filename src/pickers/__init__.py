"""Pickers - searchable country and language picker screens."""

from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("pickers")
except PackageNotFoundError:  # pragma: no cover
    # When running from a source checkout without an installed distribution.
    __version__ = "0.0.0"

__all__ = ["__version__"]
