"""Textual front end for the picker engines."""

from .app import PickerApp, main
from .screens import CountryPickerScreen, DetailScreen, LanguagePickerScreen


__all__ = [
    "CountryPickerScreen",
    "DetailScreen",
    "LanguagePickerScreen",
    "PickerApp",
    "main",
]
