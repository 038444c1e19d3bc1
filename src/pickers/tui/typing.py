"""Typing helpers for the TUI layer."""

from __future__ import annotations

from typing import Any, Protocol

from pickers.engine import ListFilterEngine


class PickerScreenProtocol(Protocol):
    """Subset of the picker screen interface used by action mixins."""

    engine: ListFilterEngine

    def query_one(self, *args: Any, **kwargs: Any) -> Any: ...
    def banner_limit(self) -> int: ...
    def move_carousel(self, index: int) -> None: ...
    def refresh_items(self) -> None: ...
