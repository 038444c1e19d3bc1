"""Reusable TUI widgets."""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from textual.widgets import Static

from .constants import ACTIVE_DOT, BANNER_ID, INACTIVE_DOT


class BannerCarousel(Static):
    """Paged banner strip with page dots underneath.

    Banners are image names; the terminal shows the name in place of the image.
    """

    def __init__(self, banners: Sequence[str], *, id: str = BANNER_ID) -> None:  # noqa: A002
        super().__init__(id=id)
        self.banners = list(banners)
        self.index = 0

    def on_mount(self) -> None:
        self.show(self.index)

    def show(self, index: int) -> None:
        """Display banner ``index`` and highlight its dot."""
        self.index = index
        dots = " ".join(
            ACTIVE_DOT if position == index else INACTIVE_DOT
            for position in range(len(self.banners))
        )
        content = Text.assemble(
            (f"[ {self.banners[index]} ]", "bold"),
            "\n",
            (dots, "dim"),
        )
        self.update(content)
