"""Shared CLI helpers."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pickers.models import ItemList


console = Console()


def render_items(title: str, items: ItemList, *, total: int, show_icon: bool = False) -> None:
    """Print visible items as a numbered table followed by a match count."""
    table = Table(title=title, show_header=True, header_style="bold green")
    table.add_column("#", style="dim", justify="right")
    if show_icon:
        table.add_column("Icon", style="magenta")
    table.add_column("Label", style="cyan")

    for number, item in enumerate(items, start=1):
        if show_icon:
            table.add_row(str(number), Text(item.icon), Text(item.label))
        else:
            table.add_row(str(number), Text(item.label))

    console.print(table)
    console.print(f"[bold]Showing {len(items)} of {total}[/bold]")
