"""
Rich console output for the CLI.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lwcindex.helpers.dto.tags_dto import TagInfo

console = Console()

# Color scheme
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_INFO = "cyan"


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for tag listings.
    """

    @staticmethod
    def show_tags(tags: list[tuple[str, TagInfo]], title: str = "Tags"):
        """Display tags with their attributes."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Tag", style=COLOR_INFO, no_wrap=True)
        table.add_column("Attributes", overflow="fold")

        for name, info in sorted(tags):
            table.add_row(escape(name), escape(", ".join(info.attributes)))

        console.print(table)


def show_tag(name: str, info: TagInfo):
    """Display one tag's attributes and documentation."""
    attributes = "\n".join(f"  {escape(a)}" for a in info.attributes) or "  (none)"
    content = f"[bold]Attributes:[/bold]\n{attributes}\n\n[bold]Documentation:[/bold]\n  {escape(info.documentation)}"
    InfoPanel.show(escape(name), content)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {escape(message)}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {escape(message)}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {escape(message)}")
