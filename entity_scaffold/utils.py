"""Rich-based console helpers for the entity scaffolder.

All operator-facing output (notes, status lines, the file table and source
previews) goes through the module-level ``console`` so tests can capture
it in one place.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .scaffolder.models import RenderedFile

console = Console()


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def print_note(message: str) -> None:
    """Print a highlighted informational note."""
    console.print(f"[bold cyan]Note:[/bold cyan] {message}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


# ---------------------------------------------------------------------------
# Tables and previews
# ---------------------------------------------------------------------------


def build_files_table(files: Iterable[RenderedFile], title: str | None = None) -> Table:
    """Build the two-column ``path`` / ``class`` table for *files*."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("path", style="dim", no_wrap=True)
    table.add_column("class")

    for rendered in files:
        descriptor = rendered.descriptor
        table.add_row(
            escape(rendered.path.as_posix()),
            escape(f"{descriptor.kind.value} {descriptor.fqn}"),
        )
    return table


def print_files_table(files: Iterable[RenderedFile], title: str | None = None) -> None:
    """Print the file table followed by a blank line."""
    console.print(build_files_table(files, title))
    console.print()


def print_source(rendered: RenderedFile) -> None:
    """Print one rendered file with PHP syntax highlighting."""
    console.print(
        Panel(
            Syntax(rendered.source, "php", line_numbers=False),
            title=rendered.path.as_posix(),
            title_align="left",
        )
    )
