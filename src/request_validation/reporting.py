"""Rich console rendering of validation errors.

Useful in CLIs and during development to inspect what a validation pass
recorded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from request_validation.errors import ValidationErrors

__all__ = ["build_report_table", "print_report"]


def build_report_table(errors: ValidationErrors, title: str = "Validation Errors") -> Table:
    """Build a table with one row per recorded message.

    Keyed messages are listed first in insertion order, followed by general
    messages with an empty path column.

    Args:
        errors: Error bundle to render.
        title: Table title.

    Returns:
        Rich Table with "Path" and "Error" columns.
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Path", style="cyan")
    table.add_column("Error", style="yellow")

    for key, messages in errors.by_key.items():
        for message in messages:
            table.add_row(key, message)
    for message in errors.general:
        table.add_row("", message)

    if errors.is_empty:
        table.add_row("-", "No errors")

    return table


def print_report(
    errors: ValidationErrors,
    console: Console | None = None,
    title: str = "Validation Errors",
) -> None:
    """Print the errors table to a Rich console (stdout by default)."""
    (console or Console()).print(build_report_table(errors, title=title))
