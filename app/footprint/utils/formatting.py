"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from footprint.models.permissions import format_permissions

if TYPE_CHECKING:
    from footprint.models.entry import Entry

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "#f53263",
        "info": "#0ec1c8",
        "perms": "#c1ff62",
        "owner": "#69B9A1",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def safe_text(value: object) -> str:
    """Make a path or message safe to embed in Rich markup.

    Bytes smuggled in as surrogate escapes are shown as backslash escapes
    and square brackets are escaped so they are not read as markup.
    """
    text = os.fspath(value) if isinstance(value, os.PathLike) else str(value)
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "backslashreplace")
    return escape(raw.decode("utf-8", "backslashreplace"))


def create_entry_table(title: str = "Footprint") -> Table:
    """Create a pre-configured table for displaying footprint entries.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Permissions", style="perms", no_wrap=True)
    table.add_column("Owner", style="owner")
    table.add_column("Group", style="owner")
    table.add_column("Path", style="text", overflow="fold")
    return table


def format_entry_row(index: int, entry: Entry) -> tuple[str, str, str, str, str]:
    """Format an entry as a table row.

    Names and paths go through safe_text.

    Returns:
        Tuple of (index, permissions, owner, group, path).
    """
    return (
        str(index),
        format_permissions(entry.permissions),
        safe_text(entry.owner_name),
        safe_text(entry.group_name),
        safe_text(entry.path),
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
