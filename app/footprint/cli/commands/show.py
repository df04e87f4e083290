"""Show command for listing tracked entries.

This module provides the `footprint show` command for viewing the
entries recorded in the footprint ledger.
"""

from enum import Enum
from typing import Annotated

import typer

from footprint.cli.common import require_footprint, resolve_ledger_path
from footprint.core.ledger import ENCODING, ENCODING_ERRORS
from footprint.utils.formatting import (
    console,
    create_entry_table,
    format_entry_row,
    print_info,
    safe_text,
)

app = typer.Typer(
    name="show",
    help="Show tracked entries.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options for show."""

    TABLE = "table"
    TEXT = "text"


@app.callback(invoke_without_command=True)
def show(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format (text is the raw ledger format).",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show entries in the footprint ledger.

    Examples:
        footprint show              # Table view
        footprint show -f text      # Raw ledger lines for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    path = resolve_ledger_path(ctx)
    footprint = require_footprint(path)

    if output_format == OutputFormat.TEXT:
        # Bytes so undecodable filenames come back out unchanged
        typer.echo(footprint.render().encode(ENCODING, ENCODING_ERRORS), nl=False)
        return

    if len(footprint) == 0:
        print_info(f"No entries tracked in {safe_text(path)}")
        return

    table = create_entry_table(title=f"Footprint ({safe_text(path)})")
    for index, entry in enumerate(footprint, start=1):
        table.add_row(*format_entry_row(index, entry))
    console.print(table)
    console.print(f"\n[muted]{len(footprint)} entries tracked[/]")
