"""Check command for verifying tracked entries against the disk.

Validation is not implemented yet; the command reports how many
entries went unchecked so nobody mistakes a clean exit for a pass.
"""

import typer

from footprint.cli.common import require_footprint, resolve_ledger_path
from footprint.utils.formatting import print_warning

app = typer.Typer(
    name="check",
    help="Check tracked entries against the disk (not implemented yet).",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def check(ctx: typer.Context) -> None:
    """Check that tracked entries still match the filesystem."""
    if ctx.invoked_subcommand is not None:
        return

    footprint = require_footprint(resolve_ledger_path(ctx))
    footprint.validate()
    print_warning(f"Validation is not implemented yet; {len(footprint)} entries were not checked.")
