"""Count command for the number of tracked entries."""

import typer

from footprint.cli.common import require_footprint, resolve_ledger_path

app = typer.Typer(
    name="count",
    help="Print the number of tracked entries.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def count(ctx: typer.Context) -> None:
    """Print the number of entries in the footprint ledger."""
    if ctx.invoked_subcommand is not None:
        return

    footprint = require_footprint(resolve_ledger_path(ctx))
    typer.echo(len(footprint))
