"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from footprint import __version__
from footprint.cli.commands import check, config, count, create, show

# Create main Typer app
app = typer.Typer(
    name="footprint",
    help="Track the files a program leaves on disk.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"footprint version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    ledger: Annotated[
        Path | None,
        typer.Option(
            "--ledger",
            "-l",
            help="Footprint ledger file (overrides config).",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file path.",
        ),
    ] = None,
) -> None:
    """footprint - Track the files a program leaves on disk.

    Records every created file with its permissions and owner in a
    plain-text ledger so it can be audited later.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["ledger"] = ledger
    ctx.obj["config"] = config_path


# Register commands
app.add_typer(show.app, name="show")
app.add_typer(count.app, name="count")
app.command(name="create")(create.create)
app.add_typer(check.app, name="check")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
