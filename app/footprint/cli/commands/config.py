"""Configuration commands.

Provides commands to write a default config file and to show the
effective settings.
"""

from pathlib import Path
from typing import Annotated

import typer

from footprint.cli.common import get_options
from footprint.core.config import (
    ConfigError,
    FootprintConfig,
    load_config_or_default,
    save_config,
)
from footprint.core.paths import get_config_path
from footprint.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    safe_text,
)

app = typer.Typer(
    help="Manage footprint configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    path = get_options(ctx).get("config")
    return path if isinstance(path, Path) else get_config_path()


@app.command()
def init(
    ctx: typer.Context,
    ledger_path: Annotated[
        Path | None,
        typer.Option("--ledger-path", help="Ledger file to record in the config."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file."""
    path = _config_path(ctx)
    if path.exists() and not force:
        print_error(f"Config already exists: {safe_text(path)} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(FootprintConfig(ledger_path=ledger_path), path)
    except ConfigError as e:
        print_error(safe_text(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {safe_text(saved)}")


@app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    path = _config_path(ctx)
    try:
        config = load_config_or_default(path)
    except ConfigError as e:
        print_error(f"Failed to load config: {safe_text(e)}")
        raise typer.Exit(code=1) from e

    console.print(f"[muted]config:[/] {safe_text(path)}")
    if not path.exists():
        print_info("No config file found, using defaults.")
    console.print(f"[muted]ledger_path:[/] {safe_text(config.effective_ledger_path)}")
