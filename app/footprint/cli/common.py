"""Helpers shared by CLI commands."""

from pathlib import Path

import typer

from footprint.core.config import ConfigError, load_config_or_default
from footprint.core.errors import FootprintError
from footprint.core.ledger import FootprintList
from footprint.core.store import load_footprint
from footprint.utils.formatting import print_error, print_info, safe_text


def get_options(ctx: typer.Context) -> dict[str, object]:
    """Return the global options stored by the main callback."""
    obj = ctx.find_root().obj
    return obj if isinstance(obj, dict) else {}


def resolve_ledger_path(ctx: typer.Context) -> Path:
    """Resolve the ledger file to operate on.

    The --ledger option wins over the config file, which wins over the
    XDG default.

    Raises:
        typer.Exit: If the config file cannot be loaded.
    """
    options = get_options(ctx)
    ledger = options.get("ledger")
    if isinstance(ledger, Path):
        return ledger

    config_path = options.get("config")
    try:
        config = load_config_or_default(config_path if isinstance(config_path, Path) else None)
    except ConfigError as e:
        print_error(f"Failed to load config: {safe_text(e)}")
        raise typer.Exit(code=1) from e
    return config.effective_ledger_path


def require_footprint(path: Path) -> FootprintList:
    """Load the footprint or exit with a helpful error message.

    Raises:
        typer.Exit: If the footprint cannot be loaded.
    """
    try:
        return load_footprint(path)
    except (FootprintError, OSError) as e:
        print_error(safe_text(e))
        print_info(f"Footprint file: {safe_text(path)}")
        raise typer.Exit(code=1) from e
