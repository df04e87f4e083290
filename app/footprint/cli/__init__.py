"""CLI package for footprint.

This package contains the Typer application and all subcommands.
"""

from footprint.cli.main import app

__all__ = ["app"]
