"""CLI commands for footprint.

This package contains all subcommand implementations.
"""

from footprint.cli.commands import check, config, count, create, show

__all__ = ["check", "config", "count", "create", "show"]
