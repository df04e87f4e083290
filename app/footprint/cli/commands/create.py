"""Create command for making and tracking new files.

This module provides the `footprint create` command, which creates
each given file and records it in the footprint ledger.
"""

from pathlib import Path
from typing import Annotated

import typer

from footprint.cli.common import require_footprint, resolve_ledger_path
from footprint.core.errors import EntryError
from footprint.core.store import save_footprint
from footprint.models.entry import is_serializable_path
from footprint.utils.formatting import print_error, print_info, print_success, safe_text


def create(
    ctx: typer.Context,
    paths: Annotated[
        list[Path],
        typer.Argument(help="Files to create (existing files are truncated)."),
    ],
) -> None:
    """Create files and record them in the footprint.

    Paths containing a tab or newline are refused before anything is
    created, since they cannot be stored in the ledger.

    Examples:
        footprint create ~/.cache/myapp/state.db
        footprint --ledger ./footprint.txt create a.txt b.txt
    """
    ledger_path = resolve_ledger_path(ctx)
    footprint = require_footprint(ledger_path)

    tracked = 0
    failed = 0
    for path in paths:
        shown = safe_text(path)
        if not is_serializable_path(path):
            print_error(f"Refusing {shown}: tabs and newlines cannot be stored in a footprint")
            failed += 1
            continue
        try:
            handle = footprint.create(path)
        except EntryError as e:
            print_error(f"Could not track {shown}: {safe_text(e)} (file left on disk)")
            failed += 1
            continue
        except OSError as e:
            print_error(f"Failed to create {shown}: {safe_text(e)}")
            failed += 1
            continue
        handle.close()
        tracked += 1
        print_success(f"Tracked {shown}")

    if tracked:
        try:
            save_footprint(footprint, ledger_path)
        except (OSError, RuntimeError) as e:
            print_error(f"Failed to save footprint {safe_text(ledger_path)}: {safe_text(e)}")
            raise typer.Exit(code=1) from e
        print_info(f"Footprint saved to {safe_text(ledger_path)}")

    if failed:
        raise typer.Exit(code=1)
