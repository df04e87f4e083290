"""Footprint file I/O operations.

Loads and saves a FootprintList as a plain text file in the ledger
line format. Saves replace the file atomically so a crash never leaves
a half-written footprint behind.
"""

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from footprint.core.ledger import ENCODING, ENCODING_ERRORS, FootprintList
from footprint.core.paths import ensure_dir, get_ledger_path

logger = logging.getLogger(__name__)


def load_footprint(path: Path | None = None) -> FootprintList:
    """Load a footprint from a ledger file.

    A missing file is treated as an empty footprint.

    Args:
        path: Path to the ledger file. If None, uses the default ledger path.

    Returns:
        The parsed FootprintList.

    Raises:
        FormatError: If the file contents are malformed.
        LedgerReadError: If the file cannot be read.
    """
    ledger_path = path or get_ledger_path()

    if not ledger_path.exists():
        logger.debug("No footprint at %s, starting empty", ledger_path)
        return FootprintList()

    # Split on "\n" only; a lone "\r" is a legal path character
    with ledger_path.open(encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as f:
        return FootprintList.parse(f)


def save_footprint(footprint: FootprintList, path: Path | None = None) -> Path:
    """Save a footprint to a ledger file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.
    The temporary file is cleaned up on failure.

    Args:
        footprint: The FootprintList to save.
        path: Path to save to. If None, uses the default ledger path.

    Returns:
        Path where the footprint was saved.

    Raises:
        RuntimeError: If the parent directory cannot be created.
        OSError: If the file cannot be written.
    """
    ledger_path = path or get_ledger_path()
    ensure_dir(ledger_path.parent, "footprint")

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="w",
            encoding=ENCODING,
            errors=ENCODING_ERRORS,
            newline="",
            dir=ledger_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            footprint.write(f)
        os.replace(tmp_path, ledger_path)
    except Exception:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise

    logger.debug("Saved %d footprint entries to %s", len(footprint), ledger_path)
    return ledger_path
