"""footprint - track the files a program leaves on disk.

A footprint is an ordered, thread-safe ledger of the filesystem entries
a program has created, with a stable one-line-per-entry text format so
it can be saved and reloaded between runs.
"""

from footprint.core.errors import (
    EntryError,
    FootprintError,
    FormatError,
    IdentityLookupError,
    LedgerReadError,
    PathResolutionError,
    StatError,
)
from footprint.core.ledger import FootprintList
from footprint.models.entry import Entry

__version__ = "0.1.0"

__all__ = [
    "Entry",
    "EntryError",
    "FootprintError",
    "FootprintList",
    "FormatError",
    "IdentityLookupError",
    "LedgerReadError",
    "PathResolutionError",
    "StatError",
    "__version__",
]
