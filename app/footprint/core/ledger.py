"""Footprint ledger.

This module provides FootprintList, an ordered record of every
filesystem object a program has created. Entries are kept in insertion
order, duplicates are allowed, and the whole list can be serialized to
text and parsed back.

A freshly constructed FootprintList is ready to use. Each instance owns
its own reader/writer lock, so lists never block one another.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterable, Iterator
from typing import IO, Any

from footprint.core.errors import EntryError, FormatError, LedgerReadError
from footprint.core.locks import ReadWriteLock
from footprint.models.entry import Entry

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

# Undecodable filename bytes survive a save/load cycle as lone surrogates.
ENCODING_ERRORS = "surrogateescape"


class FootprintList:
    """Thread-safe, ordered list of footprint entries.

    Storage format (one entry per line, no header)::

        -rw-r--r--<TAB>owner/group<TAB>/absolute/path

    Attributes:
        _lock: Guards _entries. Writers (add, parse) take exclusive
            access; readers (len, render, iteration) take shared access.
        _entries: Tracked entries in insertion order.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        """Initialize a FootprintList.

        Args:
            entries: Optional initial entries, kept in the given order.
        """
        self._lock = ReadWriteLock()
        self._entries: list[Entry] = list(entries)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self)})"

    def entries(self) -> tuple[Entry, ...]:
        """Return a snapshot of the tracked entries in insertion order."""
        with self._lock.read_locked():
            return tuple(self._entries)

    def add(self, entry: Entry) -> None:
        """Append an entry to the list.

        No validation is performed and duplicate paths are accepted.

        Args:
            entry: The entry to track.
        """
        with self._lock.write_locked():
            self._entries.append(entry)
        logger.debug("Tracking %s", entry.path)

    def create(self, path: str | os.PathLike[str], binary: bool = False) -> IO[Any]:
        """Create a file and track it in the list.

        The file is created (or truncated) and opened for reading and
        writing. The caller owns the returned handle and must close it.

        If the file is created but its entry cannot be built, the file
        is left on disk untracked: the handle is closed, a warning is
        logged and the error is re-raised.

        Args:
            path: Path of the file to create.
            binary: Open the file in binary mode instead of text mode.

        Returns:
            The open file handle.

        Raises:
            OSError: If the file cannot be created. The list is unchanged.
            EntryError: If the created file cannot be described.
        """
        if binary:
            handle: IO[Any] = open(path, "w+b")  # noqa: SIM115
        else:
            handle = open(path, "w+", encoding=ENCODING)  # noqa: SIM115

        try:
            entry = Entry.from_file(handle)
        except EntryError:
            handle.close()
            logger.warning("Created %s but could not track it; file left on disk", path)
            raise

        self.add(entry)
        return handle

    def render(self) -> str:
        """Serialize the list to text.

        Every entry becomes one newline-terminated line. An empty list
        renders to the empty string.

        Returns:
            The serialized footprint.
        """
        buf = io.StringIO()
        self.write(buf)
        return buf.getvalue()

    def write(self, stream: IO[str]) -> None:
        """Write the serialized list to a text stream.

        The shared lock is held for the whole traversal, so the output
        is a consistent snapshot even if other threads are adding.

        Args:
            stream: Writable text stream.

        Raises:
            OSError: If writing to the stream fails.
        """
        with self._lock.read_locked():
            for entry in self._entries:
                stream.write(entry.to_line() + "\n")

    @classmethod
    def parse(cls, stream: IO[Any]) -> FootprintList:
        """Read a FootprintList from a stream.

        Lines are read until end of stream. Text and binary streams are
        both accepted; bytes are decoded as UTF-8, with invalid bytes
        kept as surrogate escapes. A trailing "\\n" or "\\r\\n" ends each
        line; text streams should be opened with newline="\\n" so a lone
        "\\r" inside a path does not split it. Parsing is all-or-nothing:
        one malformed line fails the whole parse.

        Args:
            stream: Readable text or binary stream.

        Returns:
            A new FootprintList holding the parsed entries in file order.

        Raises:
            FormatError: If any line is malformed.
            LedgerReadError: If reading from the stream fails.
        """
        entries: list[Entry] = []
        lineno = 0

        while True:
            try:
                raw = stream.readline()
                if isinstance(raw, bytes):
                    raw = raw.decode(ENCODING, ENCODING_ERRORS)
            except (OSError, UnicodeDecodeError) as e:
                raise LedgerReadError(f"Failed to read line {lineno + 1}: {e}") from e

            if not raw:
                break
            lineno += 1

            line = _strip_line_ending(raw)
            try:
                entries.append(Entry.from_line(line))
            except FormatError as e:
                raise FormatError(e.reason, line=line, char=e.char, lineno=lineno) from e

        footprint = cls()
        with footprint._lock.write_locked():
            footprint._entries.extend(entries)

        logger.debug("Parsed %d footprint entries", len(entries))
        return footprint

    @classmethod
    def from_text(cls, text: str) -> FootprintList:
        """Parse a FootprintList from serialized text.

        Raises:
            FormatError: If any line is malformed.
        """
        return cls.parse(io.StringIO(text, newline="\n"))

    def validate(self) -> None:
        """Check tracked entries against the filesystem.

        Not implemented: no entry is checked and this always returns.
        """
        with self._lock.read_locked():
            count = len(self._entries)
        logger.warning("Footprint validation is not implemented; %d entries left unchecked", count)

    def remove(self, path: str | os.PathLike[str]) -> None:
        """Stop tracking a path.

        Not implemented: neither the entry nor the file is removed and
        this always returns.
        """
        logger.warning("Footprint removal is not implemented; %s is still tracked", os.fspath(path))


def _strip_line_ending(raw: str) -> str:
    """Remove a single trailing ``\\n`` or ``\\r\\n``."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw
