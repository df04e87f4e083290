"""Exception hierarchy for footprint.

All errors raised by the ledger and its entry model derive from
FootprintError so callers can catch the whole family at once.
"""


class FootprintError(Exception):
    """Base exception for footprint errors."""


class EntryError(FootprintError):
    """Raised when an Entry cannot be built from a live file."""


class StatError(EntryError):
    """Raised when the file cannot be stat'ed."""


class PathResolutionError(EntryError):
    """Raised when the absolute path of a file cannot be resolved."""


class IdentityLookupError(EntryError):
    """Raised when a numeric owner or group id has no symbolic name.

    Attributes:
        kind: Either "user" or "group".
        ident: The numeric id that failed to resolve.
    """

    def __init__(self, kind: str, ident: int) -> None:
        self.kind = kind
        self.ident = ident
        super().__init__(f"Unknown {kind} id: {ident}")


class FormatError(FootprintError):
    """Raised when serialized footprint text is malformed.

    Attributes:
        reason: Short description of what is wrong.
        line: The offending line, if known.
        char: The offending character, if known.
        lineno: 1-based line number within the parsed stream, if known.
    """

    def __init__(
        self,
        reason: str,
        line: str | None = None,
        char: str | None = None,
        lineno: int | None = None,
    ) -> None:
        self.reason = reason
        self.line = line
        self.char = char
        self.lineno = lineno

        message = reason if lineno is None else f"line {lineno}: {reason}"
        if char is not None:
            message = f"{message}: {char!r} (byte {ord(char)})"
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)


class LedgerReadError(FootprintError, OSError):
    """Raised when a footprint stream fails while being read."""
