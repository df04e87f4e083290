"""Unix permission bit codec.

Converts between permission masks and their 10-character symbolic form
(e.g. ``-rwxr-xr-x``). Only the nine permission bits are modelled; the
leading file-type character is always written as ``-`` and skipped on
parse regardless of its value.
"""

from footprint.core.errors import FormatError

SYMBOLIC_LENGTH = len("drwxr-xr-x")

PERMISSION_MASK = 0o777

_CHAR_VALUES = {"r": 4, "w": 2, "x": 1, "-": 0}
_RWX = "rwx"


def parse_permissions(symbolic: str) -> int:
    """Parse a symbolic permission string into permission bits.

    Args:
        symbolic: Ten-character string such as ``drwxr-xr-x``.

    Returns:
        Permission bits in the range 0o000 to 0o777.

    Raises:
        FormatError: If the length is wrong or a character is not one
            of ``r``, ``w``, ``x`` or ``-``.
    """
    if len(symbolic) != SYMBOLIC_LENGTH:
        raise FormatError("invalid length", line=symbolic)

    bits = 0
    # Groups start at offsets 1, 4 and 7; the type character is skipped.
    for group_start in range(1, SYMBOLIC_LENGTH, 3):
        digit = 0
        for char in symbolic[group_start : group_start + 3]:
            try:
                digit += _CHAR_VALUES[char]
            except KeyError:
                raise FormatError("invalid character", char=char) from None
        bits = (bits << 3) | digit

    return bits


def format_permissions(mode: int) -> str:
    """Render permission bits as a 10-character symbolic string.

    Bits outside 0o777 (file type, setuid, sticky) are ignored.

    Args:
        mode: Permission bits, typically ``st_mode`` or a masked value.

    Returns:
        Symbolic string with a ``-`` type character, e.g. ``-rw-r--r--``.
    """
    perms = mode & PERMISSION_MASK
    chars = ["-"]
    for shift in (6, 3, 0):
        digit = (perms >> shift) & 0o7
        for bit, char in zip((4, 2, 1), _RWX, strict=True):
            chars.append(char if digit & bit else "-")
    return "".join(chars)
