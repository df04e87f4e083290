"""Footprint entry model.

This module defines the immutable Entry record that describes one
filesystem object tracked by a footprint ledger, and the line format
it is serialized to.

The line format is similar to the ``.footprint`` files of the CRUX
package manager::

    -rw-r--r--<TAB>owner/group<TAB>/absolute/path
"""

from __future__ import annotations

import grp
import os
import pwd
from dataclasses import dataclass
from typing import Any

from footprint.core.errors import (
    FormatError,
    IdentityLookupError,
    PathResolutionError,
    StatError,
)
from footprint.models.permissions import (
    PERMISSION_MASK,
    format_permissions,
    parse_permissions,
)

FIELD_SEPARATOR = "\t"
OWNER_SEPARATOR = "/"

# A path holding either of these would not read back as one entry.
UNSAFE_PATH_CHARS = ("\t", "\n")


@dataclass(frozen=True, slots=True)
class Entry:
    """A single filesystem object tracked by a footprint.

    Owner and group are stored by name rather than by numeric id, so a
    reloaded entry reflects the names that were valid when it was
    created. Later account renames are not detected.

    Attributes:
        permissions: Permission bits (0o000 to 0o777).
        path: Absolute filesystem path.
        owner_name: Symbolic name of the owning user.
        group_name: Symbolic name of the owning group.
    """

    permissions: int
    path: str
    owner_name: str
    group_name: str

    @classmethod
    def from_file(cls, handle: Any) -> Entry:
        """Build an entry from an open file handle.

        Args:
            handle: Open file object with ``fileno()`` and ``name``.

        Returns:
            Entry describing the file.

        Raises:
            StatError: If the file cannot be stat'ed.
            PathResolutionError: If the absolute path cannot be resolved.
            IdentityLookupError: If the owner or group id has no name.
        """
        try:
            st = os.fstat(handle.fileno())
        except (OSError, ValueError) as e:
            raise StatError(f"Cannot stat {getattr(handle, 'name', handle)!r}: {e}") from e

        return cls._from_stat(getattr(handle, "name", None), st)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Entry:
        """Build an entry from an existing path.

        Symbolic links are followed, matching what opening the file would see.

        Raises:
            StatError: If the path cannot be stat'ed.
            PathResolutionError: If the absolute path cannot be resolved.
            IdentityLookupError: If the owner or group id has no name.
        """
        try:
            st = os.stat(path)
        except OSError as e:
            raise StatError(f"Cannot stat {os.fspath(path)!r}: {e}") from e

        return cls._from_stat(path, st)

    @classmethod
    def _from_stat(cls, name: Any, st: os.stat_result) -> Entry:
        try:
            path = os.path.abspath(os.fspath(name))
        except (OSError, TypeError) as e:
            raise PathResolutionError(f"Cannot resolve absolute path of {name!r}: {e}") from e

        return cls(
            permissions=st.st_mode & PERMISSION_MASK,
            path=path,
            owner_name=lookup_user_name(st.st_uid),
            group_name=lookup_group_name(st.st_gid),
        )

    def to_line(self) -> str:
        """Serialize to a single tab-separated line (no trailing newline)."""
        return (
            f"{format_permissions(self.permissions)}{FIELD_SEPARATOR}"
            f"{self.owner_name}{OWNER_SEPARATOR}{self.group_name}{FIELD_SEPARATOR}"
            f"{self.path}"
        )

    @classmethod
    def from_line(cls, line: str) -> Entry:
        """Parse an entry from one serialized line.

        The leading file-type character of the permission field is
        ignored. The path field is taken verbatim.

        Args:
            line: A line without its terminating newline.

        Returns:
            Parsed Entry.

        Raises:
            FormatError: If the line does not have exactly three fields,
                the owner field is not ``owner/group``, or the permission
                field is malformed.
        """
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != 3:
            raise FormatError("wrong field count", line=line)

        perms_field, owner_field, path = fields

        owners = owner_field.split(OWNER_SEPARATOR)
        if len(owners) != 2:
            raise FormatError("wrong owner/group field", line=line)

        try:
            permissions = parse_permissions(perms_field)
        except FormatError as e:
            raise FormatError(e.reason, line=line, char=e.char) from e

        return cls(
            permissions=permissions,
            path=path,
            owner_name=owners[0],
            group_name=owners[1],
        )

    def __str__(self) -> str:
        return self.to_line()


def lookup_user_name(uid: int) -> str:
    """Resolve a numeric user id to its account name.

    Raises:
        IdentityLookupError: If no account has this id.
    """
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        raise IdentityLookupError("user", uid) from None


def lookup_group_name(gid: int) -> str:
    """Resolve a numeric group id to its group name.

    Raises:
        IdentityLookupError: If no group has this id.
    """
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        raise IdentityLookupError("group", gid) from None


def is_serializable_path(path: str | os.PathLike[str]) -> bool:
    """Return True if the absolute form of ``path`` fits on one ledger line."""
    absolute = os.path.abspath(os.fspath(path))
    return not any(char in absolute for char in UNSAFE_PATH_CHARS)
