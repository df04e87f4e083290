"""Data models for footprint.

This module exports the entry model and the permission codec.
"""

from footprint.models.entry import Entry, lookup_group_name, lookup_user_name
from footprint.models.permissions import format_permissions, parse_permissions

__all__ = [
    "Entry",
    "format_permissions",
    "lookup_group_name",
    "lookup_user_name",
    "parse_permissions",
]
