"""Utility modules for footprint.

This module exports commonly used utility functions.
"""

from footprint.utils.formatting import (
    console,
    create_entry_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
    safe_text,
)

__all__ = [
    "console",
    "create_entry_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "safe_text",
]
