"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import grp
import os
import pwd

import pytest
from footprint.models.entry import Entry


@pytest.fixture
def sample_entries() -> list[Entry]:
    """A few entries, one path tracked twice."""
    return [
        Entry(0o755, "/usr/local/bin/tool", "root", "root"),
        Entry(0o644, "/home/user/.config/tool/config.toml", "user", "staff"),
        Entry(0o600, "/home/user/.cache/tool/token", "user", "user"),
        Entry(0o644, "/home/user/.config/tool/config.toml", "user", "staff"),
    ]


@pytest.fixture
def sample_text() -> str:
    """Serialized form of sample_entries."""
    return (
        "-rwxr-xr-x\troot/root\t/usr/local/bin/tool\n"
        "-rw-r--r--\tuser/staff\t/home/user/.config/tool/config.toml\n"
        "-rw-------\tuser/user\t/home/user/.cache/tool/token\n"
        "-rw-r--r--\tuser/staff\t/home/user/.config/tool/config.toml\n"
    )


@pytest.fixture
def current_names() -> tuple[str, str]:
    """Owner and group names of files created by this process.

    Skips the test when the running uid/gid has no account entry, as in
    some minimal containers.
    """
    try:
        owner = pwd.getpwuid(os.geteuid()).pw_name
        group = grp.getgrgid(os.getegid()).gr_name
    except KeyError:
        pytest.skip("current uid/gid has no account entry")
    return owner, group
