"""XDG-compliant path management for footprint.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and state storage.

XDG defaults:
- Config: ~/.config/footprint/
- State: ~/.local/state/footprint/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "footprint"

LEDGER_FILENAME = "footprint.txt"
CONFIG_FILENAME = "config.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/footprint/ (or XDG_CONFIG_HOME/footprint/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    The saved footprint ledger lives here: it should persist between
    runs but is not configuration.

    Returns:
        Path to ~/.local/state/footprint/ (or XDG_STATE_HOME/footprint/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Get the default config file path.

    Returns:
        Path to ~/.config/footprint/config.toml.
    """
    return get_config_dir() / CONFIG_FILENAME


def get_ledger_path() -> Path:
    """Get the default ledger file path.

    Returns:
        Path to ~/.local/state/footprint/footprint.txt.
    """
    return get_state_dir() / LEDGER_FILENAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
