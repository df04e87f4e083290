"""Footprint configuration and settings.

This module provides the configuration model and I/O functions for
footprint. Configuration is stored in ~/.config/footprint/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from footprint.core.paths import get_config_path, get_ledger_path

logger = logging.getLogger(__name__)


class FootprintConfig(BaseModel):
    """Configuration for footprint.

    Attributes:
        ledger_path: Where the footprint ledger is saved. If None, the
            XDG state directory is used.
    """

    model_config = ConfigDict(extra="forbid")

    ledger_path: Annotated[
        Path | None,
        Field(description="Ledger file path (None = XDG state directory)"),
    ] = None

    @property
    def effective_ledger_path(self) -> Path:
        """Get the ledger path to use.

        Returns:
            The configured ledger path with ``~`` expanded, or the
            default ledger path if none is configured.
        """
        if self.ledger_path is not None:
            return self.ledger_path.expanduser()
        return get_ledger_path()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FootprintConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FootprintConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FootprintConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> FootprintConfig:
    """Load configuration, falling back to defaults if no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return FootprintConfig()


def save_config(config: FootprintConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The FootprintConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: FootprintConfig) -> dict[str, object]:
    """Convert FootprintConfig to a dictionary for TOML serialization.

    TOML has no null, so unset values are omitted.
    """
    result: dict[str, object] = {}
    if config.ledger_path is not None:
        result["ledger_path"] = str(config.ledger_path)
    return result
