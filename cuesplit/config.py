"""Configuration management for cuesplit."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cuesplit.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "cuesplit" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        output_root: Directory under which album folders are created.
            When None, folders are created next to the source audio,
            which then has to be writable.
        temp_root: Directory for per-album scratch directories
            (None = $TMPDIR or /tmp).
        delete_source: Delete source audio images after a successful split.
        colored_output: Whether to use colored terminal output.
        config_path: Path where config was loaded from (None if defaults).
    """

    output_root: Path | None = None
    temp_root: Path | None = None
    delete_source: bool = False
    colored_output: bool = True
    config_path: Path | None = None

    def validate(self) -> None:
        """Normalize configured paths."""
        if self.output_root is not None:
            self.output_root = self.output_root.expanduser()
        if self.temp_root is not None:
            self.temp_root = self.temp_root.expanduser()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.
            A missing file is not an error; defaults are used.

    Returns:
        Config object.

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser()

    if not config_path.exists():
        config = Config()
        config.validate()
        return config

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e
    except OSError as e:
        raise ConfigParseError(config_path, e.strerror or str(e)) from e

    config = _parse_config_dict(data, config_path)
    config.validate()
    return config


def _optional_path(section: dict[str, Any], key: str, name: str) -> Path | None:
    value = section[key]
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigValidationError(name, value, "must be a string path")
    return Path(value)


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [paths] section
    paths = data.get("paths", {})
    if "output_root" in paths:
        config.output_root = _optional_path(paths, "output_root", "paths.output_root")

    if "temp_root" in paths:
        config.temp_root = _optional_path(paths, "temp_root", "paths.temp_root")

    # Parse [behaviour] section
    behaviour = data.get("behaviour", {})
    if "delete_source" in behaviour:
        value = behaviour["delete_source"]
        if not isinstance(value, bool):
            raise ConfigValidationError("behaviour.delete_source", value, "must be a boolean")
        config.delete_source = value

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    return config
