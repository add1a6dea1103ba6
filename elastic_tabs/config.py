"""
Configuration for TabWriter.

Supports YAML configuration files with JSON fallback, merged from multiple
sources (custom path → project → user → defaults) and finally overridden
by environment variables.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from typing import Any

import yaml

from .common import vlog


DEFAULT_MINWIDTH = 2
DEFAULT_PADDING = 2

OPTION_NAMES = ("minwidth", "padding")

# Configuration file locations (in priority order)
CONFIG_LOCATIONS = [
    ".elastic-tabs.yml",                                      # Project root (highest priority)
    ".elastic-tabs.yaml",
    os.path.expanduser("~/.config/elastic-tabs/config.yml"),  # User global
    os.path.expanduser("~/.config/elastic-tabs/config.yaml"),
]

ENV_MINWIDTH = "ELASTIC_TABS_MINWIDTH"
ENV_PADDING = "ELASTIC_TABS_PADDING"


class ConfigError(ValueError):
    """Raised when an explicitly requested configuration cannot be loaded."""


@dataclass(frozen=True)
class TabWriterConfig:
    """
    Alignment options recognized by TabWriter.

    Attributes:
        minwidth: Floor on every computed column width
        padding: Spaces inserted after every non-trailing cell, on top of
            the gap between the cell and its column width
    """
    minwidth: int = DEFAULT_MINWIDTH
    padding: int = DEFAULT_PADDING

    def __post_init__(self):
        for name in OPTION_NAMES:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Invalid {name}: {value!r}. Must be an integer")
            if value < 0:
                raise ValueError(f"Invalid {name}: {value}. Must be >= 0")

    @staticmethod
    def from_dict(data: dict[str, Any]) -> TabWriterConfig:
        """Create TabWriterConfig from dictionary, accepting a ``tabwriter`` section."""
        return TabWriterConfig(**config_section(data))

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def config_section(data: dict[str, Any]) -> dict[str, Any]:
    """
    Extract the options actually present in a parsed config file.

    Keys left out of the file are left out of the result, so a file that
    does not mention an option never overrides one that does.

    Raises:
        ValueError: If the ``tabwriter`` section is not a mapping
    """
    section = data.get("tabwriter", data)
    if not isinstance(section, dict):
        raise ValueError("'tabwriter' section must be a mapping")
    return {name: section[name] for name in OPTION_NAMES if name in section}


def _load_yaml(file_path: str) -> dict[str, Any] | None:
    """
    Load YAML configuration file.

    Returns:
        Parsed configuration dictionary, or None if the file is unreadable or invalid
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return None


def _load_json(file_path: str) -> dict[str, Any] | None:
    """
    Load JSON configuration file.

    Returns:
        Parsed configuration dictionary, or None if file invalid
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
            return data if isinstance(data, dict) else {}
    except (OSError, json.JSONDecodeError):
        return None


def load_config_data(file_path: str, verbose: bool = False) -> dict[str, Any] | None:
    """
    Load and validate the options set by a single file.

    ``.json`` files are read as JSON. Anything else is read as YAML, with a
    sibling ``.json`` file tried when the YAML cannot be parsed.

    Args:
        file_path: Path to configuration file
        verbose: Enable verbose logging

    Returns:
        The options present in the file, or None if it cannot be loaded
    """
    if not os.path.exists(file_path):
        return None

    vlog(f"Loading config from: {file_path}", verbose)

    if file_path.endswith(".json"):
        data = _load_json(file_path)
    else:
        data = _load_yaml(file_path)
        if data is None:
            json_path = os.path.splitext(file_path)[0] + ".json"
            if os.path.exists(json_path):
                vlog(f"Invalid YAML, trying JSON: {json_path}", verbose)
                data = _load_json(json_path)

    if data is None:
        vlog(f"Invalid config file: {file_path}", verbose)
        return None

    try:
        section = config_section(data)
        TabWriterConfig(**section)
    except (ValueError, TypeError) as e:
        vlog(f"Config validation failed for {file_path}: {e}", verbose)
        return None

    vlog(f"Loaded config successfully: {file_path}", verbose)
    return section


def load_config_file(file_path: str, verbose: bool = False) -> TabWriterConfig | None:
    """
    Load configuration from a single file.

    Options the file does not set take their defaults.

    Returns:
        TabWriterConfig, or None if file cannot be loaded
    """
    section = load_config_data(file_path, verbose)
    if section is None:
        return None
    return TabWriterConfig(**section)


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def apply_env_overrides(config: TabWriterConfig) -> TabWriterConfig:
    """Return config with ELASTIC_TABS_MINWIDTH / ELASTIC_TABS_PADDING applied."""
    minwidth = _env_int(ENV_MINWIDTH)
    padding = _env_int(ENV_PADDING)
    if minwidth is None and padding is None:
        return config
    try:
        return TabWriterConfig(
            minwidth=config.minwidth if minwidth is None else minwidth,
            padding=config.padding if padding is None else padding,
        )
    except ValueError as e:
        raise ConfigError(str(e)) from e


def load_config(
    custom_path: str | None = None,
    verbose: bool = False,
) -> TabWriterConfig:
    """
    Load and merge configuration from all sources.

    Configuration precedence (highest to lowest):
    1. Environment variables
    2. Custom path (if provided)
    3. Project .elastic-tabs.yml
    4. User ~/.config/elastic-tabs/config.yml
    5. Defaults

    An option set in a higher-priority file wins even when its value
    equals the default.

    Args:
        custom_path: Optional path to custom configuration file
        verbose: Enable verbose logging

    Returns:
        Merged TabWriterConfig (defaults if no config found)

    Raises:
        ConfigError: If custom_path cannot be loaded or an environment
            override is invalid
    """
    sections: list[dict[str, Any]] = []

    if custom_path:
        section = load_config_data(custom_path, verbose)
        if section is None:
            raise ConfigError(f"Could not load config from specified path: {custom_path}")
        sections.append(section)

    for location in CONFIG_LOCATIONS:
        section = load_config_data(location, verbose)
        if section is not None:
            sections.append(section)
            vlog(f"Found config at: {location}", verbose)

    # Apply lowest priority first so higher-priority files overwrite it
    merged: dict[str, Any] = {}
    for section in reversed(sections):
        merged.update(section)

    if sections:
        vlog(f"Merged {len(sections)} config files", verbose)
    else:
        vlog("No config files found, using defaults", verbose)

    return apply_env_overrides(TabWriterConfig(**merged))
