#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the shortcode2blocks CLI.

This module handles automatic discovery of configuration files, loading
configs from JSON, TOML or YAML, and turning a loaded configuration into
``ConversionOptions`` with command-line overrides applied on top.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from shortcode2blocks.exceptions import ConfigError
from shortcode2blocks.options import ConversionOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SHORTCODE2BLOCKS_CONFIG"
PYPROJECT_SECTION = "shortcode2blocks"
CONFIG_FILENAMES = [
    ".shortcode2blocks.toml",
    ".shortcode2blocks.yaml",
    ".shortcode2blocks.yml",
    ".shortcode2blocks.json",
]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.shortcode2blocks] section from a pyproject.toml file.

    Returns
    -------
    dict
        The section, or an empty dict if the file has none

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", file_path=str(pyproject_path)) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", file_path=str(pyproject_path)) from e

    config = data.get("tool", {}).get(PYPROJECT_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}",
            file_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root. In each directory the dedicated config files are
    checked first, in ``CONFIG_FILENAMES`` order, then ``pyproject.toml``
    if it holds a ``[tool.shortcode2blocks]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the search

    Returns
    -------
    Path or None
        First config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping (empty for an empty YAML file)

    Raises
    ------
    ConfigError
        If the file does not exist, cannot be parsed, or does not hold a mapping

    Examples
    --------
    >>> config = load_config_file(".shortcode2blocks.toml")
    >>> config.get("class_prefix")
    'site'

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", file_path=str(config_path))

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", file_path=str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}", file_path=str(config_path)) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", file_path=str(config_path)) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file must contain a mapping, got {type(config).__name__}", file_path=str(config_path)
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (SHORTCODE2BLOCKS_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration (empty dict if no config found)

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = find_config_in_parents()
    if discovered_path:
        logger.debug("Using discovered config file %s", discovered_path)
        return load_config_file(discovered_path)

    return {}


def build_options(config: Mapping[str, Any], overrides: Mapping[str, Any]) -> ConversionOptions:
    """Combine config values and command-line overrides into options.

    Parameters
    ----------
    config : mapping
        Values loaded from a config file
    overrides : mapping
        Values given on the command line (``None`` means not given)

    Raises
    ------
    ValidationError
        If a key is unknown or a value fails validation

    """
    values = dict(config)
    for key, value in overrides.items():
        if value is not None:
            values[key] = value
    return ConversionOptions.from_mapping(values)


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAMES",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
    "build_options",
]
