"""Define utility functions for reading and writing YAML configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def write_yaml_config(data: dict[str, Any], filepath: Path) -> None:
    """Write the given configuration data to a YAML file, creating parent directories."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open("w") as file:
        yaml.safe_dump(data, file, sort_keys=False, default_flow_style=False)


def read_yaml_config(yaml_path: Path, required_keys: set[str] | None = None) -> dict[str, Any]:
    """Read a YAML configuration file whose top level is a mapping.

    :param yaml_path: Path to the YAML file to be read
    :param required_keys: Top-level keys that must be present (if None, ignored)
    :return: Dictionary of configuration data
    :raises KeyError: If a required key is missing in the loaded data
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot read configuration from nonexistent file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            config = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to parse YAML configuration: {yaml_path}") from error

    if not isinstance(config, dict):
        raise TypeError(f"Expected a mapping at the top level of {yaml_path}, got {type(config)}.")

    missing = sorted((required_keys or set()) - config.keys())
    if missing:
        raise KeyError(f"Configuration {yaml_path} is missing required keys: {', '.join(missing)}")

    return config
