"""Configuration file I/O (YAML/JSON load as dict)."""

import json
from typing import Any

import yaml

from loopbench.utils.errors import ConfigError


def _as_mapping(data: Any, filepath: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {filepath} must contain a mapping, got {type(data).__name__}")
    return data


def load_yaml_file(filepath: str) -> dict[str, Any]:
    """Load a YAML file into a dictionary.

    Args:
        filepath: Path to YAML file

    Returns:
        Loaded config as dict; empty dict if file is empty

    Raises:
        ConfigError: If the file cannot be read as UTF-8, is not valid YAML,
            or its root is not a mapping
    """
    try:
        with open(filepath, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {filepath}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {filepath}: {e}") from e
    return _as_mapping(data, filepath)


def load_json_file(filepath: str) -> dict[str, Any]:
    """Load a JSON file into a dictionary.

    Args:
        filepath: Path to JSON file

    Returns:
        Loaded config as dict; empty dict if file holds ``null``

    Raises:
        ConfigError: If the file cannot be read as UTF-8, is not valid JSON,
            or its root is not a mapping
    """
    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {filepath}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {filepath}: {e}") from e
    return _as_mapping(data, filepath)
