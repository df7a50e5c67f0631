"""Configuration management for LoopBench."""

import os
from dataclasses import asdict
from typing import Any

from loopbench.configs.config_io import load_json_file, load_yaml_file
from loopbench.configs.defaults import DEFAULT_CONFIG
from loopbench.utils.errors import ConfigError


class Config:
    """Unified configuration container for LoopBench."""

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """Initialize configuration.

        Args:
            config_dict: Optional dictionary to use as base (shallow copy)
        """
        self.config = (config_dict or {}).copy()

    def update(self, config_dict: dict[str, Any]) -> None:
        """Merge overrides into the configuration, one level deep for dict sections."""
        for key, value in config_dict.items():
            current = self.config.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                self.config[key] = {**current, **value}
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as 'benchmark.n' or 'report.show_sums'.

        Returns default when any section along the path is missing, is not a
        mapping, or the final value is None.
        """
        node: Any = self.config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return default if node is None else node

    def get_bool(self, key: str, default: bool) -> bool:
        """Look up a flag; YAML strings like 'no' are rejected rather than coerced.

        Raises:
            ConfigError: If the value is present but not a bool
        """
        value = self.get(key, default)
        if not isinstance(value, bool):
            raise ConfigError(f"{key} must be true or false, got {value!r}")
        return value

    def to_dict(self) -> dict[str, Any]:
        """Return the sections as plain dicts, expanding BenchmarkConfig/ReportConfig dataclasses."""
        return {
            section: asdict(value) if hasattr(value, "__dataclass_fields__") else value
            for section, value in self.config.items()
        }


def default_config() -> Config:
    """Return a Config populated from DEFAULT_CONFIG."""
    return Config(Config(DEFAULT_CONFIG).to_dict())


class ConfigManager:
    """Loads configuration files."""

    @staticmethod
    def load_yaml(filepath: str) -> Config:
        return Config(load_yaml_file(filepath))

    @staticmethod
    def load_json(filepath: str) -> Config:
        return Config(load_json_file(filepath))

    @staticmethod
    def load(filepath: str) -> Config:
        """Load a YAML or JSON configuration file, chosen by extension.

        Raises:
            ConfigError: If the extension is not .yaml, .yml or .json
        """
        if filepath.endswith((".yaml", ".yml")):
            return ConfigManager.load_yaml(filepath)
        if filepath.endswith(".json"):
            return ConfigManager.load_json(filepath)
        raise ConfigError(f"Unsupported config file type: {filepath} (expected .yaml, .yml or .json)")

    @staticmethod
    def load_or_default(filepath: str | None = None) -> Config:
        """Load configuration from file layered over the defaults.

        Args:
            filepath: Optional path to configuration file; missing files are ignored

        Returns:
            Config with file values merged over DEFAULT_CONFIG
        """
        base = default_config()
        if filepath and os.path.exists(filepath):
            base.update(ConfigManager.load(filepath).config)
        return base
