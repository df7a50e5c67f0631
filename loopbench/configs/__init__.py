"""Configuration load and config types."""

from .config import Config, ConfigManager, default_config
from .config_io import load_json_file, load_yaml_file
from .defaults import DEFAULT_CONFIG, BenchmarkConfig, ReportConfig

__all__ = [
    "load_yaml_file",
    "load_json_file",
    "Config",
    "ConfigManager",
    "default_config",
    "DEFAULT_CONFIG",
    "BenchmarkConfig",
    "ReportConfig",
]
