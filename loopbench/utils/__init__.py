"""Shared utilities: errors and timing statistics."""

from .errors import ConfigError, InvalidInputError, LoopBenchError
from .stats import percentile, timing_stats

__all__ = [
    "LoopBenchError",
    "InvalidInputError",
    "ConfigError",
    "percentile",
    "timing_stats",
]
