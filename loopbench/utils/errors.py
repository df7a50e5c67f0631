"""Custom exceptions for LoopBench.

This module defines application-specific errors so callers can handle
invalid benchmark input and configuration failures explicitly.
"""


class LoopBenchError(Exception):
    """Base exception for all LoopBench errors."""

    pass


class InvalidInputError(LoopBenchError, ValueError):
    """Raised when a benchmark parameter is out of range (e.g. sequence length <= 0)."""

    pass


class ConfigError(LoopBenchError):
    """Raised when a configuration file cannot be parsed or has the wrong shape."""

    pass
