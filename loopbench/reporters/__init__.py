"""Reporters for benchmark output."""

from .terminal_reporter import TerminalReporter, format_duration

__all__ = ["TerminalReporter", "format_duration"]
