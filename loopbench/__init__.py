"""LoopBench - iteration-construct micro-benchmark.

Provides:
- strategies (the five summation strategies and their registry)
- runners (IterationBenchmarkRunner, measure_iteration_strategies, run_benchmark)
- schema (Measurement, StrategyResult, BenchmarkReport)
- configs (Config, ConfigManager, DEFAULT_CONFIG)
- reporters (TerminalReporter)
"""

__version__ = "1.0"

from loopbench.configs import Config, ConfigManager
from loopbench.reporters import TerminalReporter
from loopbench.runners import (
    DEFAULT_SEQUENCE_LENGTH,
    IterationBenchmarkRunner,
    build_sequence,
    measure_iteration_strategies,
    run_benchmark,
)
from loopbench.schema import BenchmarkReport, Measurement, StrategyResult
from loopbench.strategies import STRATEGIES, Strategy, get_strategy, list_strategies
from loopbench.utils.errors import ConfigError, InvalidInputError, LoopBenchError

__all__ = [
    "__version__",
    "Config",
    "ConfigManager",
    "TerminalReporter",
    "DEFAULT_SEQUENCE_LENGTH",
    "IterationBenchmarkRunner",
    "build_sequence",
    "measure_iteration_strategies",
    "run_benchmark",
    "BenchmarkReport",
    "Measurement",
    "StrategyResult",
    "STRATEGIES",
    "Strategy",
    "get_strategy",
    "list_strategies",
    "LoopBenchError",
    "InvalidInputError",
    "ConfigError",
]
