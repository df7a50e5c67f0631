"""Benchmark runner module for LoopBench.

Provides IterationBenchmarkRunner and the measure_iteration_strategies
entry point.
"""

from .benchmark_runner import (
    DEFAULT_SEQUENCE_LENGTH,
    IterationBenchmarkRunner,
    build_sequence,
    measure_iteration_strategies,
    run_benchmark,
)

__all__ = [
    "DEFAULT_SEQUENCE_LENGTH",
    "IterationBenchmarkRunner",
    "build_sequence",
    "measure_iteration_strategies",
    "run_benchmark",
]
