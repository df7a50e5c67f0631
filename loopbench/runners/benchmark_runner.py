"""Iteration benchmark runner for LoopBench.

Builds the sequence-under-test once, then times each summation strategy
over it. Only the summation phase is timed; sequence construction is not.
"""

import logging
import math
import time
from collections.abc import Callable, Iterable
from typing import Any

from loopbench.configs import Config, default_config
from loopbench.schema import BenchmarkReport, Measurement, StrategyResult
from loopbench.strategies import Strategy, resolve_strategies
from loopbench.utils.errors import InvalidInputError

LOGGER = logging.getLogger(__name__)

DEFAULT_SEQUENCE_LENGTH = 1_000_000

Clock = Callable[[], float]


def _require_int(name: str, value: Any, minimum: int) -> int:
    # bool is an int subclass but never a meaningful length or count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidInputError(f"{name} must be >= {minimum}, got {value}")
    return value


def build_sequence(n: int) -> list[int]:
    """Build the sequence-under-test: position i holds i + 1.

    Args:
        n: Sequence length (must be a positive integer)

    Returns:
        List [1, 2, ..., n]

    Raises:
        InvalidInputError: If n is not a positive integer
    """
    _require_int("n", n, 1)
    return list(range(1, n + 1))


class IterationBenchmarkRunner:
    """Time each summation strategy over a sequence of length n."""

    def __init__(
        self,
        n: int = DEFAULT_SEQUENCE_LENGTH,
        strategies: Iterable[str] | None = None,
        repeat: int = 1,
        warmup: int = 0,
        clock: Clock = time.perf_counter,
        quiet: bool = True,
    ):
        """Initialize benchmark runner.

        Args:
            n: Sequence length
            strategies: Strategy names in run order (default: all)
            repeat: Number of timed runs per strategy
            warmup: Number of untimed runs per strategy, discarded before timing
            clock: Monotonic clock returning seconds
            quiet: If True, suppress progress output

        Raises:
            InvalidInputError: If any parameter is out of range or a strategy is unknown
        """
        self.n = _require_int("n", n, 1)
        self.repeat = _require_int("repeat", repeat, 1)
        self.warmup = _require_int("warmup", warmup, 0)
        self.strategies: list[Strategy] = resolve_strategies(strategies)
        self.clock = clock
        self.quiet = quiet

    def _time_once(self, strategy: Strategy, sequence: list[int]) -> tuple[float, int]:
        start = self.clock()
        total = strategy(sequence)
        elapsed = self.clock() - start
        if not math.isfinite(elapsed) or elapsed < 0:
            LOGGER.warning("Clock returned %r for %s; recording 0.0", elapsed, strategy.name)
            elapsed = 0.0
        return elapsed, total

    def run_strategy(self, strategy: Strategy, sequence: list[int]) -> StrategyResult:
        """Run warm-up then timed repetitions of one strategy."""
        for _ in range(self.warmup):
            strategy(sequence)

        result = StrategyResult(strategy=strategy.name, label=strategy.label, total=0)
        for i in range(self.repeat):
            elapsed, total = self._time_once(strategy, sequence)
            if i > 0 and total != result.total:
                LOGGER.warning("%s produced %d after %d on the same input", strategy.name, total, result.total)
            result.total = total
            result.timings.append(elapsed)
            LOGGER.debug("%s run %d: %.6fs (sum=%d)", strategy.name, i + 1, elapsed, total)
        return result

    def run(self) -> BenchmarkReport:
        """Build the sequence and run every strategy in order.

        Returns:
            BenchmarkReport with one StrategyResult per strategy
        """
        sequence = build_sequence(self.n)
        LOGGER.info("Built sequence of length %d", len(sequence))
        if not self.quiet:
            print(f"Length of sequence: {len(sequence):,}")

        report = BenchmarkReport(n=self.n, repeat=self.repeat, warmup=self.warmup)
        for strategy in self.strategies:
            result = self.run_strategy(strategy, sequence)
            report.results.append(result)
            if not self.quiet:
                print(f"  {strategy.label:<16} {result.best_seconds * 1000:10.3f} ms")

        if not report.sums_agree:
            LOGGER.warning("Strategy sums disagree with expected %d", report.expected_sum)
        return report


def measure_iteration_strategies(
    n: int = DEFAULT_SEQUENCE_LENGTH,
    strategies: Iterable[str] | None = None,
    repeat: int = 1,
    warmup: int = 0,
    clock: Clock = time.perf_counter,
) -> list[Measurement]:
    """Time each strategy summing [1..n] and return one Measurement per strategy.

    Args:
        n: Sequence length (positive integer)
        strategies: Strategy names in run order (default: all five)
        repeat: Timed runs per strategy; the first is reported
        warmup: Discarded runs per strategy before timing
        clock: Monotonic clock returning seconds

    Returns:
        Measurements in run order

    Raises:
        InvalidInputError: If n <= 0 or another parameter is invalid
    """
    runner = IterationBenchmarkRunner(
        n=n,
        strategies=strategies,
        repeat=repeat,
        warmup=warmup,
        clock=clock,
    )
    return runner.run().measurements


def run_benchmark(config: Config | None = None, quiet: bool = True, **overrides: Any) -> BenchmarkReport:
    """Run the benchmark with values from config, overridden by keyword arguments.

    Recognized keys: n, repeat, warmup, strategies (read from the
    ``benchmark`` section of the config). None-valued overrides are ignored.
    """
    config = config or default_config()
    params = {
        "n": config.get("benchmark.n", DEFAULT_SEQUENCE_LENGTH),
        "repeat": config.get("benchmark.repeat", 1),
        "warmup": config.get("benchmark.warmup", 0),
        "strategies": config.get("benchmark.strategies"),
    }
    params.update({k: v for k, v in overrides.items() if v is not None})
    return IterationBenchmarkRunner(quiet=quiet, **params).run()
