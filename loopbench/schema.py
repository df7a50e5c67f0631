"""Result types produced by the iteration benchmark."""

from dataclasses import dataclass, field
from typing import Any

from loopbench.utils.stats import timing_stats


@dataclass(frozen=True)
class Measurement:
    """One timed summation: strategy name, elapsed seconds and the computed sum."""

    strategy: str
    elapsed_seconds: float
    total: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy,
            "elapsed_seconds": self.elapsed_seconds,
            "total": self.total,
        }


@dataclass
class StrategyResult:
    """Aggregate of the timed repetitions of a single strategy."""

    strategy: str
    label: str
    total: int
    timings: list[float] = field(default_factory=list)

    @property
    def best_seconds(self) -> float:
        return min(self.timings) if self.timings else 0.0

    @property
    def stats(self) -> dict[str, float]:
        return timing_stats(self.timings)

    def measurement(self) -> Measurement:
        """Return the first timed run as a Measurement."""
        elapsed = self.timings[0] if self.timings else 0.0
        return Measurement(self.strategy, elapsed, self.total)

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy,
            "label": self.label,
            "total": self.total,
            "timings": list(self.timings),
            "stats": self.stats,
        }


@dataclass
class BenchmarkReport:
    """Outcome of one benchmark run over a sequence of length n."""

    n: int
    repeat: int = 1
    warmup: int = 0
    results: list[StrategyResult] = field(default_factory=list)

    @property
    def expected_sum(self) -> int:
        return self.n * (self.n + 1) // 2

    @property
    def sums_agree(self) -> bool:
        """True when every strategy produced the closed-form sum."""
        return all(r.total == self.expected_sum for r in self.results)

    @property
    def measurements(self) -> list[Measurement]:
        return [r.measurement() for r in self.results]

    def ranking(self) -> list[StrategyResult]:
        """Results ordered fastest first by best elapsed time."""
        return sorted(self.results, key=lambda r: r.best_seconds)

    @property
    def fastest(self) -> StrategyResult | None:
        ranked = self.ranking()
        return ranked[0] if ranked else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "n": self.n,
            "repeat": self.repeat,
            "warmup": self.warmup,
            "expected_sum": self.expected_sum,
            "sums_agree": self.sums_agree,
            "results": [r.to_dict() for r in self.results],
        }
