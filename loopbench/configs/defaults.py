"""Default configuration for LoopBench."""

from dataclasses import dataclass, field

from loopbench.strategies import list_strategies


@dataclass
class BenchmarkConfig:
    """Configuration for the iteration benchmark."""

    n: int = 1_000_000
    repeat: int = 1
    warmup: int = 0
    strategies: list = field(default_factory=list_strategies)


@dataclass
class ReportConfig:
    """Configuration for terminal reporting."""

    show_sums: bool = True


DEFAULT_CONFIG = {
    "benchmark": BenchmarkConfig(),
    "report": ReportConfig(),
}
