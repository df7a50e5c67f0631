"""Plain-text terminal reporter for benchmark results."""

from loopbench.schema import BenchmarkReport


def format_duration(seconds: float) -> str:
    """Format seconds as milliseconds with three decimals (e.g. '11.418ms')."""
    return f"{seconds * 1000:.3f}ms"


class TerminalReporter:
    """Render a BenchmarkReport as a table and a correctness line."""

    def __init__(self, show_sums: bool = True):
        self.show_sums = show_sums

    def render(self, report: BenchmarkReport) -> None:
        """Print results in run order, then a sum cross-check."""
        fastest = report.fastest
        baseline = fastest.best_seconds if fastest else 0.0

        print("\nIteration Strategy Benchmark")
        print("=" * 72)
        print(f"Sequence length: {report.n:,} | timed runs: {report.repeat} | warm-up runs: {report.warmup}")
        print("-" * 72)
        header = f"{'Strategy':<16} {'Best':>14} {'Mean':>14} {'vs fastest':>11}"
        if self.show_sums:
            header += f" {'Sum':>14}"
        print(header)
        print("-" * 72)
        for result in report.results:
            mean = result.stats.get("mean", 0.0)
            relative = f"{result.best_seconds / baseline:.2f}x" if baseline > 0 else "-"
            line = (
                f"{result.label:<16} {format_duration(result.best_seconds):>14} "
                f"{format_duration(mean):>14} {relative:>11}"
            )
            if self.show_sums:
                line += f" {result.total:>14}"
            print(line)
        print("-" * 72)
        if fastest is not None:
            print(f"Fastest: {fastest.label} ({format_duration(fastest.best_seconds)})")

        if report.sums_agree:
            print(f"[OK] All strategies summed to {report.expected_sum}")
        else:
            wrong = ", ".join(r.strategy for r in report.results if r.total != report.expected_sum)
            print(f"[WARN] Expected sum {report.expected_sum}; mismatched strategies: {wrong}")
