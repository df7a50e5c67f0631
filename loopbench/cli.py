"""Command-line interface for LoopBench."""

import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from loopbench import __version__
from loopbench.configs import Config, ConfigManager
from loopbench.reporters import TerminalReporter
from loopbench.runners import DEFAULT_SEQUENCE_LENGTH, run_benchmark
from loopbench.strategies import STRATEGIES
from loopbench.utils.errors import ConfigError, InvalidInputError

try:
    LOOPBENCH_CLI_VERSION = package_version("loopbench")
except PackageNotFoundError:
    LOOPBENCH_CLI_VERSION = __version__

CONFIG_ENV_VAR = "LOOPBENCH_CONFIG"


def run_strategies_list(args: argparse.Namespace, config: Config) -> int:
    """Execute `loopbench strategies`."""
    print("\nAvailable Strategies")
    print("=" * 72)
    for strategy in STRATEGIES.values():
        print(f"{strategy.name:<12} {strategy.label:<14} {strategy.description}")
    return 0


def run_bench(args: argparse.Namespace, config: Config) -> int:
    """Execute `loopbench run`."""
    try:
        show_sums = config.get_bool("report.show_sums", True) and not args.no_sums
        report = run_benchmark(
            config,
            quiet=not args.progress,
            n=args.n,
            repeat=args.repeat,
            warmup=args.warmup,
            strategies=args.strategy,
        )
    except (InvalidInputError, ConfigError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    TerminalReporter(show_sums=show_sums).render(report)
    return 0 if report.sums_agree else 1


def setup_parser() -> argparse.ArgumentParser:
    """Setup command-line argument parser.

    Returns:
        ArgumentParser configured for LoopBench
    """
    parser = argparse.ArgumentParser(
        prog="loopbench",
        description="LoopBench - compare iteration constructs summing a sequence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  loopbench run                      # N = {DEFAULT_SEQUENCE_LENGTH:,}
  loopbench run 5000 --repeat 5 --warmup 1
  loopbench run 100000 --strategy for_item --strategy callback
  loopbench strategies

Environment Variables:
  {CONFIG_ENV_VAR}    Default config file path (YAML/JSON)
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"loopbench {LOOPBENCH_CLI_VERSION}",
        help="Show CLI version and exit",
    )
    parser.add_argument("--config", help="Path to configuration file (YAML/JSON)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    run_parser = subparsers.add_parser("run", help="Run the iteration benchmark")
    run_parser.add_argument(
        "n",
        nargs="?",
        type=int,
        default=None,
        help=f"Sequence length (default: benchmark.n from config, else {DEFAULT_SEQUENCE_LENGTH})",
    )
    run_parser.add_argument("--repeat", type=int, default=None, help="Timed runs per strategy")
    run_parser.add_argument("--warmup", type=int, default=None, help="Discarded runs per strategy before timing")
    run_parser.add_argument(
        "--strategy",
        action="append",
        choices=list(STRATEGIES),
        help="Strategy to run (repeatable; default: all in fixed order)",
    )
    run_parser.add_argument("--progress", action="store_true", help="Print each strategy as it completes")
    run_parser.add_argument("--no-sums", action="store_true", help="Omit the sum column from the table")
    run_parser.set_defaults(func=run_bench)

    strategies_parser = subparsers.add_parser("strategies", help="List available strategies")
    strategies_parser.set_defaults(func=run_strategies_list)

    return parser


def _load_config(path: str | None) -> Config:
    if path and not os.path.exists(path):
        print(f"[WARN] Config file not found: {path}; using defaults", file=sys.stderr)
    return ConfigManager.load_or_default(path)


def main(argv=None) -> int:
    """CLI entrypoint."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not getattr(args, "command", None):
        parser.print_help()
        return 0

    try:
        config = _load_config(args.config or os.environ.get(CONFIG_ENV_VAR))
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    return int(args.func(args, config))


if __name__ == "__main__":
    raise SystemExit(main())
