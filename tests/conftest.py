"""Pytest configuration and fixtures."""

import pytest


class FakeClock:
    """Deterministic clock advancing a fixed step on every call."""

    def __init__(self, step: float = 0.001):
        self.step = step
        self.now = 0.0
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        self.now += self.step
        return self.now


@pytest.fixture
def fake_clock():
    """Provide a clock that advances 1 ms per call."""
    return FakeClock()


@pytest.fixture
def yaml_config_file(tmp_path):
    """Write a small YAML benchmark config and return its path."""
    path = tmp_path / "loopbench.yaml"
    path.write_text(
        "benchmark:\n"
        "  n: 50\n"
        "  repeat: 2\n"
        "  warmup: 1\n"
        "  strategies: [for_item, callback]\n"
        "report:\n"
        "  show_sums: false\n",
        encoding="utf-8",
    )
    return str(path)
