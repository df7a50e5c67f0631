"""Shared statistics utilities for repeated timing samples."""

import numpy as np


def percentile(values: list[float], p: float) -> float:
    """Calculate percentile of a list of values (linear interpolation).

    Args:
        values: List of numeric values
        p: Percentile to calculate (0-100)

    Returns:
        Percentile value, or 0.0 if values is empty
    """
    if not values:
        return 0.0
    return float(np.percentile(values, p))


def timing_stats(values: list[float]) -> dict[str, float]:
    """Summarize elapsed durations (seconds) from repeated runs.

    Args:
        values: Elapsed durations in seconds

    Returns:
        Dict with min, mean, median, p95, max and stdev; empty dict if no values
    """
    if not values:
        return {}
    arr = np.asarray(values, dtype=float)
    return {
        "min": float(arr.min()),
        "mean": float(arr.mean()),
        "median": float(np.median(arr)),
        "p95": percentile(values, 95),
        "max": float(arr.max()),
        "stdev": float(arr.std()),
    }
