"""
Farkle - Outcome Statistics

Turns a list of per-turn results into cumulative threshold percentages.
"""

from bisect import bisect_right
from typing import Sequence

from farkle.simulation.models import ThresholdStat


DEFAULT_THRESHOLDS: tuple[int, ...] = (
    300, 500, 750, 1000, 1500, 2000, 2500, 3000, 3500, 4000, 4500,
    5000, 5500, 6000, 6500, 7500, 8500, 9450, 9500, 10000,
)


def threshold_stats(
    results: Sequence[int],
    thresholds: Sequence[int] = DEFAULT_THRESHOLDS
) -> list[ThresholdStat]:
    """
    Percentage of results at or below each threshold.

    Args:
        results: One score per simulated turn
        thresholds: Score cut-offs, reported in the given order

    Returns:
        One ThresholdStat per threshold

    Raises:
        ValueError: If there are no results
    """
    if not results:
        raise ValueError("Cannot compute statistics without results.")

    ordered = sorted(results)
    total = len(ordered)
    return [
        ThresholdStat(threshold=t, percent=bisect_right(ordered, t) * 100 / total)
        for t in thresholds
    ]


def format_stats(stats: Sequence[ThresholdStat]) -> str:
    """One ``threshold: percent%`` line per stat."""
    return "\n".join(str(stat) for stat in stats)
