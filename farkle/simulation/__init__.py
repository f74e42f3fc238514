"""
Farkle Simulation.

Parallel turn simulation and outcome statistics built on the rule engine.
"""

from farkle.simulation.models import SimulationReport, TargetResult, ThresholdStat
from farkle.simulation.runner import play_to_target, run_simulation, simulate_chunk
from farkle.simulation.stats import DEFAULT_THRESHOLDS, format_stats, threshold_stats

__all__ = [
    "DEFAULT_THRESHOLDS",
    "SimulationReport",
    "TargetResult",
    "ThresholdStat",
    "format_stats",
    "play_to_target",
    "run_simulation",
    "simulate_chunk",
    "threshold_stats",
]
