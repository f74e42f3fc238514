"""
Farkle - Simulation Runner

Plays many independent turns, split into chunks that run in parallel worker
processes. Every chunk owns its own random stream derived from the base
seed, so a run is reproducible for a given seed and worker count.
"""

import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Sequence

from farkle.engine.base import TurnOutcome
from farkle.engine.dice import RollSource, make_roll_source
from farkle.engine.turn import Strategy, TurnEngine
from farkle.engine.validators import validate_target_score
from farkle.simulation.models import SimulationReport, TargetResult
from farkle.simulation.stats import DEFAULT_THRESHOLDS, threshold_stats


logger = logging.getLogger(__name__)

ChunkTask = tuple[int, int, Strategy, bool]


def simulate_chunk(task: ChunkTask) -> list[tuple[int, bool]]:
    """
    Play ``count`` turns on a private random stream.

    Args:
        task: (count, seed, strategy, validate)

    Returns:
        (peak at-risk score, banked) for every turn
    """
    count, seed, strategy, validate = task
    roll_source = make_roll_source(random.Random(seed))

    results = []
    for _ in range(count):
        summary = TurnEngine.play_turn(strategy, roll_source, validate=validate)
        results.append((summary.peak_at_risk, summary.state.outcome is TurnOutcome.BANKED))
    return results


def _chunk_sizes(count: int, workers: int) -> list[int]:
    base, extra = divmod(count, workers)
    sizes = [base + (1 if i < extra else 0) for i in range(workers)]
    return [size for size in sizes if size > 0]


def _strategy_name(strategy: Strategy) -> str:
    return getattr(strategy, "__name__", None) or repr(strategy)


def run_simulation(
    turns: int,
    strategy: Strategy,
    workers: int | None = None,
    seed: int | None = None,
    thresholds: Sequence[int] = DEFAULT_THRESHOLDS,
    validate: bool = True
) -> SimulationReport:
    """
    Simulate ``turns`` independent turns and summarise them.

    Args:
        turns: Number of turns to play
        strategy: Picklable strategy used for every turn
        workers: Worker processes (default: CPU count, capped at ``turns``)
        seed: Base seed (default: fresh entropy)
        thresholds: Cut-offs for the percentage table
        validate: Reject invalid reservations

    Returns:
        SimulationReport with outcome counts and threshold percentages
    """
    if turns <= 0:
        raise ValueError(f"Number of turns must be positive, got {turns}.")

    available_cpus = os.cpu_count() or 1
    if workers is None:
        workers = min(available_cpus, turns)
    else:
        workers = max(1, min(workers, turns))

    sizes = _chunk_sizes(turns, workers)
    seeder = random.Random(seed)
    tasks = [(size, seeder.getrandbits(64), strategy, validate) for size in sizes]

    logger.info(
        "Simulating %d turns with %s across %d worker(s)",
        turns, _strategy_name(strategy), len(tasks)
    )
    start = time.perf_counter()
    if len(tasks) == 1:
        chunk_results = [simulate_chunk(tasks[0])]
    else:
        with ProcessPoolExecutor(max_workers=len(tasks)) as pool:
            chunk_results = list(pool.map(simulate_chunk, tasks))
    elapsed_ms = (time.perf_counter() - start) * 1000

    results = [item for chunk in chunk_results for item in chunk]
    peaks = [peak for peak, _ in results]
    banked = sum(1 for _, was_banked in results if was_banked)
    logger.info("Finished %d turns in %.1f ms", len(results), elapsed_ms)

    return SimulationReport(
        turns=len(results),
        workers=len(tasks),
        seed=seed,
        strategy=_strategy_name(strategy),
        banked_turns=banked,
        busted_turns=len(results) - banked,
        mean_peak=sum(peaks) / len(peaks),
        max_peak=max(peaks),
        thresholds=threshold_stats(peaks, thresholds),
        elapsed_ms=elapsed_ms,
    )


def play_to_target(
    target_score: int,
    strategy: Strategy,
    roll_source: RollSource | None = None,
    max_turns: int = 1000,
    validate: bool = True
) -> TargetResult:
    """
    Play turns, threading the banked score, until it reaches the target.

    Stops after ``max_turns`` so a strategy that never banks cannot loop
    forever; ``reached`` reports whether the target was hit.
    """
    validate_target_score(target_score)

    score = 0
    busts = 0
    turns = 0
    while score < target_score and turns < max_turns:
        summary = TurnEngine.play_turn(strategy, roll_source, score, validate=validate)
        turns += 1
        if summary.state.outcome is TurnOutcome.BUST:
            busts += 1
        score = summary.state.score

    logger.debug("Played %d turns to reach %d of %d", turns, score, target_score)
    return TargetResult(
        target_score=target_score,
        score=score,
        turns=turns,
        busts=busts,
        reached=score >= target_score,
    )
