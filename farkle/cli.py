"""
Farkle - Command Line Driver

Runs a batch of simulated turns and prints how often the peak at-risk
score stayed at or under each threshold, or plays turns until a target
score is banked.
"""

import argparse
import logging
import random
from typing import Sequence

from farkle.config import LOG_LEVELS, Settings, configure_logging, get_settings
from farkle.engine.dice import make_roll_source
from farkle.engine.strategies import STRATEGY_NAMES, get_strategy
from farkle.simulation.models import TargetResult
from farkle.simulation.runner import play_to_target, run_simulation
from farkle.simulation.stats import format_stats


logger = logging.getLogger(__name__)


def _parse_positive_int(value):
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}")
    return parsed


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="farkle-sim",
        description="Simulate Farkle turns and report outcome thresholds.",
    )
    parser.add_argument(
        "--turns",
        type=_parse_positive_int,
        default=settings.simulation_turns,
        help="Number of turns to simulate (default: %(default)s)",
    )
    parser.add_argument(
        "--workers",
        type=_parse_positive_int,
        default=settings.workers,
        help="Worker processes (default: CPU count)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Base random seed for reproducible runs",
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGY_NAMES,
        default="push-luck",
        help="Reference strategy to play (default: %(default)s)",
    )
    parser.add_argument(
        "--threshold",
        type=_parse_positive_int,
        default=None,
        help="At-risk score at which the bank-at strategy banks",
    )
    parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        default=settings.validate_reservations,
        help="Accept reservations without checking them",
    )
    parser.add_argument(
        "--play-to-target",
        action="store_true",
        help="Play turns until the target score is banked instead of simulating",
    )
    parser.add_argument(
        "--target-score",
        type=_parse_positive_int,
        default=settings.target_score,
        help="Score to reach with --play-to-target (default: %(default)s)",
    )
    parser.add_argument(
        "--max-turns",
        type=_parse_positive_int,
        default=1000,
        help="Give up on the target after this many turns (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: from settings)",
    )
    return parser


def format_target(result: TargetResult) -> str:
    """Human-readable summary of a play-to-target run."""
    if result.reached:
        head = f"Reached {result.score} of {result.target_score} in {result.turns} turns"
    else:
        head = f"Stopped at {result.score} of {result.target_score} after {result.turns} turns"
    return f"{head} ({result.busts} busts)"


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    configure_logging(settings, args.log_level)

    if args.threshold is not None and args.strategy != "bank-at":
        parser.error("--threshold only applies to --strategy bank-at")
    try:
        strategy = get_strategy(args.strategy, args.threshold)
    except ValueError as exc:
        parser.error(str(exc))

    if args.play_to_target:
        print(f"Playing Farkle to {args.target_score}")
        result = play_to_target(
            args.target_score,
            strategy,
            make_roll_source(random.Random(args.seed)),
            max_turns=args.max_turns,
            validate=args.validate,
        )
        print(format_target(result))
        return 0

    print("Running Farkle Stats")
    report = run_simulation(
        args.turns,
        strategy,
        workers=args.workers,
        seed=args.seed,
        validate=args.validate,
    )
    logger.info(
        "Mean peak %.1f, max peak %d, %d of %d turns banked, bust rate %.1f%%",
        report.mean_peak, report.max_peak, report.banked_turns, report.turns,
        report.bust_rate * 100
    )
    print(format_stats(report.thresholds))
    return 0
