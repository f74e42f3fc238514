"""
Farkle Rule Engine.

Pure Python game logic with no I/O.
Handles scoring, bust detection, hot dice and turn progression.
"""

from farkle.engine.base import (
    NUM_DICE,
    Face,
    RolledState,
    ScoreResult,
    ScoringBreakdown,
    ScoringCategory,
    TurnOutcome,
    TurnState,
)
from farkle.engine.dice import RollSource, make_roll_source, roll_dice, scripted_roll_source
from farkle.engine.scoring import FarkleScorer, is_bust, is_hot_dice, score, scoring_dice
from farkle.engine.turn import Strategy, TurnEngine, TurnSummary, advance, new_turn, play_turn
from farkle.engine.validators import InvalidReservation

__all__ = [
    # Data Classes
    "RolledState",
    "ScoreResult",
    "ScoringBreakdown",
    "TurnState",
    "TurnSummary",
    # Enums
    "Face",
    "ScoringCategory",
    "TurnOutcome",
    # Engines
    "FarkleScorer",
    "TurnEngine",
    # Functions
    "advance",
    "is_bust",
    "is_hot_dice",
    "make_roll_source",
    "new_turn",
    "play_turn",
    "roll_dice",
    "score",
    "scoring_dice",
    "scripted_roll_source",
    # Types
    "RollSource",
    "Strategy",
    # Errors
    "InvalidReservation",
    "NUM_DICE",
]
