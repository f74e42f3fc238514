"""
Farkle - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the rule engine. All classes are immutable (frozen dataclasses) so that turn
state can be threaded through independent simulations without sharing.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto


NUM_DICE = 6


class Face(IntEnum):
    """One face of a six-sided die."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6


class ScoringCategory(Enum):
    """Categories of scoring combinations, in rule priority order."""
    SIX_OF_A_KIND = auto()
    TWO_TRIPLETS = auto()
    STRAIGHT = auto()               # 1-2-3-4-5-6
    FIVE_OF_A_KIND = auto()
    THREE_PAIRS = auto()
    FOUR_OF_A_KIND_WITH_PAIR = auto()
    FOUR_OF_A_KIND = auto()
    THREE_OF_A_KIND = auto()
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()


class TurnOutcome(Enum):
    """How the step that produced a TurnState resolved."""
    ROLLING = "rolling"
    BUST = "bust"
    BANKED = "banked"


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a roll.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice that contributed to this score
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[Face, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoreResult:
    """
    Complete scoring result for a roll.

    Attributes:
        points: Total points scored
        consumed: Dice used by the scoring combinations, sorted ascending
        breakdown: Individual scoring components, in the order they fired
    """
    points: int
    consumed: tuple[Face, ...] = field(default_factory=tuple)
    breakdown: tuple[ScoringBreakdown, ...] = field(default_factory=tuple)

    @property
    def is_bust(self) -> bool:
        """Returns True if nothing in the roll scored."""
        return self.points == 0

    def __iter__(self):
        # Allows ``points, consumed = score(roll)``
        return iter((self.points, self.consumed))

    def __str__(self) -> str:
        if self.is_bust:
            return "FARKLE! No scoring dice."
        lines = [f"Total: {self.points} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class RolledState:
    """
    Snapshot handed to a strategy after a scoring roll.

    Attributes:
        rolled: Number of dice physically rolled this round
        scorable: Faces the scorer consumed from this roll
        score_at_risk: At-risk score including this roll's best score
        score: Score already banked before this turn
        dice: Every face rolled this round
    """
    rolled: int
    scorable: tuple[Face, ...]
    score_at_risk: int
    score: int
    dice: tuple[Face, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TurnState:
    """
    Durable state carried between rolls of a turn.

    Attributes:
        dice_left: Number of dice to roll next
        score_at_risk: Points accumulated this turn (lost on a bust)
        score: Banked score
        outcome: How the step that produced this state resolved
        last_roll: Faces rolled by that step
    """
    dice_left: int = NUM_DICE
    score_at_risk: int = 0
    score: int = 0
    outcome: TurnOutcome = TurnOutcome.ROLLING
    last_roll: tuple[Face, ...] = field(default_factory=tuple)

    @property
    def is_turn_over(self) -> bool:
        """True once the turn has busted or been banked."""
        return self.outcome is not TurnOutcome.ROLLING
