"""
Farkle - Turn Engine

Drives one turn a roll at a time: roll the dice still in hand, score them,
then either bust, let the strategy bank, or lock in the dice it reserves
and carry the rest forward.

All methods are stateless class methods. State is passed in and returned,
never stored; the roll source and strategy are injected by the caller.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from farkle.engine.base import (
    NUM_DICE,
    Face,
    RolledState,
    TurnOutcome,
    TurnState,
)
from farkle.engine.dice import RollSource, roll_dice
from farkle.engine.scoring import FarkleScorer
from farkle.engine.validators import (
    validate_dice_values,
    validate_reservation,
    validate_score,
)


logger = logging.getLogger(__name__)

Strategy = Callable[[RolledState], Iterable[Face | int]]


@dataclass(frozen=True)
class TurnSummary:
    """
    Result of playing a turn to completion.

    Attributes:
        state: Terminal state (BUST or BANKED)
        peak_at_risk: Highest at-risk score reached (the banked amount on a bank)
        rolls: Number of rolls taken
    """
    state: TurnState
    peak_at_risk: int
    rolls: int

    @property
    def banked(self) -> int:
        """Points this turn added to the banked score."""
        if self.state.outcome is TurnOutcome.BANKED:
            return self.peak_at_risk
        return 0


class TurnEngine:
    """
    Stateless turn engine for six-die Farkle.

    ``advance`` performs one roll; ``play_turn`` repeats it until the
    turn busts or is banked.
    """

    NUM_DICE = NUM_DICE

    @classmethod
    def new_turn(cls, score: int = 0) -> TurnState:
        """
        Create the initial state for a new turn.

        Args:
            score: Banked score carried in from earlier turns

        Returns:
            Fresh TurnState with six dice in hand
        """
        return TurnState(
            dice_left=cls.NUM_DICE,
            score_at_risk=0,
            score=validate_score(score),
        )

    @classmethod
    def advance(
        cls,
        state: TurnState,
        strategy: Strategy,
        roll_source: RollSource | None = None,
        *,
        validate: bool = True
    ) -> TurnState:
        """
        Roll, score and apply the strategy's decision.

        Args:
            state: Current turn state
            strategy: Chooses which scorable dice to reserve; an empty
                selection banks the at-risk score
            roll_source: Produces one face per call (default: random)
            validate: Reject reservations that were not offered or do not
                score (default: True)

        Returns:
            The next TurnState. Its outcome is BUST or BANKED when the turn
            ended on this roll, ROLLING otherwise.

        Raises:
            InvalidReservation: If ``validate`` is set and the strategy
                reserved dice it may not
        """
        dice = roll_dice(state.dice_left, roll_source)
        result = FarkleScorer.calculate_score(dice)

        if result.is_bust:
            logger.debug(
                "Bust on %s, losing %d at-risk points",
                list(map(int, dice)), state.score_at_risk
            )
            return TurnState(
                dice_left=cls.NUM_DICE,
                score_at_risk=0,
                score=state.score,
                outcome=TurnOutcome.BUST,
                last_roll=dice,
            )

        # what the strategy gets to see
        rolled = RolledState(
            rolled=state.dice_left,
            scorable=result.consumed,
            score_at_risk=state.score_at_risk + result.points,
            score=state.score,
            dice=dice,
        )
        reserved = validate_dice_values(strategy(rolled), max_count=rolled.rolled)

        if not reserved:
            logger.debug("Banking %d points", rolled.score_at_risk)
            return TurnState(
                dice_left=cls.NUM_DICE,
                score_at_risk=0,
                score=rolled.score + rolled.score_at_risk,
                outcome=TurnOutcome.BANKED,
                last_roll=dice,
            )

        locked = FarkleScorer.calculate_score(reserved)
        if validate:
            validate_reservation(reserved, rolled.scorable, locked.consumed)

        dice_left = rolled.rolled - len(reserved)
        if dice_left == 0:
            logger.debug("Hot dice, rolling all %d again", cls.NUM_DICE)
            dice_left = cls.NUM_DICE

        logger.debug(
            "Reserved %s for %d points, %d dice left",
            list(map(int, reserved)), locked.points, dice_left
        )
        return TurnState(
            dice_left=dice_left,
            score_at_risk=state.score_at_risk + locked.points,
            score=state.score,
            outcome=TurnOutcome.ROLLING,
            last_roll=dice,
        )

    @classmethod
    def play_turn(
        cls,
        strategy: Strategy,
        roll_source: RollSource | None = None,
        score: int = 0,
        *,
        validate: bool = True
    ) -> TurnSummary:
        """
        Play a fresh turn until it busts or is banked.

        A strategy that never banks keeps rolling until it busts, so the
        peak at-risk score is how far the turn got.
        """
        state = cls.new_turn(score)
        peak = 0
        rolls = 0
        while True:
            before = state
            state = cls.advance(state, strategy, roll_source, validate=validate)
            rolls += 1
            if state.outcome is TurnOutcome.BANKED:
                peak = max(peak, state.score - before.score)
            elif state.outcome is TurnOutcome.ROLLING:
                peak = max(peak, state.score_at_risk)
            if state.is_turn_over:
                return TurnSummary(state=state, peak_at_risk=peak, rolls=rolls)


new_turn = TurnEngine.new_turn
advance = TurnEngine.advance
play_turn = TurnEngine.play_turn
