"""
Farkle - Scorer

Maps an unordered roll of up to six dice to its best score and the dice
consumed to reach it. All methods are stateless class methods operating on
immutable inputs.

Scoring Rules (first match wins, then the remaining dice are rescored):
    1.  Six of a kind: 3,000 points
    2.  Two triplets: 2,500 points
    3.  1-2-3-4-5-6 straight: 2,500 points
    4.  Five of a kind: 2,000 points
    5.  Three pairs: 1,500 points
    6.  Four of a kind with a pair: 1,500 points
    7.  Four of a kind: 2,000 points
    8.  Three of a kind: 1s or 3s 300, otherwise face × 100
    9.  Single 1: 100 points
    10. Single 5: 50 points
"""

from collections import Counter
from itertools import chain
from typing import Iterable

from farkle.engine.base import (
    NUM_DICE,
    Face,
    ScoreResult,
    ScoringBreakdown,
    ScoringCategory,
)
from farkle.engine.validators import validate_dice_values


class FarkleScorer:
    """
    Stateless scorer for six-die Farkle.

    Each rule works on a Counter of face to count. A rule that fires strips
    its dice from a fresh copy of the Counter and hands that copy to the
    next level, so no level sees another level's mutations.
    """

    # Scoring values
    SIX_OF_A_KIND_POINTS = 3000
    TWO_TRIPLETS_POINTS = 2500
    STRAIGHT_POINTS = 2500
    FIVE_OF_A_KIND_POINTS = 2000
    THREE_PAIRS_POINTS = 1500
    FOUR_OF_A_KIND_WITH_PAIR_POINTS = 1500
    FOUR_OF_A_KIND_POINTS = 2000
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50

    TRIPLE_POINTS = {
        Face.ONE: 300,
        Face.TWO: 200,
        Face.THREE: 300,
        Face.FOUR: 400,
        Face.FIVE: 500,
        Face.SIX: 600,
    }

    @classmethod
    def calculate_score(cls, dice: Iterable[Face | int]) -> ScoreResult:
        """
        Calculate the best score for a roll.

        Args:
            dice: Up to six die faces, in any order

        Returns:
            ScoreResult with total points, consumed dice and breakdown

        Raises:
            ValueError: If a value is not a die face or more than six dice
                are given
        """
        values = validate_dice_values(dice, min_count=0, max_count=NUM_DICE)
        breakdown = cls._score_counts(Counter(values))

        return ScoreResult(
            points=sum(item.points for item in breakdown),
            consumed=tuple(sorted(chain.from_iterable(b.dice_values for b in breakdown))),
            breakdown=breakdown,
        )

    @classmethod
    def _score_counts(cls, counts: Counter[Face]) -> tuple[ScoringBreakdown, ...]:
        counts = +counts
        if not counts:
            return ()

        by_count: dict[int, list[Face]] = {}
        for face in sorted(counts):
            by_count.setdefault(counts[face], []).append(face)
        singles = by_count.get(1, [])
        pairs = by_count.get(2, [])
        triples = by_count.get(3, [])
        fours = by_count.get(4, [])
        fives = by_count.get(5, [])
        sixes = by_count.get(6, [])

        if sixes:
            face = sixes[0]
            return (cls._combo(
                ScoringCategory.SIX_OF_A_KIND, (face,) * 6,
                cls.SIX_OF_A_KIND_POINTS, f"Six {int(face)}s"
            ),)

        if len(triples) == 2:
            low, high = triples
            return (cls._combo(
                ScoringCategory.TWO_TRIPLETS, (low,) * 3 + (high,) * 3,
                cls.TWO_TRIPLETS_POINTS, f"Two triplets ({int(low)}s and {int(high)}s)"
            ),)

        if len(singles) == NUM_DICE:
            return (cls._combo(
                ScoringCategory.STRAIGHT, tuple(Face),
                cls.STRAIGHT_POINTS, "Straight (1-2-3-4-5-6)"
            ),)

        if fives:
            face = fives[0]
            # the sixth die may still be a 1 or a 5
            return (cls._combo(
                ScoringCategory.FIVE_OF_A_KIND, (face,) * 5,
                cls.FIVE_OF_A_KIND_POINTS, f"Five {int(face)}s"
            ),) + cls._score_counts(cls._without(counts, face, 5))

        if len(pairs) == 3:
            return (cls._combo(
                ScoringCategory.THREE_PAIRS, tuple(f for f in pairs for _ in range(2)),
                cls.THREE_PAIRS_POINTS, "Three pairs"
            ),)

        if fours and pairs:
            quad, pair = fours[0], pairs[0]
            return (cls._combo(
                ScoringCategory.FOUR_OF_A_KIND_WITH_PAIR, (quad,) * 4 + (pair,) * 2,
                cls.FOUR_OF_A_KIND_WITH_PAIR_POINTS,
                f"Four {int(quad)}s with a pair of {int(pair)}s"
            ),)

        if fours:
            face = fours[0]
            return (cls._combo(
                ScoringCategory.FOUR_OF_A_KIND, (face,) * 4,
                cls.FOUR_OF_A_KIND_POINTS, f"Four {int(face)}s"
            ),) + cls._score_counts(cls._without(counts, face, 4))

        if triples:
            # two triples were caught above, so there is exactly one
            face = triples[0]
            return (cls._combo(
                ScoringCategory.THREE_OF_A_KIND, (face,) * 3,
                cls.TRIPLE_POINTS[face], f"Three {int(face)}s"
            ),) + cls._score_counts(cls._without(counts, face, 3))

        ones = counts[Face.ONE]
        if ones:
            return (cls._combo(
                ScoringCategory.SINGLE_ONE, (Face.ONE,) * ones,
                ones * cls.SINGLE_ONE_POINTS,
                f"{ones}x Single 1{'s' if ones > 1 else ''}"
            ),) + cls._score_counts(cls._without(counts, Face.ONE, ones))

        fives_left = counts[Face.FIVE]
        if fives_left:
            return (cls._combo(
                ScoringCategory.SINGLE_FIVE, (Face.FIVE,) * fives_left,
                fives_left * cls.SINGLE_FIVE_POINTS,
                f"{fives_left}x Single 5{'s' if fives_left > 1 else ''}"
            ),) + cls._score_counts(cls._without(counts, Face.FIVE, fives_left))

        return ()

    @staticmethod
    def _combo(
        category: ScoringCategory,
        dice_values: tuple[Face, ...],
        points: int,
        description: str
    ) -> ScoringBreakdown:
        return ScoringBreakdown(
            category=category,
            dice_values=dice_values,
            points=points,
            description=description,
        )

    @staticmethod
    def _without(counts: Counter[Face], face: Face, count: int) -> Counter[Face]:
        """Copy of ``counts`` with ``count`` dice of ``face`` removed."""
        remaining = Counter(counts)
        remaining[face] -= count
        return +remaining

    @classmethod
    def is_bust(cls, dice: Iterable[Face | int]) -> bool:
        """
        Check if a roll is a bust (no scoring dice).

        Args:
            dice: Dice values to check

        Returns:
            True if the roll contains no scoring combinations
        """
        return cls.calculate_score(dice).is_bust

    @classmethod
    def is_hot_dice(cls, dice: Iterable[Face | int]) -> bool:
        """
        Check if every die in the roll scores (hot dice).

        Hot dice means the player can pick up all six dice and roll again.
        """
        values = tuple(dice)
        if not values:
            return False
        return len(cls.calculate_score(values).consumed) == len(values)

    @classmethod
    def scoring_dice(cls, dice: Iterable[Face | int]) -> tuple[Face, ...]:
        """Faces the scorer would consume from the roll."""
        return cls.calculate_score(dice).consumed


score = FarkleScorer.calculate_score
is_bust = FarkleScorer.is_bust
is_hot_dice = FarkleScorer.is_hot_dice
scoring_dice = FarkleScorer.scoring_dice
