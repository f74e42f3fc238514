"""
Farkle - Dice

The default roll source. The turn engine only needs a zero-argument callable
returning one Face; tests pass scripted sources instead.
"""

import random
from typing import Callable, Iterable

from farkle.engine.base import Face
from farkle.engine.validators import validate_dice_count, validate_face


RollSource = Callable[[], Face]


def make_roll_source(rng: random.Random | None = None) -> RollSource:
    """
    Build a roll source drawing uniformly from 1-6.

    Args:
        rng: Random stream to draw from (default: the module-level generator)
    """
    randint = rng.randint if rng is not None else random.randint

    def roll() -> Face:
        return Face(randint(1, 6))

    return roll


def scripted_roll_source(faces: Iterable[int]) -> RollSource:
    """Roll source that replays the given faces in order."""
    remaining = iter([validate_face(value, i) for i, value in enumerate(faces)])

    def roll() -> Face:
        try:
            return next(remaining)
        except StopIteration:
            raise ValueError("Scripted roll source is exhausted.") from None

    return roll


def roll_dice(count: int, roll_source: RollSource | None = None) -> tuple[Face, ...]:
    """
    Roll ``count`` dice.

    Returns:
        The rolled faces, in roll order
    """
    validate_dice_count(count)
    roll = roll_source or make_roll_source()
    return tuple(roll() for _ in range(count))
