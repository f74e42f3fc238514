"""
Farkle - Input Validation Utilities

Provides validation functions for rule engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from collections import Counter
from typing import Iterable

from farkle.engine.base import NUM_DICE, Face


class InvalidReservation(ValueError):
    """Raised when a strategy reserves dice it was not offered."""


def validate_face(value: object, index: int | None = None) -> Face:
    """
    Validate and normalize one die face.

    Args:
        value: Face or int between 1 and 6
        index: Position of the value in its roll, for error messages

    Returns:
        The value as a Face

    Raises:
        ValueError: If the value is not a die face
    """
    where = f" at index {index}" if index is not None else ""
    # bool is an int subclass but never a die face
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Die value{where} must be an integer, got {type(value).__name__}.")
    if not (1 <= value <= 6):
        raise ValueError(f"Die value{where} is {value}, must be between 1 and 6.")
    return Face(value)


def validate_dice_values(
    values: Iterable[object],
    min_count: int = 0,
    max_count: int | None = NUM_DICE
) -> tuple[Face, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Dice faces to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple of Face

    Raises:
        ValueError: If validation fails
    """
    faces = tuple(validate_face(value, i) for i, value in enumerate(values))
    count = len(faces)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    return faces


def validate_dice_count(count: int) -> int:
    """
    Validate the number of dice to roll.

    Raises:
        ValueError: If count is not 1-6
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Dice count must be an integer, got {type(count).__name__}.")

    if not (1 <= count <= NUM_DICE):
        raise ValueError(f"Dice count must be 1-{NUM_DICE}, got {count}.")

    return count


def validate_score(score: int, allow_negative: bool = False) -> int:
    """
    Validate a score value.

    Args:
        score: Score to validate
        allow_negative: Whether negative scores are allowed

    Returns:
        Validated score

    Raises:
        ValueError: If score is invalid
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if not allow_negative and score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_target_score(score: int) -> int:
    """
    Validate the target score for play-to-target runs.

    Raises:
        ValueError: If score is not a positive integer
    """
    validate_score(score)
    if score <= 0:
        raise ValueError(f"Target score must be positive, got {score}.")
    return score


def validate_reservation(
    reserved: tuple[Face, ...],
    scorable: tuple[Face, ...],
    consumed: tuple[Face, ...]
) -> tuple[Face, ...]:
    """
    Validate dice a strategy chose to set aside.

    Args:
        reserved: Faces the strategy returned
        scorable: Faces it was offered
        consumed: Faces the scorer consumed when scoring ``reserved`` alone

    Returns:
        The reservation, unchanged

    Raises:
        InvalidReservation: If the reservation holds dice that were not
            offered, or dice that do not score on their own
    """
    missing = Counter(reserved) - Counter(scorable)
    if missing:
        raise InvalidReservation(
            f"Reserved {_format_faces(reserved)} but only "
            f"{_format_faces(scorable)} were scorable."
        )

    unscored = Counter(reserved) - Counter(consumed)
    if unscored:
        raise InvalidReservation(
            f"Cannot reserve non-scoring dice {_format_faces(tuple(unscored.elements()))}."
        )

    return reserved


def _format_faces(faces: tuple[Face, ...]) -> str:
    return "[" + ", ".join(str(int(f)) for f in sorted(faces)) + "]"
