"""
Farkle - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from farkle.config import get_settings
from farkle.engine.base import Face, RolledState


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, tuple[int, ...]]]:
    """
    Roll patterns with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, expected_consumed)
    """
    return {
        # Singles
        "single_one": ((1,), 100, (1,)),
        "single_five": ((5,), 50, (5,)),
        "two_ones": ((1, 1), 200, (1, 1)),
        "two_fives": ((5, 5), 100, (5, 5)),
        "one_and_five": ((1, 5), 150, (1, 5)),
        "two_and_five": ((2, 5), 50, (5,)),

        # Three of a kind
        "three_ones": ((1, 1, 1), 300, (1, 1, 1)),
        "three_twos": ((2, 2, 2), 200, (2, 2, 2)),
        "three_sixes": ((6, 6, 6), 600, (6, 6, 6)),
        "three_fours_plus_one": ((4, 4, 4, 1), 500, (1, 4, 4, 4)),

        # Six-dice combinations
        "six_ones": ((1, 1, 1, 1, 1, 1), 3000, (1, 1, 1, 1, 1, 1)),
        "straight": ((1, 2, 3, 4, 5, 6), 2500, (1, 2, 3, 4, 5, 6)),
        "two_triplets": ((1, 1, 1, 2, 2, 2), 2500, (1, 1, 1, 2, 2, 2)),
        "four_and_pair": ((1, 1, 2, 2, 2, 2), 1500, (1, 1, 2, 2, 2, 2)),
        "three_pairs": ((2, 2, 3, 3, 4, 4), 1500, (2, 2, 3, 3, 4, 4)),

        # Recursion into leftovers
        "five_ones_and_five": ((1, 1, 1, 1, 1, 5), 2050, (1, 1, 1, 1, 1, 5)),
        "four_threes_one_five": ((3, 3, 3, 3, 1, 5), 2150, (1, 3, 3, 3, 3, 5)),
        "mixed_singles": ((5, 5, 1, 2, 3, 2), 200, (1, 5, 5)),
        "found_in_real_runs": ((6, 1, 5, 1, 4, 5), 300, (1, 1, 5, 5)),

        # Busts
        "empty": ((), 0, ()),
        "bust_roll": ((2, 3, 4, 6), 0, ()),
    }


@pytest.fixture
def bust_rolls() -> list[tuple[int, ...]]:
    """Rolls that should result in a bust."""
    return [
        (2,),
        (3,),
        (4,),
        (6,),
        (2, 3),
        (4, 6),
        (2, 3, 4),
        (2, 3, 4, 6),
        (2, 2, 3, 3, 4),
        (2, 2, 3, 4, 6, 6),
    ]


@pytest.fixture
def hot_dice_rolls() -> list[tuple[int, ...]]:
    """Rolls where every die scores."""
    return [
        (1, 2, 3, 4, 5, 6),  # Straight
        (1, 1, 1, 5, 5, 5),  # Two triplets
        (1, 1, 1, 1, 5, 5),  # Four 1s + pair
        (1, 5, 1, 5, 1, 5),  # Alternating
        (2, 2, 2, 2, 2, 2),  # Six of a kind
    ]


# =============================================================================
# TURN FIXTURES
# =============================================================================

@pytest.fixture
def rolled_state() -> RolledState:
    """A scoring roll of 1, 5, 2, 3, 4, 4."""
    return RolledState(
        rolled=6,
        scorable=(Face.ONE, Face.FIVE),
        score_at_risk=150,
        score=0,
        dice=(Face.ONE, Face.FIVE, Face.TWO, Face.THREE, Face.FOUR, Face.FOUR),
    )


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Settings are cached; make each test read the environment afresh."""
    for key in ("FARKLE_DEBUG", "FARKLE_LOG_LEVEL", "FARKLE_SIMULATION_TURNS",
                "FARKLE_WORKERS", "FARKLE_SEED", "FARKLE_TARGET_SCORE",
                "FARKLE_VALIDATE_RESERVATIONS"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
