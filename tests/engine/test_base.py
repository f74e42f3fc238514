"""
Farkle - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import dataclasses

import pytest
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
from farkle.engine.validators import (
    InvalidReservation,
    validate_dice_count,
    validate_dice_values,
    validate_face,
    validate_reservation,
    validate_score,
    validate_target_score,
)


class TestFace:
    """Tests for the Face enum."""

    def test_six_faces(self):
        assert [int(f) for f in Face] == [1, 2, 3, 4, 5, 6]

    def test_faces_compare_with_ints(self):
        assert Face.FIVE == 5
        assert Face(3) is Face.THREE

    def test_faces_are_hashable(self):
        assert {Face.ONE: "a"}[1] == "a"

    def test_invalid_face(self):
        with pytest.raises(ValueError):
            Face(7)


class TestScoringCategory:
    """Tests for ScoringCategory enum."""

    def test_all_categories_defined(self):
        expected = {
            "SIX_OF_A_KIND", "TWO_TRIPLETS", "STRAIGHT", "FIVE_OF_A_KIND",
            "THREE_PAIRS", "FOUR_OF_A_KIND_WITH_PAIR", "FOUR_OF_A_KIND",
            "THREE_OF_A_KIND", "SINGLE_ONE", "SINGLE_FIVE",
        }
        assert {c.name for c in ScoringCategory} == expected


class TestScoreResult:
    """Tests for ScoreResult dataclass."""

    def test_bust_result(self):
        result = ScoreResult(points=0)
        assert result.is_bust
        assert result.consumed == ()
        assert str(result) == "FARKLE! No scoring dice."

    def test_scoring_result(self):
        breakdown = ScoringBreakdown(
            category=ScoringCategory.SINGLE_ONE,
            dice_values=(Face.ONE,),
            points=100,
            description="1x Single 1",
        )
        result = ScoreResult(points=100, consumed=(Face.ONE,), breakdown=(breakdown,))
        assert not result.is_bust
        assert "1x Single 1: 100" in str(result)

    def test_is_frozen(self):
        result = ScoreResult(points=50)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.points = 100


class TestTurnState:
    """Tests for TurnState dataclass."""

    def test_defaults(self):
        state = TurnState()
        assert state.dice_left == NUM_DICE == 6
        assert state.score_at_risk == 0
        assert state.score == 0
        assert state.outcome is TurnOutcome.ROLLING
        assert not state.is_turn_over

    @pytest.mark.parametrize("outcome", [TurnOutcome.BUST, TurnOutcome.BANKED])
    def test_terminal_outcomes(self, outcome):
        assert TurnState(outcome=outcome).is_turn_over

    def test_is_frozen(self):
        state = TurnState()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.dice_left = 3

    def test_rolled_state_is_frozen(self, rolled_state: RolledState):
        with pytest.raises(dataclasses.FrozenInstanceError):
            rolled_state.scorable = ()


class TestValidateFace:
    """Tests for validate_face."""

    def test_int_becomes_face(self):
        assert validate_face(4) is Face.FOUR

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_face(True)

    def test_index_in_message(self):
        with pytest.raises(ValueError, match="at index 2 is 9"):
            validate_face(9, 2)


class TestValidateDiceValues:
    """Tests for validate_dice_values."""

    def test_valid_values(self):
        assert validate_dice_values([1, 2, 3]) == (Face.ONE, Face.TWO, Face.THREE)

    def test_empty_allowed_by_default(self):
        assert validate_dice_values([]) == ()

    def test_min_count(self):
        with pytest.raises(ValueError, match="At least 1 dice required"):
            validate_dice_values([], min_count=1)

    def test_max_count(self):
        with pytest.raises(ValueError, match="At most 6 dice allowed, got 7"):
            validate_dice_values([1] * 7)

    def test_no_max(self):
        assert len(validate_dice_values([1] * 10, max_count=None)) == 10

    def test_accepts_generators(self):
        assert validate_dice_values(x for x in (5, 5)) == (Face.FIVE, Face.FIVE)


class TestValidateDiceCount:
    """Tests for validate_dice_count."""

    @pytest.mark.parametrize("count", [1, 6])
    def test_valid(self, count: int):
        assert validate_dice_count(count) == count

    @pytest.mark.parametrize("count", [0, 7])
    def test_out_of_range(self, count: int):
        with pytest.raises(ValueError, match="Dice count must be 1-6"):
            validate_dice_count(count)

    def test_not_int(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_dice_count(2.0)


class TestValidateScore:
    """Tests for score validators."""

    def test_valid_score(self):
        assert validate_score(100) == 100

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            validate_score(-1)

    def test_negative_allowed(self):
        assert validate_score(-1, allow_negative=True) == -1

    def test_target_must_be_positive(self):
        with pytest.raises(ValueError, match="must be positive"):
            validate_target_score(0)

    def test_target_valid(self):
        assert validate_target_score(10000) == 10000


class TestValidateReservation:
    """Tests for validate_reservation."""

    def test_valid(self):
        reserved = (Face.ONE, Face.FIVE)
        assert validate_reservation(reserved, (Face.ONE, Face.FIVE, Face.FIVE), reserved) == reserved

    def test_not_offered(self):
        with pytest.raises(InvalidReservation, match=r"Reserved \[5\] but only \[1\]"):
            validate_reservation((Face.FIVE,), (Face.ONE,), (Face.FIVE,))

    def test_not_scoring(self):
        offered = (Face.TWO, Face.TWO, Face.TWO)
        with pytest.raises(InvalidReservation, match=r"non-scoring dice \[2, 2\]"):
            validate_reservation((Face.TWO, Face.TWO), offered, ())
