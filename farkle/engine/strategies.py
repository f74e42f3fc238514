"""
Farkle - Reference Strategies

A strategy receives the RolledState after every scoring roll and returns the
faces to set aside. Returning nothing banks the at-risk score.

Strategies used by the parallel simulation runner must be picklable, so the
threshold strategy is a small class rather than a closure.
"""

from dataclasses import dataclass

from farkle.engine.base import Face, RolledState
from farkle.engine.turn import Strategy


def reserve_all_push_luck(state: RolledState) -> tuple[Face, ...]:
    """Set aside every scorable die and never stop rolling."""
    return state.scorable


def bank_immediately(state: RolledState) -> tuple[Face, ...]:
    """Bank after the first scoring roll."""
    return ()


@dataclass(frozen=True)
class BankAt:
    """
    Keep every scorable die until the at-risk score reaches ``threshold``,
    then bank.
    """
    threshold: int

    def __post_init__(self) -> None:
        if self.threshold <= 0:
            raise ValueError(f"Bank threshold must be positive, got {self.threshold}.")

    def __call__(self, state: RolledState) -> tuple[Face, ...]:
        if state.score_at_risk >= self.threshold:
            return ()
        return state.scorable


def bank_at(threshold: int) -> BankAt:
    """Strategy that banks once at least ``threshold`` points are at risk."""
    return BankAt(threshold)


STRATEGY_NAMES = ("push-luck", "bank-now", "bank-at")


def get_strategy(name: str, threshold: int | None = None) -> Strategy:
    """
    Look up a reference strategy by its command-line name.

    Raises:
        ValueError: If the name is unknown, or ``bank-at`` is requested
            without a threshold
    """
    if name == "push-luck":
        return reserve_all_push_luck
    if name == "bank-now":
        return bank_immediately
    if name == "bank-at":
        if threshold is None:
            raise ValueError("The bank-at strategy needs a threshold.")
        return bank_at(threshold)
    raise ValueError(f"Unknown strategy {name!r}, expected one of {STRATEGY_NAMES}.")
