"""
Farkle - Simulation Report Models

Pydantic models describing the outcome of simulation runs.
"""

from pydantic import BaseModel, Field


class ThresholdStat(BaseModel):
    """Share of turns whose peak at-risk score stayed at or under a threshold."""

    threshold: int
    percent: float = Field(ge=0, le=100)

    def __str__(self) -> str:
        return f"{self.threshold}: {self.percent}%"


class SimulationReport(BaseModel):
    """Aggregate result of a batch of simulated turns."""

    turns: int = Field(gt=0)
    workers: int = Field(gt=0)
    seed: int | None = None
    strategy: str
    banked_turns: int = 0
    busted_turns: int = 0
    mean_peak: float = 0.0
    max_peak: int = 0
    thresholds: list[ThresholdStat] = Field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def bust_rate(self) -> float:
        """Fraction of turns that ended in a bust."""
        return self.busted_turns / self.turns


class TargetResult(BaseModel):
    """Outcome of playing turns until a target score is banked."""

    target_score: int = Field(gt=0)
    score: int = 0
    turns: int = 0
    busts: int = 0
    reached: bool = False
