"""
Simulation Data Models

Pydantic and dataclass models for the parity symmetry games.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Attribute generation range (inclusive)
ATTRIBUTE_MIN = 3
ATTRIBUTE_MAX = 286

# Game 1 target sums for the 57/57 split of the ultimate level
ODD_GROUP_TARGET_SUM = 6555
EVEN_GROUP_TARGET_SUM = 6236

# Game 1 level sizes
LEVEL_COUNTS = (10, 40, 80, 114)
ULTIMATE_LEVEL_COUNT = 114

# Game 2 fixed partition
HALVING_ITEM_COUNT = 114
HALF_SIZE = 57

# Batch iteration bound (inclusive)
MIN_BATCH_ITERATIONS = 1
MAX_BATCH_ITERATIONS = 100000


class GameStatus(str, Enum):
    """Status of a game after its most recent action."""

    IDLE = "idle"
    FAIL = "fail"
    SUCCESS = "success"
    PERFECT = "perfect"  # Ultimate level only


class LevelDefinition(BaseModel):
    """A selectable Game 1 level."""

    level_id: int = Field(ge=1, le=4)
    count: int
    name: str
    description: str

    @property
    def target(self) -> int:
        """Number of even (and odd) sums needed for a balanced split."""
        return self.count // 2

    @property
    def is_ultimate(self) -> bool:
        """Whether group sums are checked on this level."""
        return self.count == ULTIMATE_LEVEL_COUNT


LEVELS: tuple[LevelDefinition, ...] = (
    LevelDefinition(
        level_id=1,
        count=10,
        name="The Novice",
        description="Try to balance 10 chapters (5 even / 5 odd).",
    ),
    LevelDefinition(
        level_id=2,
        count=40,
        name="The Scholar",
        description="Try to balance 40 chapters (20 even / 20 odd).",
    ),
    LevelDefinition(
        level_id=3,
        count=80,
        name="The Hafiz",
        description="Try to balance 80 chapters (40 even / 40 odd).",
    ),
    LevelDefinition(
        level_id=4,
        count=114,
        name="The Miracle",
        description="The ultimate challenge: 114 chapters with perfect sums.",
    ),
)


def get_level(count: int) -> LevelDefinition:
    """
    Look up a level by its item count.

    Raises:
        ValueError: If count is not one of LEVEL_COUNTS
    """
    for level in LEVELS:
        if level.count == count:
            return level
    raise ValueError(f"Unknown level size {count}; expected one of {LEVEL_COUNTS}")


def get_level_by_id(level_id: int) -> LevelDefinition:
    """Look up a level by its 1-based id."""
    for level in LEVELS:
        if level.level_id == level_id:
            return level
    raise ValueError(f"Unknown level id {level_id}; expected 1-{len(LEVELS)}")


class SimulationConfig(BaseModel):
    """Configuration for a simulation session."""

    # Core settings
    random_seed: int | None = None
    start_level: int = 10

    # Batch settings
    default_batch_iterations: int = Field(
        default=5000, ge=MIN_BATCH_ITERATIONS, le=MAX_BATCH_ITERATIONS
    )
    batch_chunk_size: int = Field(default=10000, ge=1, le=MAX_BATCH_ITERATIONS)

    # Reporting
    sample_size: int = Field(default=10, ge=0, le=HALVING_ITEM_COUNT)

    @field_validator("start_level")
    @classmethod
    def _check_start_level(cls, value: int) -> int:
        if value not in LEVEL_COUNTS:
            raise ValueError(f"start_level must be one of {LEVEL_COUNTS}")
        return value


@dataclass(frozen=True)
class GeneratedItem:
    """A Game 1 chapter: index plus random attribute."""

    index: int
    attribute: int

    @property
    def sum(self) -> int:
        """Index plus attribute."""
        return self.index + self.attribute

    @property
    def is_even(self) -> bool:
        """Whether the sum is even."""
        return self.sum % 2 == 0


@dataclass(frozen=True)
class HalvingItem:
    """A Game 2 chapter."""

    index: int
    attribute: int

    @property
    def is_even_attribute(self) -> bool:
        """Whether the attribute itself is even."""
        return self.attribute % 2 == 0


@dataclass
class SymmetryTrialResult:
    """Classification of one Game 1 generation pass."""

    items: list[GeneratedItem]
    level_count: int
    even_count: int
    odd_count: int
    target: int
    split_balanced: bool
    status: GameStatus
    even_group_sum: int = 0
    odd_group_sum: int = 0

    @property
    def is_ultimate(self) -> bool:
        """Whether group sums took part in the classification."""
        return self.level_count == ULTIMATE_LEVEL_COUNT

    @property
    def odd_sum_matches(self) -> bool:
        """Odd group sum equals its target."""
        return self.odd_group_sum == ODD_GROUP_TARGET_SUM

    @property
    def even_sum_matches(self) -> bool:
        """Even group sum equals its target."""
        return self.even_group_sum == EVEN_GROUP_TARGET_SUM

    def get_summary(self) -> dict[str, Any]:
        """Get summary dictionary for reporting."""
        summary: dict[str, Any] = {
            "level_count": self.level_count,
            "status": self.status.value,
            "even_count": self.even_count,
            "odd_count": self.odd_count,
            "target": self.target,
            "split_balanced": self.split_balanced,
        }
        if self.is_ultimate:
            summary["even_group_sum"] = self.even_group_sum
            summary["odd_group_sum"] = self.odd_group_sum
        return summary


@dataclass
class HalvingTrialResult:
    """Classification of one Game 2 generation pass."""

    items: list[HalvingItem]
    even_in_first: int
    even_in_second: int
    status: GameStatus

    @property
    def halves_match(self) -> bool:
        return self.even_in_first == self.even_in_second

    @property
    def difference(self) -> int:
        """Absolute gap between the two half-counts."""
        return abs(self.even_in_first - self.even_in_second)

    def get_summary(self) -> dict[str, Any]:
        """Get summary dictionary for reporting."""
        return {
            "status": self.status.value,
            "even_in_first": self.even_in_first,
            "even_in_second": self.even_in_second,
            "difference": self.difference,
        }


@dataclass
class BatchTally:
    """Cumulative Game 2 counters for a session."""

    wins: int = 0
    losses: int = 0

    @property
    def attempts(self) -> int:
        """Total trials recorded."""
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Fraction of attempts won."""
        return self.wins / self.attempts if self.attempts > 0 else 0.0

    def record(self, won: bool) -> None:
        """Record a single trial."""
        if won:
            self.wins += 1
        else:
            self.losses += 1

    def add(self, wins: int, losses: int) -> None:
        """Fold a batch into the tally."""
        self.wins += wins
        self.losses += losses

    def reset(self) -> None:
        self.wins = 0
        self.losses = 0

    def get_summary(self) -> dict[str, Any]:
        """Get summary dictionary for reporting."""
        return {
            "attempts": self.attempts,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": round(self.win_rate, 4),
        }


@dataclass
class BatchResult:
    """Result of one batch run."""

    requested: Any
    iterations: int
    wins: int = 0
    losses: int = 0
    was_clamped: bool = False
    elapsed_seconds: float = 0.0

    @property
    def win_rate(self) -> float:
        return self.wins / self.iterations if self.iterations > 0 else 0.0

    def get_summary(self) -> dict[str, Any]:
        """Get summary dictionary for reporting."""
        return {
            "requested": self.requested,
            "iterations": self.iterations,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": round(self.win_rate, 4),
            "was_clamped": self.was_clamped,
            "elapsed_seconds": round(self.elapsed_seconds, 4),
        }
