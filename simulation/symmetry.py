"""
Symmetry Simulation (Game 1)

Generates N chapters, sums each chapter's index with its random attribute,
and checks whether the even/odd split of those sums is exactly balanced.
On the ultimate level the even-group and odd-group sums must also hit
fixed targets.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from simulation.generator import AttributeGenerator
from simulation.models import (
    EVEN_GROUP_TARGET_SUM,
    LEVELS,
    ODD_GROUP_TARGET_SUM,
    ULTIMATE_LEVEL_COUNT,
    GameStatus,
    GeneratedItem,
    LevelDefinition,
    SymmetryTrialResult,
    get_level,
)


def classify_symmetry(items: Sequence[GeneratedItem]) -> SymmetryTrialResult:
    """
    Classify a generated chapter list.

    The level is taken from the list length. Group sums are always
    reported but only decide between SUCCESS and PERFECT on the
    ultimate level.

    Args:
        items: Chapters indexed 1..N

    Returns:
        SymmetryTrialResult with counts, sums and status
    """
    count = len(items)
    even_count = sum(1 for item in items if item.is_even)
    odd_count = count - even_count
    target = count // 2

    split_balanced = even_count == target and odd_count == target

    even_group_sum = sum(item.sum for item in items if item.is_even)
    odd_group_sum = sum(item.sum for item in items if not item.is_even)

    if count == ULTIMATE_LEVEL_COUNT:
        if not split_balanced:
            status = GameStatus.FAIL
        elif (
            odd_group_sum == ODD_GROUP_TARGET_SUM
            and even_group_sum == EVEN_GROUP_TARGET_SUM
        ):
            status = GameStatus.PERFECT
        else:
            status = GameStatus.SUCCESS  # Split matched, sums did not
    else:
        status = GameStatus.SUCCESS if split_balanced else GameStatus.FAIL

    return SymmetryTrialResult(
        items=list(items),
        level_count=count,
        even_count=even_count,
        odd_count=odd_count,
        target=target,
        split_balanced=split_balanced,
        status=status,
        even_group_sum=even_group_sum,
        odd_group_sum=odd_group_sum,
    )


class SymmetrySimulation:
    """
    Game 1 session state.

    Holds the selected level, the currently displayed chapters, the
    status of the last trial and the per-level attempt counter.
    """

    def __init__(
        self,
        generator: AttributeGenerator | None = None,
        level_count: int = LEVELS[0].count,
    ) -> None:
        """
        Initialize the simulation.

        Args:
            generator: Attribute source (creates an unseeded one if not provided)
            level_count: Initial level size
        """
        self.generator = generator or AttributeGenerator()
        self.level: LevelDefinition = get_level(level_count)
        self.status = GameStatus.IDLE
        self.items: list[GeneratedItem] = []
        self.attempts = 0
        self.last_result: SymmetryTrialResult | None = None

    def select_level(self, count: int) -> LevelDefinition:
        """
        Switch to another level, discarding the current trial.

        Selecting the current level is a no-op.

        Raises:
            ValueError: If count is not a known level size
        """
        level = get_level(count)
        if level == self.level:
            return self.level

        self.level = level
        self.reset()
        logger.info(f"Selected level {self.level.level_id}: {self.level.name} ({count} chapters)")
        return self.level

    def reset(self) -> None:
        """Return to IDLE with no generated chapters."""
        self.status = GameStatus.IDLE
        self.items = []
        self.attempts = 0
        self.last_result = None

    def generate_items(self, count: int | None = None) -> list[GeneratedItem]:
        """Draw one chapter per index 1..count."""
        count = count or self.level.count
        return [
            GeneratedItem(index=i, attribute=self.generator.generate())
            for i in range(1, count + 1)
        ]

    def run_trial(self, count: int | None = None) -> SymmetryTrialResult:
        """
        Generate and classify one random book.

        Args:
            count: Level size; selects that level first if it differs
                from the current one

        Returns:
            SymmetryTrialResult for the new chapters
        """
        if count is not None and count != self.level.count:
            self.select_level(count)

        self.attempts += 1
        self.items = self.generate_items()
        result = classify_symmetry(self.items)

        self.status = result.status
        self.last_result = result

        logger.debug(
            f"Level {self.level.level_id} attempt #{self.attempts}: "
            f"{result.even_count} even / {result.odd_count} odd -> {result.status.value}"
        )
        if result.status == GameStatus.PERFECT:
            logger.info(f"Perfect match on attempt #{self.attempts}")

        return result
