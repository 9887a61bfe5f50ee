"""
Halving Simulation (Game 2)

Generates 114 chapters, splits them into chapters 1-57 and 58-114, and
checks whether both halves hold the same number of even attributes.
Supports single trials and batches of up to MAX_BATCH_ITERATIONS trials
aggregated into a session tally.
"""

from __future__ import annotations

import math
import time
from collections.abc import Sequence
from typing import Any

import numpy as np
from loguru import logger

from simulation.generator import AttributeGenerator
from simulation.models import (
    HALF_SIZE,
    HALVING_ITEM_COUNT,
    MAX_BATCH_ITERATIONS,
    MIN_BATCH_ITERATIONS,
    BatchResult,
    BatchTally,
    GameStatus,
    HalvingItem,
    HalvingTrialResult,
)


def parse_iterations(value: Any) -> int | float | None:
    """
    Read a batch size from user input without applying the bound.

    Finite numbers truncate toward zero; infinities are kept so clamping
    can send them to the nearest bound.

    Args:
        value: Raw batch size (int, float, text or None)

    Returns:
        The requested number, or None if the input holds no usable number
    """
    number: float | int | None = None

    if isinstance(value, bool):
        return None
    elif isinstance(value, (int, np.integer)):
        number = int(value)
    elif isinstance(value, (float, np.floating)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", "").replace("_", "")
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None

    if isinstance(number, float):
        if math.isnan(number):
            return None
        if not math.isinf(number):
            number = int(number)

    return number


def coerce_iterations(value: Any) -> int:
    """
    Turn user input into a batch size within the iteration bound.

    Never raises: anything that is not a usable number becomes the
    minimum, and numbers outside the bound are clamped.

    Args:
        value: Raw batch size (int, float, text or None)

    Returns:
        Batch size in [MIN_BATCH_ITERATIONS, MAX_BATCH_ITERATIONS]
    """
    number = parse_iterations(value)
    if number is None:
        return MIN_BATCH_ITERATIONS
    return int(max(MIN_BATCH_ITERATIONS, min(MAX_BATCH_ITERATIONS, number)))


def classify_halves(items: Sequence[HalvingItem]) -> HalvingTrialResult:
    """
    Compare even-attribute counts of the two fixed halves.

    Raises:
        ValueError: If items does not hold exactly HALVING_ITEM_COUNT chapters
    """
    if len(items) != HALVING_ITEM_COUNT:
        raise ValueError(
            f"Expected {HALVING_ITEM_COUNT} chapters, got {len(items)}"
        )

    first_half = items[:HALF_SIZE]
    second_half = items[HALF_SIZE:]

    even_in_first = sum(1 for item in first_half if item.is_even_attribute)
    even_in_second = sum(1 for item in second_half if item.is_even_attribute)

    status = GameStatus.SUCCESS if even_in_first == even_in_second else GameStatus.FAIL

    return HalvingTrialResult(
        items=list(items),
        even_in_first=even_in_first,
        even_in_second=even_in_second,
        status=status,
    )


def count_matching_halves(attributes: np.ndarray) -> int:
    """
    Count trials whose halves hold the same number of even attributes.

    Args:
        attributes: (trials, HALVING_ITEM_COUNT) matrix, one trial per row

    Returns:
        Number of matching rows
    """
    even = attributes % 2 == 0
    first = even[:, :HALF_SIZE].sum(axis=1)
    second = even[:, HALF_SIZE:].sum(axis=1)
    return int(np.count_nonzero(first == second))


class HalvingSimulation:
    """
    Game 2 session state.

    Owns the cumulative tally, the currently displayed chapters and the
    status of the last single trial.
    """

    def __init__(
        self,
        generator: AttributeGenerator | None = None,
        chunk_size: int = 10000,
    ) -> None:
        """
        Initialize the simulation.

        Args:
            generator: Attribute source (creates an unseeded one if not provided)
            chunk_size: Trials drawn per matrix during a batch
        """
        self.generator = generator or AttributeGenerator()
        self.chunk_size = max(1, chunk_size)
        self.tally = BatchTally()
        self.status = GameStatus.IDLE
        self.items: list[HalvingItem] = []
        self.last_result: HalvingTrialResult | None = None

    def generate_items(self) -> list[HalvingItem]:
        """Draw one chapter per index 1..HALVING_ITEM_COUNT."""
        return [
            HalvingItem(index=i, attribute=self.generator.generate())
            for i in range(1, HALVING_ITEM_COUNT + 1)
        ]

    def run_trial(self) -> HalvingTrialResult:
        """Generate, classify and tally one trial."""
        self.items = self.generate_items()
        result = classify_halves(self.items)

        self.tally.record(result.halves_match)
        self.status = result.status
        self.last_result = result

        logger.debug(
            f"Halving trial: {result.even_in_first} vs {result.even_in_second} "
            f"-> {result.status.value}"
        )
        return result

    def run_batch(self, iterations: Any) -> BatchResult:
        """
        Run many trials without keeping per-chapter data.

        Args:
            iterations: Requested trial count; coerced and clamped silently

        Returns:
            BatchResult with the executed count and win/loss deltas
        """
        parsed = parse_iterations(iterations)
        count = coerce_iterations(iterations)
        was_clamped = parsed is None or parsed != count
        if was_clamped:
            logger.warning(f"Batch size {iterations!r} adjusted to {count}")

        logger.info(f"Starting batch: {count} trials")
        started = time.perf_counter()

        wins = 0
        remaining = count
        while remaining > 0:
            rows = min(self.chunk_size, remaining)
            matrix = self.generator.generate_matrix(rows, HALVING_ITEM_COUNT)
            wins += count_matching_halves(matrix)
            remaining -= rows

        result = BatchResult(
            requested=iterations,
            iterations=count,
            wins=wins,
            losses=count - wins,
            was_clamped=was_clamped,
            elapsed_seconds=time.perf_counter() - started,
        )

        self.tally.add(result.wins, result.losses)
        self.items = []
        self.status = GameStatus.IDLE
        self.last_result = None

        logger.info(
            f"Batch complete: {result.wins} wins / {result.losses} losses "
            f"in {result.elapsed_seconds:.2f}s"
        )
        return result

    def reset(self) -> None:
        """Zero the tally and clear the current trial."""
        self.tally.reset()
        self.items = []
        self.status = GameStatus.IDLE
        self.last_result = None
