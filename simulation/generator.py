"""
Random Attribute Generator

Uniform integer draws over the attribute range, shared by both games.
"""

from __future__ import annotations

import numpy as np

from simulation.models import ATTRIBUTE_MAX, ATTRIBUTE_MIN


class AttributeGenerator:
    """
    Draws chapter attributes uniformly from [ATTRIBUTE_MIN, ATTRIBUTE_MAX].

    Wraps a numpy Generator so a session can be seeded for reproducible
    runs and the batch loop can draw whole matrices at once.
    """

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the generator.

        Args:
            seed: Optional seed for reproducible sequences
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def reseed(self, seed: int | None = None) -> None:
        """Replace the underlying random source."""
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def generate(self) -> int:
        """Draw a single attribute."""
        return int(self._rng.integers(ATTRIBUTE_MIN, ATTRIBUTE_MAX + 1))

    def generate_many(self, count: int) -> np.ndarray:
        """Draw `count` attributes as a 1-D array."""
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        return self._rng.integers(ATTRIBUTE_MIN, ATTRIBUTE_MAX + 1, size=count)

    def generate_matrix(self, rows: int, cols: int) -> np.ndarray:
        """Draw a rows x cols matrix of attributes (one trial per row)."""
        if rows <= 0 or cols <= 0:
            raise ValueError(f"matrix shape must be positive, got ({rows}, {cols})")
        return self._rng.integers(ATTRIBUTE_MIN, ATTRIBUTE_MAX + 1, size=(rows, cols))
