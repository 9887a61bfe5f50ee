"""
Tests for the Random Attribute Generator
"""

import numpy as np
import pytest

from simulation.generator import AttributeGenerator
from simulation.models import ATTRIBUTE_MAX, ATTRIBUTE_MIN


class TestAttributeGenerator:
    """Tests for AttributeGenerator."""

    def test_single_draws_in_range(self, seeded_generator):
        """Test generate() stays inside the inclusive range."""
        draws = [seeded_generator.generate() for _ in range(2000)]

        assert all(ATTRIBUTE_MIN <= value <= ATTRIBUTE_MAX for value in draws)
        assert all(isinstance(value, int) for value in draws)

    def test_large_sample_is_uniform(self, seeded_generator):
        """Test every value appears with roughly equal frequency."""
        draws = seeded_generator.generate_many(100000)

        assert draws.min() >= ATTRIBUTE_MIN
        assert draws.max() <= ATTRIBUTE_MAX

        counts = np.bincount(draws - ATTRIBUTE_MIN, minlength=ATTRIBUTE_MAX - ATTRIBUTE_MIN + 1)
        assert len(counts) == 284

        # Expected ~352 per value, standard deviation ~19
        assert counts.min() > 250
        assert counts.max() < 460

    def test_even_and_odd_equally_likely(self, seeded_generator):
        """Test parity is balanced across the range."""
        draws = seeded_generator.generate_many(100000)
        even_share = np.count_nonzero(draws % 2 == 0) / len(draws)

        assert even_share == pytest.approx(0.5, abs=0.01)

    def test_seed_reproducible(self):
        """Test equal seeds give equal sequences."""
        first = AttributeGenerator(seed=3)
        second = AttributeGenerator(seed=3)

        assert [first.generate() for _ in range(50)] == [second.generate() for _ in range(50)]

    def test_reseed(self):
        """Test reseeding restarts the sequence."""
        generator = AttributeGenerator(seed=5)
        before = generator.generate_many(20)

        generator.reseed(5)

        assert np.array_equal(before, generator.generate_many(20))
        assert generator.seed == 5

    def test_matrix_shape(self, seeded_generator):
        matrix = seeded_generator.generate_matrix(10, 114)

        assert matrix.shape == (10, 114)
        assert matrix.min() >= ATTRIBUTE_MIN
        assert matrix.max() <= ATTRIBUTE_MAX

    def test_non_positive_sizes_rejected(self, seeded_generator):
        with pytest.raises(ValueError):
            seeded_generator.generate_many(0)
        with pytest.raises(ValueError):
            seeded_generator.generate_matrix(0, 114)
