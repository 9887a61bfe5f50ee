"""
Tests for Exact Odds
"""

from math import comb

import pytest

from simulation.probability import (
    balanced_split_probability,
    expected_attempts,
    format_probability,
    half_match_probability,
    parity_odds_label,
)


class TestBalancedSplitProbability:
    """Tests for balanced_split_probability."""

    def test_ten_chapters(self):
        assert balanced_split_probability(10) == pytest.approx(252 / 1024)

    def test_ultimate_level(self):
        """Test the 57/57 split probability."""
        prob = balanced_split_probability(114)

        assert prob == comb(114, 57) / 2**114
        assert prob == pytest.approx(0.0746, abs=0.001)

    def test_decreases_with_size(self):
        probs = [balanced_split_probability(n) for n in (10, 40, 80, 114)]

        assert probs == sorted(probs, reverse=True)

    def test_odd_and_empty_never_balance(self):
        assert balanced_split_probability(11) == 0.0
        assert balanced_split_probability(0) == 0.0


class TestHalfMatchProbability:
    """Tests for half_match_probability."""

    def test_equals_balanced_split_of_whole(self):
        """Test Vandermonde's identity ties both games together."""
        assert half_match_probability() == balanced_split_probability(114)

    def test_small_half(self):
        # Halves of 1: match when both even or both odd
        assert half_match_probability(1) == 0.5


class TestLabels:
    """Tests for odds labels and formatting."""

    @pytest.mark.parametrize(
        "count, label",
        [(10, "High (~25%)"), (40, "Medium (~12%)"), (80, "Low (< 8%)"), (114, "Low (< 8%)")],
    )
    def test_parity_odds_label(self, count, label):
        assert parity_odds_label(count) == label

    def test_expected_attempts(self):
        assert expected_attempts(0.25) == 4
        assert expected_attempts(0.0) == float("inf")

    def test_format_probability(self):
        assert format_probability(0.0746) == "7.46%"
        assert format_probability(0.5, 1) == "50.0%"
