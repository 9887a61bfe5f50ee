"""
Exact Odds

Binomial odds for the balance conditions both games check. Every
attribute in [3, 286] is even with probability exactly 1/2 (142 of 284
values), so index + attribute is also even with probability 1/2.
"""

from __future__ import annotations

from math import comb

from simulation.models import HALF_SIZE


def balanced_split_probability(count: int) -> float:
    """
    Probability that `count` fair parity draws split exactly in half.

    Args:
        count: Number of chapters (odd counts can never balance)

    Returns:
        C(count, count/2) / 2**count
    """
    if count <= 0 or count % 2:
        return 0.0
    return comb(count, count // 2) / 2**count


def half_match_probability(half_size: int = HALF_SIZE) -> float:
    """
    Probability that two halves of `half_size` fair draws hold the same
    number of evens.

    By Vandermonde's identity sum_k C(n, k)**2 == C(2n, n), so this equals
    balanced_split_probability(2 * half_size).
    """
    total = sum(comb(half_size, k) ** 2 for k in range(half_size + 1))
    return total / 2 ** (2 * half_size)


def parity_odds_label(count: int) -> str:
    """Coarse odds label shown next to the attempt counter."""
    if count > 50:
        return "Low (< 8%)"
    if count > 20:
        return "Medium (~12%)"
    return "High (~25%)"


def expected_attempts(probability: float) -> float:
    """Mean number of trials until the first success."""
    if probability <= 0:
        return float("inf")
    return 1 / probability


def format_probability(prob: float, decimal_places: int = 2) -> str:
    """Format probability as percentage string."""
    return f"{prob * 100:.{decimal_places}f}%"
