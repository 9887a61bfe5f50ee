"""
Simulation Module

Random parity games over 114 generated chapters.

Components:
    - models: Constants, data models and session configuration
    - generator: Uniform attribute generator shared by both games
    - symmetry: Game 1, even/odd split of index + attribute sums
    - halving: Game 2, even-attribute counts of two fixed halves, with batch runs
    - probability: Exact binomial odds for both balance conditions
    - report: Text and JSON output for results

Usage:
    from simulation import AttributeGenerator, HalvingSimulation, SymmetrySimulation

    generator = AttributeGenerator(seed=42)

    game1 = SymmetrySimulation(generator, level_count=114)
    result = game1.run_trial()
    print(result.status, result.even_count, result.odd_count)

    game2 = HalvingSimulation(generator)
    batch = game2.run_batch(5000)
    print(game2.tally.attempts, game2.tally.wins, game2.tally.losses)
"""

from simulation.models import (
    ATTRIBUTE_MAX,
    ATTRIBUTE_MIN,
    EVEN_GROUP_TARGET_SUM,
    HALF_SIZE,
    HALVING_ITEM_COUNT,
    LEVEL_COUNTS,
    LEVELS,
    MAX_BATCH_ITERATIONS,
    MIN_BATCH_ITERATIONS,
    ODD_GROUP_TARGET_SUM,
    BatchResult,
    BatchTally,
    GameStatus,
    GeneratedItem,
    HalvingItem,
    HalvingTrialResult,
    LevelDefinition,
    SimulationConfig,
    SymmetryTrialResult,
    get_level,
    get_level_by_id,
)
from simulation.generator import AttributeGenerator
from simulation.symmetry import SymmetrySimulation, classify_symmetry
from simulation.halving import (
    HalvingSimulation,
    classify_halves,
    coerce_iterations,
    parse_iterations,
    count_matching_halves,
)
from simulation.probability import (
    balanced_split_probability,
    expected_attempts,
    half_match_probability,
    parity_odds_label,
)
from simulation.report import ReportGenerator, status_message

__all__ = [
    # Constants
    "ATTRIBUTE_MAX",
    "ATTRIBUTE_MIN",
    "EVEN_GROUP_TARGET_SUM",
    "HALF_SIZE",
    "HALVING_ITEM_COUNT",
    "LEVEL_COUNTS",
    "LEVELS",
    "MAX_BATCH_ITERATIONS",
    "MIN_BATCH_ITERATIONS",
    "ODD_GROUP_TARGET_SUM",
    # Models
    "BatchResult",
    "BatchTally",
    "GameStatus",
    "GeneratedItem",
    "HalvingItem",
    "HalvingTrialResult",
    "LevelDefinition",
    "SimulationConfig",
    "SymmetryTrialResult",
    "get_level",
    "get_level_by_id",
    # Generator
    "AttributeGenerator",
    # Game 1
    "SymmetrySimulation",
    "classify_symmetry",
    # Game 2
    "HalvingSimulation",
    "classify_halves",
    "coerce_iterations",
    "parse_iterations",
    "count_matching_halves",
    # Probability
    "balanced_split_probability",
    "expected_attempts",
    "half_match_probability",
    "parity_odds_label",
    # Report
    "ReportGenerator",
    "status_message",
]
