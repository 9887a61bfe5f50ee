"""
Pytest Configuration and Fixtures

Shared fixtures and builders for the parity simulator test suite.
"""

from pathlib import Path
from typing import Any

import pytest
import yaml

from simulation.generator import AttributeGenerator
from simulation.models import (
    ATTRIBUTE_MAX,
    ATTRIBUTE_MIN,
    EVEN_GROUP_TARGET_SUM,
    HALF_SIZE,
    ODD_GROUP_TARGET_SUM,
    GeneratedItem,
    HalvingItem,
    SimulationConfig,
)


def build_group(indices: list[int], even: bool, total: int) -> list[GeneratedItem]:
    """
    Build chapters whose sums all share a parity and add up to `total`.

    Every chapter starts at the smallest attribute giving the wanted
    parity, then attributes are raised in steps of 2 until the total is met.
    """
    wanted = 0 if even else 1
    attributes = {}
    for index in indices:
        attribute = ATTRIBUTE_MIN
        if (index + attribute) % 2 != wanted:
            attribute += 1
        attributes[index] = attribute

    remaining = total - sum(index + a for index, a in attributes.items())
    assert remaining >= 0 and remaining % 2 == 0

    for index in indices:
        room = ATTRIBUTE_MAX - attributes[index]
        room -= room % 2
        step = min(room, remaining)
        attributes[index] += step
        remaining -= step

    assert remaining == 0
    return [GeneratedItem(index=i, attribute=attributes[i]) for i in indices]


def build_symmetry_items(
    even_indices: list[int],
    odd_indices: list[int],
    even_total: int,
    odd_total: int,
) -> list[GeneratedItem]:
    """Build a full chapter list ordered by index."""
    items = build_group(even_indices, True, even_total) + build_group(
        odd_indices, False, odd_total
    )
    return sorted(items, key=lambda item: item.index)


def build_halving_items(even_in_first: int, even_in_second: int) -> list[HalvingItem]:
    """Build 114 chapters with the given even-attribute count per half."""
    items = []
    for offset, evens in ((0, even_in_first), (HALF_SIZE, even_in_second)):
        for position in range(HALF_SIZE):
            attribute = 4 if position < evens else 3
            items.append(HalvingItem(index=offset + position + 1, attribute=attribute))
    return items


@pytest.fixture
def seeded_generator() -> AttributeGenerator:
    """Generator with a fixed seed."""
    return AttributeGenerator(seed=12345)


@pytest.fixture
def perfect_items() -> list[GeneratedItem]:
    """114 chapters with a 57/57 split hitting both target sums."""
    return build_symmetry_items(
        list(range(1, 58)),
        list(range(58, 115)),
        EVEN_GROUP_TARGET_SUM,
        ODD_GROUP_TARGET_SUM,
    )


@pytest.fixture
def partial_items() -> list[GeneratedItem]:
    """114 chapters with a 57/57 split missing both target sums."""
    return build_symmetry_items(
        list(range(1, 58)),
        list(range(58, 115)),
        EVEN_GROUP_TARGET_SUM + 2,
        ODD_GROUP_TARGET_SUM + 2,
    )


@pytest.fixture
def unbalanced_items() -> list[GeneratedItem]:
    """114 chapters with a 58/56 split."""
    return build_symmetry_items(
        list(range(1, 59)),
        list(range(59, 115)),
        8000,
        6000,
    )


@pytest.fixture
def test_config() -> SimulationConfig:
    """Seeded configuration with a small batch chunk."""
    return SimulationConfig(
        random_seed=7,
        start_level=10,
        default_batch_iterations=200,
        batch_chunk_size=64,
        sample_size=5,
    )


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Sample YAML configuration content."""
    return {
        "simulation": {
            "random_seed": 99,
            "start_level": 40,
            "default_batch_iterations": 2500,
            "batch_chunk_size": 500,
            "sample_size": 3,
        }
    }


@pytest.fixture
def config_file(tmp_path: Path, sample_config_data: dict[str, Any]) -> Path:
    """Write the sample configuration to a temporary YAML file."""
    path = tmp_path / "simulation.yaml"
    path.write_text(yaml.safe_dump(sample_config_data))
    return path


@pytest.fixture
def halving_builder():
    """Builder for Game 2 chapter lists with chosen half-counts."""
    return build_halving_items


@pytest.fixture
def symmetry_builder():
    """Builder for Game 1 chapter lists with chosen groups and sums."""
    return build_symmetry_items
