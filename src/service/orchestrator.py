"""
Orchestrator Service

Session object for the presentation layer. Loads configuration, shares
one attribute generator between both games, and turns each user action
into a simulation call plus a formatted report.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from simulation import (
    AttributeGenerator,
    BatchResult,
    HalvingSimulation,
    HalvingTrialResult,
    LevelDefinition,
    ReportGenerator,
    SimulationConfig,
    SymmetrySimulation,
    SymmetryTrialResult,
)

DEFAULT_CONFIG_PATH = Path("config/simulation.yaml")


def load_config(config_path: str | Path | None = None) -> SimulationConfig:
    """
    Load session configuration from YAML.

    Args:
        config_path: Path to configuration file. Defaults to config/simulation.yaml

    Returns:
        Validated SimulationConfig; defaults if the file is missing or empty

    Raises:
        pydantic.ValidationError: If the file holds out-of-range values
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        logger.warning(f"Simulation config not found at {config_path}, using defaults")
        return SimulationConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return SimulationConfig(**data.get("simulation", data))


@dataclass
class TrialReport:
    """A result paired with its rendered report."""

    result: SymmetryTrialResult | HalvingTrialResult | BatchResult
    report: str


class Orchestrator:
    """
    Main session orchestrator.

    Owns the generator, both games and the report generator, and exposes
    one method per user action.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        generator: AttributeGenerator | None = None,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            config: Session configuration (loads config/simulation.yaml if not provided)
            generator: Attribute source (seeded from config if not provided)
        """
        self.config = config or load_config()
        self.generator = generator or AttributeGenerator(self.config.random_seed)

        self.symmetry = SymmetrySimulation(self.generator, self.config.start_level)
        self.halving = HalvingSimulation(self.generator, self.config.batch_chunk_size)
        self.report_generator = ReportGenerator(sample_size=self.config.sample_size)

        logger.info(
            f"Orchestrator initialized (seed={self.config.random_seed}, "
            f"level={self.config.start_level})"
        )

    @property
    def level(self) -> LevelDefinition:
        return self.symmetry.level

    def select_level(self, count: int) -> LevelDefinition:
        """Switch Game 1 to another level."""
        return self.symmetry.select_level(count)

    def run_symmetry_trial(self) -> TrialReport:
        """Run one Game 1 trial on the current level."""
        result = self.symmetry.run_trial()
        report = self.report_generator.generate_symmetry_report(
            result, self.symmetry.level, self.symmetry.attempts
        )
        return TrialReport(result=result, report=report)

    def run_halving_trial(self) -> TrialReport:
        """Run one Game 2 trial."""
        result = self.halving.run_trial()
        report = self.report_generator.generate_halving_report(result, self.halving.tally)
        return TrialReport(result=result, report=report)

    def run_batch(self, iterations: Any = None) -> TrialReport:
        """
        Run a Game 2 batch.

        Args:
            iterations: Requested trial count; the configured default if None
        """
        if iterations is None:
            iterations = self.config.default_batch_iterations
        result = self.halving.run_batch(iterations)
        report = self.report_generator.generate_batch_report(result, self.halving.tally)
        return TrialReport(result=result, report=report)

    def reset(self) -> None:
        """Zero Game 2's tally. Game 1 keeps its level and attempts."""
        self.halving.reset()
        logger.info("Halving tally reset")

    def get_summary(self) -> dict[str, Any]:
        """Get session summary for reporting."""
        summary: dict[str, Any] = {
            "level": self.symmetry.level.count,
            "level_attempts": self.symmetry.attempts,
            "symmetry_status": self.symmetry.status.value,
            "halving_status": self.halving.status.value,
            "tally": self.halving.tally.get_summary(),
        }
        if self.symmetry.last_result is not None:
            summary["last_symmetry"] = self.symmetry.last_result.get_summary()
        return summary
