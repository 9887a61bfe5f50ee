"""Service layer for running game sessions."""

from .orchestrator import DEFAULT_CONFIG_PATH, Orchestrator, TrialReport, load_config

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "Orchestrator",
    "TrialReport",
    "load_config",
]
