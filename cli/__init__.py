"""
CLI Module for the Parity Symmetry Simulator

Provides an interactive command-line interface for running both games
and viewing their results.

Usage:
    python -m cli.main
"""

from cli.main import main, run_interactive

__all__ = ["main", "run_interactive"]
