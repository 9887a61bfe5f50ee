#!/usr/bin/env python3
"""
Interactive CLI for the Parity Symmetry Simulator

Provides a menu-driven interface for generating random books, checking
their parity balance and running batches of halving trials.

Usage:
    python -m cli.main [--verbose] [--seed N] [--config PATH]
"""

from __future__ import annotations

import sys

from loguru import logger

from simulation import (
    LEVELS,
    balanced_split_probability,
    expected_attempts,
    get_level_by_id,
    half_match_probability,
)
from simulation.probability import format_probability
from src.service.orchestrator import Orchestrator, load_config


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI usage."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG")
    else:
        logger.add(sys.stderr, level="WARNING")


def print_header() -> None:
    """Print welcome header."""
    print()
    print("=" * 60)
    print("   The Symmetry of Design")
    print("   Random Parity Simulator")
    print("=" * 60)
    print()


def print_levels(current_count: int) -> None:
    """Print the selectable levels."""
    print("\nLevels:")
    print("-" * 50)
    for level in LEVELS:
        marker = "*" if level.count == current_count else " "
        print(f" {marker}[{level.level_id}] {level.name:<12} {level.count:>3} chapters")
    print()


def get_level_selection(current_count: int) -> int | None:
    """
    Get level selection from user.

    Returns:
        Selected level size or None for cancel
    """
    print_levels(current_count)

    while True:
        user_input = input("Select level (1-4 or Enter to cancel): ").strip()

        if not user_input:
            return None

        if user_input.isdigit():
            try:
                return get_level_by_id(int(user_input)).count
            except ValueError:
                pass

        print(f"  Invalid level '{user_input}'. Please choose 1-{len(LEVELS)}.")


def get_batch_size(default: int) -> str:
    """Read a batch size; the raw text is coerced by the simulation."""
    user_input = input(f"Number of trials (Enter for {default:,}): ").strip()
    return user_input or str(default)


def show_odds() -> None:
    """Print exact odds for every level and for the halving game."""
    print("\n--- ODDS ---")
    for level in LEVELS:
        prob = balanced_split_probability(level.count)
        print(
            f"  {level.name:<12} {level.count:>3} chapters: "
            f"{format_probability(prob):>8}  (~1 in {expected_attempts(prob):,.1f})"
        )
    prob = half_match_probability()
    print(f"  Halving game (57 vs 57):   {format_probability(prob):>8}")
    print()


def run_interactive(orchestrator: Orchestrator) -> None:
    """Run the interactive CLI session."""
    print_header()

    while True:
        level = orchestrator.level
        tally = orchestrator.halving.tally

        print("\n" + "=" * 50)
        print(f"MAIN MENU  (level {level.level_id}: {level.name}, {level.count} chapters)")
        print("=" * 50)
        print("  [1] Generate random book (symmetry game)")
        print("  [2] Change level")
        print("  [3] Run halving trial")
        print("  [4] Run halving batch")
        print(f"  [5] Reset halving tally ({tally.attempts:,} attempts)")
        print("  [6] Show odds")
        print("  [q] Quit")
        print()

        choice = input("Select option: ").strip().lower()

        if choice == "q" or choice == "quit":
            print("\nThank you for playing!")
            break

        elif choice == "1":
            print()
            print(orchestrator.run_symmetry_trial().report)

        elif choice == "2":
            count = get_level_selection(level.count)
            if count is None:
                print("  Cancelled.")
            else:
                selected = orchestrator.select_level(count)
                print(f"  Selected: {selected.name}")
                print(f"  {selected.description}")

        elif choice == "3":
            print()
            print(orchestrator.run_halving_trial().report)

        elif choice == "4":
            raw = get_batch_size(orchestrator.config.default_batch_iterations)
            print("Running batch, please wait...")
            print()
            print(orchestrator.run_batch(raw).report)

        elif choice == "5":
            orchestrator.reset()
            print("  Halving tally reset.")

        elif choice == "6":
            show_odds()

        else:
            print("  Invalid option. Please choose 1-6 or 'q'.")


def get_option(name: str) -> str | None:
    """Read the value following a command line flag."""
    for i, arg in enumerate(sys.argv):
        if arg == name and i + 1 < len(sys.argv):
            return sys.argv[i + 1]
    return None


def main() -> int:
    """Main entry point."""
    verbose = "--verbose" in sys.argv or "-v" in sys.argv
    configure_logging(verbose)

    try:
        config = load_config(get_option("--config"))
        seed = get_option("--seed")
        if seed is not None:
            config = config.model_copy(update={"random_seed": int(seed)})

        run_interactive(Orchestrator(config=config))
        return 0
    except KeyboardInterrupt:
        print("\n\nInterrupted. Exiting...")
        return 0
    except Exception as e:
        print(f"Fatal error: {e}")
        logger.exception("CLI error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
