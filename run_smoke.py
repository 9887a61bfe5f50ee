#!/usr/bin/env python3
"""
Parity Simulator Smoke Test

Runs one symmetry trial per level, one halving trial and one batch,
printing every report.

Usage:
    python run_smoke.py
    python run_smoke.py --iterations 100000 --seed 7
    python run_smoke.py --json
"""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger


def main() -> int:
    parser = argparse.ArgumentParser(description="Parity Simulator Smoke Test")
    parser.add_argument(
        "--iterations", default="1000",
        help="Batch size for the halving game (default: 1000; coerced like user input)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument("--config", default=None, help="Path to simulation YAML config")
    parser.add_argument("--json", action="store_true", help="Print JSON output instead of text reports")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose application logging")

    args = parser.parse_args()

    logger.remove()
    if args.verbose:
        logger.add(sys.stderr, level="DEBUG")
    else:
        logger.add(sys.stderr, level="WARNING")

    from simulation import LEVELS
    from src.service.orchestrator import Orchestrator, load_config

    print()
    print("=" * 62)
    print("  PARITY SIMULATOR - SMOKE TEST")
    print("=" * 62)
    print(f"  Batch size:   {args.iterations}")
    print(f"  Seed:         {args.seed if args.seed is not None else 'random'}")
    print("=" * 62)
    print()

    try:
        config = load_config(args.config)
        if args.seed is not None:
            config = config.model_copy(update={"random_seed": args.seed})
        orchestrator = Orchestrator(config=config)
        generator = orchestrator.report_generator

        runs = []
        for level in LEVELS:
            orchestrator.select_level(level.count)
            runs.append(orchestrator.run_symmetry_trial())
        runs.append(orchestrator.run_halving_trial())
        runs.append(orchestrator.run_batch(args.iterations))

        if args.json:
            output = [
                generator.generate_json_output(run.result, orchestrator.halving.tally)
                for run in runs
            ]
            print(json.dumps(output, indent=2))
        else:
            for run in runs:
                print(run.report)
                print()

    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 1
    except Exception as e:
        print(f"\nError: {e}")
        logger.exception("Smoke test error")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
