"""
Report Output Module

Formats trial, batch and tally results as text reports and
JSON-serializable dictionaries for the presentation layer.
"""

from __future__ import annotations

from typing import Any

from simulation.models import (
    EVEN_GROUP_TARGET_SUM,
    ODD_GROUP_TARGET_SUM,
    BatchResult,
    BatchTally,
    GameStatus,
    HalvingTrialResult,
    LevelDefinition,
    SymmetryTrialResult,
)
from simulation.probability import (
    balanced_split_probability,
    format_probability,
    half_match_probability,
    parity_odds_label,
)


STATUS_MESSAGES = {
    GameStatus.FAIL: "Imbalance detected. Try again.",
    GameStatus.SUCCESS: "Symmetry achieved! You beat the odds.",
    GameStatus.PERFECT: "Perfect match! Both group sums hit their targets.",
}

PARTIAL_SUCCESS_MESSAGE = (
    "Partial symmetry: the 57/57 split matched, but the group sums "
    "do not hit their targets."
)

PARTIAL_SUCCESS_NOTE = (
    "Getting the exact sums by luck is statistically virtually impossible."
)

HALVING_MESSAGES = {
    GameStatus.FAIL: "The halves differ. Try again.",
    GameStatus.SUCCESS: "Both halves hold the same number of even chapters!",
}


def status_message(status: GameStatus, level: LevelDefinition | None = None) -> str:
    """
    Get the message shown for a Game 1 status.

    Args:
        status: Status of the last trial
        level: Level the trial ran on (SUCCESS reads differently on the
            ultimate level)

    Returns:
        Message text, empty for IDLE
    """
    if status == GameStatus.SUCCESS and level is not None and level.is_ultimate:
        return PARTIAL_SUCCESS_MESSAGE
    return STATUS_MESSAGES.get(status, "")


def format_target_check(value: int, target: int) -> str:
    """Show a group sum with a tick or its target."""
    if value == target:
        return f"{value} [OK]"
    return f"{value} (target: {target})"


class ReportGenerator:
    """
    Generator for game reports.

    Turns simulation results into the text and dictionaries the CLI shows.
    """

    def __init__(self, sample_size: int = 10) -> None:
        """
        Initialize the generator.

        Args:
            sample_size: Number of chapters listed in a trial report
        """
        self.sample_size = sample_size

    def generate_symmetry_report(
        self,
        result: SymmetryTrialResult,
        level: LevelDefinition,
        attempts: int = 0,
    ) -> str:
        """
        Generate formatted text report for a Game 1 trial.

        Args:
            result: Trial to format
            level: Level the trial ran on
            attempts: Attempt number within the level

        Returns:
            Formatted report string
        """
        lines = []

        lines.append("=" * 60)
        lines.append(f"LEVEL {level.level_id}: {level.name.upper()}")
        lines.append("=" * 60)
        lines.append(level.description)
        lines.append("")

        lines.append("SPLIT:")
        lines.append(f"  Even sums: {result.even_count} / {result.target}")
        lines.append(f"  Odd sums:  {result.odd_count} / {result.target}")
        lines.append("")

        if level.is_ultimate:
            lines.append("GROUP SUMS:")
            lines.append(
                f"  Odd group:  {format_target_check(result.odd_group_sum, ODD_GROUP_TARGET_SUM)}"
            )
            lines.append(
                f"  Even group: {format_target_check(result.even_group_sum, EVEN_GROUP_TARGET_SUM)}"
            )
            lines.append("")

        lines.append(f"RESULT: {result.status.value.upper()}")
        lines.append(f"  {status_message(result.status, level)}")
        if level.is_ultimate and result.status == GameStatus.SUCCESS:
            lines.append(f"  {PARTIAL_SUCCESS_NOTE}")
        lines.append("")

        if self.sample_size and result.items:
            lines.append("CHAPTERS:")
            for item in result.items[: self.sample_size]:
                parity = "even" if item.is_even else "odd"
                lines.append(
                    f"  #{item.index:>3}  attribute {item.attribute:>3}  "
                    f"sum {item.sum:>3}  {parity}"
                )
            hidden = len(result.items) - self.sample_size
            if hidden > 0:
                lines.append(f"  ... {hidden} more")
            lines.append("")

        odds = balanced_split_probability(level.count)
        lines.append(
            f"Attempt #{attempts} - Probability of parity: {parity_odds_label(level.count)} "
            f"(exact {format_probability(odds)})"
        )
        lines.append("=" * 60)

        return "\n".join(lines)

    def generate_halving_report(
        self,
        result: HalvingTrialResult,
        tally: BatchTally,
    ) -> str:
        """Generate formatted text report for a Game 2 single trial."""
        lines = []

        lines.append("=" * 60)
        lines.append("HALVING TRIAL")
        lines.append("=" * 60)
        lines.append(f"  Even chapters in 1-57:   {result.even_in_first}")
        lines.append(f"  Even chapters in 58-114: {result.even_in_second}")
        lines.append("")
        lines.append(f"RESULT: {result.status.value.upper()}")
        lines.append(f"  {HALVING_MESSAGES[result.status]}")
        lines.append("")
        lines.extend(self._tally_lines(tally))
        lines.append("=" * 60)

        return "\n".join(lines)

    def generate_batch_report(self, batch: BatchResult, tally: BatchTally) -> str:
        """Generate formatted text report for a batch run."""
        lines = []

        lines.append("=" * 60)
        lines.append("BATCH RUN")
        lines.append("=" * 60)
        if batch.was_clamped:
            lines.append(f"  Requested: {batch.requested!r} (ran {batch.iterations:,})")
        lines.append(f"  Trials:  {batch.iterations:,}")
        lines.append(f"  Wins:    {batch.wins:,}")
        lines.append(f"  Losses:  {batch.losses:,}")
        lines.append(f"  Win rate: {format_probability(batch.win_rate)}")
        lines.append(f"  Expected: {format_probability(half_match_probability())}")
        lines.append(f"  Time:    {batch.elapsed_seconds:.2f}s")
        lines.append("")
        lines.extend(self._tally_lines(tally))
        lines.append("=" * 60)

        return "\n".join(lines)

    def generate_json_output(
        self,
        result: SymmetryTrialResult | HalvingTrialResult | BatchResult,
        tally: BatchTally | None = None,
    ) -> dict[str, Any]:
        """
        Generate JSON-serializable output.

        Args:
            result: Any trial or batch result
            tally: Optional Game 2 tally to include

        Returns:
            Dictionary suitable for JSON serialization
        """
        output: dict[str, Any] = {"result": result.get_summary()}

        if isinstance(result, SymmetryTrialResult):
            output["game"] = "symmetry"
            output["items"] = [
                {
                    "index": item.index,
                    "attribute": item.attribute,
                    "sum": item.sum,
                    "is_even": item.is_even,
                }
                for item in result.items
            ]
        elif isinstance(result, HalvingTrialResult):
            output["game"] = "halving"
            output["items"] = [
                {
                    "index": item.index,
                    "attribute": item.attribute,
                    "is_even_attribute": item.is_even_attribute,
                }
                for item in result.items
            ]
        else:
            output["game"] = "halving_batch"

        if tally is not None:
            output["tally"] = tally.get_summary()

        return output

    def _tally_lines(self, tally: BatchTally) -> list[str]:
        return [
            "TALLY:",
            f"  Attempts: {tally.attempts:,}",
            f"  Wins:     {tally.wins:,}",
            f"  Losses:   {tally.losses:,}",
            f"  Win rate: {format_probability(tally.win_rate)}",
        ]
