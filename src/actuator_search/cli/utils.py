"""CLI utility functions."""

import logging
from typing import List, Optional

from actuator_search.core.data_models import (
    SearchConfiguration, SearchOutcome, SearchResult, TraceRecord
)

RULE = "-" * 59
SEPARATOR = "-" * 60


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"


def format_trace_record(record: TraceRecord) -> List[str]:
    """Render one trace record, preceded by its notice if it has one."""
    lines = []
    if record.notice:
        lines.append(f"    -> {record.notice}")
    if record.relief is None:
        lines.append(f"Step {record.step_index:3d}: Position {record.position:6.1f} ({record.label})")
    else:
        lines.append(f"Step {record.step_index:3d}: Pos {record.position:6.1f} | "
                     f"Relief {record.relief:5.2f} ({record.label})")
    return lines


def format_outcome(result: SearchResult) -> str:
    """One-line verdict for a finished run."""
    position = result.statistics.final_position
    if result.outcome is SearchOutcome.FOUND_WITH_ADJUSTMENT:
        return f"TARGET REACHED WITH FINAL ADJUSTMENT at position {position:.1f}"
    if result.outcome is SearchOutcome.FOUND:
        return f"TARGET FOUND at position {position:.1f}"
    if result.outcome is SearchOutcome.OUT_OF_RANGE:
        return f"(!) Position out of range. Final position: {position:.1f}"
    return f"TARGET NOT FOUND. Final position: {position:.1f}"


def format_statistics(result: SearchResult) -> List[str]:
    """Render the statistics block of a finished run."""
    stats = result.statistics
    return [
        RULE,
        "                      STATISTICS                           ",
        RULE,
        f"Total steps:             {stats.steps:3d}",
        f"Distance traveled:       {stats.distance_traveled:6.1f} units",
        f"Execution time:          {format_duration(result.computation_time)}",
        f"Final position:          {stats.final_position:6.1f}",
        f"Final error:             {result.final_error:6.2f} units",
        RULE,
    ]


def format_problem_summary(config: SearchConfiguration) -> List[str]:
    """Problem configuration shown above the menu."""
    return [
        "Problem Configuration:",
        f"  - Initial position (B): {config.initial_position}",
        f"  - Target position (A): {config.target_position} (unknown to algorithms)",
        f"  - Displacement: {config.displacement} units",
        f"  - Search increment: {config.increment}",
    ]
