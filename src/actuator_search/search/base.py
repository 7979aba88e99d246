"""Shared search interface.

Both strategies implement ``BaseSearch.perform_search`` against a ``SearchRun``,
which owns the per-run statistics and trace and applies the final-step
correction common to the two algorithms.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from actuator_search.core.data_models import (
    SearchConfiguration, SearchOutcome, SearchResult, SearchStatistics,
    SearchTrace, TraceRecord
)
from actuator_search.search.relief import RingReliefFunction, is_target_found, is_within_bounds

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[TraceRecord], None]

START_LABEL = "start"
RIGHT_LABEL = "right ->"
LEFT_LABEL = "left <-"
FINAL_ADJUSTMENT_LABEL = "final adjustment"


class SearchRun:
    """Mutable state of one search run: position, statistics and trace."""

    def __init__(self, config: SearchConfiguration,
                 update_callback: Optional[UpdateCallback] = None):
        self.config = config
        self.statistics = SearchStatistics()
        self.trace = SearchTrace()
        self.update_callback = update_callback
        self.position = config.initial_position

    def is_target_found(self, position: Optional[float] = None) -> bool:
        return is_target_found(self.config, self.position if position is None else position)

    def is_within_bounds(self, position: float) -> bool:
        return is_within_bounds(self.config, position)

    def start(self, relief: Optional[float] = None) -> None:
        """Record the initial position as step 1."""
        self.statistics.record_step()
        self._emit(self.position, START_LABEL, relief, None)

    def move_to(self, position: float, label: str,
                relief: Optional[float] = None, notice: Optional[str] = None) -> None:
        """Move to a new position, accumulating distance and recording the step."""
        self.statistics.add_distance(abs(position - self.position))
        self.position = position
        self.statistics.record_step()
        self._emit(position, label, relief, notice)

    def finalize(self, relief_function: Optional[RingReliefFunction] = None) -> SearchOutcome:
        """Apply the final-step correction and classify the run.

        A position within one increment of the target, but not on it, gets a
        single corrective move that lands exactly on the target.
        """
        target = self.config.target_position
        outcome = SearchOutcome.NOT_FOUND
        if abs(self.position - target) <= self.config.increment and self.position != target:
            relief = relief_function(target) if relief_function is not None else None
            logger.debug(f"Final adjustment from {self.position:.2f} to {target:.2f}")
            self.move_to(target, FINAL_ADJUSTMENT_LABEL, relief)
            outcome = SearchOutcome.FOUND_WITH_ADJUSTMENT
        elif self.is_target_found():
            outcome = SearchOutcome.FOUND
        self.statistics.set_final_position(self.position)
        return outcome

    def _emit(self, position: float, label: str,
              relief: Optional[float], notice: Optional[str]) -> None:
        record = TraceRecord(
            step_index=self.statistics.steps,
            position=position,
            label=label,
            relief=relief,
            notice=notice
        )
        self.trace.append(record)
        logger.debug(f"Step {record.step_index}: position {position:.2f} ({label})")
        if self.update_callback is not None:
            self.update_callback(record)


class BaseSearch(ABC):
    """Abstract base class for positioning searches."""

    def __init__(self, name: str):
        """Initialize search.

        Args:
            name: Name of the algorithm, reported in results
        """
        self.name = name

    @abstractmethod
    def perform_search(self, run: SearchRun) -> Tuple[SearchOutcome, str]:
        """Drive the run to completion.

        Args:
            run: Fresh run state positioned at the initial position

        Returns:
            Tuple of (outcome, termination_reason)
        """
        pass

    def execute(self, config: SearchConfiguration,
                update_callback: Optional[UpdateCallback] = None) -> SearchResult:
        """Run the search once with timing.

        Args:
            config: Problem parameters
            update_callback: Optional callable receiving each TraceRecord as it is made

        Returns:
            SearchResult with statistics, trace and outcome
        """
        run = SearchRun(config, update_callback)
        logger.info(f"{self.name} search started at {config.initial_position:.2f} "
                    f"(increment={config.increment}, tolerance={config.tolerance})")

        start_time = time.perf_counter()
        outcome, termination_reason = self.perform_search(run)
        computation_time = time.perf_counter() - start_time

        final_position = run.statistics.final_position
        result = SearchResult(
            algorithm=self.name,
            outcome=outcome,
            statistics=run.statistics,
            trace=run.trace,
            termination_reason=termination_reason,
            computation_time=computation_time,
            final_error=abs(final_position - config.target_position)
        )

        logger.info(f"{self.name} search finished: {outcome.value} at {final_position:.2f} "
                    f"after {run.statistics.steps} steps ({termination_reason})")
        return result
