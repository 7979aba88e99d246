"""Exhaustive bidirectional search.

Steps alternately to the right and to the left of the initial position with a
growing offset, using nothing but the found/not-found signal:

    B -> B+d -> B-d -> B+2d -> B-2d -> ...
"""

import logging
from typing import List, Tuple

from actuator_search.core.data_models import SearchOutcome
from actuator_search.search.base import BaseSearch, SearchRun, LEFT_LABEL, RIGHT_LABEL

logger = logging.getLogger(__name__)

# Safety limit on recorded steps, the only guard against non-termination
MAX_EXHAUSTIVE_STEPS = 1000


class ExhaustiveSearch(BaseSearch):
    """Uninformed bidirectional stepping search."""

    def __init__(self):
        super().__init__("Exhaustive")

    def perform_search(self, run: SearchRun) -> Tuple[SearchOutcome, str]:
        run.start()
        termination_reason = "target_found"

        trial = 1
        while not run.is_target_found():
            if run.statistics.steps >= MAX_EXHAUSTIVE_STEPS:
                termination_reason = "step_limit"
                logger.warning(f"Step limit of {MAX_EXHAUSTIVE_STEPS} reached without finding the target")
                break

            candidates = self._candidates(run, trial)
            if not candidates:
                # Larger offsets only move further out of range
                termination_reason = "bounds_exhausted"
                logger.warning(f"Both directions out of range at offset {trial}")
                break

            for candidate, label in candidates:
                if run.statistics.steps >= MAX_EXHAUSTIVE_STEPS:
                    break
                run.move_to(self._adaptive_step(run, candidate), label)
                if run.is_target_found():
                    break

            trial += 1

        return run.finalize(), termination_reason

    def _candidates(self, run: SearchRun, trial: int) -> List[Tuple[float, str]]:
        """In-bounds candidates for one trial offset, right before left."""
        config = run.config
        offset = trial * config.increment
        candidates = [
            (config.initial_position + offset, RIGHT_LABEL),
            (config.initial_position - offset, LEFT_LABEL),
        ]
        return [(position, label) for position, label in candidates
                if run.is_within_bounds(position)]

    def _adaptive_step(self, run: SearchRun, candidate: float) -> float:
        """Land exactly on the target when it is within one increment."""
        target = run.config.target_position
        if abs(target - run.position) <= run.config.increment:
            logger.debug(f"Adaptive snap from {run.position:.2f} to target {target:.2f}")
            return target
        return candidate
