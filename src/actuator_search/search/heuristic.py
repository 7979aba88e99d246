"""Heuristic search following the relief gradient.

Hill-climbs on the ring relief h(n). After three consecutive non-improving
moves (local maximum or plateau) it takes an exploratory jump of two
increments in a randomly chosen direction.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from actuator_search.core.data_models import SearchOutcome
from actuator_search.search.base import BaseSearch, SearchRun, LEFT_LABEL, RIGHT_LABEL
from actuator_search.search.relief import RingReliefFunction

logger = logging.getLogger(__name__)

# Safety limit on recorded steps, the only guard against non-termination
MAX_HEURISTIC_STEPS = 100
# Non-improving moves tolerated before an exploratory jump
LOCAL_MAXIMUM_PATIENCE = 3
EXPLORATION_LABEL = "exploration"
LOCAL_MAXIMUM_NOTICE = "Local maximum detected, exploratory jump"

# Returns True to jump right, False to jump left
RandomSource = Callable[[], bool]


def create_random_source(seed: Optional[int] = None) -> RandomSource:
    """Fair coin backed by a private NumPy generator.

    Args:
        seed: Seed for reproducible runs; None draws fresh entropy

    Returns:
        Zero-argument callable returning True (right) or False (left)
    """
    rng = np.random.default_rng(seed)

    def coin_flip() -> bool:
        return bool(rng.integers(0, 2))

    return coin_flip


@dataclass(frozen=True)
class MoveDecision:
    """Outcome of one decision cycle."""
    position: float
    label: str
    steps_without_improvement: int
    notice: Optional[str] = None


class HeuristicSearch(BaseSearch):
    """Gradient-following search with local-maximum escape."""

    def __init__(self, random_source: Optional[RandomSource] = None, seed: Optional[int] = None):
        """Initialize heuristic search.

        Args:
            random_source: Direction source for exploratory jumps
            seed: Seed for the default source, ignored when random_source is given
        """
        super().__init__("Heuristic")
        self.random_source = random_source
        self.seed = seed

    def perform_search(self, run: SearchRun) -> Tuple[SearchOutcome, str]:
        config = run.config
        relief = RingReliefFunction(config)
        random_source = self.random_source or create_random_source(self.seed)
        steps_without_improvement = 0

        run.start(relief(run.position))

        while not run.is_target_found():
            if run.statistics.steps >= MAX_HEURISTIC_STEPS:
                logger.warning(f"Step limit of {MAX_HEURISTIC_STEPS} reached without finding the target")
                return run.finalize(relief), "step_limit"

            right_position = run.position + config.increment
            left_position = run.position - config.increment
            decision = decide_move(
                current_relief=relief(run.position),
                right_relief=relief.candidate_relief(right_position),
                left_relief=relief.candidate_relief(left_position),
                current_position=run.position,
                increment=config.increment,
                steps_without_improvement=steps_without_improvement,
                random_source=random_source
            )

            if not run.is_within_bounds(decision.position):
                logger.warning(f"Position {decision.position:.2f} out of range "
                               f"[{config.min_range}, {config.max_range}], aborting")
                run.statistics.set_final_position(run.position)
                return SearchOutcome.OUT_OF_RANGE, "out_of_range"

            if decision.notice:
                logger.info(f"{decision.notice} at {run.position:.2f}")

            steps_without_improvement = decision.steps_without_improvement
            run.move_to(decision.position, decision.label,
                        relief=relief(decision.position), notice=decision.notice)

        return run.finalize(relief), "target_found"


def decide_move(current_relief: float,
                right_relief: float,
                left_relief: float,
                current_position: float,
                increment: float,
                steps_without_improvement: int,
                random_source: RandomSource) -> MoveDecision:
    """Choose the next move from the relief of the current and neighbouring positions.

    Improving moves prefer the right on ties and reset the improvement counter.
    Without an improving move the counter grows; at LOCAL_MAXIMUM_PATIENCE an
    exploratory jump of two increments is taken and the counter resets,
    otherwise the search drifts toward the larger neighbouring relief.
    """
    right_position = current_position + increment
    left_position = current_position - increment

    if right_relief > current_relief and right_relief >= left_relief:
        return MoveDecision(right_position, RIGHT_LABEL, 0)
    if left_relief > current_relief:
        return MoveDecision(left_position, LEFT_LABEL, 0)

    steps_without_improvement += 1
    if steps_without_improvement >= LOCAL_MAXIMUM_PATIENCE:
        direction = 1 if random_source() else -1
        return MoveDecision(
            current_position + direction * 2 * increment,
            EXPLORATION_LABEL,
            0,
            notice=LOCAL_MAXIMUM_NOTICE
        )

    if right_relief >= left_relief:
        return MoveDecision(right_position, RIGHT_LABEL, steps_without_improvement)
    return MoveDecision(left_position, LEFT_LABEL, steps_without_improvement)
