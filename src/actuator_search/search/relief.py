"""Evaluation functions shared by both search strategies.

Implements the synthetic ring relief used as the hill-climbing heuristic:
    h(x) = max(0, r - |x - target|)
together with the target and bounds predicates.
"""

from actuator_search.core.data_models import SearchConfiguration

# Relief reported for a candidate that cannot be used (outside the bounds)
UNUSABLE_RELIEF = -1.0


class RingReliefFunction:
    """Relief bump of half-width ``ring_radius`` centred on the target.

    Pure: the value depends only on the position and the configuration.
    """

    def __init__(self, config: SearchConfiguration):
        self.config = config
        self.name = "RingRelief"

    def compute(self, position: float) -> float:
        """Compute relief at a position.

        Args:
            position: Axis position to evaluate

        Returns:
            Relief in [0, ring_radius], peaking at the target
        """
        distance_to_center = abs(position - self.config.target_position)
        return max(0.0, self.config.ring_radius - distance_to_center)

    def __call__(self, position: float) -> float:
        return self.compute(position)

    def candidate_relief(self, position: float) -> float:
        """Relief of a candidate move, or UNUSABLE_RELIEF if it leaves the bounds."""
        if not is_within_bounds(self.config, position):
            return UNUSABLE_RELIEF
        return self.compute(position)


def is_target_found(config: SearchConfiguration, position: float) -> bool:
    """True when the position lies inside the tolerance band around the target."""
    return abs(position - config.target_position) <= config.tolerance


def is_within_bounds(config: SearchConfiguration, position: float) -> bool:
    """Inclusive range check against [min_range, max_range]."""
    return config.min_range <= position <= config.max_range
