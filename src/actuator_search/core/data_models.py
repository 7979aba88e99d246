"""Core data models for the actuator search simulator."""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


class InvalidConfiguration(ValueError):
    """Raised when search parameters cannot produce a terminating search."""
    pass


@dataclass(frozen=True)
class SearchConfiguration:
    """Immutable problem parameters for a single search run.

    The target position is only consulted through the evaluation functions
    (relief, target check) and the final-step correction.
    """

    initial_position: float = 250.0
    target_position: float = 450.0
    increment: float = 15.0
    tolerance: float = 7.5
    min_range: float = 50.0
    max_range: float = 750.0
    ring_radius: float = 40.0

    def __post_init__(self) -> None:
        """Validate parameters before any search can use them."""
        if not self.increment > 0:
            raise InvalidConfiguration(f"increment must be positive, got {self.increment}")
        if self.tolerance < 0:
            raise InvalidConfiguration(f"tolerance must be non-negative, got {self.tolerance}")
        if not self.ring_radius > 0:
            raise InvalidConfiguration(f"ring_radius must be positive, got {self.ring_radius}")
        if not self.min_range < self.max_range:
            raise InvalidConfiguration(
                f"min_range ({self.min_range}) must be below max_range ({self.max_range})"
            )
        for name in ('initial_position', 'target_position'):
            value = getattr(self, name)
            if not self.min_range <= value <= self.max_range:
                raise InvalidConfiguration(
                    f"{name} {value} outside [{self.min_range}, {self.max_range}]"
                )

    @property
    def displacement(self) -> float:
        """Signed distance from the initial position to the target."""
        return self.target_position - self.initial_position

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'SearchConfiguration':
        """Build a configuration from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {key: float(value) for key, value in values.items()
                  if key in known and value is not None}
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class SearchStatistics:
    """Step and distance accumulator owned by exactly one search run."""

    steps: int = 0
    distance_traveled: float = 0.0
    final_position: float = 0.0

    def record_step(self) -> None:
        self.steps += 1

    def add_distance(self, delta: float) -> None:
        # delta must be non-negative
        self.distance_traveled += delta

    def set_final_position(self, position: float) -> None:
        self.final_position = position

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'steps': self.steps,
            'distance_traveled': self.distance_traveled,
            'final_position': self.final_position,
        }


@dataclass(frozen=True)
class TraceRecord:
    """One move of a search, as shown to the operator."""

    step_index: int
    position: float
    label: str
    relief: Optional[float] = None
    notice: Optional[str] = None


@dataclass
class SearchTrace:
    """Ordered move-by-move record of a run. Display only."""

    records: List[TraceRecord] = field(default_factory=list)

    def append(self, record: TraceRecord) -> None:
        self.records.append(record)

    @property
    def positions(self) -> List[float]:
        return [record.position for record in self.records]

    @property
    def labels(self) -> List[str]:
        return [record.label for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[TraceRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> TraceRecord:
        return self.records[index]


class SearchOutcome(Enum):
    """Final report of a search run."""

    FOUND = "found"
    FOUND_WITH_ADJUSTMENT = "found_with_adjustment"
    NOT_FOUND = "not_found"
    OUT_OF_RANGE = "out_of_range"


@dataclass
class SearchResult:
    """Result of a single search run."""
    algorithm: str
    outcome: SearchOutcome
    statistics: SearchStatistics
    trace: SearchTrace
    termination_reason: str = "unknown"
    computation_time: float = 0.0
    final_error: float = 0.0

    @property
    def success(self) -> bool:
        return self.outcome in (SearchOutcome.FOUND, SearchOutcome.FOUND_WITH_ADJUSTMENT)

    def as_tuple(self) -> Tuple[SearchStatistics, SearchTrace, SearchOutcome]:
        return self.statistics, self.trace, self.outcome

    def to_dict(self) -> Dict[str, Any]:
        summary = {
            'algorithm': self.algorithm,
            'outcome': self.outcome.value,
            'termination_reason': self.termination_reason,
            'computation_time': self.computation_time,
            'final_error': self.final_error,
        }
        summary.update(self.statistics.to_dict())
        return summary

