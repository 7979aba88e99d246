"""Actuator search: 1-D positioning search simulator.

Locates an unknown target on an axis with fixed-size steps, using either an
exhaustive bidirectional search or a relief-gradient heuristic search.
"""

from actuator_search.core.data_models import (
    InvalidConfiguration, SearchConfiguration, SearchOutcome, SearchResult,
    SearchStatistics, SearchTrace, TraceRecord
)
from actuator_search.search import (
    ExhaustiveSearch, HeuristicSearch, RingReliefFunction,
    create_search, run_exhaustive_search, run_heuristic_search
)

__version__ = "0.1.0"

__all__ = [
    'InvalidConfiguration',
    'SearchConfiguration',
    'SearchOutcome',
    'SearchResult',
    'SearchStatistics',
    'SearchTrace',
    'TraceRecord',
    'ExhaustiveSearch',
    'HeuristicSearch',
    'RingReliefFunction',
    'create_search',
    'run_exhaustive_search',
    'run_heuristic_search'
]
