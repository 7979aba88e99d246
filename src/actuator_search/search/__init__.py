"""Positioning search algorithms.

This module implements the exhaustive bidirectional search and the
relief-gradient heuristic search over a 1-D axis.
"""

from .relief import RingReliefFunction, is_target_found, is_within_bounds
from .base import BaseSearch, SearchRun
from .exhaustive import ExhaustiveSearch, MAX_EXHAUSTIVE_STEPS
from .heuristic import (
    HeuristicSearch, MoveDecision, create_random_source, decide_move, MAX_HEURISTIC_STEPS
)
from .runner import create_search, run_exhaustive_search, run_heuristic_search

__all__ = [
    'RingReliefFunction',
    'is_target_found',
    'is_within_bounds',
    'BaseSearch',
    'SearchRun',
    'ExhaustiveSearch',
    'MAX_EXHAUSTIVE_STEPS',
    'HeuristicSearch',
    'MoveDecision',
    'create_random_source',
    'decide_move',
    'MAX_HEURISTIC_STEPS',
    'create_search',
    'run_exhaustive_search',
    'run_heuristic_search'
]
