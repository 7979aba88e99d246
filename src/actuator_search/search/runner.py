"""Entry points for running a search with a given configuration."""

from typing import Optional

from actuator_search.core.data_models import SearchConfiguration, SearchResult
from actuator_search.search.base import BaseSearch, UpdateCallback
from actuator_search.search.exhaustive import ExhaustiveSearch
from actuator_search.search.heuristic import HeuristicSearch, RandomSource


ALGORITHMS = ('exhaustive', 'heuristic')


def create_search(name: str,
                  random_source: Optional[RandomSource] = None,
                  seed: Optional[int] = None) -> BaseSearch:
    """Create a search algorithm by name.

    Args:
        name: 'exhaustive' or 'heuristic'
        random_source: Exploratory-jump direction source (heuristic only)
        seed: Seed for the default random source (heuristic only)

    Returns:
        Configured search instance
    """
    if name == 'exhaustive':
        return ExhaustiveSearch()
    if name == 'heuristic':
        return HeuristicSearch(random_source=random_source, seed=seed)
    raise ValueError(f"Unknown search algorithm: {name!r} (expected one of {ALGORITHMS})")


def run_exhaustive_search(config: SearchConfiguration,
                          update_callback: Optional[UpdateCallback] = None) -> SearchResult:
    """Run the bidirectional exhaustive search once."""
    return ExhaustiveSearch().execute(config, update_callback)


def run_heuristic_search(config: SearchConfiguration,
                         random_source: Optional[RandomSource] = None,
                         seed: Optional[int] = None,
                         update_callback: Optional[UpdateCallback] = None) -> SearchResult:
    """Run the relief-gradient search once.

    Args:
        config: Problem parameters
        random_source: Direction source for exploratory jumps (True = right)
        seed: Seed for the default source when random_source is None
        update_callback: Optional per-step trace consumer

    Returns:
        SearchResult for the run
    """
    search = HeuristicSearch(random_source=random_source, seed=seed)
    return search.execute(config, update_callback)
