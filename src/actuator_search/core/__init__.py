"""Core data models for the actuator search simulator."""

from .data_models import (
    InvalidConfiguration, SearchConfiguration, SearchStatistics, TraceRecord,
    SearchTrace, SearchOutcome, SearchResult
)

__all__ = [
    'InvalidConfiguration',
    'SearchConfiguration',
    'SearchStatistics',
    'TraceRecord',
    'SearchTrace',
    'SearchOutcome',
    'SearchResult'
]
