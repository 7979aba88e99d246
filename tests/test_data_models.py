"""Tests for core data models."""

import dataclasses

import pytest

from actuator_search.core.data_models import (
    InvalidConfiguration, SearchConfiguration, SearchStatistics, TraceRecord,
    SearchTrace, SearchOutcome, SearchResult
)


class TestSearchConfiguration:
    """Test SearchConfiguration validation and helpers."""

    def test_defaults_match_engine_assembly_problem(self):
        """Test default parameters."""
        config = SearchConfiguration()

        assert config.initial_position == 250.0
        assert config.target_position == 450.0
        assert config.increment == 15.0
        assert config.tolerance == 7.5
        assert config.min_range == 50.0
        assert config.max_range == 750.0
        assert config.ring_radius == 40.0
        assert config.displacement == 200.0

    def test_configuration_is_immutable(self):
        """Test that a configuration cannot be changed after construction."""
        config = SearchConfiguration()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.increment = 5.0

    @pytest.mark.parametrize("increment", [0.0, -15.0])
    def test_non_positive_increment_rejected(self, increment):
        """Test that a non-positive increment fails fast."""
        with pytest.raises(InvalidConfiguration, match="increment"):
            SearchConfiguration(increment=increment)

    def test_negative_tolerance_rejected(self):
        with pytest.raises(InvalidConfiguration, match="tolerance"):
            SearchConfiguration(tolerance=-0.1)

    def test_non_positive_ring_radius_rejected(self):
        with pytest.raises(InvalidConfiguration, match="ring_radius"):
            SearchConfiguration(ring_radius=0.0)

    def test_inverted_range_rejected(self):
        with pytest.raises(InvalidConfiguration, match="min_range"):
            SearchConfiguration(min_range=800.0, max_range=750.0)

    @pytest.mark.parametrize("field_name,value", [
        ("initial_position", 49.0),
        ("initial_position", 751.0),
        ("target_position", 10.0),
        ("target_position", 800.0),
    ])
    def test_positions_outside_range_rejected(self, field_name, value):
        """Test that initial and target positions must lie within the bounds."""
        with pytest.raises(InvalidConfiguration, match=field_name):
            SearchConfiguration(**{field_name: value})

    def test_positions_on_bounds_accepted(self):
        """Test that the bounds themselves are valid positions."""
        config = SearchConfiguration(initial_position=50.0, target_position=750.0)
        assert config.displacement == 700.0

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            SearchConfiguration(increment=0)

    def test_from_dict_ignores_unknown_keys(self):
        """Test building from a mapping."""
        config = SearchConfiguration.from_dict({
            'initial_position': 100,
            'increment': 10,
            'unused': 'value',
        })

        assert config.initial_position == 100.0
        assert isinstance(config.initial_position, float)
        assert config.increment == 10.0
        assert config.target_position == 450.0

    def test_to_dict_round_trip(self):
        config = SearchConfiguration(increment=5.0)
        assert SearchConfiguration.from_dict(config.to_dict()) == config


class TestSearchStatistics:
    """Test SearchStatistics accumulator."""

    def test_initial_state(self):
        stats = SearchStatistics()
        assert stats.steps == 0
        assert stats.distance_traveled == 0.0
        assert stats.final_position == 0.0

    def test_accumulation(self):
        """Test step counting and distance accumulation."""
        stats = SearchStatistics()
        stats.record_step()
        stats.record_step()
        stats.add_distance(15.0)
        stats.add_distance(30.0)
        stats.set_final_position(235.0)

        assert stats.steps == 2
        assert stats.distance_traveled == 45.0
        assert stats.final_position == 235.0

    def test_set_final_position_is_assignment(self):
        stats = SearchStatistics()
        stats.set_final_position(450.0)
        stats.set_final_position(450.0)
        assert stats.final_position == 450.0

    def test_to_dict(self):
        stats = SearchStatistics(steps=3, distance_traveled=12.5, final_position=1.0)
        assert stats.to_dict() == {
            'steps': 3,
            'distance_traveled': 12.5,
            'final_position': 1.0,
        }


class TestSearchTrace:
    """Test SearchTrace container."""

    @pytest.fixture
    def trace(self):
        trace = SearchTrace()
        trace.append(TraceRecord(step_index=1, position=250.0, label="start"))
        trace.append(TraceRecord(step_index=2, position=265.0, label="right ->", relief=0.0))
        return trace

    def test_sequence_behaviour(self, trace):
        assert len(trace) == 2
        assert trace[0].label == "start"
        assert [record.step_index for record in trace] == [1, 2]

    def test_positions_and_labels(self, trace):
        assert trace.positions == [250.0, 265.0]
        assert trace.labels == ["start", "right ->"]

    def test_record_defaults(self, trace):
        assert trace[0].relief is None
        assert trace[0].notice is None
        assert trace[1].relief == 0.0


class TestSearchResult:
    """Test SearchResult helpers."""

    def _result(self, outcome):
        stats = SearchStatistics(steps=4, distance_traveled=20.0, final_position=450.0)
        return SearchResult(
            algorithm="Exhaustive",
            outcome=outcome,
            statistics=stats,
            trace=SearchTrace(),
            termination_reason="target_found"
        )

    @pytest.mark.parametrize("outcome,success", [
        (SearchOutcome.FOUND, True),
        (SearchOutcome.FOUND_WITH_ADJUSTMENT, True),
        (SearchOutcome.NOT_FOUND, False),
        (SearchOutcome.OUT_OF_RANGE, False),
    ])
    def test_success(self, outcome, success):
        assert self._result(outcome).success is success

    def test_as_tuple(self):
        result = self._result(SearchOutcome.FOUND)
        stats, trace, outcome = result.as_tuple()
        assert stats is result.statistics
        assert trace is result.trace
        assert outcome is SearchOutcome.FOUND

    def test_to_dict(self):
        summary = self._result(SearchOutcome.NOT_FOUND).to_dict()
        assert summary['algorithm'] == "Exhaustive"
        assert summary['outcome'] == "not_found"
        assert summary['steps'] == 4
        assert summary['distance_traveled'] == 20.0
