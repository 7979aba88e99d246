"""Tests for CLI interface."""

import io
import logging
from unittest.mock import patch

import pytest

from actuator_search.cli import commands
from actuator_search.cli.main import main_cli, create_parser
from actuator_search.cli.utils import (
    format_duration, format_trace_record, format_outcome, format_statistics,
    format_problem_summary
)
from actuator_search.core.data_models import (
    SearchConfiguration, SearchOutcome, SearchResult, SearchStatistics, SearchTrace,
    TraceRecord
)


def scripted_input(*responses):
    """Line reader that replays responses and then signals end of input."""
    remaining = list(responses)

    def read(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


class TestCLIParser:
    """Test CLI argument parsing."""

    def test_create_parser(self):
        parser = create_parser()
        assert parser.prog == 'actuator-search'

    def test_run_command_parsing(self):
        parser = create_parser()

        args = parser.parse_args(['run', 'exhaustive'])
        assert args.command == 'run'
        assert args.algorithm == 'exhaustive'
        assert args.seed is None
        assert args.no_trace is False

        args = parser.parse_args([
            'run', 'heuristic',
            '--seed', '7',
            '--initial', '300',
            '--ring-radius', '50',
            '--no-trace'
        ])
        assert args.algorithm == 'heuristic'
        assert args.seed == 7
        assert args.initial == 300.0
        assert args.ring_radius == 50.0
        assert args.no_trace is True

    def test_unknown_algorithm_rejected(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(['run', 'astar'])

    def test_global_options(self):
        parser = create_parser()
        args = parser.parse_args(['-vv', '-c', 'search.increment=10', 'menu'])
        assert args.verbose == 2
        assert args.config == 'search.increment=10'
        assert args.command == 'menu'

    def test_config_command_parsing(self):
        parser = create_parser()
        args = parser.parse_args(['config', 'validate'])
        assert args.command == 'config'
        assert args.config_action == 'validate'


class TestCollectOverrides:
    """Test conversion of CLI flags into configuration overrides."""

    def test_flags_and_config_string(self):
        args = create_parser().parse_args([
            '-c', 'search.min_range=0, search.max_range=1000',
            'run', 'heuristic', '--target', '460', '--seed', '5'
        ])
        overrides = commands.collect_overrides(args)

        assert overrides == [
            'search.min_range=0',
            'search.max_range=1000',
            'search.target_position=460.0',
            'heuristic.random_seed=5',
        ]

    def test_no_overrides(self):
        args = create_parser().parse_args(['menu'])
        assert commands.collect_overrides(args) == []


class TestMainCLI:
    """Test command routing."""

    def test_no_command(self):
        assert main_cli([]) == 1

    def test_routes_run(self):
        with patch.object(commands, 'run_command', return_value=0) as mock_run:
            assert main_cli(['run', 'exhaustive']) == 0
            mock_run.assert_called_once()

    def test_routes_menu(self):
        with patch.object(commands, 'menu_command', return_value=0) as mock_menu:
            assert main_cli(['menu']) == 0
            mock_menu.assert_called_once()

    def test_keyboard_interrupt(self):
        with patch.object(commands, 'run_command', side_effect=KeyboardInterrupt):
            assert main_cli(['run', 'exhaustive']) == 130

    def test_unexpected_error(self):
        with patch.object(commands, 'config_command', side_effect=RuntimeError("boom")):
            assert main_cli(['config', 'show']) == 1


class TestRunCommand:
    """Test the run command end to end."""

    def _run(self, argv):
        args = create_parser().parse_args(argv)
        output = io.StringIO()
        return commands.run_command(args, output=output), output.getvalue()

    def test_exhaustive_run(self):
        code, out = self._run(['run', 'exhaustive'])

        assert code == 0
        assert "EXHAUSTIVE SEARCH (BIDIRECTIONAL)" in out
        assert "Step   1: Position  250.0 (start)" in out
        assert "Step   2: Position  265.0 (right ->)" in out
        assert "Step   3: Position  235.0 (left <-)" in out
        assert "TARGET REACHED WITH FINAL ADJUSTMENT at position 450.0" in out
        assert "Total steps:              27" in out
        assert "Final error:               0.00 units" in out

    def test_config_overrides_change_the_problem(self):
        code, out = self._run([
            '-c', 'search.target_position=455.0,search.tolerance=2.0',
            'run', 'exhaustive'
        ])

        assert code == 0
        assert "TARGET FOUND at position 455.0" in out

    def test_heuristic_run(self):
        code, out = self._run(['run', 'heuristic', '--seed', '3'])

        assert code in (0, 1)
        assert "HEURISTIC SEARCH (RELIEF GRADIENT)" in out
        assert "Step   1: Pos  250.0 | Relief  0.00 (start)" in out
        assert "STATISTICS" in out

    def test_seed_flag_reaches_search(self):
        args = create_parser().parse_args(['run', 'heuristic', '--seed', '7', '--no-trace'])
        with patch.object(commands, 'execute_search') as mock_execute:
            mock_execute.return_value.success = True
            assert commands.run_command(args) == 0

        assert mock_execute.call_args.kwargs['seed'] == 7

    def test_no_trace(self):
        code, out = self._run(['run', 'exhaustive', '--no-trace'])

        assert code == 0
        assert "Step   1:" not in out
        assert "TARGET REACHED WITH FINAL ADJUSTMENT" in out

    def test_invalid_configuration(self):
        code, out = self._run(['run', 'exhaustive', '--increment', '0'])
        assert code == 1
        assert "STATISTICS" not in out


class TestMenuCommand:
    """Test the interactive menu."""

    def _menu(self, *responses):
        args = create_parser().parse_args(['menu'])
        output = io.StringIO()
        code = commands.menu_command(args, input_func=scripted_input(*responses), output=output)
        return code, output.getvalue()

    def test_exit_immediately(self):
        code, out = self._menu('3')

        assert code == 0
        assert "ROBOTIC SEARCH SYSTEM - ENGINE ASSEMBLY" in out
        assert "Target position (A): 450.0 (unknown to algorithms)" in out
        assert "Displacement: 200.0 units" in out
        assert "Goodbye!" in out

    def test_invalid_option_then_exhaustive(self):
        code, out = self._menu('abc', '9', '1', '', '3')

        assert code == 0
        assert out.count("X Invalid option. Please try again.") == 2
        assert "EXHAUSTIVE SEARCH (BIDIRECTIONAL)" in out
        assert "TARGET REACHED WITH FINAL ADJUSTMENT" in out
        assert out.rstrip().endswith("Goodbye!")

    def test_end_of_input_exits(self):
        code, out = self._menu()
        assert code == 0
        assert "Goodbye!" in out

    def test_read_option(self):
        assert commands.read_option(scripted_input(' 2 '), "") == 2
        assert commands.read_option(scripted_input('two'), "") == -1
        assert commands.read_option(scripted_input(), "") == commands.MENU_EXIT


class TestConfigCommand:
    """Test config show/validate."""

    def test_show(self, capsys):
        args = create_parser().parse_args(['config', 'show'])
        assert commands.config_command(args) == 0
        out = capsys.readouterr().out
        assert "target_position: 450.0" in out

    def test_show_uses_config_manager(self):
        args = create_parser().parse_args(['-c', 'search.increment=5.0', 'config', 'show'])
        with patch.object(commands.ConfigManager, 'print_config') as mock_print:
            assert commands.config_command(args) == 0
        mock_print.assert_called_once_with()

    def test_validate(self, capsys):
        args = create_parser().parse_args(['config', 'validate'])
        assert commands.config_command(args) == 0
        assert "Configuration is valid" in capsys.readouterr().out

    def test_validate_failure(self, capsys):
        args = create_parser().parse_args(['-c', 'search.increment=-1', 'config', 'validate'])
        assert commands.config_command(args) == 1
        assert "Configuration validation failed" in capsys.readouterr().out


class TestFormatting:
    """Test rendering helpers."""

    def _result(self, outcome, final_position=450.0):
        stats = SearchStatistics(steps=12, distance_traveled=195.0, final_position=final_position)
        return SearchResult(
            algorithm="Heuristic",
            outcome=outcome,
            statistics=stats,
            trace=SearchTrace(),
            computation_time=0.0042,
            final_error=abs(final_position - 450.0)
        )

    def test_trace_record_without_relief(self):
        record = TraceRecord(step_index=7, position=205.0, label="left <-")
        assert format_trace_record(record) == ["Step   7: Position  205.0 (left <-)"]

    def test_trace_record_with_relief_and_notice(self):
        record = TraceRecord(step_index=4, position=310.0, label="exploration",
                             relief=0.0, notice="Local maximum detected, exploratory jump")
        assert format_trace_record(record) == [
            "    -> Local maximum detected, exploratory jump",
            "Step   4: Pos  310.0 | Relief  0.00 (exploration)",
        ]

    @pytest.mark.parametrize("outcome,text", [
        (SearchOutcome.FOUND, "TARGET FOUND at position 450.0"),
        (SearchOutcome.FOUND_WITH_ADJUSTMENT, "TARGET REACHED WITH FINAL ADJUSTMENT at position 450.0"),
        (SearchOutcome.NOT_FOUND, "TARGET NOT FOUND. Final position: 450.0"),
        (SearchOutcome.OUT_OF_RANGE, "(!) Position out of range. Final position: 450.0"),
    ])
    def test_outcome(self, outcome, text):
        assert format_outcome(self._result(outcome)) == text

    def test_statistics_block(self):
        lines = format_statistics(self._result(SearchOutcome.NOT_FOUND, final_position=445.0))

        assert "Total steps:              12" in lines
        assert "Distance traveled:        195.0 units" in lines
        assert "Execution time:          4.2ms" in lines
        assert "Final position:           445.0" in lines
        assert "Final error:               5.00 units" in lines

    def test_problem_summary(self):
        lines = format_problem_summary(SearchConfiguration())
        assert "  - Initial position (B): 250.0" in lines
        assert "  - Search increment: 15.0" in lines

    @pytest.mark.parametrize("seconds,expected", [
        (0.0005, "500.0µs"),
        (0.25, "250.0ms"),
        (12.5, "12.50s"),
        (125.0, "2m 5.0s"),
    ])
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected
