"""CLI command implementations."""

import logging
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from omegaconf import DictConfig, OmegaConf

from actuator_search.config import (
    ConfigManager, load_config, get_parameter, build_search_configuration,
    validate_config, ConfigValidationError
)
from actuator_search.core.data_models import InvalidConfiguration, SearchConfiguration, SearchResult
from actuator_search.search.runner import create_search

from .utils import (
    SEPARATOR, format_trace_record, format_outcome, format_statistics, format_problem_summary
)

logger = logging.getLogger(__name__)

MENU_EXHAUSTIVE = 1
MENU_HEURISTIC = 2
MENU_EXIT = 3
MENU_ALGORITHMS = {MENU_EXHAUSTIVE: 'exhaustive', MENU_HEURISTIC: 'heuristic'}

ALGORITHM_HEADERS = {
    'exhaustive': [
        "EXHAUSTIVE SEARCH (BIDIRECTIONAL)",
        "  Systematically explores both directions from the initial",
        "  position without information about the target location.",
        "",
        "  Pattern: B -> B+d -> B-d -> B+2d -> B-2d -> ...",
    ],
    'heuristic': [
        "HEURISTIC SEARCH (RELIEF GRADIENT)",
        "  Uses the prominent ring relief as a guide.",
        "  Moves towards where the relief is greater.",
        "",
        "  Heuristic function: h(n) = relief at position n",
    ],
}

# Flag name on the run subcommand -> config key
RUN_OVERRIDES = {
    'initial': 'search.initial_position',
    'target': 'search.target_position',
    'increment': 'search.increment',
    'tolerance': 'search.tolerance',
    'ring_radius': 'search.ring_radius',
    'seed': 'heuristic.random_seed',
}


def collect_overrides(args) -> List[str]:
    """Gather Hydra overrides from --config and the run flags.

    Args:
        args: Parsed command line arguments

    Returns:
        List of key=value overrides
    """
    overrides = []
    if getattr(args, 'config', None):
        overrides.extend(item.strip() for item in args.config.split(',') if item.strip())
    for attribute, key in RUN_OVERRIDES.items():
        value = getattr(args, attribute, None)
        if value is not None:
            overrides.append(f"{key}={value}")
    return overrides


def load_run_configuration(args) -> Tuple[DictConfig, SearchConfiguration]:
    """Load the Hydra config for a command and derive the search parameters."""
    config = load_config(overrides=collect_overrides(args))

    if getattr(args, 'verbose', 0) == 0 and not getattr(args, 'quiet', False):
        level = OmegaConf.select(config, 'logging.level', default='WARNING')
        logging.getLogger().setLevel(str(level).upper())

    return config, build_search_configuration(config)


def execute_search(algorithm: str,
                   search_config: SearchConfiguration,
                   seed: Optional[int] = None,
                   output: Optional[TextIO] = None,
                   show_trace: bool = True) -> SearchResult:
    """Run one search and render header, trace, verdict and statistics.

    Args:
        algorithm: 'exhaustive' or 'heuristic'
        search_config: Problem parameters
        seed: Seed for the heuristic's exploratory jumps
        output: Stream to write to (defaults to stdout)
        show_trace: Whether to print each step as it is taken

    Returns:
        The SearchResult of the run
    """
    output = output or sys.stdout

    def emit(line: str = "") -> None:
        print(line, file=output)

    title, *description = ALGORITHM_HEADERS[algorithm]
    emit("=" * 60)
    emit(f"  {title}")
    emit("=" * 60)
    emit()
    emit("Description:")
    for line in description:
        emit(line)
    emit()
    emit("Starting search...")
    emit()
    emit(SEPARATOR)

    def on_step(record) -> None:
        for line in format_trace_record(record):
            emit(line)

    search = create_search(algorithm, seed=seed)
    result = search.execute(search_config, on_step if show_trace else None)

    emit(SEPARATOR)
    emit()
    emit(format_outcome(result))
    emit()
    for line in format_statistics(result):
        emit(line)

    return result


def run_command(args, output: Optional[TextIO] = None) -> int:
    """Handle run command.

    Args:
        args: Parsed command line arguments
        output: Stream to write to (defaults to stdout)

    Returns:
        Exit code (0 when the target was reached)
    """
    try:
        _, search_config = load_run_configuration(args)
        seed = get_parameter('heuristic.random_seed')
        result = execute_search(
            args.algorithm,
            search_config,
            seed=seed,
            output=output,
            show_trace=not args.no_trace
        )
        return 0 if result.success else 1

    except (InvalidConfiguration, ConfigValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except Exception as e:
        logger.error(f"Run command failed: {e}")
        return 1


def read_option(input_func: Callable[[str], str], prompt: str) -> int:
    """Read a menu option; anything that is not an integer maps to -1."""
    try:
        return int(input_func(prompt).strip())
    except EOFError:
        return MENU_EXIT
    except ValueError:
        return -1


def run_menu(search_config: SearchConfiguration,
             seed: Optional[int] = None,
             input_func: Callable[[str], str] = input,
             output: Optional[TextIO] = None) -> None:
    """Interactive menu loop: 1 exhaustive, 2 heuristic, 3 exit.

    Args:
        search_config: Problem parameters shared by every run
        seed: Seed for the heuristic's exploratory jumps
        input_func: Line reader taking a prompt (defaults to input)
        output: Stream to write to (defaults to stdout)
    """
    output = output or sys.stdout

    def emit(line: str = "") -> None:
        print(line, file=output)

    while True:
        emit()
        emit("=" * 59)
        emit("  ROBOTIC SEARCH SYSTEM - ENGINE ASSEMBLY")
        emit("=" * 59)
        emit()
        for line in format_problem_summary(search_config):
            emit(line)
        emit()
        emit("-" * 59)
        emit("                      MAIN MENU                            ")
        emit("-" * 59)
        emit("  1. Exhaustive Search (Bidirectional)")
        emit("  2. Heuristic Search (Relief Gradient)")
        emit("  3. Exit")
        emit("-" * 59)

        option = read_option(input_func, "\nSelect an option: ")

        if option in MENU_ALGORITHMS:
            execute_search(MENU_ALGORITHMS[option], search_config, seed=seed, output=output)
            emit()
            try:
                input_func("Press Enter to continue...")
            except EOFError:
                emit("\nGoodbye!")
                return
        elif option == MENU_EXIT:
            emit("\nGoodbye!")
            return
        else:
            emit("\nX Invalid option. Please try again.")


def menu_command(args,
                 input_func: Callable[[str], str] = input,
                 output: Optional[TextIO] = None) -> int:
    """Handle menu command.

    Args:
        args: Parsed command line arguments
        input_func: Line reader taking a prompt
        output: Stream to write to (defaults to stdout)

    Returns:
        Exit code
    """
    try:
        _, search_config = load_run_configuration(args)
        seed = get_parameter('heuristic.random_seed')
        run_menu(search_config, seed=seed, input_func=input_func, output=output)
        return 0

    except (InvalidConfiguration, ConfigValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except Exception as e:
        logger.error(f"Menu command failed: {e}")
        return 1


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        if args.config_action == 'show':
            manager = ConfigManager()
            manager.load_config(overrides=collect_overrides(args), validate=False)
            manager.print_config()
            return 0

        elif args.config_action == 'validate':
            try:
                config = load_config(overrides=collect_overrides(args), validate=False)
                validate_config(config)
                print("Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
