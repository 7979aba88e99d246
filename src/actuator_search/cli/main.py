"""Main CLI entry point for the actuator search simulator."""

import sys
import argparse
import logging
from typing import List, Optional

from actuator_search.search.runner import ALGORITHMS

from . import commands
from .utils import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='actuator-search',
        description='Actuator Search - exhaustive and relief-gradient positioning search on a 1-D axis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  actuator-search run exhaustive                 # Bidirectional exhaustive search
  actuator-search run heuristic --seed 7         # Reproducible heuristic search
  actuator-search menu                           # Interactive menu
  actuator-search config show                    # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Comma-separated configuration overrides (e.g., search.increment=10)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all log output except errors'
    )

    # Subcommands
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Run command
    run_parser = subparsers.add_parser(
        'run',
        help='Run a single search',
        description='Run one search and print its trace and statistics'
    )

    run_parser.add_argument(
        'algorithm',
        choices=ALGORITHMS,
        help='Search strategy'
    )

    run_parser.add_argument(
        '--seed',
        type=int,
        help='Seed for exploratory jumps (heuristic only)'
    )

    run_parser.add_argument(
        '--initial',
        type=float,
        help='Initial position'
    )

    run_parser.add_argument(
        '--target',
        type=float,
        help='Target position'
    )

    run_parser.add_argument(
        '--increment',
        type=float,
        help='Step increment'
    )

    run_parser.add_argument(
        '--tolerance',
        type=float,
        help='Accepted distance from the target'
    )

    run_parser.add_argument(
        '--ring-radius',
        type=float,
        help='Half-width of the relief ring around the target'
    )

    run_parser.add_argument(
        '--no-trace',
        action='store_true',
        help='Do not print the step-by-step trace'
    )

    # Menu command
    menu_parser = subparsers.add_parser(
        'menu',
        help='Interactive search menu',
        description='Choose searches from an interactive text menu'
    )

    menu_parser.add_argument(
        '--seed',
        type=int,
        help='Seed for exploratory jumps (heuristic only)'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect the search configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # Setup logging based on verbosity
    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'run':
            return commands.run_command(parsed_args)
        if parsed_args.command == 'menu':
            return commands.menu_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
