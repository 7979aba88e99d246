"""Command-line interface for the actuator search simulator.

This module provides CLI commands for running single searches and the
interactive menu.
"""

from .main import main_cli
from .commands import run_command, menu_command, config_command
from .utils import setup_logging, format_trace_record, format_statistics

__all__ = [
    'main_cli',
    'run_command',
    'menu_command',
    'config_command',
    'setup_logging',
    'format_trace_record',
    'format_statistics'
]
