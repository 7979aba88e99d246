"""Configuration management for the actuator search simulator.

This module provides Hydra-based configuration management with runtime
override capabilities.
"""

from .config_manager import (
    ConfigManager, load_config, get_config, get_parameter, build_search_configuration
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'get_config',
    'get_parameter',
    'build_search_configuration',
    'validate_config',
    'ConfigValidationError'
]
