"""Configuration validation for the actuator search simulator."""

import logging
from omegaconf import DictConfig, OmegaConf

from actuator_search.core.data_models import InvalidConfiguration, SearchConfiguration

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_heuristic_config(config.get('heuristic', {}))
        validate_logging_config(config.get('logging', {}))

        logger.debug("Configuration validation passed")

    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Every parameter must be numeric and together they must describe a
    terminating search (see SearchConfiguration).

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    if isinstance(search_config, DictConfig):
        search_config = OmegaConf.to_container(search_config, resolve=True)

    for key, value in search_config.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigValidationError(
                f"search.{key} must be a number, got {value!r}"
            )

    try:
        SearchConfiguration.from_dict(search_config)
    except InvalidConfiguration as e:
        raise ConfigValidationError(f"search section is invalid: {e}")


def validate_heuristic_config(heuristic_config: DictConfig) -> None:
    """Validate heuristic configuration section.

    Args:
        heuristic_config: Heuristic configuration section
    """
    if not heuristic_config:
        return

    seed = heuristic_config.get('random_seed', None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
        raise ConfigValidationError(
            f"heuristic.random_seed must be null or a non-negative integer, got {seed!r}"
        )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section.

    Args:
        logging_config: Logging configuration section
    """
    if not logging_config:
        return

    level = logging_config.get('level', 'WARNING')
    if str(level).upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {LOG_LEVELS}, got {level!r}"
        )
