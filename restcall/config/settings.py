"""
Configuration management for Restcall.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from restcall.exceptions import InvalidConfigurationError
from restcall.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${RESTCALL_LOG_LEVEL}" -> value of RESTCALL_LOG_LEVEL env var
        "${RESTCALL_LOG_LEVEL:INFO}" -> value of RESTCALL_LOG_LEVEL or "INFO" if not set
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def _as_bool(value: Any) -> bool:
    """Interpret YAML or env-expanded values as a boolean."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class HttpConfig:
    """HTTP call configuration."""

    json_indent: int = 2
    log_traffic: bool = False  # route request/response logs to structlog when no callback is given


@dataclass
class RestCallConfig:
    """Main Restcall configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    http: HttpConfig = field(default_factory=HttpConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.restcall/config.yaml")


def get_default_config() -> RestCallConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        RestCallConfig: Default configuration object
    """
    return RestCallConfig(
        logging=LoggingConfig(level="INFO", file="", json_format=True),
        http=HttpConfig(json_indent=2, log_traffic=False),
    )


def load_config(config_path: Optional[str] = None) -> RestCallConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        RestCallConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        )
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        )

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping at the top level"
        )

    config_data = _expand_env_vars(config_data)
    logger.debug("Expanded environment variables in configuration")

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
        logger.info(f"Successfully loaded and validated configuration from {config_path}")
        return config
    except (InvalidConfigurationError, TypeError, ValueError, AttributeError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        )


def _build_config_from_dict(config_data: Dict[str, Any]) -> RestCallConfig:
    """
    Build RestCallConfig from dictionary loaded from YAML.

    Merges user configuration with defaults.
    """
    default_config = get_default_config()

    logging_data = config_data.get('logging') or {}
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=os.path.expanduser(
            logging_data.get('file', default_config.logging.file) or ""
        ),
        json_format=_as_bool(
            logging_data.get('json_format', default_config.logging.json_format)
        ),
    )

    http_data = config_data.get('http') or {}
    http = HttpConfig(
        json_indent=int(http_data.get('json_indent', default_config.http.json_indent)),
        log_traffic=_as_bool(http_data.get('log_traffic', default_config.http.log_traffic)),
    )

    return RestCallConfig(logging=logging, http=http)


def _validate_config(config: RestCallConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    if config.http.json_indent < 0:
        raise InvalidConfigurationError(
            f"json_indent cannot be negative, got {config.http.json_indent}"
        )


def configure_logging(config: RestCallConfig) -> None:
    """Apply the logging section of a configuration via setup_logging."""
    setup_logging(
        level=config.logging.level,
        log_file=config.logging.file or None,
        json_format=config.logging.json_format,
    )
