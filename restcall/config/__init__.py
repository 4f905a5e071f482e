"""
Configuration management for Restcall.

Handles loading and validation of configuration files.
"""

from restcall.config.settings import (
    HttpConfig,
    LoggingConfig,
    RestCallConfig,
    configure_logging,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "HttpConfig",
    "LoggingConfig",
    "RestCallConfig",
    "configure_logging",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
