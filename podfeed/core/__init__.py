"""
Core functionality for podfeed.

This module provides the foundational components shared by the link parsers
and the feed builders: configuration, logging, and the error hierarchy.

Exported Components:
    CONFIG: dict
        Main configuration dictionary organized by category (api, builder,
        download, log, app).
    validate_config: callable
        Returns a list of warnings for missing or malformed settings.
    get_api_key: callable
        Returns the configured credential for a provider.
    get_logger: callable
        Function to obtain a logger instance for a specific module.
    setup_logger: callable
        Installs console and rotating file handlers on the 'podfeed' logger.

Example:
    >>> from podfeed.core import CONFIG, get_api_key, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> key = get_api_key("youtube")
    >>> timeout = CONFIG['builder']['timeout']
"""

from .config import CONFIG, get_api_key, validate_config
from .logger import get_logger, setup_exception_handler, setup_logger

__all__ = [
    "CONFIG",
    "get_api_key",
    "validate_config",
    "get_logger",
    "setup_logger",
    "setup_exception_handler",
]
