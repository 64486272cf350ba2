"""
===================================================
Core infrastructure package for the statement builder.
===================================================

This package provides centralized configuration management, logging
infrastructure and the application exception hierarchy.

Modules:
    config: Configuration management from environment variables
    logger: Centralized logging configuration and utilities
    exceptions: Application exceptions carrying status codes

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Connecting to {config.db_host}")
"""

__version__ = "0.1.0"
__all__ = [
    'get_logger', 'setup_logging', 'config', 'Config',
    'ApplicationError', 'BadRequest', 'Forbidden', 'NotFound', 'Conflict',
    'InternalServerError',
]

from core.config import Config, config
from core.exceptions import (
    ApplicationError,
    BadRequest,
    Conflict,
    Forbidden,
    InternalServerError,
    NotFound,
)
from core.logger import get_logger, setup_logging
