"""Logging infrastructure for logtape-otel.

The application logging facility is the standard library ``logging`` module.
A category path maps onto the dotted logger hierarchy, so ``("app", "db")``
is the logger ``app.db``.

Key components:
    get_logger: Factory for category loggers
    setup_logging: Initialize logging configuration from YAML or defaults
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from logtape_otel.logging import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("Processing started")
"""

from .logging_config import LoggingConfig, category_to_name, get_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "category_to_name",
    "get_logger",
    "setup_logging",
]
