"""Logging configuration for logtape-otel.

This module configures the standard library logging system, which is the
application logging facility the OpenTelemetry sink hangs off. It supports
YAML-based configuration and programmatic setup with sensible defaults.

Key features:
- YAML configuration file support
- Environment variable overrides
- Category-based loggers (``("app", "db")`` is the logger ``app.db``)

Usage:
    >>> from logtape_otel.logging import get_logger
    >>> logger = get_logger(("app", "db"))
    >>> logger.info("Connected to {host}", extra={"host": "db-1"})

Environment variables:
    LOGTAPE_OTEL_LOGGING_CONFIG: Path to custom logging.yml
    LOGTAPE_OTEL_LOG_LEVEL: Default log level for the package (INFO, DEBUG, etc.)
"""

import logging
import logging.config
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

# Default log levels for the package's own loggers
DEFAULT_LOG_LEVELS = {
    "logtape_otel": "INFO",
    "logtape.meta": "WARNING",
}


class LoggingConfig:
    """Manages logging configuration for the package.

    Configuration precedence:
        1. Explicit config_path parameter
        2. LOGTAPE_OTEL_LOGGING_CONFIG environment variable
        3. Default configuration

    Example:
        >>> config = LoggingConfig()
        >>> config.apply()
        >>>
        >>> config = LoggingConfig(Path("custom_logging.yml"))
        >>> config.apply()

    Note:
        Configuration is lazy-loaded and cached after first access.
    """

    def __init__(self, config_path: Path | None = None):
        """Initialize logging configuration.

        Args:
            config_path: Optional path to YAML configuration file.
                        If None, checks the environment and falls back
                        to the default configuration.
        """
        self.config_path = config_path or self._get_default_config_path()
        self._config: dict[str, Any] | None = None

    @staticmethod
    def _get_default_config_path() -> Path | None:
        """Get default config path from the environment, or None."""
        if env_path := os.environ.get("LOGTAPE_OTEL_LOGGING_CONFIG"):
            return Path(env_path)
        return None

    def load_config(self) -> dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in ``logging.config.dictConfig`` format.

        Note:
            Configuration is cached after first load. Create a new
            LoggingConfig instance to reload from disk.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        """Get default logging configuration.

        Console output for the package loggers at LOGTAPE_OTEL_LOG_LEVEL
        (INFO by default). Backend diagnostics forwarded under
        ``logtape.meta.otel`` are shown from WARNING up.

        Default format:
            "HH:MM:SS.mmm | LEVEL | logger.name - message"
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "logtape_otel": {
                    "level": os.environ.get("LOGTAPE_OTEL_LOG_LEVEL", DEFAULT_LOG_LEVELS["logtape_otel"]),
                    "handlers": ["console"],
                    "propagate": False,
                },
                "logtape.meta": {
                    "level": DEFAULT_LOG_LEVELS["logtape.meta"],
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }

    def apply(self):
        """Apply the configuration with ``logging.config.dictConfig``.

        Note:
            Multiple calls reconfigure logging.
        """
        logging.config.dictConfig(self.load_config())


_logging_config: LoggingConfig | None = None


def setup_logging(config_path: Path | None = None, level: str | None = None):
    """Set up logging for logtape-otel.

    Args:
        config_path: Optional path to YAML logging configuration file.
        level: Optional level override applied to the package loggers.

    Example:
        >>> setup_logging()
        >>> setup_logging(Path("/etc/myapp/logging.yml"))
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            logging.getLogger(logger_name).setLevel(level)


def category_to_name(category: str | Sequence[str]) -> str:
    """Return the dotted logger name for a category path."""
    if isinstance(category, str):
        return category
    return ".".join(category)


def get_logger(category: str | Sequence[str]) -> logging.Logger:
    """Get the logger for a category.

    Args:
        category: Dotted logger name (``__name__``) or a category path
                  such as ``("app", "db")``.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger = get_logger(["logtape", "meta", "otel"])
        >>> logger.name
        'logtape.meta.otel'

    Note:
        This never configures logging on first use. Host applications
        call setup_logging() themselves, or configure logging their own way.
    """
    return logging.getLogger(category_to_name(category))
