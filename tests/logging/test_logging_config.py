"""Tests for logging configuration."""

import logging
import os
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

from logtape_otel.logging import LoggingConfig, category_to_name, get_logger, setup_logging


class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_default_config_path_from_env(self):
        """Test getting config path from environment."""
        with patch.dict(os.environ, {"LOGTAPE_OTEL_LOGGING_CONFIG": "/path/to/config.yml"}):
            config = LoggingConfig()
            assert config.config_path == Path("/path/to/config.yml")

    def test_no_config_path_returns_none(self):
        """Test that no env vars results in None config path."""
        with patch.dict(os.environ, clear=True):
            config = LoggingConfig()
            assert config.config_path is None

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        """Test loading config from YAML file."""
        config_file = tmp_path / "logging.yml"
        config_file.write_text("""
version: 1
disable_existing_loggers: false
handlers:
  console:
    class: logging.StreamHandler
""")

        config = LoggingConfig(config_path=config_file)
        loaded = config.load_config()

        assert loaded["version"] == 1
        assert loaded["disable_existing_loggers"] is False
        assert "console" in loaded["handlers"]

    def test_load_default_config_when_no_file(self):
        """Test loading default config when no file exists."""
        with patch.dict(os.environ, clear=True):
            loaded = LoggingConfig().load_config()

        assert loaded["version"] == 1
        assert "formatters" in loaded
        assert "handlers" in loaded
        assert loaded["loggers"]["logtape_otel"]["level"] == "INFO"
        assert loaded["loggers"]["logtape.meta"]["level"] == "WARNING"

    def test_default_level_from_env(self):
        """Test LOGTAPE_OTEL_LOG_LEVEL overrides the package level."""
        with patch.dict(os.environ, {"LOGTAPE_OTEL_LOG_LEVEL": "DEBUG"}, clear=True):
            loaded = LoggingConfig().load_config()
        assert loaded["loggers"]["logtape_otel"]["level"] == "DEBUG"

    def test_config_cached(self):
        """Test configuration is loaded once per instance."""
        config = LoggingConfig()
        assert config.load_config() is config.load_config()

    @patch("logging.config.dictConfig")
    def test_apply_config(self, mock_dict_config: Mock) -> None:
        """Test applying logging configuration."""
        config = LoggingConfig()
        config.apply()

        mock_dict_config.assert_called_once()
        call_args = mock_dict_config.call_args[0][0]
        assert call_args["version"] == 1


class TestSetupLogging:
    """Test setup_logging function."""

    @patch("logtape_otel.logging.logging_config.LoggingConfig.apply")
    def test_setup_logging_basic(self, mock_apply: Mock) -> None:
        """Test basic setup_logging call."""
        setup_logging()
        mock_apply.assert_called_once()

    @patch("logtape_otel.logging.logging_config.LoggingConfig.apply")
    def test_setup_logging_with_level(self, mock_apply: Mock) -> None:
        """Test setup_logging with custom level."""
        loggers = [logging.getLogger("logtape_otel"), logging.getLogger("logtape.meta")]
        previous = [logger.level for logger in loggers]
        try:
            setup_logging(level="DEBUG")
            assert all(logger.level == logging.DEBUG for logger in loggers)
        finally:
            for logger, level in zip(loggers, previous):
                logger.setLevel(level)

    @patch("logtape_otel.logging.logging_config.LoggingConfig")
    def test_setup_logging_with_config_path(self, mock_config_class: Mock, tmp_path: Path) -> None:
        """Test setup_logging with custom config path."""
        config_file = tmp_path / "custom.yml"
        mock_instance = MagicMock()
        mock_config_class.return_value = mock_instance

        setup_logging(config_path=config_file)

        mock_config_class.assert_called_once_with(config_file)
        mock_instance.apply.assert_called_once()


class TestGetLogger:
    """Test get_logger function."""

    def test_dotted_name(self):
        assert get_logger("app.db") is logging.getLogger("app.db")

    def test_category_sequence(self):
        assert get_logger(("logtape", "meta", "otel")).name == "logtape.meta.otel"

    def test_category_list(self):
        assert get_logger(["app"]) is logging.getLogger("app")

    def test_category_to_name(self):
        assert category_to_name(["a", "b", "c"]) == "a.b.c"
        assert category_to_name("a.b") == "a.b"
