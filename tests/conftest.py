"""Common test fixtures for logtape-otel."""

import logging
from collections.abc import Generator

import pytest
from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import InMemoryLogExporter, SimpleLogRecordProcessor

from logtape_otel import reset_diag_logger
from tests.support.helpers import OtelEnv, RecordCollector


@pytest.fixture
def otel_env() -> Generator[OtelEnv]:
    """Isolated OTel LoggerProvider with in-memory exporter."""
    exporter = InMemoryLogExporter()
    provider = LoggerProvider(shutdown_on_exit=False)
    provider.add_log_record_processor(SimpleLogRecordProcessor(exporter))
    yield exporter, provider
    provider.shutdown()


@pytest.fixture(autouse=True)
def reset_diagnostics() -> Generator[None]:
    """Undo any process-wide diagnostics install made by a test."""
    yield
    reset_diag_logger()


@pytest.fixture
def diag_records() -> Generator[list[logging.LogRecord]]:
    """Records logged under the logtape.meta.otel category."""
    collector = RecordCollector()
    diag_logger = logging.getLogger("logtape.meta.otel")
    previous_level = diag_logger.level
    diag_logger.setLevel(logging.DEBUG)
    diag_logger.addHandler(collector)
    yield collector.records
    diag_logger.removeHandler(collector)
    diag_logger.setLevel(previous_level)
