"""Shared test helpers."""

import logging
from typing import TypeAlias

from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import InMemoryLogExporter

OtelEnv: TypeAlias = tuple[InMemoryLogExporter, LoggerProvider]


class RecordCollector(logging.Handler):
    """Handler keeping every record it receives."""

    def __init__(self) -> None:
        super().__init__(level=logging.NOTSET)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)
