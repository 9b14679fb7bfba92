"""Logging bridge: feeds standard library log records into the OpenTelemetry sink.

``OpenTelemetryHandler`` is an ordinary ``logging.Handler``. Attach it to any
logger (usually the root) and every record it sees becomes an
``ApplicationLogRecord``:

- the logger name is the category (``app.db`` -> ``("app", "db")``)
- ``extra=`` fields are the properties
- with properties present, the message is a brace template (``"user {id}"``)

It can also be declared in a ``dictConfig``/YAML file; keyword arguments other
than ``level`` are passed to ``get_open_telemetry_sink()``::

    handlers:
      otel:
        class: logtape_otel.OpenTelemetryHandler
        service_name: checkout
        object_renderer: json
"""

import logging
from typing import Any, Final

from ._sink import OpenTelemetrySink, get_open_telemetry_sink
from ._template import parse_message_template
from ._types import ApplicationLogRecord, LogLevel

_RESERVED_ATTRS: Final = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

_exception_formatter = logging.Formatter()


def _to_level(levelno: int) -> LogLevel:
    if levelno >= logging.CRITICAL:
        return LogLevel.FATAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    if levelno >= logging.INFO:
        return LogLevel.INFO
    if levelno >= logging.DEBUG:
        return LogLevel.DEBUG
    return LogLevel.TRACE


def _get_properties(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}


def _get_message(record: logging.LogRecord, properties: dict[str, Any], *, template: bool) -> tuple[Any, ...]:
    if record.args:
        return (record.getMessage(),)
    if not isinstance(record.msg, str):
        return ("", record.msg)
    if template:
        return parse_message_template(record.msg, properties)
    return (record.msg,)


def to_application_record(record: logging.LogRecord) -> ApplicationLogRecord:
    """Convert a standard library record into an ``ApplicationLogRecord``."""
    properties = _get_properties(record)
    # Only records logged with extra= carry a brace template
    template = bool(properties)
    if record.exc_info:
        properties["exception"] = _exception_formatter.formatException(record.exc_info)
    message = _get_message(record, properties, template=template)
    return ApplicationLogRecord(
        category=tuple(record.name.split(".")),
        level=_to_level(record.levelno).value,
        message=message,
        properties=properties,
        timestamp=record.created * 1000,
    )


class OpenTelemetryHandler(logging.Handler):
    """Logging handler that forwards every record to an ``OpenTelemetrySink``."""

    def __init__(
        self,
        sink: OpenTelemetrySink | None = None,
        level: int | str = logging.NOTSET,
        **sink_options: Any,
    ) -> None:
        super().__init__(level=level)
        self.sink = sink if sink is not None else get_open_telemetry_sink(**sink_options)

    def emit(self, record: logging.LogRecord) -> None:
        """Convert and hand the record to the sink."""
        try:
            self.sink(to_application_record(record))
        except Exception:
            self.handleError(record)
