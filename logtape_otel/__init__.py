"""logtape-otel - forward structured application log records to OpenTelemetry.

Records carry a category path, a templated message (alternating literal text
and values), a property bag, a level and a millisecond timestamp. The sink
converts each one into an OpenTelemetry log record (severity, body,
``attributes.*`` plus ``category``, timestamp) and emits it through a logger
provider, by default one exporting over OTLP/HTTP.

Quick Start:
    >>> import logging
    >>> from logtape_otel import OpenTelemetryHandler, get_open_telemetry_sink
    >>>
    >>> sink = get_open_telemetry_sink(service_name="checkout")
    >>> logging.getLogger().addHandler(OpenTelemetryHandler(sink))
    >>> logging.getLogger("app.db").info("Connected to {host}", extra={"host": "db-1"})

Environment Variables:
    - OTEL_SERVICE_NAME: service name when none is passed explicitly
    - OTEL_EXPORTER_OTLP_*: endpoint/headers, read by the OTLP exporter
"""

from ._attributes import to_attributes
from ._body import join_body, to_body
from ._diagnostics import (
    DIAGNOSTIC_CATEGORY,
    DiagLoggerAdapter,
    DiagnosticsHandler,
    get_diag_logger,
    reset_diag_logger,
    set_diag_logger,
)
from ._logging_bridge import OpenTelemetryHandler, to_application_record
from ._provider import LoggerProviderLike, ProviderHandle, create_default_provider
from ._severity import map_severity
from ._sink import OpenTelemetrySink, SinkOptions, get_open_telemetry_sink
from ._stringify import stringify
from ._template import escape_template, parse_message_template
from ._types import (
    UNDEFINED,
    ApplicationLogRecord,
    LogLevel,
    MessageMode,
    RenderMode,
    TelemetryRecord,
)
from ._version import __version__
from .logging import LoggingConfig, get_logger, setup_logging
from .settings import settings

__all__ = [
    # Config/Settings
    "settings",
    # Logging
    "get_logger",
    "LoggingConfig",
    "setup_logging",
    "OpenTelemetryHandler",
    "to_application_record",
    # Records
    "ApplicationLogRecord",
    "TelemetryRecord",
    "LogLevel",
    "MessageMode",
    "RenderMode",
    "UNDEFINED",
    # Sink
    "OpenTelemetrySink",
    "SinkOptions",
    "get_open_telemetry_sink",
    "LoggerProviderLike",
    "ProviderHandle",
    "create_default_provider",
    # Conversion
    "stringify",
    "to_attributes",
    "to_body",
    "join_body",
    "map_severity",
    "parse_message_template",
    "escape_template",
    # Diagnostics
    "DIAGNOSTIC_CATEGORY",
    "DiagLoggerAdapter",
    "DiagnosticsHandler",
    "get_diag_logger",
    "set_diag_logger",
    "reset_diag_logger",
    "__version__",
]
