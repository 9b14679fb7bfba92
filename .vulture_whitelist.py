"""Vulture whitelist: methods called by frameworks, not direct code."""

# logging.Handler.emit, called by the logging module
from logtape_otel import DiagnosticsHandler, OpenTelemetryHandler

DiagnosticsHandler.emit
OpenTelemetryHandler.emit

# Async context manager protocol, called by Python
from logtape_otel import OpenTelemetrySink

OpenTelemetrySink.__aenter__
OpenTelemetrySink.__aexit__
