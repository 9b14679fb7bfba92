"""Distribution name and version reported as the OpenTelemetry instrumentation scope."""

PACKAGE_NAME = "logtape-otel"
__version__ = "0.1.0"
