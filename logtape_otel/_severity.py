"""Application level to OpenTelemetry severity mapping."""

from opentelemetry._logs import SeverityNumber

from ._types import LogLevel

_SEVERITY_BY_LEVEL: dict[str, SeverityNumber] = {
    LogLevel.DEBUG: SeverityNumber.DEBUG,
    LogLevel.INFO: SeverityNumber.INFO,
    LogLevel.WARNING: SeverityNumber.WARN,
    LogLevel.ERROR: SeverityNumber.ERROR,
    LogLevel.FATAL: SeverityNumber.FATAL,
}


def map_severity(level: str) -> SeverityNumber:
    """Return the severity for a level; unknown levels (``trace`` included) map to UNSPECIFIED."""
    return _SEVERITY_BY_LEVEL.get(level, SeverityNumber.UNSPECIFIED)
