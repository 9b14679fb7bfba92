"""Record models and enums shared by the converters and the sink."""

from datetime import UTC, datetime, timedelta
from enum import StrEnum
from typing import Any, Final

from opentelemetry._logs import SeverityNumber
from opentelemetry.sdk._logs import LogRecord
from opentelemetry.sdk.resources import Resource
from pydantic import BaseModel, ConfigDict, Field

_EPOCH: Final = datetime(1970, 1, 1, tzinfo=UTC)


class _Undefined:
    """Marker for a value that was never provided (e.g. a missing template property)."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


def _undefined_to_none(values: list[Any] | tuple[Any, ...]) -> list[Any] | tuple[Any, ...]:
    if not any(value is UNDEFINED for value in values):
        return values
    return [None if value is UNDEFINED else value for value in values]


class LogLevel(StrEnum):
    """Application log levels."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class RenderMode(StrEnum):
    """How non-primitive values are rendered into attributes and message bodies."""

    JSON = "json"
    INSPECT = "inspect"


class MessageMode(StrEnum):
    """Shape of the emitted body: one joined string or the raw fragment list."""

    STRING = "string"
    ARRAY = "array"


class ApplicationLogRecord(BaseModel):
    """A structured log record as produced by the application logging facility.

    ``message`` alternates literal text (even indices) and interpolated values
    (odd indices). ``timestamp`` is in milliseconds since the epoch.
    """

    model_config = ConfigDict(frozen=True)

    category: tuple[str, ...]
    level: str
    message: tuple[Any, ...] = ()
    properties: dict[str, Any] = Field(default_factory=dict)
    timestamp: int | float


class TelemetryRecord(BaseModel):
    """A log record normalized for the OpenTelemetry logs data model."""

    model_config = ConfigDict(frozen=True)

    severity_number: SeverityNumber
    severity_text: str
    body: str | list[Any]
    attributes: dict[str, Any]
    timestamp: datetime

    @property
    def time_unix_nano(self) -> int:
        """Timestamp as integer nanoseconds since the epoch."""
        return (self.timestamp - _EPOCH) // timedelta(microseconds=1) * 1_000

    def to_log_record(self, resource: Resource | None = None) -> LogRecord:
        """Build the OpenTelemetry SDK record handed to a logger's ``emit``.

        ``UNDEFINED`` inside array bodies and array attributes becomes ``None``,
        the only null the SDK accepts in a sequence.
        """
        body = self.body
        if isinstance(body, list):
            body = _undefined_to_none(body)
        attributes = {
            key: _undefined_to_none(value) if isinstance(value, (list, tuple)) else value
            for key, value in self.attributes.items()
        }
        return LogRecord(
            timestamp=self.time_unix_nano,
            severity_text=self.severity_text,
            severity_number=self.severity_number,
            body=body,
            resource=resource,
            attributes=attributes,
        )


def ms_to_datetime(timestamp: int | float) -> datetime:
    """Convert a millisecond epoch timestamp to an aware UTC datetime."""
    return _EPOCH + timedelta(milliseconds=timestamp)


def datetime_to_ms(value: datetime) -> int:
    """Convert an aware datetime back to whole milliseconds since the epoch."""
    return (value - _EPOCH) // timedelta(milliseconds=1)
