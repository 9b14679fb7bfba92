"""OpenTelemetry sink: converts application log records and emits them.

Example:
    >>> from logtape_otel import ApplicationLogRecord, get_open_telemetry_sink
    >>> sink = get_open_telemetry_sink(service_name="checkout", object_renderer="json")
    >>> sink(ApplicationLogRecord(
    ...     category=("app", "db"),
    ...     level="info",
    ...     message=("Connected to ", "db-1"),
    ...     properties={"host": "db-1"},
    ...     timestamp=1_700_000_000_000,
    ... ))
"""

import logging
import threading
from types import TracebackType
from typing import Any, Self

from opentelemetry.sdk.resources import Resource
from pydantic import BaseModel, ConfigDict, Field

from ._attributes import to_attributes
from ._body import join_body, to_body
from ._diagnostics import DIAGNOSTIC_CATEGORY, DiagLoggerAdapter, set_diag_logger
from ._provider import ProviderHandle, resolve_provider
from ._severity import map_severity
from ._types import ApplicationLogRecord, MessageMode, RenderMode, TelemetryRecord, ms_to_datetime
from ._version import PACKAGE_NAME, __version__
from .logging import get_logger

logger = get_logger(__name__)

# Set while a sink is inside the backend emit on this thread
_emission = threading.local()


class SinkOptions(BaseModel):
    """Options for ``OpenTelemetrySink``.

    Attributes:
        logger_provider: Provider to emit through. When None a provider with
                         an OTLP/HTTP exporter and a synchronous processor is
                         built from ``otlp_exporter_config`` and ``service_name``.
        message_type: ``string`` joins the body into one string, ``array``
                      keeps the fragment list.
        object_renderer: How non-primitive values are rendered.
        diagnostics: Route OpenTelemetry's own diagnostics to the
                     ``logtape.meta.otel`` logger (process-wide).
        otlp_exporter_config: Keyword arguments for ``OTLPLogExporter``.
                              Ignored when ``logger_provider`` is given.
        service_name: ``service.name`` resource attribute. Falls back to
                      ``OTEL_SERVICE_NAME``. Ignored when ``logger_provider``
                      is given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    logger_provider: Any | None = None
    message_type: MessageMode = MessageMode.STRING
    object_renderer: RenderMode = RenderMode.INSPECT
    diagnostics: bool = False
    otlp_exporter_config: dict[str, Any] = Field(default_factory=dict)
    service_name: str | None = None


def is_diagnostic_category(category: tuple[str, ...]) -> bool:
    """Whether the first three segments are ``logtape``, ``meta``, ``otel``."""
    return category[: len(DIAGNOSTIC_CATEGORY)] == DIAGNOSTIC_CATEGORY


class OpenTelemetrySink:
    """Per-record entry point forwarding application records to OpenTelemetry.

    The sink never shuts the provider down by itself; call ``aclose()`` or use
    ``async with`` to flush and stop it.
    """

    def __init__(self, options: SinkOptions | None = None) -> None:
        self.options = options or SinkOptions()
        if self.options.diagnostics:
            set_diag_logger(DiagLoggerAdapter(), logging.DEBUG)
            logger.debug("OpenTelemetry diagnostics routed to logtape.meta.otel")

        self._handle: ProviderHandle = resolve_provider(
            self.options.logger_provider,
            service_name=self.options.service_name,
            exporter_config=self.options.otlp_exporter_config,
        )
        self._logger = self._handle.provider.get_logger(PACKAGE_NAME, __version__)
        resource = getattr(self._logger, "resource", None)
        self._resource = resource if isinstance(resource, Resource) else Resource.get_empty()

    @property
    def provider(self) -> Any:
        """The active logger provider."""
        return self._handle.provider

    @property
    def owns_provider(self) -> bool:
        """True when the provider was built by the sink."""
        return self._handle.owned

    @property
    def can_shutdown(self) -> bool:
        """Whether ``aclose()`` has a provider shutdown to delegate to."""
        return self._handle.can_shutdown

    @property
    def emitting(self) -> bool:
        """True while any sink on the current thread is handing a record to the backend."""
        return getattr(_emission, "active", False)

    def convert(self, record: ApplicationLogRecord) -> TelemetryRecord:
        """Normalize an application record. Pure; raises if a value cannot be rendered."""
        renderer = self.options.object_renderer
        attributes = to_attributes(record.properties, renderer)
        attributes["category"] = list(record.category)
        body = to_body(record.message, renderer)
        return TelemetryRecord(
            severity_number=map_severity(record.level),
            severity_text=record.level,
            body=body if self.options.message_type == MessageMode.ARRAY else join_body(body),
            attributes=attributes,
            timestamp=ms_to_datetime(record.timestamp),
        )

    def handle(self, record: ApplicationLogRecord) -> None:
        """Convert and emit one record.

        Records in the diagnostic category are dropped, and so is anything
        logged on this thread while a synchronous exporter is running.
        """
        if is_diagnostic_category(record.category) or self.emitting:
            return
        telemetry = self.convert(record)
        _emission.active = True
        try:
            self._logger.emit(telemetry.to_log_record(self._resource))
        finally:
            _emission.active = False

    __call__ = handle

    async def aclose(self) -> None:
        """Flush and shut down the provider, if it supports shutdown."""
        if not self.can_shutdown:
            return
        logger.debug(f"Shutting down logger provider {type(self.provider).__name__}")
        await self._handle.shutdown()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def get_open_telemetry_sink(options: SinkOptions | None = None, **overrides: Any) -> OpenTelemetrySink:
    """Create a sink that forwards application log records to OpenTelemetry.

    Args:
        options: Complete options. Keyword overrides are applied on top.
        **overrides: Any ``SinkOptions`` field.

    Example:
        >>> sink = get_open_telemetry_sink(logger_provider=provider, message_type="array")
    """
    if options is None:
        options = SinkOptions(**overrides)
    elif overrides:
        options = SinkOptions(**{**dict(options), **overrides})
    return OpenTelemetrySink(options)
