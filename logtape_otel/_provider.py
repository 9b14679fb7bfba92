"""Logger provider capabilities and the default OTLP provider.

Any object with ``get_logger(name, version)`` can back the sink. Two optional
capabilities are detected structurally: ``add_log_record_processor`` and
``shutdown`` (synchronous or a coroutine function).
"""

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from opentelemetry._logs import Logger
from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter
from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import SimpleLogRecordProcessor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource

from .logging import get_logger
from .settings import settings

logger = get_logger(__name__)


class LoggerProviderLike(Protocol):
    """Minimum capability the sink needs from a provider."""

    def get_logger(self, name: str, version: str | None = None) -> Logger:
        """Return a logger for the given instrumentation scope."""
        ...


@runtime_checkable
class SupportsAddProcessor(Protocol):
    """Provider that accepts record processors."""

    def add_log_record_processor(self, log_record_processor: Any) -> None:
        """Register a processor."""
        ...


@runtime_checkable
class SupportsShutdown(Protocol):
    """Provider that can flush and stop."""

    def shutdown(self) -> Any:
        """Flush buffered records and stop."""
        ...


@dataclass(frozen=True, slots=True)
class ProviderHandle:
    """The provider backing a sink.

    ``owned`` is True when the provider was built by ``create_default_provider``
    and False when the caller supplied it.
    """

    provider: Any
    owned: bool

    @property
    def can_add_processor(self) -> bool:
        """Whether processors can be registered on the provider."""
        return isinstance(self.provider, SupportsAddProcessor)

    @property
    def can_shutdown(self) -> bool:
        """Whether the provider exposes a shutdown operation."""
        return isinstance(self.provider, SupportsShutdown)

    async def shutdown(self) -> None:
        """Delegate to the provider's shutdown; no-op if it has none."""
        if not isinstance(self.provider, SupportsShutdown):
            return
        shutdown = self.provider.shutdown
        if inspect.iscoroutinefunction(shutdown):
            await shutdown()
            return
        result = await asyncio.to_thread(shutdown)
        if inspect.isawaitable(result):
            await result


def create_default_provider(
    service_name: str | None = None,
    exporter_config: dict[str, Any] | None = None,
) -> LoggerProvider:
    """Build an SDK provider exporting synchronously over OTLP/HTTP.

    The resource merges the SDK's environment-derived defaults with
    ``service.name`` taken from ``service_name`` or, failing that, from
    ``OTEL_SERVICE_NAME``.
    """
    name = service_name or settings.otel_service_name
    resource = Resource.create({SERVICE_NAME: name} if name else {})
    provider = LoggerProvider(resource=resource)
    exporter = OTLPLogExporter(**(exporter_config or {}))
    provider.add_log_record_processor(SimpleLogRecordProcessor(exporter))
    logger.debug(f"Created default OTLP logger provider (service.name={name or '<sdk default>'})")
    return provider


def resolve_provider(
    logger_provider: Any | None,
    *,
    service_name: str | None = None,
    exporter_config: dict[str, Any] | None = None,
) -> ProviderHandle:
    """Use the supplied provider, or build the default one when absent."""
    if logger_provider is not None:
        return ProviderHandle(provider=logger_provider, owned=False)
    return ProviderHandle(
        provider=create_default_provider(service_name, exporter_config),
        owned=True,
    )
