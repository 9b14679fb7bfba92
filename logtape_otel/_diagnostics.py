"""Bridge for OpenTelemetry's own diagnostics.

OpenTelemetry Python reports its internal warnings and errors through the
standard library logger named ``opentelemetry``. ``set_diag_logger()``
attaches a ``DiagnosticsHandler`` there that forwards every record to a
``DiagLoggerAdapter``, which re-logs it as an application record under
``logtape.meta.otel``. The sink drops that category, so diagnostics never
loop back into the exporter that produced them.

The install is process-wide and the last call wins.
"""

import logging
from typing import Any, Final

from ._template import escape_template
from .logging import get_logger

DIAGNOSTIC_CATEGORY: Final = ("logtape", "meta", "otel")
BACKEND_LOGGER_NAME: Final = "opentelemetry"

logger = get_logger(__name__)


class DiagLoggerAdapter:
    """Forwards backend diagnostics to the application logger for ``DIAGNOSTIC_CATEGORY``.

    Each call logs ``"<escaped msg>: {values}"`` with the extra positional
    values as the ``values`` property. Braces in ``msg`` are doubled so
    backend text is never parsed as a placeholder.
    """

    def __init__(self) -> None:
        self.logger = get_logger(DIAGNOSTIC_CATEGORY)

    def _log(self, level: int, msg: str, values: tuple[Any, ...]) -> None:
        self.logger.log(level, f"{escape_template(msg)}: {{values}}", extra={"values": values})

    def error(self, msg: str, *values: Any) -> None:
        self._log(logging.ERROR, msg, values)

    def warn(self, msg: str, *values: Any) -> None:
        self._log(logging.WARNING, msg, values)

    def info(self, msg: str, *values: Any) -> None:
        self._log(logging.INFO, msg, values)

    def debug(self, msg: str, *values: Any) -> None:
        self._log(logging.DEBUG, msg, values)

    def verbose(self, msg: str, *values: Any) -> None:
        self._log(logging.DEBUG, msg, values)


class DiagnosticsHandler(logging.Handler):
    """Logging handler that routes backend log records into a ``DiagLoggerAdapter``."""

    def __init__(self, adapter: DiagLoggerAdapter, level: int = logging.NOTSET) -> None:
        super().__init__(level=level)
        self.adapter = adapter

    def emit(self, record: logging.LogRecord) -> None:
        """Forward to the adapter method matching the record level."""
        try:
            values: tuple[Any, ...] = ()
            if record.exc_info and record.exc_info[1] is not None:
                values = (record.exc_info[1],)
            if record.levelno >= logging.ERROR:
                self.adapter.error(record.getMessage(), *values)
            elif record.levelno >= logging.WARNING:
                self.adapter.warn(record.getMessage(), *values)
            elif record.levelno >= logging.INFO:
                self.adapter.info(record.getMessage(), *values)
            elif record.levelno >= logging.DEBUG:
                self.adapter.debug(record.getMessage(), *values)
            else:
                self.adapter.verbose(record.getMessage(), *values)
        except Exception:
            self.handleError(record)


class _Installation:
    """Process-wide diagnostics install, with the logger state it replaced."""

    def __init__(self, handler: DiagnosticsHandler, level: int, propagate: bool) -> None:
        self.handler = handler
        self.previous_level = level
        self.previous_propagate = propagate


_installation: _Installation | None = None


def get_diag_logger() -> DiagLoggerAdapter | None:
    """Return the installed adapter, or None."""
    if _installation is None:
        return None
    return _installation.handler.adapter


def set_diag_logger(adapter: DiagLoggerAdapter, level: int = logging.DEBUG) -> DiagLoggerAdapter | None:
    """Install ``adapter`` as the backend's diagnostic sink.

    Replaces any previous install. Backend records at or above ``level``
    go only to the adapter; they no longer propagate to ancestor handlers.

    Returns:
        The previously installed adapter, or None.
    """
    global _installation  # noqa: PLW0603

    backend_logger = logging.getLogger(BACKEND_LOGGER_NAME)
    previous = _installation
    if previous is not None:
        backend_logger.removeHandler(previous.handler)
        logger.debug("Replacing previously installed OpenTelemetry diagnostic logger")
        saved_level, saved_propagate = previous.previous_level, previous.previous_propagate
    else:
        saved_level, saved_propagate = backend_logger.level, backend_logger.propagate

    handler = DiagnosticsHandler(adapter)
    backend_logger.addHandler(handler)
    backend_logger.setLevel(level)
    backend_logger.propagate = False
    _installation = _Installation(handler, saved_level, saved_propagate)
    return previous.handler.adapter if previous is not None else None


def reset_diag_logger() -> None:
    """Remove the installed adapter and restore the backend logger."""
    global _installation  # noqa: PLW0603

    if _installation is None:
        return
    backend_logger = logging.getLogger(BACKEND_LOGGER_NAME)
    backend_logger.removeHandler(_installation.handler)
    backend_logger.setLevel(_installation.previous_level)
    backend_logger.propagate = _installation.previous_propagate
    _installation = None
