"""Console logging adapter.

Writes structured log lines to stdout through structlog. Development uses the
colored console renderer; every other environment gets one JSON object per
line. get_logger() in the container picks the renderer and level from
Settings.

ConsoleAdapter satisfies LoggerProtocol structurally (PEP 544); it does not
inherit from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    """Flatten an exception into error_type/error_message fields."""
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """structlog-backed logger for Sitecraft.

    Args:
        use_json (bool): Render JSON lines instead of the console format.
        level (str): Minimum level name, case-insensitive ("debug", "INFO").

    Raises:
        KeyError: If level is not a logging level name.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        min_level = logging.getLevelNamesMapping()[level.upper()]

        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.format_exc_info,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR level.

        Args:
            message (str): Event name, e.g. "event_handler_failed".
            error (Exception | None): Rendered as error_type and error_message.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return an adapter that adds context to every line it logs.

        The receiver is left unchanged and structlog is not reconfigured.
        """
        bound = object.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)
