"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, human-readable or JSON)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from sitecraft.core.config import get_settings

if TYPE_CHECKING:
    from sitecraft.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    - LOG_JSON overrides either choice

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from sitecraft.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=settings.use_json_logs, level=level)
