# mypy: disable-error-code="arg-type"
"""Domain event dispatcher factory.

Application-scoped singleton for domain event dispatch. Configures event
handlers at startup using registry-driven auto-wiring: every entry in
EVENT_REGISTRY names the handler method that serves it.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitecraft.domain.protocols.event_dispatcher_protocol import (
        DomainEventDispatcher,
    )


@lru_cache()
def get_event_dispatcher() -> "DomainEventDispatcher":
    """Get event dispatcher singleton (app-scoped).

    For each event in EVENT_REGISTRY:
        1. Compute the handler method name (handle_<handler_name>)
        2. Register LoggingEventHandler's method when requires_logging is set

    Mode-dependent behavior (Settings.events_strict_mode):
        - STRICT: RuntimeError at startup if a required handler is missing
        - GRACEFUL: skip the missing handler and log a warning

    Returns:
        Dispatcher implementing DomainEventDispatcher.

    Usage:
        dispatcher = get_event_dispatcher()
        await dispatcher.dispatch_events(page.domain_events)
    """
    from sitecraft.core.config import get_settings
    from sitecraft.core.container.infrastructure import get_logger
    from sitecraft.domain.events.registry import EVENT_REGISTRY
    from sitecraft.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from sitecraft.infrastructure.events.in_memory_event_dispatcher import (
        InMemoryDomainEventDispatcher,
    )

    strict_mode = get_settings().events_strict_mode
    logger = get_logger()

    dispatcher = InMemoryDomainEventDispatcher(logger=logger)
    logging_handler = LoggingEventHandler(logger=logger)

    for metadata in EVENT_REGISTRY:
        if not metadata.requires_logging:
            continue

        method_name = metadata.handler_method
        handler_method = getattr(logging_handler, method_name, None)
        if handler_method is None:
            if strict_mode:
                raise RuntimeError(
                    f"EVENTS_STRICT_MODE: Missing required logging handler\n"
                    f"Event: {metadata.event_type}\n"
                    f"Expected method: LoggingEventHandler.{method_name}\n\n"
                    f"Fix: Implement handler in "
                    f"sitecraft/infrastructure/events/handlers/logging_event_handler.py\n"
                    f"Or disable strict mode: Set EVENTS_STRICT_MODE=false in .env"
                )
            logger.warning(
                "Missing logging handler (graceful mode)",
                event_class=metadata.event_type,
                handler_method=method_name,
            )
            continue

        dispatcher.register(metadata.event_type, handler_method)

    return dispatcher
