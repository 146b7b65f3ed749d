"""In-memory domain event dispatcher.

Implements DomainEventDispatcher with a dictionary-based registry keyed by
the event-type string. Suitable for single-process deployments; events are
not persisted.

Architecture:
    - Implements DomainEventDispatcher (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type -> list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution per event (asyncio.gather)
    - Sequential delivery across events (dispatch_events)

Usage:
    >>> @lru_cache()
    >>> def get_event_dispatcher() -> DomainEventDispatcher:
    ...     return InMemoryDomainEventDispatcher(logger=get_logger())
    >>>
    >>> dispatcher.register("PagePublished", notify_subscribers)
    >>> await dispatcher.dispatch_events(page.domain_events)
"""

import asyncio
from collections import defaultdict
from collections.abc import Sequence

from sitecraft.domain.events.base_event import DomainEvent
from sitecraft.domain.protocols.event_dispatcher_protocol import EventHandler
from sitecraft.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryDomainEventDispatcher:
    """In-memory dispatcher with fail-open handler execution.

    NOT thread-safe (single-process async design).

    Attributes:
        _handlers: Event-type string -> registered async handlers, in
            registration order.
        _logger: Logger for dispatch tracing and handler failures.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def register(self, event_type: str, handler: EventHandler) -> None:
        """Register an async handler for an event type.

        Args:
            event_type: Event discriminant, e.g. "ComponentAdded". Matching is
                exact; no inheritance matching.
            handler: Async callable accepting the event.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    async def dispatch(self, event: DomainEvent) -> None:
        """Deliver an event to all handlers registered for its type.

        Handlers run concurrently. A handler exception is logged
        (event_handler_failed) and never propagates. No handlers is a no-op.

        Args:
            event: Domain event to deliver.
        """
        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            return

        self._logger.debug(
            "domain_event_dispatching",
            event_type=event.event_type,
            event_id=str(event.event_id),
            aggregate_id=str(event.aggregate_id),
            handler_count=len(handlers),
        )

        await asyncio.gather(*(self._run_handler(handler, event) for handler in handlers))

    async def _run_handler(self, handler: EventHandler, event: DomainEvent) -> None:
        """Await one handler, logging any exception it raises.

        The call itself sits inside the try, so a handler that raises before
        returning an awaitable is contained too.
        """
        try:
            await handler(event)
        except Exception as e:
            self._logger.error(
                "event_handler_failed",
                error=e,
                event_type=event.event_type,
                event_id=str(event.event_id),
                aggregate_id=str(event.aggregate_id),
                handler_name=getattr(handler, "__name__", repr(handler)),
            )

    async def dispatch_events(self, events: Sequence[DomainEvent]) -> None:
        """Deliver events one at a time, in order.

        All handlers of an event settle before the next event is dispatched.

        Args:
            events: Events in emission order.
        """
        for event in events:
            await self.dispatch(event)

    def get_registered_event_types(self) -> list[str]:
        """Event types with at least one handler, in first-registration order."""
        return [event_type for event_type, handlers in self._handlers.items() if handlers]

    def get_handler_count(self, event_type: str | None = None) -> int:
        """Count registered handlers.

        Args:
            event_type: Restrict the count to one type. None counts all.

        Returns:
            Number of registered handlers.
        """
        if event_type is not None:
            return len(self._handlers.get(event_type, []))
        return sum(len(handlers) for handlers in self._handlers.values())

    def clear(self) -> None:
        """Remove every registered handler."""
        self._handlers.clear()
