"""Domain event dispatcher protocol (port).

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface
    - Infrastructure provides InMemoryDomainEventDispatcher

Delivery semantics:
    - Handlers are registered per event-type string ("PageCreated"); many
      handlers may share one type
    - dispatch(event) runs all handlers for the event concurrently; a
      failing handler is logged and never affects its siblings or the caller
    - dispatch_events(events) dispatches one event at a time, in order; each
      event's handlers all settle before the next event starts
    - Events are transient: nothing is persisted, so events still pending
      when the process dies are lost

Usage:
    >>> dispatcher.register("PagePublished", notify_subscribers)
    >>> await dispatcher.dispatch_events(page.domain_events)
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol

from sitecraft.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async event handler: accepts one event, returns None, side effects only."""


class DomainEventDispatcher(Protocol):
    """Protocol for domain event dispatchers."""

    def register(self, event_type: str, handler: EventHandler) -> None:
        """Register a handler for an event type.

        Args:
            event_type: Event discriminant, e.g. "ComponentAdded".
            handler: Async callable invoked with the event.
        """
        ...

    async def dispatch(self, event: DomainEvent) -> None:
        """Deliver one event to all of its handlers (concurrently, fail-open).

        No handlers registered is a no-op. Never raises for handler failures.
        """
        ...

    async def dispatch_events(self, events: Sequence[DomainEvent]) -> None:
        """Deliver events sequentially in the given order."""
        ...
