"""Flush an aggregate's pending domain events.

Command handlers call this after the aggregate has been saved, so handlers
only ever see events for persisted state.

Usage:
    await self._page_repo.save(page)
    await publish_domain_events(page, self._event_dispatcher)
"""

from typing import Protocol

from sitecraft.domain.events.base_event import DomainEvent
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher


class EventSource(Protocol):
    """Anything that accumulates domain events (Page, Project)."""

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]: ...

    def clear_domain_events(self) -> None: ...


async def publish_domain_events(
    aggregate: EventSource, dispatcher: DomainEventDispatcher
) -> None:
    """Dispatch pending events in emission order, then clear them.

    Args:
        aggregate: Aggregate holding pending events.
        dispatcher: Event dispatcher.
    """
    events = aggregate.domain_events
    if not events:
        return
    await dispatcher.dispatch_events(events)
    aggregate.clear_domain_events()
