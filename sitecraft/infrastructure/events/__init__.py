"""Domain event dispatch infrastructure."""

from sitecraft.infrastructure.events.in_memory_event_dispatcher import (
    InMemoryDomainEventDispatcher,
)

__all__ = ["InMemoryDomainEventDispatcher"]
