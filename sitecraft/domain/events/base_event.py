"""Base domain event class.

Domain events record "things that happened" to an aggregate and are named in
past tense (PageCreated, ComponentAdded, ProjectPublished). Aggregates append
them to a pending list; the application layer dispatches them after the
aggregate has been persisted.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7) and occurred_at (UTC)
    - aggregate_id identifies the Page or Project the event belongs to
    - EVENT_TYPE class attribute is the string discriminant used for
      dispatcher routing and serialization

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class PagePublished(DomainEvent):
    ...     EVENT_TYPE: ClassVar[str] = "PagePublished"
    ...     project_id: UUID
    >>>
    >>> event = PagePublished(aggregate_id=page.id, project_id=page.project_id)
    >>> event.event_type
    'PagePublished'
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen, kw_only dataclasses
        4. Set EVENT_TYPE to their class name
        5. Be added to EVENT_REGISTRY and the SitecraftEvent union

    Attributes:
        aggregate_id: ID of the aggregate that raised the event.
        event_id: Unique identifier for this event instance (UUIDv7).
        occurred_at: Timestamp when the event occurred (UTC).
    """

    EVENT_TYPE: ClassVar[str] = "DomainEvent"

    aggregate_id: UUID
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """String discriminant (e.g. "PageCreated")."""
        return self.EVENT_TYPE
