"""Page domain events.

Every externally observable change to a Page raises exactly one event.
aggregate_id is always the page ID.

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from typing import Any, ClassVar
from uuid import UUID

from sitecraft.domain.enums import ComponentType
from sitecraft.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Page lifecycle
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PageCreated(DomainEvent):
    """Page created inside a project.

    Attributes:
        project_id: Owning project.
        page_name: Initial name.
        page_path: Initial path.
    """

    EVENT_TYPE: ClassVar[str] = "PageCreated"

    project_id: UUID
    page_name: str
    page_path: str


@dataclass(frozen=True, kw_only=True)
class PageNameChanged(DomainEvent):
    """Page renamed."""

    EVENT_TYPE: ClassVar[str] = "PageNameChanged"

    project_id: UUID
    old_name: str
    new_name: str


@dataclass(frozen=True, kw_only=True)
class PagePathChanged(DomainEvent):
    """Page moved to a new path."""

    EVENT_TYPE: ClassVar[str] = "PagePathChanged"

    project_id: UUID
    old_path: str
    new_path: str


@dataclass(frozen=True, kw_only=True)
class PageTitleChanged(DomainEvent):
    """Page title set, changed or cleared (None)."""

    EVENT_TYPE: ClassVar[str] = "PageTitleChanged"

    project_id: UUID
    old_title: str | None
    new_title: str | None


@dataclass(frozen=True, kw_only=True)
class PageLayoutUpdated(DomainEvent):
    """Page layout replaced.

    Attributes:
        project_id: Owning project.
        layout: New layout in persisted form ({maxWidth, padding, spacing}).
    """

    EVENT_TYPE: ClassVar[str] = "PageLayoutUpdated"

    project_id: UUID
    layout: dict[str, Any]


@dataclass(frozen=True, kw_only=True)
class PagePublished(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "PagePublished"

    project_id: UUID


@dataclass(frozen=True, kw_only=True)
class PageUnpublished(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "PageUnpublished"

    project_id: UUID


@dataclass(frozen=True, kw_only=True)
class PageDeleted(DomainEvent):
    """Page deleted (raised by the application layer after the delete)."""

    EVENT_TYPE: ClassVar[str] = "PageDeleted"

    project_id: UUID
    page_name: str


# ═══════════════════════════════════════════════════════════════
# Component changes
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class ComponentAdded(DomainEvent):
    """Component placed on the page.

    Attributes:
        component_id: New component.
        component_type: Its type.
        position: Index where it was inserted.
    """

    EVENT_TYPE: ClassVar[str] = "ComponentAdded"

    component_id: UUID
    component_type: ComponentType
    position: int


@dataclass(frozen=True, kw_only=True)
class ComponentRemoved(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "ComponentRemoved"

    component_id: UUID
    component_type: ComponentType


@dataclass(frozen=True, kw_only=True)
class ComponentUpdated(DomainEvent):
    """Component properties changed.

    Attributes:
        component_id: Updated component.
        updated_properties: Names of the properties supplied in the update.
    """

    EVENT_TYPE: ClassVar[str] = "ComponentUpdated"

    component_id: UUID
    updated_properties: tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class ComponentsReordered(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "ComponentsReordered"

    new_order: tuple[UUID, ...]


type PageEvent = (
    PageCreated
    | PageNameChanged
    | PagePathChanged
    | PageTitleChanged
    | PageLayoutUpdated
    | PagePublished
    | PageUnpublished
    | PageDeleted
    | ComponentAdded
    | ComponentRemoved
    | ComponentUpdated
    | ComponentsReordered
)
