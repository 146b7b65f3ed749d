"""Domain Events Registry - Single Source of Truth.

This registry catalogs ALL domain events with their metadata. Used for:
- Container wiring (automated handler registration)
- Validation tests (every event has a logging handler and serializes)
- Lookup of event classes by their string discriminant

Adding new events:
1. Define event dataclass in page_events.py or project_events.py
2. Add it to the PageEvent/ProjectEvent union
3. Add entry to EVENT_REGISTRY below
4. Add a case to serialize_event()
5. Run tests - they'll tell you what's missing (handler methods)
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, assert_never

from sitecraft.domain.events.base_event import DomainEvent
from sitecraft.domain.events.page_events import (
    ComponentAdded,
    ComponentRemoved,
    ComponentsReordered,
    ComponentUpdated,
    PageCreated,
    PageDeleted,
    PageEvent,
    PageLayoutUpdated,
    PageNameChanged,
    PagePathChanged,
    PagePublished,
    PageTitleChanged,
    PageUnpublished,
)
from sitecraft.domain.events.project_events import (
    PageAddedToProject,
    PageRemovedFromProject,
    ProjectArchived,
    ProjectConfigUpdated,
    ProjectCreated,
    ProjectDeleted,
    ProjectDescriptionChanged,
    ProjectEvent,
    ProjectNameChanged,
    ProjectPublished,
)

type SitecraftEvent = PageEvent | ProjectEvent


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    PAGE = "page"
    COMPONENT = "component"
    PROJECT = "project"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        handler_name: Snake-case name; handler methods are handle_<handler_name>.
        requires_logging: LoggingEventHandler handles this event.
    """

    event_class: type[DomainEvent]
    category: EventCategory
    handler_name: str
    requires_logging: bool = True

    @property
    def event_type(self) -> str:
        return self.event_class.EVENT_TYPE

    @property
    def handler_method(self) -> str:
        return f"handle_{self.handler_name}"


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY - Single Source of Truth
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    # Page lifecycle (8 events)
    EventMetadata(PageCreated, EventCategory.PAGE, "page_created"),
    EventMetadata(PageNameChanged, EventCategory.PAGE, "page_name_changed"),
    EventMetadata(PagePathChanged, EventCategory.PAGE, "page_path_changed"),
    EventMetadata(PageTitleChanged, EventCategory.PAGE, "page_title_changed"),
    EventMetadata(PageLayoutUpdated, EventCategory.PAGE, "page_layout_updated"),
    EventMetadata(PagePublished, EventCategory.PAGE, "page_published"),
    EventMetadata(PageUnpublished, EventCategory.PAGE, "page_unpublished"),
    EventMetadata(PageDeleted, EventCategory.PAGE, "page_deleted"),
    # Components (4 events)
    EventMetadata(ComponentAdded, EventCategory.COMPONENT, "component_added"),
    EventMetadata(ComponentRemoved, EventCategory.COMPONENT, "component_removed"),
    EventMetadata(ComponentUpdated, EventCategory.COMPONENT, "component_updated"),
    EventMetadata(ComponentsReordered, EventCategory.COMPONENT, "components_reordered"),
    # Projects (9 events)
    EventMetadata(ProjectCreated, EventCategory.PROJECT, "project_created"),
    EventMetadata(ProjectNameChanged, EventCategory.PROJECT, "project_name_changed"),
    EventMetadata(
        ProjectDescriptionChanged, EventCategory.PROJECT, "project_description_changed"
    ),
    EventMetadata(ProjectConfigUpdated, EventCategory.PROJECT, "project_config_updated"),
    EventMetadata(PageAddedToProject, EventCategory.PROJECT, "page_added_to_project"),
    EventMetadata(
        PageRemovedFromProject, EventCategory.PROJECT, "page_removed_from_project"
    ),
    EventMetadata(ProjectPublished, EventCategory.PROJECT, "project_published"),
    EventMetadata(ProjectArchived, EventCategory.PROJECT, "project_archived"),
    EventMetadata(ProjectDeleted, EventCategory.PROJECT, "project_deleted"),
]


# ═══════════════════════════════════════════════════════════════
# Computed Views (for validation and introspection)
# ═══════════════════════════════════════════════════════════════


def get_all_events() -> list[type[DomainEvent]]:
    """Get all registered event classes.

    Returns:
        List of event classes in registry.
    """
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_event_class(event_type: str) -> type[DomainEvent] | None:
    """Look up an event class by its string discriminant.

    Args:
        event_type: e.g. "PageCreated".

    Returns:
        The event class, or None if not registered.
    """
    for meta in EVENT_REGISTRY:
        if meta.event_type == event_type:
            return meta.event_class
    return None


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dict with total count, counts by category and logging coverage.
    """
    return {
        "total_events": len(EVENT_REGISTRY),
        "by_category": dict(Counter(meta.category.value for meta in EVENT_REGISTRY)),
        "requiring_logging": sum(1 for m in EVENT_REGISTRY if m.requires_logging),
    }


# ═══════════════════════════════════════════════════════════════
# Serialization
# ═══════════════════════════════════════════════════════════════


def _event_data(event: SitecraftEvent) -> dict[str, Any]:
    match event:
        case PageCreated():
            return {
                "projectId": str(event.project_id),
                "pageName": event.page_name,
                "pagePath": event.page_path,
            }
        case PageNameChanged():
            return {
                "projectId": str(event.project_id),
                "oldName": event.old_name,
                "newName": event.new_name,
            }
        case PagePathChanged():
            return {
                "projectId": str(event.project_id),
                "oldPath": event.old_path,
                "newPath": event.new_path,
            }
        case PageTitleChanged():
            return {
                "projectId": str(event.project_id),
                "oldTitle": event.old_title,
                "newTitle": event.new_title,
            }
        case PageLayoutUpdated():
            return {"projectId": str(event.project_id), "layout": dict(event.layout)}
        case PagePublished() | PageUnpublished():
            return {"projectId": str(event.project_id)}
        case PageDeleted():
            return {"projectId": str(event.project_id), "pageName": event.page_name}
        case ComponentAdded():
            return {
                "componentId": str(event.component_id),
                "componentType": event.component_type.value,
                "position": event.position,
            }
        case ComponentRemoved():
            return {
                "componentId": str(event.component_id),
                "componentType": event.component_type.value,
            }
        case ComponentUpdated():
            return {
                "componentId": str(event.component_id),
                "updatedProperties": list(event.updated_properties),
            }
        case ComponentsReordered():
            return {"newOrder": [str(cid) for cid in event.new_order]}
        case ProjectCreated():
            return {"userId": str(event.user_id), "projectName": event.project_name}
        case ProjectNameChanged():
            return {"oldName": event.old_name, "newName": event.new_name}
        case ProjectDescriptionChanged():
            return {
                "oldDescription": event.old_description,
                "newDescription": event.new_description,
            }
        case ProjectConfigUpdated():
            return {"configType": event.config_type, "userId": str(event.user_id)}
        case PageAddedToProject() | PageRemovedFromProject():
            return {"pageId": str(event.page_id)}
        case ProjectPublished():
            return {"userId": str(event.user_id)}
        case ProjectArchived():
            return {
                "userId": str(event.user_id),
                "previousStatus": event.previous_status.value,
            }
        case ProjectDeleted():
            return {"userId": str(event.user_id), "projectName": event.project_name}
        case _:
            assert_never(event)


def serialize_event(event: SitecraftEvent) -> dict[str, Any]:
    """Serialize an event to its wire/log representation.

    Args:
        event: Any registered event.

    Returns:
        dict: {eventId, eventType, aggregateId, occurredAt, data}.

    Example:
        >>> serialize_event(PagePublished(aggregate_id=page_id, project_id=project_id))
        {'eventId': '...', 'eventType': 'PagePublished', 'aggregateId': '...',
         'occurredAt': '2026-01-01T00:00:00+00:00', 'data': {'projectId': '...'}}
    """
    return {
        "eventId": str(event.event_id),
        "eventType": event.event_type,
        "aggregateId": str(event.aggregate_id),
        "occurredAt": event.occurred_at.isoformat(),
        "data": _event_data(event),
    }
