"""Domain events package.

Usage:
    from sitecraft.domain.events import PageCreated, DomainEvent
"""

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
from sitecraft.domain.events.registry import SitecraftEvent

__all__ = [
    "DomainEvent",
    "SitecraftEvent",
    # Page events
    "PageEvent",
    "PageCreated",
    "PageNameChanged",
    "PagePathChanged",
    "PageTitleChanged",
    "PageLayoutUpdated",
    "PagePublished",
    "PageUnpublished",
    "PageDeleted",
    "ComponentAdded",
    "ComponentRemoved",
    "ComponentUpdated",
    "ComponentsReordered",
    # Project events
    "ProjectEvent",
    "ProjectCreated",
    "ProjectNameChanged",
    "ProjectDescriptionChanged",
    "ProjectConfigUpdated",
    "PageAddedToProject",
    "PageRemovedFromProject",
    "ProjectPublished",
    "ProjectArchived",
    "ProjectDeleted",
]
