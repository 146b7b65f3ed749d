"""Project domain events.

aggregate_id is always the project ID.

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from typing import ClassVar, Literal
from uuid import UUID

from sitecraft.domain.enums import ProjectStatus
from sitecraft.domain.events.base_event import DomainEvent

type ConfigType = Literal["theme", "navigation", "all"]


@dataclass(frozen=True, kw_only=True)
class ProjectCreated(DomainEvent):
    """Project created.

    Attributes:
        user_id: Owner.
        project_name: Initial name.
    """

    EVENT_TYPE: ClassVar[str] = "ProjectCreated"

    user_id: UUID
    project_name: str


@dataclass(frozen=True, kw_only=True)
class ProjectNameChanged(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "ProjectNameChanged"

    old_name: str
    new_name: str


@dataclass(frozen=True, kw_only=True)
class ProjectDescriptionChanged(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "ProjectDescriptionChanged"

    old_description: str | None
    new_description: str | None


@dataclass(frozen=True, kw_only=True)
class ProjectConfigUpdated(DomainEvent):
    """Project configuration replaced.

    Attributes:
        config_type: Which part changed: theme, navigation or all.
        user_id: Owner.
    """

    EVENT_TYPE: ClassVar[str] = "ProjectConfigUpdated"

    config_type: ConfigType
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class PageAddedToProject(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "PageAddedToProject"

    page_id: UUID


@dataclass(frozen=True, kw_only=True)
class PageRemovedFromProject(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "PageRemovedFromProject"

    page_id: UUID


@dataclass(frozen=True, kw_only=True)
class ProjectPublished(DomainEvent):
    EVENT_TYPE: ClassVar[str] = "ProjectPublished"

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ProjectArchived(DomainEvent):
    """Project archived.

    Attributes:
        user_id: Owner.
        previous_status: Status before archiving (may already be ARCHIVED).
    """

    EVENT_TYPE: ClassVar[str] = "ProjectArchived"

    user_id: UUID
    previous_status: ProjectStatus


@dataclass(frozen=True, kw_only=True)
class ProjectDeleted(DomainEvent):
    """Project deleted (raised by the application layer after the delete)."""

    EVENT_TYPE: ClassVar[str] = "ProjectDeleted"

    user_id: UUID
    project_name: str


type ProjectEvent = (
    ProjectCreated
    | ProjectNameChanged
    | ProjectDescriptionChanged
    | ProjectConfigUpdated
    | PageAddedToProject
    | PageRemovedFromProject
    | ProjectPublished
    | ProjectArchived
    | ProjectDeleted
)
