"""Project aggregate root.

A project belongs to a user (by reference) and groups the pages of one
website. It carries a lifecycle status and the site-wide ProjectConfig.

Page composition:
    A Project only holds Page objects that a caller hands it, either through
    add_page() or from_persistence(pages=...). Repository-backed flows load
    pages through PageRepository and pass them to publish(pages=...), so the
    publish preconditions always run over real data.

Status transitions:
    DRAFT/PUBLISHED/ARCHIVED are one-way from the model's perspective.
    publish() checks pages only; archive() is unconditional.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from sitecraft.core.enums import ErrorCode
from sitecraft.core.errors import ConflictError, DomainError, NotFoundError
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities.page import Page
from sitecraft.domain.enums import ProjectStatus
from sitecraft.domain.errors import InvalidValueError, ProjectError
from sitecraft.domain.events import (
    DomainEvent,
    PageAddedToProject,
    PageRemovedFromProject,
    ProjectArchived,
    ProjectConfigUpdated,
    ProjectCreated,
    ProjectDescriptionChanged,
    ProjectNameChanged,
    ProjectPublished,
)
from sitecraft.domain.events.project_events import ConfigType
from sitecraft.domain.types import as_datetime, as_uuid
from sitecraft.domain.validators.functions import validate_required_string
from sitecraft.domain.value_objects import ProjectConfig

MAX_NAME_LENGTH = 100


def validate_project_name(name: Any) -> str:
    """Validate a project name.

    Raises:
        InvalidValueError: INVALID_PROJECT_NAME.
    """
    return validate_required_string(
        name,
        field="name",
        max_length=MAX_NAME_LENGTH,
        code=ErrorCode.INVALID_PROJECT_NAME,
        label="Project name",
        strip=True,
    )


@dataclass(eq=False)
class Project:
    """Project aggregate root.

    Attributes:
        id: Unique identifier.
        name: Display name, 1-100 characters.
        user_id: Owner (immutable).
        description: Optional description.
        status: Lifecycle status.
        config: Theme and navigation settings.
        pages: Pages composed into this aggregate (see module docstring).
        created_at: Creation timestamp (UTC).
        updated_at: Bumped on every mutation (UTC).
    """

    id: UUID
    name: str
    user_id: UUID
    description: str | None = None
    status: ProjectStatus = ProjectStatus.DRAFT
    config: ProjectConfig = field(default_factory=ProjectConfig)
    pages: list[Page] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False
    )

    @classmethod
    def create(
        cls,
        name: str,
        user_id: UUID,
        description: str | None = None,
        config: ProjectConfig | None = None,
    ) -> Result["Project", DomainError]:
        """Create a new DRAFT project.

        Returns:
            Success(Project): New project with a pending ProjectCreated event.
            Failure(ValidationError): Invalid name.
        """
        try:
            validate_project_name(name)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())

        now = datetime.now(UTC)
        project = cls(
            id=uuid7(),
            name=name,
            user_id=user_id,
            description=description or None,
            config=config or ProjectConfig(),
            created_at=now,
            updated_at=now,
        )
        project._record(
            ProjectCreated(aggregate_id=project.id, user_id=user_id, project_name=name)
        )
        return Success(value=project)

    @classmethod
    def from_persistence(
        cls, record: Mapping[str, Any], pages: Iterable[Page] | None = None
    ) -> "Project":
        """Rebuild from a stored record without validation or events.

        Args:
            record: Persisted project record.
            pages: Pages to compose into the aggregate, if the caller loaded them.
        """
        return cls(
            id=as_uuid(record["id"]),
            name=record["name"],
            user_id=as_uuid(record["userId"]),
            description=record.get("description"),
            status=ProjectStatus(record.get("status", ProjectStatus.DRAFT)),
            config=ProjectConfig.from_dict(record.get("config")),
            pages=list(pages or []),
            created_at=as_datetime(record["createdAt"]),
            updated_at=as_datetime(record["updatedAt"]),
        )

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def update_name(self, name: str) -> Result[None, DomainError]:
        try:
            validate_project_name(name)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())

        old_name = self.name
        self.name = name
        self._touch()
        self._record(
            ProjectNameChanged(aggregate_id=self.id, old_name=old_name, new_name=name)
        )
        return Success(value=None)

    def update_description(self, description: str | None) -> Result[None, DomainError]:
        old_description = self.description
        self.description = description or None
        self._touch()
        self._record(
            ProjectDescriptionChanged(
                aggregate_id=self.id,
                old_description=old_description,
                new_description=self.description,
            )
        )
        return Success(value=None)

    def update_config(self, config: ProjectConfig) -> Result[None, DomainError]:
        """Replace the configuration.

        The emitted event names the part that changed: "theme",
        "navigation", or "all" when both (or neither) differ.
        """
        config_type: ConfigType = "all"
        theme_changed = config.theme != self.config.theme
        navigation_changed = config.navigation != self.config.navigation
        if theme_changed and not navigation_changed:
            config_type = "theme"
        elif navigation_changed and not theme_changed:
            config_type = "navigation"

        self.config = config
        self._touch()
        self._record(
            ProjectConfigUpdated(
                aggregate_id=self.id, config_type=config_type, user_id=self.user_id
            )
        )
        return Success(value=None)

    # -------------------------------------------------------------------------
    # Composed pages
    # -------------------------------------------------------------------------

    def add_page(
        self, name: str, path: str, title: str | None = None
    ) -> Result[Page, DomainError]:
        """Create a page inside this project.

        Returns:
            Success(Page): The new page (with its own PageCreated event).
            Failure(ConflictError): Path already used by a composed page.
            Failure(ValidationError): Invalid name or path.
        """
        if any(page.path == path for page in self.pages):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PAGE_PATH_ALREADY_EXISTS,
                    message=f"{ProjectError.PAGE_PATH_ALREADY_EXISTS}: {path}",
                    resource_type="Page",
                    conflicting_field="path",
                )
            )

        result = Page.create(project_id=self.id, name=name, path=path, title=title)
        if isinstance(result, Failure):
            return result
        page = result.value

        self.pages.append(page)
        self._touch()
        self._record(PageAddedToProject(aggregate_id=self.id, page_id=page.id))
        return Success(value=page)

    def remove_page(self, page_id: UUID) -> Result[None, DomainError]:
        page = self.get_page(page_id)
        if page is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PAGE_NOT_FOUND,
                    message=f"{ProjectError.PAGE_NOT_FOUND}: {page_id}",
                    resource_type="Page",
                    resource_id=str(page_id),
                )
            )

        self.pages.remove(page)
        self._touch()
        self._record(PageRemovedFromProject(aggregate_id=self.id, page_id=page_id))
        return Success(value=None)

    def get_page(self, page_id: UUID) -> Page | None:
        for page in self.pages:
            if page.id == page_id:
                return page
        return None

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def publish(self, pages: Iterable[Page] | None = None) -> Result[None, DomainError]:
        """Publish the project.

        Args:
            pages: The project's pages as loaded from storage. Defaults to the
                composed pages.

        Returns:
            Success(None): status is PUBLISHED.
            Failure(DomainError): PROJECT_HAS_NO_PAGES or
                PROJECT_HAS_NO_PUBLISHED_PAGES.
        """
        candidates = list(self.pages if pages is None else pages)
        if not candidates:
            return Failure(
                error=DomainError(
                    code=ErrorCode.PROJECT_HAS_NO_PAGES, message=ProjectError.NO_PAGES
                )
            )
        if not any(page.is_published for page in candidates):
            return Failure(
                error=DomainError(
                    code=ErrorCode.PROJECT_HAS_NO_PUBLISHED_PAGES,
                    message=ProjectError.NO_PUBLISHED_PAGES,
                )
            )

        self.status = ProjectStatus.PUBLISHED
        self._touch()
        self._record(ProjectPublished(aggregate_id=self.id, user_id=self.user_id))
        return Success(value=None)

    def archive(self) -> Result[None, DomainError]:
        previous_status = self.status
        self.status = ProjectStatus.ARCHIVED
        self._touch()
        self._record(
            ProjectArchived(
                aggregate_id=self.id,
                user_id=self.user_id,
                previous_status=previous_status,
            )
        )
        return Success(value=None)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    # -------------------------------------------------------------------------
    # Domain events
    # -------------------------------------------------------------------------

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def _record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------------

    def to_persistence(self) -> dict[str, Any]:
        """Flat record. Pages are persisted by PageRepository, not here."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "userId": str(self.user_id),
            "status": self.status.value,
            "config": self.config.to_dict(),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
