"""Project queries (CQRS read operations).

Queries represent requests for project data. They are immutable
dataclasses with question-like names. Queries NEVER change state.

Pattern:
- Queries are data containers (no logic)
- Handlers fetch and return data
- Queries do NOT emit domain events
"""

from dataclasses import dataclass
from uuid import UUID

from sitecraft.domain.enums import ProjectStatus


@dataclass(frozen=True, kw_only=True)
class GetProject:
    """Get a single project by ID.

    Attributes:
        project_id: Project to retrieve.
        user_id: User requesting (for ownership verification).
    """

    project_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListUserProjects:
    """List a user's projects, one page at a time.

    Attributes:
        user_id: Owner.
        page: 1-based page number (default 1).
        limit: Page size (default from settings, capped at the maximum).
        search: Case-insensitive substring of name or description.
        status: Only projects in this status.

    Example:
        >>> query = ListUserProjects(user_id=user_id, status=ProjectStatus.DRAFT)
        >>> result = await handler.handle(query)
    """

    user_id: UUID
    page: int | None = None
    limit: int | None = None
    search: str | None = None
    status: ProjectStatus | None = None


@dataclass(frozen=True, kw_only=True)
class GetProjectStats:
    """Project counts by status for a user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetRecentProjects:
    """Most recently updated projects of a user.

    Attributes:
        user_id: Owner.
        limit: How many (default from settings).
    """

    user_id: UUID
    limit: int | None = None


@dataclass(frozen=True, kw_only=True)
class GetProjectWithPages:
    """A project together with its pages.

    Attributes:
        project_id: Project to retrieve.
        user_id: User requesting (for ownership verification).
        include_unpublished: Include draft pages. Default False returns
            published pages only.
    """

    project_id: UUID
    user_id: UUID
    include_unpublished: bool = False
