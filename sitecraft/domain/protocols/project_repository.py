"""ProjectRepository protocol for project persistence.

Port (interface) for hexagonal architecture. Persistence adapters live
outside this package and implement this protocol structurally.
"""

from typing import Protocol
from uuid import UUID

from sitecraft.domain.entities.project import Project
from sitecraft.domain.enums import ProjectStatus
from sitecraft.domain.types import Paginated, ProjectStats


class ProjectRepository(Protocol):
    """Project repository protocol (port).

    Methods:
        find_by_id: Retrieve project by ID (pages are not loaded)
        save: Create or update
        delete: Delete project; adapters cascade to its pages
        is_name_unique_for_user: Name uniqueness per owner
        find_by_user_id_with_pagination: Paged listing with filters
        get_project_stats: Counts by status
        find_recently_updated: Most recently updated first
    """

    async def find_by_id(self, project_id: UUID) -> Project | None:
        """Find project by ID.

        Returns:
            Project if found, None otherwise.
        """
        ...

    async def save(self, project: Project) -> None:
        """Upsert project (pages are saved through PageRepository)."""
        ...

    async def delete(self, project_id: UUID) -> None:
        """Delete project and, at the storage level, all of its pages."""
        ...

    async def is_name_unique_for_user(
        self, user_id: UUID, name: str, exclude_id: UUID | None = None
    ) -> bool:
        """Check that no other project of user_id is called name.

        Args:
            user_id: Owner.
            name: Candidate name.
            exclude_id: Project to ignore (the one being renamed).
        """
        ...

    async def find_by_user_id_with_pagination(
        self,
        user_id: UUID,
        page: int,
        limit: int,
        search: str | None = None,
        status: ProjectStatus | None = None,
    ) -> Paginated[Project]:
        """List a user's projects, newest update first.

        Args:
            user_id: Owner.
            page: 1-based page number.
            limit: Page size.
            search: Case-insensitive substring of name or description.
            status: Only projects in this status.
        """
        ...

    async def get_project_stats(self, user_id: UUID) -> ProjectStats: ...

    async def find_recently_updated(self, user_id: UUID, limit: int) -> list[Project]: ...
