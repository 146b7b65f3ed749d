"""PageRepository protocol for page persistence.

Port (interface) for hexagonal architecture. Pages are persisted together
with their components.
"""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from sitecraft.domain.entities.page import Page
from sitecraft.domain.types import PageStats, Paginated


class PageRepository(Protocol):
    """Page repository protocol (port).

    Methods:
        find_by_id: Retrieve page (with components) by ID
        find_by_project_id: All pages of a project, in creation order
        save: Create or update (components included)
        delete: Delete page
        is_path_unique_in_project / is_name_unique_in_project: Uniqueness
        find_by_project_id_with_pagination: Paged listing with filters
        get_page_stats: Counts for a project
        bulk_update_publish_status: Set is_published on many pages
        copy_to_project: Duplicate a page (new ids) into a project
    """

    async def find_by_id(self, page_id: UUID) -> Page | None: ...

    async def find_by_project_id(self, project_id: UUID) -> list[Page]: ...

    async def save(self, page: Page) -> None: ...

    async def delete(self, page_id: UUID) -> None: ...

    async def is_path_unique_in_project(
        self, project_id: UUID, path: str, exclude_id: UUID | None = None
    ) -> bool:
        """Check that no other page of project_id uses path.

        Args:
            project_id: Project to search.
            path: Candidate path.
            exclude_id: Page to ignore (the one being moved).
        """
        ...

    async def is_name_unique_in_project(
        self, project_id: UUID, name: str, exclude_id: UUID | None = None
    ) -> bool: ...

    async def find_by_project_id_with_pagination(
        self,
        project_id: UUID,
        page: int,
        limit: int,
        search: str | None = None,
        published_only: bool = False,
    ) -> Paginated[Page]:
        """List a project's pages.

        Args:
            project_id: Project.
            page: 1-based page number.
            limit: Page size.
            search: Case-insensitive substring of name, path or title.
            published_only: Exclude unpublished pages.
        """
        ...

    async def get_page_stats(self, project_id: UUID) -> PageStats: ...

    async def bulk_update_publish_status(
        self, page_ids: Sequence[UUID], is_published: bool
    ) -> None:
        """Set is_published on every listed page in one storage operation."""
        ...

    async def copy_to_project(
        self,
        page_id: UUID,
        target_project_id: UUID,
        new_name: str | None = None,
        new_path: str | None = None,
    ) -> Page:
        """Duplicate a page into target_project_id.

        The copy gets new page and component ids, is unpublished, and takes
        new_name/new_path when given (otherwise the source's values).
        """
        ...
