"""User-scoped project query handlers.

Handlers:
    - ListUserProjectsHandler: paginated, searchable, status-filterable list
    - GetRecentProjectsHandler: most recently updated projects
    - GetProjectStatsHandler: counts by status

The user is the requester, so no ownership lookup is needed.
"""

from sitecraft.application.queries.handlers.pagination import resolve_pagination
from sitecraft.application.queries.project_queries import (
    GetProjectStats,
    GetRecentProjects,
    ListUserProjects,
)
from sitecraft.core.config import Settings, get_settings
from sitecraft.core.result import Result, Success
from sitecraft.domain.entities import Project
from sitecraft.domain.protocols.project_repository import ProjectRepository
from sitecraft.domain.types import Paginated, ProjectStats


class ListUserProjectsHandler:
    """Handler for ListUserProjects query.

    Dependencies (injected via constructor):
        - ProjectRepository: Paginated lookup
        - Settings: Page-size defaults (application settings if omitted)
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        settings: Settings | None = None,
    ) -> None:
        self._project_repo = project_repo
        self._settings = settings or get_settings()

    async def handle(self, query: ListUserProjects) -> Result[Paginated[Project], str]:
        """Handle ListUserProjects query.

        Status and search filtering happen in the repository, so total and
        total_pages describe the filtered set.

        Returns:
            Success(Paginated[Project]): One page of projects.
        """
        page, limit = resolve_pagination(query.page, query.limit, self._settings)
        result = await self._project_repo.find_by_user_id_with_pagination(
            query.user_id,
            page,
            limit,
            search=query.search,
            status=query.status,
        )
        return Success(value=result)


class GetRecentProjectsHandler:
    """Handler for GetRecentProjects query."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        settings: Settings | None = None,
    ) -> None:
        self._project_repo = project_repo
        self._settings = settings or get_settings()

    async def handle(self, query: GetRecentProjects) -> Result[list[Project], str]:
        limit = query.limit if query.limit and query.limit > 0 else None
        projects = await self._project_repo.find_recently_updated(
            query.user_id, limit or self._settings.recent_items_limit
        )
        return Success(value=projects)


class GetProjectStatsHandler:
    """Handler for GetProjectStats query."""

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def handle(self, query: GetProjectStats) -> Result[ProjectStats, str]:
        stats = await self._project_repo.get_project_stats(query.user_id)
        return Success(value=stats)
