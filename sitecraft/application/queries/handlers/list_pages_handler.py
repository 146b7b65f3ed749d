"""Project-scoped page query handlers.

Handlers:
    - ListProjectPagesHandler: paginated, searchable list
    - GetPageStatsHandler: counts for one project
"""

from sitecraft.application.queries.handlers.pagination import resolve_pagination
from sitecraft.application.queries.page_queries import GetPageStats, ListProjectPages
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.config import Settings, get_settings
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities import Page
from sitecraft.domain.protocols.page_repository import PageRepository
from sitecraft.domain.types import PageStats, Paginated


class ListProjectPagesHandler:
    """Handler for ListProjectPages query.

    Dependencies (injected via constructor):
        - PageRepository: Paginated lookup
        - OwnershipVerifier: Project ownership
        - Settings: Page-size defaults (application settings if omitted)
    """

    def __init__(
        self,
        page_repo: PageRepository,
        ownership_verifier: OwnershipVerifier,
        settings: Settings | None = None,
    ) -> None:
        self._page_repo = page_repo
        self._ownership_verifier = ownership_verifier
        self._settings = settings or get_settings()

    async def handle(self, query: ListProjectPages) -> Result[Paginated[Page], str]:
        """Handle ListProjectPages query.

        The published-only filter is applied by the repository, so total
        and total_pages describe the filtered set.

        Returns:
            Success(Paginated[Page]): One page of pages.
            Failure(error): Project not found or not owned.
        """
        ownership = await self._ownership_verifier.verify_project_ownership(
            query.project_id, query.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)

        page, limit = resolve_pagination(query.page, query.limit, self._settings)
        result = await self._page_repo.find_by_project_id_with_pagination(
            query.project_id,
            page,
            limit,
            search=query.search,
            published_only=not query.include_unpublished,
        )
        return Success(value=result)


class GetPageStatsHandler:
    """Handler for GetPageStats query."""

    def __init__(
        self,
        page_repo: PageRepository,
        ownership_verifier: OwnershipVerifier,
    ) -> None:
        self._page_repo = page_repo
        self._ownership_verifier = ownership_verifier

    async def handle(self, query: GetPageStats) -> Result[PageStats, str]:
        ownership = await self._ownership_verifier.verify_project_ownership(
            query.project_id, query.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)

        stats = await self._page_repo.get_page_stats(query.project_id)
        return Success(value=stats)
