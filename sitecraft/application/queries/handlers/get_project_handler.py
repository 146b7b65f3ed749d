"""Single-project query handlers.

Handlers:
    - GetProjectHandler: the project aggregate
    - GetProjectWithPagesHandler: the project plus its pages

Architecture:
- Returns Result[..., str] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from dataclasses import dataclass

from sitecraft.application.queries.project_queries import (
    GetProject,
    GetProjectWithPages,
)
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities import Page, Project
from sitecraft.domain.protocols.page_repository import PageRepository


@dataclass(frozen=True, kw_only=True)
class ProjectWithPagesResult:
    """A project and (a filtered view of) its pages.

    Attributes:
        project: The project aggregate.
        pages: Its pages in repository order.
    """

    project: Project
    pages: list[Page]


class GetProjectHandler:
    """Handler for GetProject query."""

    def __init__(self, ownership_verifier: OwnershipVerifier) -> None:
        self._ownership_verifier = ownership_verifier

    async def handle(self, query: GetProject) -> Result[Project, str]:
        """Handle GetProject query.

        Returns:
            Success(Project): Project found and owned by user.
            Failure(error): Project not found or not owned.
        """
        ownership = await self._ownership_verifier.verify_project_ownership(
            query.project_id, query.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        return Success(value=ownership.value)


class GetProjectWithPagesHandler:
    """Handler for GetProjectWithPages query.

    Dependencies (injected via constructor):
        - PageRepository: Loads the project's pages
        - OwnershipVerifier: Project ownership
    """

    def __init__(
        self,
        page_repo: PageRepository,
        ownership_verifier: OwnershipVerifier,
    ) -> None:
        self._page_repo = page_repo
        self._ownership_verifier = ownership_verifier

    async def handle(
        self, query: GetProjectWithPages
    ) -> Result[ProjectWithPagesResult, str]:
        ownership = await self._ownership_verifier.verify_project_ownership(
            query.project_id, query.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        project = ownership.value

        pages = await self._page_repo.find_by_project_id(project.id)
        if not query.include_unpublished:
            pages = [page for page in pages if page.is_published]

        return Success(value=ProjectWithPagesResult(project=project, pages=pages))
