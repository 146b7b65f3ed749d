"""Ownership verification service.

Centralizes ownership checks for projects and pages. Aggregates do not know
who is calling them; handlers ask this service before touching anything.

Ownership Chain:
    Page -> Project -> User

Architecture:
    - Application service (not domain - uses repositories)
    - Returns entities on success for convenience (avoid double fetch)

Usage:
    verifier = OwnershipVerifier(project_repo, page_repo)

    result = await verifier.verify_page_ownership(page_id, user_id)
    if isinstance(result, Failure):
        return Failure(error=result.error.message)
    page = result.value
"""

from uuid import UUID

from sitecraft.core.enums import ErrorCode
from sitecraft.core.errors import DomainError, NotFoundError, UnauthorizedError
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities import Page, Project
from sitecraft.domain.errors import PageError, ProjectError
from sitecraft.domain.protocols.page_repository import PageRepository
from sitecraft.domain.protocols.project_repository import ProjectRepository


class OwnershipVerifier:
    """Service for verifying project and page ownership.

    Dependencies (injected via constructor):
        - ProjectRepository: For project lookup
        - PageRepository: For page lookup

    Example:
        >>> verifier = OwnershipVerifier(project_repo, page_repo)
        >>> result = await verifier.verify_project_ownership(project_id, user_id)
        >>> if isinstance(result, Success):
        ...     project = result.value
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        page_repo: PageRepository,
    ) -> None:
        self._project_repo = project_repo
        self._page_repo = page_repo

    async def verify_project_ownership(
        self,
        project_id: UUID,
        user_id: UUID,
    ) -> Result[Project, DomainError]:
        """Verify user owns a project.

        Args:
            project_id: The project to verify.
            user_id: The user who should own the project.

        Returns:
            Success(Project): Project exists and is owned by user.
            Failure(NotFoundError): Project not found.
            Failure(UnauthorizedError): Project owned by someone else.
        """
        project = await self._project_repo.find_by_id(project_id)

        if project is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PROJECT_NOT_FOUND,
                    message=ProjectError.PROJECT_NOT_FOUND,
                    resource_type="Project",
                    resource_id=str(project_id),
                )
            )

        if not project.is_owned_by(user_id):
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message=ProjectError.ACCESS_DENIED,
                    required_permission="project:owner",
                )
            )

        return Success(value=project)

    async def verify_page_ownership(
        self,
        page_id: UUID,
        user_id: UUID,
    ) -> Result[Page, DomainError]:
        """Verify user owns a page (via its project).

        A page whose project cannot be found is treated as not owned.

        Args:
            page_id: The page to verify.
            user_id: The user who should own the page's project.

        Returns:
            Success(Page): Page exists and its project is owned by user.
            Failure(NotFoundError): Page not found.
            Failure(UnauthorizedError): Page's project missing or not owned.
        """
        page = await self._page_repo.find_by_id(page_id)

        if page is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PAGE_NOT_FOUND,
                    message=PageError.PAGE_NOT_FOUND,
                    resource_type="Page",
                    resource_id=str(page_id),
                )
            )

        project = await self._project_repo.find_by_id(page.project_id)

        if project is None or not project.is_owned_by(user_id):
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message=PageError.ACCESS_DENIED,
                    required_permission="project:owner",
                )
            )

        return Success(value=page)
