"""CreatePage command handler.

Flow:
    1. Verify the user owns the target project
    2. Check path, then name, uniqueness within the project
    3. Create the Page aggregate (validates name and path)
    4. Save, then dispatch PageCreated
"""

from uuid import UUID

from sitecraft.application.commands.page_commands import CreatePage
from sitecraft.application.events import publish_domain_events
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities import Page
from sitecraft.domain.errors import PageError
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.page_repository import PageRepository


class CreatePageHandler:
    """Handler for CreatePage command.

    Dependencies (injected via constructor):
        - PageRepository: Uniqueness checks and persistence
        - OwnershipVerifier: Project ownership
        - DomainEventDispatcher: For domain events
    """

    def __init__(
        self,
        page_repo: PageRepository,
        ownership_verifier: OwnershipVerifier,
        event_dispatcher: DomainEventDispatcher,
    ) -> None:
        self._page_repo = page_repo
        self._ownership_verifier = ownership_verifier
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: CreatePage) -> Result[UUID, str]:
        """Handle CreatePage command.

        Args:
            cmd: CreatePage command.

        Returns:
            Success(UUID): ID of the new page.
            Failure(error): Project not found or not owned, duplicate path
                or name, invalid name or path.
        """
        ownership = await self._ownership_verifier.verify_project_ownership(
            cmd.project_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)

        if not await self._page_repo.is_path_unique_in_project(cmd.project_id, cmd.path):
            return Failure(error=PageError.PATH_ALREADY_EXISTS)

        if not await self._page_repo.is_name_unique_in_project(cmd.project_id, cmd.name):
            return Failure(error=PageError.NAME_ALREADY_EXISTS)

        result = Page.create(
            project_id=cmd.project_id,
            name=cmd.name,
            path=cmd.path,
            title=cmd.title,
            layout=cmd.layout,
        )
        if isinstance(result, Failure):
            return Failure(error=result.error.message)
        page = result.value

        await self._page_repo.save(page)
        await publish_domain_events(page, self._event_dispatcher)

        return Success(value=page.id)
