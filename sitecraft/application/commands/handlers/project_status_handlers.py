"""Project status command handlers (publish, archive).

PublishProject loads the project's pages from PageRepository and hands them
to Project.publish(), so the "at least one published page" rule is checked
against stored pages rather than whatever the aggregate happens to hold.
"""

from sitecraft.application.commands.project_commands import (
    ArchiveProject,
    PublishProject,
)
from sitecraft.application.events import publish_domain_events
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.page_repository import PageRepository
from sitecraft.domain.protocols.project_repository import ProjectRepository


class PublishProjectHandler:
    """Handler for PublishProject command.

    Dependencies (injected via constructor):
        - ProjectRepository: Persistence
        - PageRepository: Loads the project's pages
        - OwnershipVerifier: Loads the project for its owner
        - DomainEventDispatcher: For domain events
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        page_repo: PageRepository,
        ownership_verifier: OwnershipVerifier,
        event_dispatcher: DomainEventDispatcher,
    ) -> None:
        self._project_repo = project_repo
        self._page_repo = page_repo
        self._ownership_verifier = ownership_verifier
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: PublishProject) -> Result[None, str]:
        """Handle PublishProject command.

        Returns:
            Success(None): Project is PUBLISHED.
            Failure(error): Not found, not owned, no pages or no published page.
        """
        ownership = await self._ownership_verifier.verify_project_ownership(
            cmd.project_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        project = ownership.value

        pages = await self._page_repo.find_by_project_id(project.id)
        result = project.publish(pages=pages)
        if isinstance(result, Failure):
            return Failure(error=result.error.message)

        await self._project_repo.save(project)
        await publish_domain_events(project, self._event_dispatcher)

        return Success(value=None)


class ArchiveProjectHandler:
    """Handler for ArchiveProject command."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        ownership_verifier: OwnershipVerifier,
        event_dispatcher: DomainEventDispatcher,
    ) -> None:
        self._project_repo = project_repo
        self._ownership_verifier = ownership_verifier
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: ArchiveProject) -> Result[None, str]:
        ownership = await self._ownership_verifier.verify_project_ownership(
            cmd.project_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        project = ownership.value

        project.archive()

        await self._project_repo.save(project)
        await publish_domain_events(project, self._event_dispatcher)

        return Success(value=None)
