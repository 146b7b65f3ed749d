"""DeleteProject command handler.

Deletion is a repository operation (pages cascade in storage); the handler
emits ProjectDeleted itself once the delete has gone through.
"""

from sitecraft.application.commands.project_commands import DeleteProject
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.events import ProjectDeleted
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.project_repository import ProjectRepository


class DeleteProjectHandler:
    """Handler for DeleteProject command.

    Dependencies (injected via constructor):
        - ProjectRepository: Deletion
        - OwnershipVerifier: Loads the project for its owner
        - DomainEventDispatcher: For domain events
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        ownership_verifier: OwnershipVerifier,
        event_dispatcher: DomainEventDispatcher,
    ) -> None:
        self._project_repo = project_repo
        self._ownership_verifier = ownership_verifier
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: DeleteProject) -> Result[None, str]:
        """Handle DeleteProject command.

        Returns:
            Success(None): Project deleted.
            Failure(error): Not found or not owned.

        Side Effects:
            - Deletes the project (and its pages, in storage)
            - Dispatches ProjectDeleted
        """
        ownership = await self._ownership_verifier.verify_project_ownership(
            cmd.project_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        project = ownership.value

        await self._project_repo.delete(project.id)

        await self._event_dispatcher.dispatch_events(
            [
                ProjectDeleted(
                    aggregate_id=project.id,
                    user_id=project.user_id,
                    project_name=project.name,
                )
            ]
        )

        return Success(value=None)
