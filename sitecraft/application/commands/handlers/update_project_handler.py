"""UpdateProject command handler.

Applies name, description and config changes in that order. The first
failing change aborts the command before anything is saved.
"""

from sitecraft.application.commands.project_commands import UpdateProject
from sitecraft.application.events import publish_domain_events
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.errors import ProjectError
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.project_repository import ProjectRepository


class UpdateProjectHandler:
    """Handler for UpdateProject command.

    Dependencies (injected via constructor):
        - ProjectRepository: Uniqueness check and persistence
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

    async def handle(self, cmd: UpdateProject) -> Result[None, str]:
        """Handle UpdateProject command.

        Returns:
            Success(None): Project updated (or nothing to change).
            Failure(error): Not found, not owned, duplicate or invalid name.

        Side Effects:
            - Saves the project
            - Dispatches ProjectNameChanged / ProjectDescriptionChanged /
              ProjectConfigUpdated for the fields that were supplied
        """
        ownership = await self._ownership_verifier.verify_project_ownership(
            cmd.project_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        project = ownership.value

        if cmd.name and cmd.name != project.name:
            is_unique = await self._project_repo.is_name_unique_for_user(
                cmd.user_id, cmd.name, exclude_id=project.id
            )
            if not is_unique:
                return Failure(error=ProjectError.NAME_ALREADY_EXISTS)

            result = project.update_name(cmd.name)
            if isinstance(result, Failure):
                return Failure(error=result.error.message)

        if cmd.description is not None:
            project.update_description(cmd.description)

        if cmd.config is not None:
            project.update_config(cmd.config)

        await self._project_repo.save(project)
        await publish_domain_events(project, self._event_dispatcher)

        return Success(value=None)
