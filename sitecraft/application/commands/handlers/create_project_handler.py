"""CreateProject command handler.

Flow:
    1. Verify the owner exists
    2. Check name uniqueness among the owner's projects
    3. Create the Project aggregate (validates name)
    4. Save, then dispatch ProjectCreated

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, events)
- Uses Result types for error handling
"""

from uuid import UUID

from sitecraft.application.commands.project_commands import CreateProject
from sitecraft.application.events import publish_domain_events
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities import Project
from sitecraft.domain.errors import ProjectError
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.project_repository import ProjectRepository
from sitecraft.domain.protocols.user_repository import UserRepository


class CreateProjectHandler:
    """Handler for CreateProject command.

    Dependencies (injected via constructor):
        - UserRepository: Owner lookup
        - ProjectRepository: Uniqueness check and persistence
        - DomainEventDispatcher: For domain events
    """

    def __init__(
        self,
        user_repo: UserRepository,
        project_repo: ProjectRepository,
        event_dispatcher: DomainEventDispatcher,
    ) -> None:
        self._user_repo = user_repo
        self._project_repo = project_repo
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: CreateProject) -> Result[UUID, str]:
        """Handle CreateProject command.

        Args:
            cmd: CreateProject command.

        Returns:
            Success(UUID): ID of the new project.
            Failure(error): Unknown user, duplicate or invalid name.

        Side Effects:
            - Saves the project
            - Dispatches ProjectCreated
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ProjectError.USER_NOT_FOUND)

        is_unique = await self._project_repo.is_name_unique_for_user(
            cmd.user_id, cmd.name
        )
        if not is_unique:
            return Failure(error=ProjectError.NAME_ALREADY_EXISTS)

        result = Project.create(
            name=cmd.name,
            user_id=cmd.user_id,
            description=cmd.description,
            config=cmd.config,
        )
        if isinstance(result, Failure):
            return Failure(error=result.error.message)
        project = result.value

        await self._project_repo.save(project)
        await publish_domain_events(project, self._event_dispatcher)

        return Success(value=project.id)
