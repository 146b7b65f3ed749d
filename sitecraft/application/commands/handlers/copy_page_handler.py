"""CopyPage command handler.

Flow:
    1. Verify the user owns the source page
    2. Verify the user owns the target project
    3. Validate the new name and path, then check uniqueness in the target
    4. Delegate the copy to PageRepository.copy_to_project
    5. Dispatch PageCreated for the copy
"""

from uuid import UUID

from sitecraft.application.commands.page_commands import CopyPage
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities.page import validate_page_name, validate_page_path
from sitecraft.domain.errors import InvalidValueError, PageError
from sitecraft.domain.events import PageCreated
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.page_repository import PageRepository


class CopyPageHandler:
    """Handler for CopyPage command.

    Dependencies (injected via constructor):
        - PageRepository: Uniqueness checks and the copy itself
        - OwnershipVerifier: Source page and target project ownership
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

    async def handle(self, cmd: CopyPage) -> Result[UUID, str]:
        """Handle CopyPage command.

        Args:
            cmd: CopyPage command.

        Returns:
            Success(UUID): ID of the copy.
            Failure(error): Source page or target project not found or not
                owned, invalid or duplicate name/path.
        """
        source = await self._ownership_verifier.verify_page_ownership(
            cmd.source_page_id, cmd.user_id
        )
        if isinstance(source, Failure):
            return Failure(error=source.error.message)

        target = await self._ownership_verifier.verify_project_ownership(
            cmd.target_project_id, cmd.user_id
        )
        if isinstance(target, Failure):
            return Failure(error=target.error.message)

        try:
            validate_page_name(cmd.new_name)
            validate_page_path(cmd.new_path)
        except InvalidValueError as e:
            return Failure(error=e.message)

        if not await self._page_repo.is_path_unique_in_project(
            cmd.target_project_id, cmd.new_path
        ):
            return Failure(error=PageError.PATH_ALREADY_EXISTS)

        if not await self._page_repo.is_name_unique_in_project(
            cmd.target_project_id, cmd.new_name
        ):
            return Failure(error=PageError.NAME_ALREADY_EXISTS)

        copy = await self._page_repo.copy_to_project(
            source.value.id,
            cmd.target_project_id,
            new_name=cmd.new_name,
            new_path=cmd.new_path,
        )

        await self._event_dispatcher.dispatch_events(
            [
                PageCreated(
                    aggregate_id=copy.id,
                    project_id=copy.project_id,
                    page_name=copy.name,
                    page_path=copy.path,
                )
            ]
        )

        return Success(value=copy.id)
