"""UpdatePage command handler.

Applies name, path, title and layout changes in that order. Name and path
changes are checked for uniqueness within the project, ignoring the page
itself. The first failing change aborts the command before anything is
saved.
"""

from sitecraft.application.commands.page_commands import UpdatePage
from sitecraft.application.events import publish_domain_events
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.errors import PageError
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.page_repository import PageRepository


class UpdatePageHandler:
    """Handler for UpdatePage command."""

    def __init__(
        self,
        page_repo: PageRepository,
        ownership_verifier: OwnershipVerifier,
        event_dispatcher: DomainEventDispatcher,
    ) -> None:
        self._page_repo = page_repo
        self._ownership_verifier = ownership_verifier
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: UpdatePage) -> Result[None, str]:
        """Handle UpdatePage command.

        Returns:
            Success(None): Page updated.
            Failure(error): Not found, not owned, duplicate or invalid
                name/path.
        """
        ownership = await self._ownership_verifier.verify_page_ownership(
            cmd.page_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        if cmd.name and cmd.name != page.name:
            is_unique = await self._page_repo.is_name_unique_in_project(
                page.project_id, cmd.name, exclude_id=page.id
            )
            if not is_unique:
                return Failure(error=PageError.NAME_ALREADY_EXISTS)

            result = page.update_name(cmd.name)
            if isinstance(result, Failure):
                return Failure(error=result.error.message)

        if cmd.path and cmd.path != page.path:
            is_unique = await self._page_repo.is_path_unique_in_project(
                page.project_id, cmd.path, exclude_id=page.id
            )
            if not is_unique:
                return Failure(error=PageError.PATH_ALREADY_EXISTS)

            result = page.update_path(cmd.path)
            if isinstance(result, Failure):
                return Failure(error=result.error.message)

        if cmd.title is not None:
            page.update_title(cmd.title)

        if cmd.layout is not None:
            page.update_layout(cmd.layout)

        await self._page_repo.save(page)
        await publish_domain_events(page, self._event_dispatcher)

        return Success(value=None)
