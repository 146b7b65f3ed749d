"""DeletePage command handler."""

from sitecraft.application.commands.page_commands import DeletePage
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.events import PageDeleted
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.page_repository import PageRepository


class DeletePageHandler:
    """Handler for DeletePage command.

    Side Effects:
        - Deletes the page (its components go with it)
        - Dispatches PageDeleted
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

    async def handle(self, cmd: DeletePage) -> Result[None, str]:
        ownership = await self._ownership_verifier.verify_page_ownership(
            cmd.page_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        await self._page_repo.delete(page.id)

        await self._event_dispatcher.dispatch_events(
            [
                PageDeleted(
                    aggregate_id=page.id,
                    project_id=page.project_id,
                    page_name=page.name,
                )
            ]
        )

        return Success(value=None)
