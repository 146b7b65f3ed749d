"""Page publication command handlers.

Handlers:
    - PublishPageHandler: publish one page (needs at least one component)
    - UnpublishPageHandler: unpublish one page
    - BulkPublishPagesHandler: set the publication state of many pages of
      one project in a single storage operation

BulkPublishPages runs every page through Page.publish()/unpublish() before
touching storage, so the component rule holds for bulk updates too and
each page emits its own PagePublished/PageUnpublished event.
"""

from sitecraft.application.commands.page_commands import (
    BulkPublishPages,
    PublishPage,
    UnpublishPage,
)
from sitecraft.application.events import publish_domain_events
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.errors import PageError
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.page_repository import PageRepository


class PublishPageHandler:
    """Handler for PublishPage command.

    Dependencies (injected via constructor):
        - PageRepository: Persistence
        - OwnershipVerifier: Page ownership
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

    async def handle(self, cmd: PublishPage) -> Result[None, str]:
        """Handle PublishPage command.

        Returns:
            Success(None): Page published.
            Failure(error): Not found, not owned, or page has no components.
        """
        ownership = await self._ownership_verifier.verify_page_ownership(
            cmd.page_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        result = page.publish()
        if isinstance(result, Failure):
            return Failure(error=result.error.message)

        await self._page_repo.save(page)
        await publish_domain_events(page, self._event_dispatcher)

        return Success(value=None)


class UnpublishPageHandler:
    """Handler for UnpublishPage command."""

    def __init__(
        self,
        page_repo: PageRepository,
        ownership_verifier: OwnershipVerifier,
        event_dispatcher: DomainEventDispatcher,
    ) -> None:
        self._page_repo = page_repo
        self._ownership_verifier = ownership_verifier
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: UnpublishPage) -> Result[None, str]:
        ownership = await self._ownership_verifier.verify_page_ownership(
            cmd.page_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        page.unpublish()

        await self._page_repo.save(page)
        await publish_domain_events(page, self._event_dispatcher)

        return Success(value=None)


class BulkPublishPagesHandler:
    """Handler for BulkPublishPages command.

    Dependencies (injected via constructor):
        - PageRepository: Page lookup and bulk status update
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

    async def handle(self, cmd: BulkPublishPages) -> Result[int, str]:
        """Handle BulkPublishPages command.

        Args:
            cmd: BulkPublishPages command.

        Returns:
            Success(int): Number of pages updated.
            Failure(error): Project not found or not owned, a page outside
                the project, or (when publishing) a page with no components.
                Nothing is stored on failure.
        """
        ownership = await self._ownership_verifier.verify_project_ownership(
            cmd.project_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)

        project_pages = {
            page.id: page
            for page in await self._page_repo.find_by_project_id(cmd.project_id)
        }
        page_ids = list(dict.fromkeys(cmd.page_ids))
        if any(page_id not in project_pages for page_id in page_ids):
            return Failure(error=PageError.PAGES_NOT_IN_PROJECT)

        pages = [project_pages[page_id] for page_id in page_ids]
        for page in pages:
            result = page.publish() if cmd.is_published else page.unpublish()
            if isinstance(result, Failure):
                return Failure(error=f"{result.error.message}: {page.name}")

        await self._page_repo.bulk_update_publish_status(page_ids, cmd.is_published)

        for page in pages:
            await publish_domain_events(page, self._event_dispatcher)

        return Success(value=len(pages))
