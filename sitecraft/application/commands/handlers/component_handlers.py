"""Component command handlers.

Handlers:
    - AddComponentHandler
    - UpdateComponentHandler
    - RemoveComponentHandler
    - ReorderComponentsHandler

All four load the page through OwnershipVerifier, delegate to the Page
aggregate, save the page, then dispatch its pending events. A failed
aggregate call leaves the page unsaved.
"""

from uuid import UUID

from sitecraft.application.commands.page_commands import (
    AddComponent,
    RemoveComponent,
    ReorderComponents,
    UpdateComponent,
)
from sitecraft.application.events import publish_domain_events
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.protocols.event_dispatcher_protocol import DomainEventDispatcher
from sitecraft.domain.protocols.page_repository import PageRepository


class _PageCommandHandler:
    """Shared constructor for handlers that edit a single page."""

    def __init__(
        self,
        page_repo: PageRepository,
        ownership_verifier: OwnershipVerifier,
        event_dispatcher: DomainEventDispatcher,
    ) -> None:
        self._page_repo = page_repo
        self._ownership_verifier = ownership_verifier
        self._event_dispatcher = event_dispatcher


class AddComponentHandler(_PageCommandHandler):
    """Handler for AddComponent command."""

    async def handle(self, cmd: AddComponent) -> Result[UUID, str]:
        """Handle AddComponent command.

        Returns:
            Success(UUID): ID of the new component.
            Failure(error): Page not found or not owned, unsupported type,
                unknown or invalid property.
        """
        ownership = await self._ownership_verifier.verify_page_ownership(
            cmd.page_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        result = page.add_component(cmd.component_type, cmd.props, cmd.position)
        if isinstance(result, Failure):
            return Failure(error=result.error.message)
        component = result.value

        await self._page_repo.save(page)
        await publish_domain_events(page, self._event_dispatcher)

        return Success(value=component.id)


class UpdateComponentHandler(_PageCommandHandler):
    """Handler for UpdateComponent command."""

    async def handle(self, cmd: UpdateComponent) -> Result[None, str]:
        ownership = await self._ownership_verifier.verify_page_ownership(
            cmd.page_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        result = page.update_component(cmd.component_id, cmd.props)
        if isinstance(result, Failure):
            return Failure(error=result.error.message)

        await self._page_repo.save(page)
        await publish_domain_events(page, self._event_dispatcher)

        return Success(value=None)


class RemoveComponentHandler(_PageCommandHandler):
    """Handler for RemoveComponent command."""

    async def handle(self, cmd: RemoveComponent) -> Result[None, str]:
        ownership = await self._ownership_verifier.verify_page_ownership(
            cmd.page_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        result = page.remove_component(cmd.component_id)
        if isinstance(result, Failure):
            return Failure(error=result.error.message)

        await self._page_repo.save(page)
        await publish_domain_events(page, self._event_dispatcher)

        return Success(value=None)


class ReorderComponentsHandler(_PageCommandHandler):
    """Handler for ReorderComponents command."""

    async def handle(self, cmd: ReorderComponents) -> Result[None, str]:
        """Handle ReorderComponents command.

        Returns:
            Success(None): Order replaced.
            Failure(error): Page not found or not owned, or the ids are not
                exactly the page's current component ids.
        """
        ownership = await self._ownership_verifier.verify_page_ownership(
            cmd.page_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        result = page.reorder_components(cmd.component_ids)
        if isinstance(result, Failure):
            return Failure(error=result.error.message)

        await self._page_repo.save(page)
        await publish_domain_events(page, self._event_dispatcher)

        return Success(value=None)
