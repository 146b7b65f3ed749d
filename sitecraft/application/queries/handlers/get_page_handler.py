"""Single-page query handlers.

Handlers:
    - GetPageHandler: the page aggregate
    - PreviewPageHandler: the page plus its render data
"""

from dataclasses import dataclass
from typing import Any

from sitecraft.application.queries.page_queries import GetPage, PreviewPage
from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities import Page


@dataclass(frozen=True, kw_only=True)
class PagePreviewResult:
    """A page and what a renderer needs to draw it.

    Attributes:
        page: The page aggregate.
        render_data: Page.to_render_data() output ({meta, layout, styles,
            components}).
    """

    page: Page
    render_data: dict[str, Any]


class GetPageHandler:
    """Handler for GetPage query."""

    def __init__(self, ownership_verifier: OwnershipVerifier) -> None:
        self._ownership_verifier = ownership_verifier

    async def handle(self, query: GetPage) -> Result[Page, str]:
        """Handle GetPage query.

        Returns:
            Success(Page): Page found and its project owned by user.
            Failure(error): Page not found or not owned.
        """
        ownership = await self._ownership_verifier.verify_page_ownership(
            query.page_id, query.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        return Success(value=ownership.value)


class PreviewPageHandler:
    """Handler for PreviewPage query."""

    def __init__(self, ownership_verifier: OwnershipVerifier) -> None:
        self._ownership_verifier = ownership_verifier

    async def handle(self, query: PreviewPage) -> Result[PagePreviewResult, str]:
        ownership = await self._ownership_verifier.verify_page_ownership(
            query.page_id, query.user_id
        )
        if isinstance(ownership, Failure):
            return Failure(error=ownership.error.message)
        page = ownership.value

        return Success(
            value=PagePreviewResult(page=page, render_data=page.to_render_data())
        )
