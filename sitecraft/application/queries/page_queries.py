"""Page queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetPage:
    """Get a single page by ID.

    Attributes:
        page_id: Page to retrieve.
        user_id: User requesting (ownership verified through the project).
    """

    page_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListProjectPages:
    """List a project's pages, one page at a time.

    Attributes:
        project_id: Project whose pages to list.
        user_id: User requesting.
        include_unpublished: Include draft pages. Default False returns
            published pages only.
        search: Case-insensitive substring of name, path or title.
        page: 1-based page number (default 1).
        limit: Page size (default from settings, capped at the maximum).
    """

    project_id: UUID
    user_id: UUID
    include_unpublished: bool = False
    search: str | None = None
    page: int | None = None
    limit: int | None = None


@dataclass(frozen=True, kw_only=True)
class GetPageStats:
    """Page counts for one project."""

    project_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class PreviewPage:
    """A page together with the data needed to render it."""

    page_id: UUID
    user_id: UUID
