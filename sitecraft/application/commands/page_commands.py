"""Page and component commands (CQRS write operations).

Every command carries the requesting user_id; handlers verify that the user
owns the page's project before doing anything else.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sitecraft.domain.enums import ComponentType
from sitecraft.domain.value_objects import PageLayout


@dataclass(frozen=True, kw_only=True)
class CreatePage:
    """Create a page in a project.

    Attributes:
        project_id: Target project (must be owned by user_id).
        user_id: User requesting.
        name: Page name, unique in the project.
        path: URL path starting with "/", unique in the project.
        title: Optional document title.
        layout: Optional layout (defaults to PageLayout()).

    Example:
        >>> command = CreatePage(
        ...     project_id=project_id,
        ...     user_id=user_id,
        ...     name="About",
        ...     path="/about",
        ... )
        >>> result = await handler.handle(command)
    """

    project_id: UUID
    user_id: UUID
    name: str
    path: str
    title: str | None = None
    layout: PageLayout | None = None


@dataclass(frozen=True, kw_only=True)
class UpdatePage:
    """Update page attributes.

    Fields left as None are not touched. An empty title clears it.
    """

    page_id: UUID
    user_id: UUID
    name: str | None = None
    path: str | None = None
    title: str | None = None
    layout: PageLayout | None = None


@dataclass(frozen=True, kw_only=True)
class PublishPage:
    """Publish a page. Fails when the page has no components."""

    page_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class UnpublishPage:
    page_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class DeletePage:
    page_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AddComponent:
    """Add a component to a page.

    Attributes:
        page_id: Page to edit.
        user_id: User requesting.
        component_type: Component type (enum member or its string value).
        props: Properties overriding the type's defaults.
        position: Insert index; out-of-range or None appends.
    """

    page_id: UUID
    user_id: UUID
    component_type: ComponentType | str
    props: Mapping[str, Any] = field(default_factory=dict)
    position: int | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateComponent:
    """Partially update a component's properties (atomic)."""

    page_id: UUID
    component_id: UUID
    user_id: UUID
    props: Mapping[str, Any]


@dataclass(frozen=True, kw_only=True)
class RemoveComponent:
    page_id: UUID
    component_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ReorderComponents:
    """Replace a page's component order.

    Attributes:
        component_ids: Exactly the page's current component ids, in the new
            order.
    """

    page_id: UUID
    user_id: UUID
    component_ids: tuple[UUID, ...]


@dataclass(frozen=True, kw_only=True)
class CopyPage:
    """Copy a page into a project owned by the same user.

    Attributes:
        source_page_id: Page to copy.
        target_project_id: Destination project (may be the source project).
        user_id: Must own both projects.
        new_name: Name of the copy, unique in the target project.
        new_path: Path of the copy, unique in the target project.
    """

    source_page_id: UUID
    target_project_id: UUID
    user_id: UUID
    new_name: str
    new_path: str


@dataclass(frozen=True, kw_only=True)
class BulkPublishPages:
    """Publish or unpublish several pages of one project at once.

    Publishing applies the same rule as PublishPage to every page: if any
    listed page has no components, nothing changes.

    Attributes:
        project_id: Project owning every listed page.
        user_id: User requesting.
        page_ids: Pages to update.
        is_published: Target publication state.
    """

    project_id: UUID
    user_id: UUID
    page_ids: tuple[UUID, ...]
    is_published: bool = True
