"""Page aggregate root.

A page owns an ordered list of Components and a PageLayout. Structural
invariants are enforced here:

- name is non-empty and at most 100 characters
- path is non-empty, starts with "/" and is at most 200 characters
- a page needs at least one component to be published
- a reorder must name exactly the current component ids

Name and path uniqueness within a project need repository lookups and are
enforced by the application layer before calling into the page.

Architecture:
    - Mutating methods return Result; a Failure leaves the page unchanged
    - Every successful mutation bumps updated_at and records one domain event
    - Pending events are drained by the application layer after save

Usage:
    result = Page.create(project_id=project.id, name="Home", path="/")
    page = result.value
    page.add_component(ComponentType.TEXT, {"content": "Welcome"})
    page.publish()
    await publish_domain_events(page, dispatcher)
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from sitecraft.core.enums import ErrorCode
from sitecraft.core.errors import DomainError, NotFoundError
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.entities.component import Component
from sitecraft.domain.enums import ComponentType
from sitecraft.domain.errors import InvalidValueError, PageError
from sitecraft.domain.events import (
    ComponentAdded,
    ComponentRemoved,
    ComponentsReordered,
    ComponentUpdated,
    DomainEvent,
    PageCreated,
    PageLayoutUpdated,
    PageNameChanged,
    PagePathChanged,
    PagePublished,
    PageTitleChanged,
    PageUnpublished,
)
from sitecraft.domain.types import as_datetime, as_uuid
from sitecraft.domain.validators.functions import validate_path, validate_required_string
from sitecraft.domain.value_objects import PageLayout

MAX_NAME_LENGTH = 100
MAX_PATH_LENGTH = 200


def validate_page_name(name: Any) -> str:
    """Validate a page name.

    Raises:
        InvalidValueError: INVALID_PAGE_NAME.
    """
    return validate_required_string(
        name,
        field="name",
        max_length=MAX_NAME_LENGTH,
        code=ErrorCode.INVALID_PAGE_NAME,
        label="Page name",
        strip=True,
    )


def validate_page_path(path: Any) -> str:
    """Validate a page path.

    Raises:
        InvalidValueError: INVALID_PAGE_PATH.
    """
    return validate_path(
        path,
        field="path",
        max_length=MAX_PATH_LENGTH,
        code=ErrorCode.INVALID_PAGE_PATH,
        label="Page path",
    )


@dataclass(eq=False)
class Page:
    """Page aggregate root.

    Attributes:
        id: Unique identifier.
        project_id: Owning project (back-reference, immutable).
        name: Display name.
        path: URL path within the site, starts with "/".
        title: Optional HTML title.
        layout: Page layout settings.
        components: Ordered components. Order is rendering order.
        is_published: Publication flag.
        created_at: Creation timestamp (UTC).
        updated_at: Bumped on every mutation (UTC).
    """

    id: UUID
    project_id: UUID
    name: str
    path: str
    title: str | None = None
    layout: PageLayout = field(default_factory=PageLayout)
    components: list[Component] = field(default_factory=list)
    is_published: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False
    )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        project_id: UUID,
        name: str,
        path: str,
        title: str | None = None,
        layout: PageLayout | None = None,
    ) -> Result["Page", DomainError]:
        """Create a new, unpublished page with no components.

        Returns:
            Success(Page): New page with a pending PageCreated event.
            Failure(ValidationError): Invalid name or path.
        """
        try:
            validate_page_name(name)
            validate_page_path(path)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())

        now = datetime.now(UTC)
        page = cls(
            id=uuid7(),
            project_id=project_id,
            name=name,
            path=path,
            title=title or None,
            layout=layout or PageLayout(),
            created_at=now,
            updated_at=now,
        )
        page._record(
            PageCreated(
                aggregate_id=page.id,
                project_id=project_id,
                page_name=name,
                page_path=path,
            )
        )
        return Success(value=page)

    @classmethod
    def from_persistence(cls, record: Mapping[str, Any]) -> "Page":
        """Rebuild from a stored record without validation or events."""
        return cls(
            id=as_uuid(record["id"]),
            project_id=as_uuid(record["projectId"]),
            name=record["name"],
            path=record["path"],
            title=record.get("title"),
            layout=PageLayout.from_dict(record.get("layout")),
            components=[Component.from_persistence(c) for c in record.get("components") or []],
            is_published=bool(record.get("isPublished", False)),
            created_at=as_datetime(record["createdAt"]),
            updated_at=as_datetime(record["updatedAt"]),
        )

    # -------------------------------------------------------------------------
    # Page attributes
    # -------------------------------------------------------------------------

    def update_name(self, name: str) -> Result[None, DomainError]:
        try:
            validate_page_name(name)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())

        old_name = self.name
        self.name = name
        self._touch()
        self._record(
            PageNameChanged(
                aggregate_id=self.id,
                project_id=self.project_id,
                old_name=old_name,
                new_name=name,
            )
        )
        return Success(value=None)

    def update_path(self, path: str) -> Result[None, DomainError]:
        try:
            validate_page_path(path)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())

        old_path = self.path
        self.path = path
        self._touch()
        self._record(
            PagePathChanged(
                aggregate_id=self.id,
                project_id=self.project_id,
                old_path=old_path,
                new_path=path,
            )
        )
        return Success(value=None)

    def update_title(self, title: str | None) -> Result[None, DomainError]:
        """Set or clear (None or "") the title."""
        old_title = self.title
        self.title = title or None
        self._touch()
        self._record(
            PageTitleChanged(
                aggregate_id=self.id,
                project_id=self.project_id,
                old_title=old_title,
                new_title=self.title,
            )
        )
        return Success(value=None)

    def update_layout(self, layout: PageLayout) -> Result[None, DomainError]:
        """Replace the layout. PageLayout is valid by construction."""
        self.layout = layout
        self._touch()
        self._record(
            PageLayoutUpdated(
                aggregate_id=self.id,
                project_id=self.project_id,
                layout=layout.to_dict(),
            )
        )
        return Success(value=None)

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def add_component(
        self,
        component_type: ComponentType | str,
        props: Mapping[str, Any] | None = None,
        position: int | None = None,
    ) -> Result[Component, DomainError]:
        """Create a component and place it on the page.

        Args:
            component_type: Component type (enum member or string value).
            props: Component properties.
            position: Insert index in [0, len(components)]. Any other value
                (including None and booleans) appends.

        Returns:
            Success(Component): The new component.
            Failure(ValidationError): Invalid type or props. Page unchanged.
        """
        result = Component.create(component_type, props)
        if isinstance(result, Failure):
            return result
        component = result.value

        if (
            isinstance(position, int)
            and not isinstance(position, bool)
            and 0 <= position <= len(self.components)
        ):
            index = position
            self.components.insert(index, component)
        else:
            index = len(self.components)
            self.components.append(component)

        self._touch()
        self._record(
            ComponentAdded(
                aggregate_id=self.id,
                component_id=component.id,
                component_type=component.component_type,
                position=index,
            )
        )
        return Success(value=component)

    def remove_component(self, component_id: UUID) -> Result[None, DomainError]:
        component = self.get_component(component_id)
        if component is None:
            return Failure(error=self._component_not_found(component_id))

        self.components.remove(component)
        self._touch()
        self._record(
            ComponentRemoved(
                aggregate_id=self.id,
                component_id=component.id,
                component_type=component.component_type,
            )
        )
        return Success(value=None)

    def update_component(
        self, component_id: UUID, props: Mapping[str, Any]
    ) -> Result[Component, DomainError]:
        component = self.get_component(component_id)
        if component is None:
            return Failure(error=self._component_not_found(component_id))

        result = component.update_props(props)
        if isinstance(result, Failure):
            return result

        self._touch()
        self._record(
            ComponentUpdated(
                aggregate_id=self.id,
                component_id=component.id,
                updated_properties=tuple(props.keys()),
            )
        )
        return Success(value=component)

    def reorder_components(self, component_ids: Sequence[UUID]) -> Result[None, DomainError]:
        """Replace the component order.

        component_ids must be exactly a permutation of the current ids. On
        any mismatch the order is left unchanged.

        Returns:
            Success(None): Order replaced.
            Failure(DomainError): COMPONENT_ORDER_MISMATCH; the message lists
                missing ids when some are absent.
        """
        new_order = list(component_ids)
        if len(new_order) != len(self.components):
            return Failure(error=self._order_mismatch(PageError.REORDER_COUNT_MISMATCH))
        if len(set(new_order)) != len(new_order):
            return Failure(error=self._order_mismatch(PageError.REORDER_DUPLICATE_IDS))

        by_id = {c.id: c for c in self.components}
        requested = set(new_order)
        missing = [str(cid) for cid in by_id if cid not in requested]
        if missing:
            return Failure(
                error=self._order_mismatch(
                    f"{PageError.REORDER_MISSING_IDS}: {', '.join(missing)}"
                )
            )

        self.components = [by_id[cid] for cid in new_order]
        self._touch()
        self._record(ComponentsReordered(aggregate_id=self.id, new_order=tuple(new_order)))
        return Success(value=None)

    def get_component(self, component_id: UUID) -> Component | None:
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    @property
    def component_count(self) -> int:
        return len(self.components)

    # -------------------------------------------------------------------------
    # Publication
    # -------------------------------------------------------------------------

    def publish(self) -> Result[None, DomainError]:
        """Publish the page.

        Returns:
            Success(None): is_published is True.
            Failure(DomainError): PAGE_HAS_NO_COMPONENTS.
        """
        if not self.components:
            return Failure(
                error=DomainError(
                    code=ErrorCode.PAGE_HAS_NO_COMPONENTS,
                    message=PageError.NO_COMPONENTS_TO_PUBLISH,
                )
            )

        self.is_published = True
        self._touch()
        self._record(PagePublished(aggregate_id=self.id, project_id=self.project_id))
        return Success(value=None)

    def unpublish(self) -> Result[None, DomainError]:
        self.is_published = False
        self._touch()
        self._record(PageUnpublished(aggregate_id=self.id, project_id=self.project_id))
        return Success(value=None)

    # -------------------------------------------------------------------------
    # Domain events
    # -------------------------------------------------------------------------

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Pending events in emission order."""
        return tuple(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def _record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def _component_not_found(self, component_id: UUID) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.COMPONENT_NOT_FOUND,
            message=f"{PageError.COMPONENT_NOT_FOUND}: {component_id}",
            resource_type="Component",
            resource_id=str(component_id),
        )

    @staticmethod
    def _order_mismatch(message: str) -> DomainError:
        return DomainError(code=ErrorCode.COMPONENT_ORDER_MISMATCH, message=message)

    # -------------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------------

    def to_render_data(self) -> dict[str, Any]:
        """Everything a renderer needs to draw the page."""
        return {
            "meta": {"title": self.title or self.name, "path": self.path},
            "layout": self.layout.to_dict(),
            "styles": self.layout.to_css_object(),
            "components": [
                {"id": str(c.id), **c.get_render_config()} for c in self.components
            ],
        }

    def to_public_info(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "projectId": str(self.project_id),
            "name": self.name,
            "path": self.path,
            "title": self.title,
            "isPublished": self.is_published,
            "componentCount": self.component_count,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def to_persistence(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "projectId": str(self.project_id),
            "name": self.name,
            "path": self.path,
            "title": self.title,
            "components": [c.to_persistence() for c in self.components],
            "layout": self.layout.to_dict(),
            "isPublished": self.is_published,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
