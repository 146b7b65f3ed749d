"""Component domain entity.

A single typed UI element placed on a Page. Components have no existence
outside their page: they are created through Page.add_component() and
destroyed when removed from the page's component list.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Identity by id (two components with equal props are still different)
    - type is fixed at creation; props change through update_props()

Usage:
    result = Component.create(ComponentType.BUTTON, {"text": "Sign up"})
    match result:
        case Success(value=component):
            component.update_props({"size": "large"})
        case Failure(error=error):
            print(error.message)
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from sitecraft.core.errors import DomainError
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.enums import ComponentType
from sitecraft.domain.errors import InvalidValueError
from sitecraft.domain.types import as_datetime, as_uuid
from sitecraft.domain.value_objects import ComponentProps


@dataclass(eq=False)
class Component:
    """Placed UI component.

    Attributes:
        id: Unique identifier, immutable.
        component_type: Component type, immutable.
        props: Validated property values.
        created_at: Creation timestamp (UTC).
        updated_at: Bumped on every property change (UTC).
    """

    id: UUID
    component_type: ComponentType
    props: ComponentProps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls, component_type: ComponentType | str, props: Mapping[str, Any] | None = None
    ) -> Result["Component", DomainError]:
        """Create a new component with validated props.

        Args:
            component_type: Enum member or string value (e.g. "Text").
            props: Caller-supplied properties, merged over the type's defaults.

        Returns:
            Success(Component): New component with fresh id and timestamps.
            Failure(ValidationError): Unknown type, unknown property or
                invalid value. No component is constructed.
        """
        try:
            validated = ComponentProps.create(component_type, props)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())

        now = datetime.now(UTC)
        return Success(
            value=cls(
                id=uuid7(),
                component_type=validated.component_type,
                props=validated,
                created_at=now,
                updated_at=now,
            )
        )

    @classmethod
    def from_persistence(cls, record: Mapping[str, Any]) -> "Component":
        """Rebuild from a stored record. Storage is trusted: no validation."""
        props = ComponentProps.from_dict(record["type"], record.get("props") or {})
        return cls(
            id=as_uuid(record["id"]),
            component_type=props.component_type,
            props=props,
            created_at=as_datetime(record["createdAt"]),
            updated_at=as_datetime(record["updatedAt"]),
        )

    def update_props(self, props: Mapping[str, Any]) -> Result[None, DomainError]:
        """Merge new property values into the current ones.

        Args:
            props: Properties to change. Unmentioned properties keep their values.

        Returns:
            Success(None): Props replaced and updated_at bumped.
            Failure(ValidationError): Nothing changed.
        """
        try:
            self.props = self.props.update(props)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())

        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def is_valid(self) -> bool:
        return self.props.is_valid()

    def get_render_config(self) -> dict[str, Any]:
        """Snapshot used by renderers: {type, props}. No re-validation."""
        return {"type": self.component_type.value, "props": self.props.to_dict()}

    def to_persistence(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "type": self.component_type.value,
            "props": self.props.to_dict(),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
