"""ComponentProps value object.

A validated property bag bound to a component type. Instances never change:
update() returns a new instance.

Error Handling:
    create() and update() raise InvalidValueError (a ValueError subclass) on
    any violation, like other value object constructors. try_validate() is
    the Result-returning form for callers that branch on failure.

Usage:
    props = ComponentProps.create(ComponentType.TEXT, {"content": "Hello"})
    bigger = props.update({"size": "large"})
    props.get("size")   # 'medium'
    bigger.get("size")  # 'large'
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from sitecraft.core.errors import ValidationError
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.enums import ComponentType
from sitecraft.domain.errors import InvalidValueError
from sitecraft.domain.validators import (
    parse_component_type,
    validate_prop_updates,
    validate_props,
)


@dataclass(frozen=True, slots=True)
class ComponentProps:
    """Validated component properties.

    Direct construction trusts its input (used when rebuilding from storage).
    Use create() for caller-supplied data.

    Attributes:
        component_type: Type the properties are bound to.
        props: Read-only view of the property values.
    """

    component_type: ComponentType
    props: Mapping[str, Any]

    def __post_init__(self) -> None:
        """Freeze a private copy of the property mapping."""
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))

    @classmethod
    def create(
        cls, component_type: ComponentType | str, props: Mapping[str, Any] | None = None
    ) -> "ComponentProps":
        """Build validated props over the type's defaults.

        Args:
            component_type: Component type (enum member or string value).
            props: Caller-supplied properties.

        Returns:
            ComponentProps: New validated instance.

        Raises:
            InvalidValueError: Unknown type, unknown property or invalid value.
        """
        resolved = parse_component_type(component_type)
        return cls(resolved, validate_props(resolved, props or {}))

    @classmethod
    def try_validate(
        cls, component_type: ComponentType | str, props: Mapping[str, Any] | None = None
    ) -> Result["ComponentProps", ValidationError]:
        """Result-returning form of create().

        Returns:
            Success(ComponentProps) or Failure(ValidationError) naming the
            offending property.
        """
        try:
            return Success(value=cls.create(component_type, props))
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())

    @classmethod
    def from_dict(
        cls, component_type: ComponentType | str, data: Mapping[str, Any]
    ) -> "ComponentProps":
        """Rebuild from stored data without validation."""
        return cls(parse_component_type(component_type), data)

    def update(self, new_props: Mapping[str, Any]) -> "ComponentProps":
        """Return a copy with new_props merged over the current values.

        Only the incoming keys are validated; defaults are not re-applied and
        keys not mentioned keep their current values. Every key is checked
        before the merge, so a single bad key rejects the whole update.

        Raises:
            InvalidValueError: Unknown property or invalid value.
        """
        validated = validate_prop_updates(self.component_type, new_props)
        return ComponentProps(self.component_type, {**self.props, **validated})

    def is_valid(self) -> bool:
        """Re-run validation over the current values.

        Diagnostic only: the failure reason is discarded. Use try_validate()
        when the reason matters.
        """
        try:
            validate_props(self.component_type, self.props)
        except InvalidValueError:
            return False
        return True

    @property
    def values(self) -> dict[str, Any]:
        """Copy of the property values."""
        return dict(self.props)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a single property value."""
        return self.props.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict."""
        return dict(self.props)
