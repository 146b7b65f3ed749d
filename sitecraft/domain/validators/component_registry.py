"""Component Type Registry.

Single source of truth for the component types a page may contain: display
name, default properties, the allowlist of configurable properties and the
per-property value rules.

Pattern: Registry Pattern with metadata catalog and helper functions.

Validation is replace-on-default: a property bag starts as a copy of the
type's defaults and each supplied key is checked against the allowlist and
its value rule before it overwrites the default. Keys outside the allowlist
are rejected even when harmless.

Usage:
    from sitecraft.domain.validators.component_registry import validate_props

    props = validate_props(ComponentType.TEXT, {"content": "Hello"})
    # {'content': 'Hello', 'size': 'medium', 'color': 'default', 'align': 'left'}
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal, NotRequired, TypedDict, assert_never

from sitecraft.core.enums import ErrorCode
from sitecraft.domain.enums import ActionType, ComponentType
from sitecraft.domain.errors import InvalidValueError
from sitecraft.domain.validators.functions import (
    validate_boolean,
    validate_choice,
    validate_image_src,
    validate_optional_string,
    validate_positive_number,
    validate_required_string,
)

SIZES = ("small", "medium", "large")
ACTION_TYPES = tuple(a.value for a in ActionType)


# =============================================================================
# Typed property records (one per component type)
# =============================================================================


class ComponentAction(TypedDict):
    """Button click action."""

    type: Literal["navigate", "submit", "none"]
    target: NotRequired[str]


class TextProps(TypedDict):
    content: str
    size: Literal["small", "medium", "large"]
    color: Literal["default", "primary", "secondary", "success", "warning", "error"]
    align: Literal["left", "center", "right"]


ButtonProps = TypedDict(
    "ButtonProps",
    {
        "text": str,
        "type": Literal["primary", "default", "dashed", "link", "text"],
        "size": Literal["small", "medium", "large"],
        "disabled": bool,
        "action": NotRequired[ComponentAction | None],
    },
)


InputProps = TypedDict(
    "InputProps",
    {
        "placeholder": str | None,
        "required": bool,
        "type": Literal["text", "password", "email", "number", "tel", "url"],
        "maxLength": NotRequired[int | float | None],
    },
)


class ImageProps(TypedDict):
    src: str
    alt: str | None
    width: int | float | Literal["auto"]
    height: int | float | Literal["auto"]


class ContainerProps(TypedDict):
    padding: Literal["none", "small", "medium", "large"]
    background: Literal["none", "light", "dark"]
    border: bool


class DividerProps(TypedDict):
    style: Literal["solid", "dashed", "dotted"]
    spacing: Literal["small", "medium", "large"]


type ComponentPropsValues = (
    TextProps | ButtonProps | InputProps | ImageProps | ContainerProps | DividerProps
)


# =============================================================================
# Registry
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ComponentDefinition:
    """Metadata for a single component type.

    Attributes:
        component_type: The type this definition describes.
        display_name: Human-readable name shown in the editor palette.
        default_props: Property values applied before caller overrides.
        configurable: Allowlist of property names callers may set.
        description: Short description for documentation.
    """

    component_type: ComponentType
    display_name: str
    default_props: Mapping[str, Any]
    configurable: frozenset[str]
    description: str


COMPONENT_REGISTRY: dict[ComponentType, ComponentDefinition] = {
    ComponentType.TEXT: ComponentDefinition(
        component_type=ComponentType.TEXT,
        display_name="Text",
        default_props={
            "content": "Text",
            "size": "medium",
            "color": "default",
            "align": "left",
        },
        configurable=frozenset({"content", "size", "color", "align"}),
        description="Block of text with size, color and alignment",
    ),
    ComponentType.BUTTON: ComponentDefinition(
        component_type=ComponentType.BUTTON,
        display_name="Button",
        default_props={
            "text": "Button",
            "type": "primary",
            "size": "medium",
            "disabled": False,
        },
        configurable=frozenset({"text", "type", "size", "disabled", "action"}),
        description="Clickable button with an optional navigate/submit action",
    ),
    ComponentType.INPUT: ComponentDefinition(
        component_type=ComponentType.INPUT,
        display_name="Input",
        default_props={
            "placeholder": "Please enter",
            "required": False,
            "type": "text",
        },
        configurable=frozenset({"placeholder", "required", "type", "maxLength"}),
        description="Single-line form input",
    ),
    ComponentType.IMAGE: ComponentDefinition(
        component_type=ComponentType.IMAGE,
        display_name="Image",
        default_props={
            "src": "/images/placeholder.jpg",
            "alt": "Image",
            "width": "auto",
            "height": "auto",
        },
        configurable=frozenset({"src", "alt", "width", "height"}),
        description="Image from an http(s) URL or site path",
    ),
    ComponentType.CONTAINER: ComponentDefinition(
        component_type=ComponentType.CONTAINER,
        display_name="Container",
        default_props={
            "padding": "medium",
            "background": "none",
            "border": False,
        },
        configurable=frozenset({"padding", "background", "border"}),
        description="Box with padding, background and optional border",
    ),
    ComponentType.DIVIDER: ComponentDefinition(
        component_type=ComponentType.DIVIDER,
        display_name="Divider",
        default_props={
            "style": "solid",
            "spacing": "medium",
        },
        configurable=frozenset({"style", "spacing"}),
        description="Horizontal rule",
    ),
}


# =============================================================================
# Helper functions
# =============================================================================


def parse_component_type(value: ComponentType | str) -> ComponentType:
    """Resolve a ComponentType from an enum member or its string value.

    Raises:
        InvalidValueError: INVALID_COMPONENT_TYPE if unknown.
    """
    if isinstance(value, ComponentType):
        return value
    try:
        return ComponentType(value)
    except ValueError:
        raise InvalidValueError(
            f"Unsupported component type: {value}",
            code=ErrorCode.INVALID_COMPONENT_TYPE,
            field="type",
        ) from None


def get_component_definition(component_type: ComponentType | str) -> ComponentDefinition:
    """Get the registry entry for a component type.

    Args:
        component_type: Enum member or string value (e.g. "Text").

    Returns:
        ComponentDefinition: Registry metadata.

    Raises:
        InvalidValueError: INVALID_COMPONENT_TYPE if the type is unknown.
    """
    return COMPONENT_REGISTRY[parse_component_type(component_type)]


def get_all_component_types() -> list[ComponentType]:
    """Get all registered component types in registry order."""
    return list(COMPONENT_REGISTRY.keys())


def get_default_props(component_type: ComponentType | str) -> dict[str, Any]:
    """Get a fresh copy of a type's default properties."""
    return dict(get_component_definition(component_type).default_props)


def get_statistics() -> dict[str, int]:
    """Get registry statistics.

    Returns:
        dict[str, int]: Type count and total configurable property count.

    Example:
        >>> get_statistics()
        {'total_types': 6, 'total_configurable_props': 22}
    """
    return {
        "total_types": len(COMPONENT_REGISTRY),
        "total_configurable_props": sum(
            len(d.configurable) for d in COMPONENT_REGISTRY.values()
        ),
    }


# =============================================================================
# Per-type value rules
# =============================================================================


def _validate_text_prop(key: str, value: Any) -> None:
    match key:
        case "content":
            validate_required_string(value, field=key, max_length=1000, label="Text content")
        case "size":
            validate_choice(value, field=key, choices=SIZES)
        case "color":
            validate_choice(
                value,
                field=key,
                choices=("default", "primary", "secondary", "success", "warning", "error"),
            )
        case "align":
            validate_choice(value, field=key, choices=("left", "center", "right"))


def _validate_action(value: Any) -> None:
    if not value:
        return
    invalid = InvalidValueError(
        "Button action is invalid",
        code=ErrorCode.INVALID_PROPERTY_VALUE,
        field="action",
    )
    if not isinstance(value, Mapping):
        raise invalid
    if value.get("type") not in ACTION_TYPES:
        raise invalid
    target = value.get("target")
    if value["type"] == ActionType.NAVIGATE.value and (
        not target or not isinstance(target, str)
    ):
        raise invalid
    if target is not None and not isinstance(target, str):
        raise invalid


def _validate_button_prop(key: str, value: Any) -> None:
    match key:
        case "text":
            validate_required_string(value, field=key, max_length=50, label="Button text")
        case "type":
            validate_choice(
                value, field=key, choices=("primary", "default", "dashed", "link", "text")
            )
        case "size":
            validate_choice(value, field=key, choices=SIZES)
        case "disabled":
            validate_boolean(value, field=key)
        case "action":
            _validate_action(value)


def _validate_input_prop(key: str, value: Any) -> None:
    match key:
        case "placeholder":
            validate_optional_string(value, field=key, max_length=100)
        case "type":
            validate_choice(
                value,
                field=key,
                choices=("text", "password", "email", "number", "tel", "url"),
            )
        case "required":
            validate_boolean(value, field=key)
        case "maxLength":
            validate_positive_number(value, field=key, allow_none=True)


def _validate_image_prop(key: str, value: Any) -> None:
    match key:
        case "src":
            validate_image_src(value, field=key)
        case "alt":
            validate_optional_string(value, field=key)
        case "width" | "height":
            validate_positive_number(value, field=key, allow_auto=True)


def _validate_container_prop(key: str, value: Any) -> None:
    match key:
        case "padding":
            validate_choice(value, field=key, choices=("none", *SIZES))
        case "background":
            validate_choice(value, field=key, choices=("none", "light", "dark"))
        case "border":
            validate_boolean(value, field=key)


def _validate_divider_prop(key: str, value: Any) -> None:
    match key:
        case "style":
            validate_choice(value, field=key, choices=("solid", "dashed", "dotted"))
        case "spacing":
            validate_choice(value, field=key, choices=SIZES)


def validate_prop_value(component_type: ComponentType, key: str, value: Any) -> None:
    """Run the value rule for one property of one component type.

    Args:
        component_type: Component type the property belongs to.
        key: Property name (already known to be in the allowlist).
        value: Candidate value.

    Raises:
        InvalidValueError: INVALID_PROPERTY_VALUE naming the key.
    """
    match component_type:
        case ComponentType.TEXT:
            _validate_text_prop(key, value)
        case ComponentType.BUTTON:
            _validate_button_prop(key, value)
        case ComponentType.INPUT:
            _validate_input_prop(key, value)
        case ComponentType.IMAGE:
            _validate_image_prop(key, value)
        case ComponentType.CONTAINER:
            _validate_container_prop(key, value)
        case ComponentType.DIVIDER:
            _validate_divider_prop(key, value)
        case _:
            assert_never(component_type)


def validate_prop_updates(
    component_type: ComponentType | str, props: Mapping[str, Any]
) -> dict[str, Any]:
    """Validate a partial property bag without applying defaults.

    Every key is checked before anything is returned, so a caller merging the
    result never applies a partial update.

    Args:
        component_type: Component type.
        props: Properties to validate.

    Returns:
        dict[str, Any]: Copy of props.

    Raises:
        InvalidValueError: INVALID_COMPONENT_TYPE, INVALID_PROPERTY_NAME or
            INVALID_PROPERTY_VALUE.
    """
    definition = get_component_definition(component_type)
    validated: dict[str, Any] = {}
    for key, value in props.items():
        if key not in definition.configurable:
            raise InvalidValueError(
                f"Component {definition.component_type.value} does not support property '{key}'",
                code=ErrorCode.INVALID_PROPERTY_NAME,
                field=key,
            )
        validate_prop_value(definition.component_type, key, value)
        validated[key] = value
    return validated


def validate_props(
    component_type: ComponentType | str, props: Mapping[str, Any]
) -> dict[str, Any]:
    """Validate a property bag and merge it over the type's defaults.

    Args:
        component_type: Component type (enum member or string value).
        props: Caller-supplied properties.

    Returns:
        dict[str, Any]: Defaults overlaid with the validated properties.

    Raises:
        InvalidValueError: INVALID_COMPONENT_TYPE, INVALID_PROPERTY_NAME or
            INVALID_PROPERTY_VALUE.

    Example:
        >>> validate_props("Button", {"text": "Go"})
        {'text': 'Go', 'type': 'primary', 'size': 'medium', 'disabled': False}
    """
    merged = get_default_props(component_type)
    merged.update(validate_prop_updates(component_type, props))
    return merged
