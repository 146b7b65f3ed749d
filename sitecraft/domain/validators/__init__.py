"""Domain validators package.

Usage:
    from sitecraft.domain.validators import validate_props, COMPONENT_REGISTRY
"""

from sitecraft.domain.validators.component_registry import (
    COMPONENT_REGISTRY,
    ComponentDefinition,
    ComponentPropsValues,
    get_all_component_types,
    get_component_definition,
    get_default_props,
    get_statistics,
    parse_component_type,
    validate_prop_updates,
    validate_prop_value,
    validate_props,
)

__all__ = [
    "COMPONENT_REGISTRY",
    "ComponentDefinition",
    "ComponentPropsValues",
    "get_all_component_types",
    "get_component_definition",
    "get_default_props",
    "get_statistics",
    "parse_component_type",
    "validate_prop_updates",
    "validate_prop_value",
    "validate_props",
]
