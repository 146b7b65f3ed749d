"""Component type enumeration.

The closed set of UI elements that can be placed on a page.
"""

from enum import Enum


class ComponentType(str, Enum):
    """Kinds of placeable UI component.

    Values match the persisted/wire representation exactly.
    """

    TEXT = "Text"
    BUTTON = "Button"
    INPUT = "Input"
    IMAGE = "Image"
    CONTAINER = "Container"
    DIVIDER = "Divider"

    @classmethod
    def values(cls) -> list[str]:
        """Get all component type values as strings.

        Returns:
            list[str]: List of all type values.
        """
        return [t.value for t in cls]
