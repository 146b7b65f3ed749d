"""Button action type enumeration."""

from enum import Enum


class ActionType(str, Enum):
    """What a Button does when clicked."""

    NAVIGATE = "navigate"  # Requires a target path or URL
    SUBMIT = "submit"
    NONE = "none"
