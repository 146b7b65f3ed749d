"""Project lifecycle status."""

from enum import Enum


class ProjectStatus(str, Enum):
    """Project lifecycle status.

    Transitions are one-way from the model's perspective: publish and archive
    do not validate against each other.
    """

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"
