"""Project commands (CQRS write operations).

Commands represent user intent to change project state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from uuid import UUID

from sitecraft.domain.value_objects import ProjectConfig


@dataclass(frozen=True, kw_only=True)
class CreateProject:
    """Create a new DRAFT project for a user.

    Attributes:
        user_id: Owner; must exist.
        name: Project name, unique among the owner's projects.
        description: Optional description.
        config: Initial configuration (defaults to ProjectConfig()).

    Example:
        >>> command = CreateProject(user_id=user_id, name="Portfolio")
        >>> result = await handler.handle(command)
    """

    user_id: UUID
    name: str
    description: str | None = None
    config: ProjectConfig | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateProject:
    """Update name, description and/or configuration.

    Fields left as None are not touched. An empty description clears it.

    Attributes:
        project_id: Project to update.
        user_id: User requesting (for ownership verification).
        name: New name, unique among the owner's other projects.
        description: New description ("" clears).
        config: Replacement configuration.
    """

    project_id: UUID
    user_id: UUID
    name: str | None = None
    description: str | None = None
    config: ProjectConfig | None = None


@dataclass(frozen=True, kw_only=True)
class PublishProject:
    """Publish a project.

    Requires at least one page, and at least one published page, among the
    project's stored pages.

    State Transition: any -> PUBLISHED
    """

    project_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ArchiveProject:
    """Archive a project.

    State Transition: any -> ARCHIVED
    """

    project_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class DeleteProject:
    """Delete a project; storage removes its pages with it."""

    project_id: UUID
    user_id: UUID
