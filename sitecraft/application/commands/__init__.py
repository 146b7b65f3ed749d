"""Commands (CQRS write side)."""

from sitecraft.application.commands.page_commands import (
    AddComponent,
    BulkPublishPages,
    CopyPage,
    CreatePage,
    DeletePage,
    PublishPage,
    RemoveComponent,
    ReorderComponents,
    UnpublishPage,
    UpdateComponent,
    UpdatePage,
)
from sitecraft.application.commands.project_commands import (
    ArchiveProject,
    CreateProject,
    DeleteProject,
    PublishProject,
    UpdateProject,
)

__all__ = [
    # Project
    "CreateProject",
    "UpdateProject",
    "PublishProject",
    "ArchiveProject",
    "DeleteProject",
    # Page
    "CreatePage",
    "UpdatePage",
    "PublishPage",
    "UnpublishPage",
    "DeletePage",
    "CopyPage",
    "BulkPublishPages",
    # Components
    "AddComponent",
    "UpdateComponent",
    "RemoveComponent",
    "ReorderComponents",
]
