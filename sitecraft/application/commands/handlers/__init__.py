"""Command handlers."""

from sitecraft.application.commands.handlers.component_handlers import (
    AddComponentHandler,
    RemoveComponentHandler,
    ReorderComponentsHandler,
    UpdateComponentHandler,
)
from sitecraft.application.commands.handlers.copy_page_handler import CopyPageHandler
from sitecraft.application.commands.handlers.create_page_handler import (
    CreatePageHandler,
)
from sitecraft.application.commands.handlers.create_project_handler import (
    CreateProjectHandler,
)
from sitecraft.application.commands.handlers.delete_page_handler import (
    DeletePageHandler,
)
from sitecraft.application.commands.handlers.delete_project_handler import (
    DeleteProjectHandler,
)
from sitecraft.application.commands.handlers.page_publication_handlers import (
    BulkPublishPagesHandler,
    PublishPageHandler,
    UnpublishPageHandler,
)
from sitecraft.application.commands.handlers.project_status_handlers import (
    ArchiveProjectHandler,
    PublishProjectHandler,
)
from sitecraft.application.commands.handlers.update_page_handler import (
    UpdatePageHandler,
)
from sitecraft.application.commands.handlers.update_project_handler import (
    UpdateProjectHandler,
)

__all__ = [
    "CreateProjectHandler",
    "UpdateProjectHandler",
    "PublishProjectHandler",
    "ArchiveProjectHandler",
    "DeleteProjectHandler",
    "CreatePageHandler",
    "UpdatePageHandler",
    "PublishPageHandler",
    "UnpublishPageHandler",
    "BulkPublishPagesHandler",
    "DeletePageHandler",
    "CopyPageHandler",
    "AddComponentHandler",
    "UpdateComponentHandler",
    "RemoveComponentHandler",
    "ReorderComponentsHandler",
]
