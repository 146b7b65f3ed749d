"""Query handlers."""

from sitecraft.application.queries.handlers.get_page_handler import (
    GetPageHandler,
    PagePreviewResult,
    PreviewPageHandler,
)
from sitecraft.application.queries.handlers.get_project_handler import (
    GetProjectHandler,
    GetProjectWithPagesHandler,
    ProjectWithPagesResult,
)
from sitecraft.application.queries.handlers.list_pages_handler import (
    GetPageStatsHandler,
    ListProjectPagesHandler,
)
from sitecraft.application.queries.handlers.list_projects_handler import (
    GetProjectStatsHandler,
    GetRecentProjectsHandler,
    ListUserProjectsHandler,
)

__all__ = [
    "GetProjectHandler",
    "GetProjectWithPagesHandler",
    "ProjectWithPagesResult",
    "ListUserProjectsHandler",
    "GetRecentProjectsHandler",
    "GetProjectStatsHandler",
    "GetPageHandler",
    "PreviewPageHandler",
    "PagePreviewResult",
    "ListProjectPagesHandler",
    "GetPageStatsHandler",
]
