"""Queries (CQRS read side)."""

from sitecraft.application.queries.page_queries import (
    GetPage,
    GetPageStats,
    ListProjectPages,
    PreviewPage,
)
from sitecraft.application.queries.project_queries import (
    GetProject,
    GetProjectStats,
    GetProjectWithPages,
    GetRecentProjects,
    ListUserProjects,
)

__all__ = [
    "GetProject",
    "ListUserProjects",
    "GetProjectStats",
    "GetRecentProjects",
    "GetProjectWithPages",
    "GetPage",
    "ListProjectPages",
    "GetPageStats",
    "PreviewPage",
]
