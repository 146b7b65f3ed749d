"""Domain errors package.

Usage:
    from sitecraft.domain.errors import InvalidValueError, PageError, ProjectError
"""

from sitecraft.domain.errors.invalid_value_error import InvalidValueError
from sitecraft.domain.errors.page_error import PageError
from sitecraft.domain.errors.project_error import ProjectError
from sitecraft.domain.errors.user_error import UserError

__all__ = [
    "InvalidValueError",
    "PageError",
    "ProjectError",
    "UserError",
]
