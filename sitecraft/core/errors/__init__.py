"""Core errors package.

Usage:
    from sitecraft.core.errors import DomainError, ValidationError, NotFoundError
"""

from sitecraft.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from sitecraft.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "ConflictError",
]
