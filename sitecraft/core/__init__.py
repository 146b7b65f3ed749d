"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Error values for domain-level failures
- Settings and the composition root

The core module has NO dependencies on other application layers (the
container imports infrastructure lazily).
"""

from sitecraft.core.enums import ErrorCode
from sitecraft.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from sitecraft.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "UnauthorizedError",
    "ValidationError",
]
