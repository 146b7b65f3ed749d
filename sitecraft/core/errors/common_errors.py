"""Common error kinds shared by all aggregates and handlers.

Error Types:
- ValidationError: a single field fails a format/length/enum/range rule
- NotFoundError: referenced entity does not exist
- UnauthorizedError: caller does not own the resource
- ConflictError: uniqueness violation (duplicate name or path)

Usage:
    from sitecraft.core.errors import ConflictError
    from sitecraft.core.enums import ErrorCode

    return Failure(
        error=ConflictError(
            code=ErrorCode.PAGE_PATH_ALREADY_EXISTS,
            message="Page path already exists: /home",
            resource_type="Page",
            conflicting_field="path",
        )
    )
"""

from dataclasses import dataclass

from sitecraft.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field or property name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Project, Page, Component, User).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class UnauthorizedError(DomainError):
    """Caller lacks ownership of, or permission on, a resource.

    Attributes:
        required_permission: Permission that was required, if any.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness conflict.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that conflicts (name, path).
    """

    resource_type: str
    conflicting_field: str | None = None
