"""Base domain error class for Railway-Oriented Programming.

DomainError is the base for every business-rule failure in Sitecraft.
Errors flow through the system as data inside Failure values; they are
never raised.

Architecture:
- Does NOT inherit from Exception (returned in Result, not raised)
- Dataclass inheritance for the error family
- A bare DomainError is used for aggregate invariant violations that do not
  fit a more specific kind (publish preconditions, reorder mismatch)

Usage:
    from sitecraft.core.errors import DomainError
    from sitecraft.core.enums import ErrorCode

    return Failure(
        error=DomainError(
            code=ErrorCode.PAGE_HAS_NO_COMPONENTS,
            message="Page needs at least one component to be published",
        )
    )
"""

from dataclasses import dataclass

from sitecraft.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message, shown to users verbatim.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
