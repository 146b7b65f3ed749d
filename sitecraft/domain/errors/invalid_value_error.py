"""Exception raised by value objects on invalid construction.

Value objects validate in __post_init__ and raise, the same way Python's own
constructors do (int("x") raises ValueError). Entities catch this at their
boundary and convert it into a ValidationError inside a Failure.

Usage:
    from sitecraft.domain.errors import InvalidValueError

    try:
        layout = PageLayout(max_width=100)
    except InvalidValueError as e:
        return Failure(error=e.to_domain_error())
"""

from sitecraft.core.enums import ErrorCode
from sitecraft.core.errors import ValidationError


class InvalidValueError(ValueError):
    """Raised when a value object or validator rejects its input.

    Attributes:
        code: Machine-readable error code.
        field: Field or property name that failed, if known.
        message: Human-readable message (same as str(exc)).
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        field: str | None = None,
    ) -> None:
        """Initialize invalid value error.

        Args:
            message: Human-readable message.
            code: Machine-readable error code.
            field: Offending field or property name.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field

    def to_domain_error(self) -> ValidationError:
        """Convert into a ValidationError value for Result-based flows.

        Returns:
            ValidationError: Error carrying the same code, message and field.
        """
        return ValidationError(code=self.code, message=self.message, field=self.field)
