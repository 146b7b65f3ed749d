"""Email value object with validation.

Immutable value object that validates email format.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from sitecraft.core.enums import ErrorCode
from sitecraft.domain.errors import InvalidValueError


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses the email-validator library; the stored value is the normalized
    address (domain lowercased).

    Attributes:
        value: The email address string (validated, normalized).

    Raises:
        InvalidValueError: INVALID_EMAIL if the format is invalid.

    Example:
        >>> str(Email("user@Example.com"))
        'user@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the address."""
        try:
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidValueError(
                f"Invalid email: {e}", code=ErrorCode.INVALID_EMAIL, field="email"
            ) from e
        object.__setattr__(self, "value", validated.normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
