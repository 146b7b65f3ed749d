"""User domain errors."""


class UserError:
    """User error constants."""

    USERNAME_REQUIRED = "Username cannot be empty"
    USERNAME_LENGTH = "Username must be between 2 and 50 characters"
    USERNAME_CHARACTERS = "Username may only contain letters, digits, underscores and CJK characters"
    USER_NOT_FOUND = "User not found"
