"""Reusable validation functions.

Validators are pure functions that raise InvalidValueError on failure and
return the validated (sometimes normalized) value on success. They are used by
the component registry, value objects and entities so that each rule is
written once.
"""

import re
from collections.abc import Collection
from typing import Any

from sitecraft.core.enums import ErrorCode
from sitecraft.domain.errors import InvalidValueError

HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
IMAGE_SRC_PREFIXES = ("http", "/", "./")


def is_number(value: Any) -> bool:
    """Check for an int or float that is not a bool.

    Args:
        value: Value to check.

    Returns:
        bool: True for real numbers, False for bools and everything else.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_required_string(
    value: Any,
    *,
    field: str,
    max_length: int,
    code: ErrorCode = ErrorCode.INVALID_PROPERTY_VALUE,
    label: str | None = None,
    strip: bool = False,
) -> str:
    """Validate a non-empty string with an upper length bound.

    Args:
        value: Value to validate.
        field: Field name reported on failure.
        max_length: Maximum allowed length (inclusive).
        code: Error code reported on failure.
        label: Human-readable name used in messages (defaults to field).
        strip: Treat whitespace-only values as empty.

    Returns:
        str: The value unchanged.

    Raises:
        InvalidValueError: If the value is not a string, is empty, or is too long.

    Example:
        >>> validate_required_string("Hello", field="content", max_length=1000)
        'Hello'
    """
    name = label or field
    if not isinstance(value, str) or not (value.strip() if strip else value):
        raise InvalidValueError(f"{name} cannot be empty", code=code, field=field)
    if len(value) > max_length:
        raise InvalidValueError(
            f"{name} cannot exceed {max_length} characters", code=code, field=field
        )
    return value


def validate_optional_string(
    value: Any,
    *,
    field: str,
    max_length: int | None = None,
    code: ErrorCode = ErrorCode.INVALID_PROPERTY_VALUE,
) -> str | None:
    """Validate an optional string (None and empty string allowed).

    Raises:
        InvalidValueError: If the value is neither None nor a string, or is
            longer than max_length.
    """
    if value is None or value == "":
        return value
    if not isinstance(value, str):
        raise InvalidValueError(f"{field} must be a string", code=code, field=field)
    if max_length is not None and len(value) > max_length:
        raise InvalidValueError(
            f"{field} cannot exceed {max_length} characters", code=code, field=field
        )
    return value


def validate_choice(
    value: Any,
    *,
    field: str,
    choices: Collection[str],
    code: ErrorCode = ErrorCode.INVALID_PROPERTY_VALUE,
) -> str:
    """Validate enum membership.

    Args:
        value: Value to validate.
        field: Field name reported on failure.
        choices: Allowed values.
        code: Error code reported on failure.

    Returns:
        str: The value unchanged.

    Raises:
        InvalidValueError: If the value is not one of the choices.

    Example:
        >>> validate_choice("large", field="size", choices=("small", "medium", "large"))
        'large'
    """
    if not isinstance(value, str) or value not in choices:
        allowed = ", ".join(choices)
        raise InvalidValueError(
            f"{field} must be one of: {allowed}", code=code, field=field
        )
    return value


def validate_boolean(
    value: Any,
    *,
    field: str,
    code: ErrorCode = ErrorCode.INVALID_PROPERTY_VALUE,
) -> bool:
    """Validate that a value is a real bool (no truthiness coercion).

    Raises:
        InvalidValueError: If the value is not a bool.
    """
    if not isinstance(value, bool):
        raise InvalidValueError(f"{field} must be a boolean", code=code, field=field)
    return value


def validate_positive_number(
    value: Any,
    *,
    field: str,
    allow_auto: bool = False,
    allow_none: bool = False,
    code: ErrorCode = ErrorCode.INVALID_PROPERTY_VALUE,
) -> int | float | str | None:
    """Validate a strictly positive number, optionally allowing "auto" or None.

    Args:
        value: Value to validate.
        field: Field name reported on failure.
        allow_auto: Accept the literal "auto".
        allow_none: Accept None.
        code: Error code reported on failure.

    Returns:
        The value unchanged.

    Raises:
        InvalidValueError: If the value is not an accepted form. Booleans are
            rejected even though bool is an int subclass.
    """
    if allow_none and value is None:
        return value
    if allow_auto and value == "auto":
        return value
    if not is_number(value) or value <= 0:
        expected = "auto or a positive number" if allow_auto else "a positive number"
        raise InvalidValueError(f"{field} must be {expected}", code=code, field=field)
    return value


def validate_image_src(value: Any, *, field: str = "src") -> str:
    """Validate an image source (http(s) URL or relative/absolute path).

    Raises:
        InvalidValueError: If empty, not a string, or missing a known prefix.

    Example:
        >>> validate_image_src("ftp://x")
        InvalidValueError: src must start with http, / or ./
    """
    if not isinstance(value, str) or not value:
        raise InvalidValueError(
            f"{field} cannot be empty",
            code=ErrorCode.INVALID_PROPERTY_VALUE,
            field=field,
        )
    if not value.startswith(IMAGE_SRC_PREFIXES):
        raise InvalidValueError(
            f"{field} must start with http, / or ./",
            code=ErrorCode.INVALID_PROPERTY_VALUE,
            field=field,
        )
    return value


def validate_path(
    value: Any,
    *,
    field: str = "path",
    max_length: int | None = None,
    code: ErrorCode = ErrorCode.VALIDATION_FAILED,
    label: str = "Path",
) -> str:
    """Validate a site path: non-empty and starting with "/".

    Raises:
        InvalidValueError: If empty, not rooted, or too long.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidValueError(f"{label} cannot be empty", code=code, field=field)
    if not value.startswith("/"):
        raise InvalidValueError(f"{label} must start with '/'", code=code, field=field)
    if max_length is not None and len(value) > max_length:
        raise InvalidValueError(
            f"{label} cannot exceed {max_length} characters", code=code, field=field
        )
    return value


def validate_hex_color(value: Any, *, field: str = "primary_color") -> str:
    """Validate a 3- or 6-digit hex color such as #fff or #1890ff.

    Raises:
        InvalidValueError: If the value is not a hex color.
    """
    if not isinstance(value, str) or not HEX_COLOR_PATTERN.match(value):
        raise InvalidValueError(
            "Primary color must be a valid hex color",
            code=ErrorCode.INVALID_THEME_CONFIG,
            field=field,
        )
    return value
