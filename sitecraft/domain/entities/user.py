"""User domain entity.

The owner of projects. Authentication (password hashing, tokens) happens
outside the domain: the entity stores an opaque password hash it never
interprets.

Usage:
    result = User.create(
        email="user@example.com",
        username="alice",
        password_hash=hasher.hash(raw_password),
    )
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from sitecraft.core.enums import ErrorCode
from sitecraft.core.errors import DomainError, ValidationError
from sitecraft.core.result import Failure, Result, Success
from sitecraft.domain.errors import InvalidValueError, UserError
from sitecraft.domain.types import as_datetime, as_uuid
from sitecraft.domain.value_objects import Email

USERNAME_PATTERN = re.compile(r"^[\w\u4e00-\u9fa5]+$")
MIN_USERNAME_LENGTH = 2
MAX_USERNAME_LENGTH = 50


def _check_username(username: Any) -> ValidationError | None:
    message = None
    if not isinstance(username, str) or not username.strip():
        message = UserError.USERNAME_REQUIRED
    elif not MIN_USERNAME_LENGTH <= len(username) <= MAX_USERNAME_LENGTH:
        message = UserError.USERNAME_LENGTH
    elif not USERNAME_PATTERN.match(username):
        message = UserError.USERNAME_CHARACTERS
    if message is None:
        return None
    return ValidationError(code=ErrorCode.INVALID_USERNAME, message=message, field="username")


@dataclass(eq=False)
class User:
    """Registered user.

    Attributes:
        id: Unique identifier.
        email: Validated, normalized email.
        username: 2-50 word characters (letters, digits, underscore, CJK).
        password_hash: Opaque credential hash.
        avatar: Optional avatar URL.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    id: UUID
    email: Email
    username: str
    password_hash: str
    avatar: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls,
        email: str,
        username: str,
        password_hash: str,
        avatar: str | None = None,
    ) -> Result["User", DomainError]:
        """Create a new user.

        Returns:
            Success(User): New user.
            Failure(ValidationError): Invalid email or username.
        """
        try:
            validated_email = Email(email)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())
        error = _check_username(username)
        if error is not None:
            return Failure(error=error)

        now = datetime.now(UTC)
        return Success(
            value=cls(
                id=uuid7(),
                email=validated_email,
                username=username,
                password_hash=password_hash,
                avatar=avatar or None,
                created_at=now,
                updated_at=now,
            )
        )

    @classmethod
    def from_persistence(cls, record: Mapping[str, Any]) -> "User":
        """Rebuild from a stored record.

        The email is re-wrapped in the Email value object, which normalizes it.
        """
        return cls(
            id=as_uuid(record["id"]),
            email=Email(record["email"]),
            username=record["username"],
            password_hash=record["password"],
            avatar=record.get("avatar"),
            created_at=as_datetime(record["createdAt"]),
            updated_at=as_datetime(record["updatedAt"]),
        )

    def update_profile(
        self, username: str | None = None, avatar: str | None = None
    ) -> Result[None, DomainError]:
        """Change username and/or avatar. None leaves a field unchanged."""
        if username is not None:
            error = _check_username(username)
            if error is not None:
                return Failure(error=error)
            self.username = username
        if avatar is not None:
            self.avatar = avatar or None
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def update_email(self, email: str) -> Result[None, DomainError]:
        try:
            self.email = Email(email)
        except InvalidValueError as e:
            return Failure(error=e.to_domain_error())
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def to_public_info(self) -> dict[str, Any]:
        """User data safe to return to clients (no password hash)."""
        return {
            "id": str(self.id),
            "email": str(self.email),
            "username": self.username,
            "avatar": self.avatar,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def to_persistence(self) -> dict[str, Any]:
        return {
            **self.to_public_info(),
            "password": self.password_hash,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
