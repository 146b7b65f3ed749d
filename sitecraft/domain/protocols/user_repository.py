"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from sitecraft.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port)."""

    async def find_by_id(self, user_id: UUID) -> User | None: ...

    async def find_by_email_or_username(self, email_or_username: str) -> User | None:
        """Find a user by either identifier (used at login).

        Email comparison is case-insensitive.
        """
        ...

    async def email_exists(self, email: str, exclude_id: UUID | None = None) -> bool: ...

    async def username_exists(
        self, username: str, exclude_id: UUID | None = None
    ) -> bool: ...

    async def save(self, user: User) -> None: ...
