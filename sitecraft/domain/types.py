"""Shared domain types.

Read-model records returned by repositories and query handlers, plus the
coercion helpers used when rebuilding entities from persisted records.

Usage:
    from sitecraft.domain.types import Paginated, ProjectStats, as_uuid

    page: Paginated[Project] = await project_repo.find_by_user_id_with_pagination(...)
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from math import ceil
from uuid import UUID

from pydantic import TypeAdapter

_uuid_adapter = TypeAdapter(UUID)
_datetime_adapter = TypeAdapter(datetime)


# ============================================================================
# Read models
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class Paginated[T]:
    """One page of a larger result set.

    Attributes:
        items: Items on this page.
        total: Total number of matching items.
        page: 1-based page number.
        limit: Page size.
    """

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True, kw_only=True)
class ProjectStats:
    """Project counts for one user, by status."""

    total: int
    published: int
    draft: int
    archived: int


@dataclass(frozen=True, kw_only=True)
class PageStats:
    """Page counts for one project."""

    total: int
    published: int
    draft: int
    total_components: int


# ============================================================================
# Persistence coercion
# ============================================================================


def as_uuid(value: UUID | str) -> UUID:
    """Coerce a stored identifier to UUID.

    Raises:
        pydantic.ValidationError: If the value is not a UUID.
    """
    return _uuid_adapter.validate_python(value)


def as_datetime(value: datetime | str) -> datetime:
    """Coerce a stored timestamp to a timezone-aware datetime.

    Naive values are taken to be UTC.

    Raises:
        pydantic.ValidationError: If the value is not a datetime.
    """
    parsed = _datetime_adapter.validate_python(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
