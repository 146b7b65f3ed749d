"""Shared pytest fixtures.

Fixtures here are available to every test module:
- Identity fixtures (user_id, other_user_id)
- mock_logger: MagicMock satisfying LoggerProtocol
- mock_dispatcher: AsyncMock standing in for DomainEventDispatcher
- In-memory repositories and a wired OwnershipVerifier
- Settings with small page sizes, and cache isolation for get_settings()
"""

from typing import cast
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from sitecraft.application.services.ownership_verifier import OwnershipVerifier
from sitecraft.core.config import Settings, get_settings
from tests.utils.in_memory_repositories import (
    InMemoryPageRepository,
    InMemoryProjectRepository,
    InMemoryUserRepository,
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test starts with a fresh settings singleton."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def user_id() -> UUID:
    return cast(UUID, uuid7())


@pytest.fixture
def other_user_id() -> UUID:
    return cast(UUID, uuid7())


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger mock; assert on .info/.warning/.error calls."""
    return MagicMock()


@pytest.fixture
def mock_dispatcher() -> AsyncMock:
    """Dispatcher mock; inspect with tests.utils.events helpers."""
    return AsyncMock()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None, default_page_size=2, max_page_size=5, recent_items_limit=3
    )


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def page_repo() -> InMemoryPageRepository:
    return InMemoryPageRepository()


@pytest.fixture
def project_repo(page_repo: InMemoryPageRepository) -> InMemoryProjectRepository:
    """Project repository that cascades deletes to page_repo."""
    return InMemoryProjectRepository(page_repo=page_repo)


@pytest.fixture
def ownership_verifier(
    project_repo: InMemoryProjectRepository, page_repo: InMemoryPageRepository
) -> OwnershipVerifier:
    return OwnershipVerifier(project_repo=project_repo, page_repo=page_repo)
