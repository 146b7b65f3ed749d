"""Seed helpers that build valid aggregates and store them.

Seeded aggregates are saved with their creation events cleared, the same
state they would have after a handler published them.
"""

from uuid import UUID

from sitecraft.domain.entities.page import Page
from sitecraft.domain.entities.project import Project
from sitecraft.domain.entities.user import User
from tests.utils.in_memory_repositories import (
    InMemoryPageRepository,
    InMemoryProjectRepository,
    InMemoryUserRepository,
)


async def seed_user(
    user_repo: InMemoryUserRepository, username: str = "alice"
) -> User:
    user = User.create(
        email=f"{username}@mail.com", username=username, password_hash="hashed"
    ).value
    await user_repo.save(user)
    return user


async def seed_project(
    project_repo: InMemoryProjectRepository,
    user_id: UUID,
    name: str = "Portfolio",
    description: str | None = None,
) -> Project:
    project = Project.create(name=name, user_id=user_id, description=description).value
    project.clear_domain_events()
    await project_repo.save(project)
    return project


async def seed_page(
    page_repo: InMemoryPageRepository,
    project_id: UUID,
    name: str = "Home",
    path: str = "/",
    *,
    texts: tuple[str, ...] = (),
    published: bool = False,
) -> Page:
    """Store a page with one Text component per entry in texts."""
    page = Page.create(project_id=project_id, name=name, path=path).value
    for content in texts:
        page.add_component("Text", {"content": content})
    if published:
        page.publish()
    page.clear_domain_events()
    await page_repo.save(page)
    return page
