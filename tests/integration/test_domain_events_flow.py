"""Integration tests for the domain event flow.

Tests cover:
- Container get_event_dispatcher() returns a wired singleton
- Command handler -> dispatcher -> LoggingEventHandler, end to end
- Event order preserved across a multi-step editing session
- Fail-open: a failing extra handler is logged, logging still happens

Architecture:
- Real InMemoryDomainEventDispatcher and LoggingEventHandler from the container
- In-memory repositories
- The container logger is replaced with a MagicMock to capture log calls
"""

from unittest.mock import patch

import pytest

from sitecraft.application.commands import (
    AddComponent,
    CreatePage,
    CreateProject,
    DeleteProject,
    PublishPage,
    PublishProject,
    ReorderComponents,
)
from sitecraft.application.commands.handlers import (
    AddComponentHandler,
    CreatePageHandler,
    CreateProjectHandler,
    DeleteProjectHandler,
    PublishPageHandler,
    PublishProjectHandler,
    ReorderComponentsHandler,
)
from sitecraft.core.container import get_event_dispatcher
from sitecraft.core.result import Success
from sitecraft.domain.events.registry import get_all_events
from tests.utils.factories import seed_user


@pytest.fixture
def dispatcher(mock_logger):
    """Container dispatcher wired with a mocked logger."""
    get_event_dispatcher.cache_clear()
    with patch(
        "sitecraft.core.container.infrastructure.get_logger", return_value=mock_logger
    ):
        yield get_event_dispatcher()
    get_event_dispatcher.cache_clear()


def _logged(mock_logger) -> list[str]:
    """Event names passed to logger.info()/warning(), in call order."""
    return [
        call.args[0]
        for call in mock_logger.method_calls
        if call[0] in ("info", "warning")
    ]


@pytest.mark.integration
class TestEventDispatcherContainer:
    def test_singleton(self, dispatcher):
        assert get_event_dispatcher() is dispatcher

    def test_every_event_wired(self, dispatcher):
        expected = {event_class.EVENT_TYPE for event_class in get_all_events()}

        assert set(dispatcher.get_registered_event_types()) == expected
        assert dispatcher.get_handler_count() == len(expected)


@pytest.mark.integration
class TestEditingSessionFlow:
    @pytest.mark.asyncio
    async def test_build_publish_delete(
        self,
        dispatcher,
        mock_logger,
        user_repo,
        project_repo,
        page_repo,
        ownership_verifier,
    ):
        # Arrange
        user = await seed_user(user_repo)
        page_deps = {
            "page_repo": page_repo,
            "ownership_verifier": ownership_verifier,
            "event_dispatcher": dispatcher,
        }

        # Act
        project_id = (
            await CreateProjectHandler(
                user_repo=user_repo, project_repo=project_repo, event_dispatcher=dispatcher
            ).handle(CreateProject(user_id=user.id, name="Portfolio"))
        ).value
        page_id = (
            await CreatePageHandler(**page_deps).handle(
                CreatePage(project_id=project_id, user_id=user.id, name="Home", path="/")
            )
        ).value
        add = AddComponentHandler(**page_deps)
        heading = (
            await add.handle(
                AddComponent(page_id=page_id, user_id=user.id, component_type="Text")
            )
        ).value
        button = (
            await add.handle(
                AddComponent(page_id=page_id, user_id=user.id, component_type="Button")
            )
        ).value
        reorder = await ReorderComponentsHandler(**page_deps).handle(
            ReorderComponents(page_id=page_id, user_id=user.id, component_ids=(button, heading))
        )
        publish_page = await PublishPageHandler(**page_deps).handle(
            PublishPage(page_id=page_id, user_id=user.id)
        )
        publish_project = await PublishProjectHandler(
            project_repo=project_repo,
            page_repo=page_repo,
            ownership_verifier=ownership_verifier,
            event_dispatcher=dispatcher,
        ).handle(PublishProject(project_id=project_id, user_id=user.id))
        delete = await DeleteProjectHandler(
            project_repo=project_repo,
            ownership_verifier=ownership_verifier,
            event_dispatcher=dispatcher,
        ).handle(DeleteProject(project_id=project_id, user_id=user.id))

        # Assert
        assert all(
            isinstance(r, Success) for r in (reorder, publish_page, publish_project, delete)
        )
        assert _logged(mock_logger) == [
            "project_created",
            "page_created",
            "component_added",
            "component_added",
            "components_reordered",
            "page_published",
            "project_published",
            "project_deleted",
        ]
        assert await project_repo.find_by_id(project_id) is None
        assert await page_repo.find_by_id(page_id) is None

    @pytest.mark.asyncio
    async def test_component_log_fields(
        self, dispatcher, mock_logger, user_repo, project_repo, page_repo, ownership_verifier
    ):
        user = await seed_user(user_repo)
        project_id = (
            await CreateProjectHandler(
                user_repo=user_repo, project_repo=project_repo, event_dispatcher=dispatcher
            ).handle(CreateProject(user_id=user.id, name="Shop"))
        ).value
        page_id = (
            await CreatePageHandler(
                page_repo=page_repo,
                ownership_verifier=ownership_verifier,
                event_dispatcher=dispatcher,
            ).handle(CreatePage(project_id=project_id, user_id=user.id, name="Home", path="/"))
        ).value
        mock_logger.reset_mock()

        component_id = (
            await AddComponentHandler(
                page_repo=page_repo,
                ownership_verifier=ownership_verifier,
                event_dispatcher=dispatcher,
            ).handle(AddComponent(page_id=page_id, user_id=user.id, component_type="Image"))
        ).value

        mock_logger.info.assert_called_once()
        call = mock_logger.info.call_args
        assert call.args == ("component_added",)
        assert call.kwargs["page_id"] == str(page_id)
        assert call.kwargs["component_id"] == str(component_id)
        assert call.kwargs["component_type"] == "Image"
        assert call.kwargs["position"] == 0


@pytest.mark.integration
class TestFailOpen:
    @pytest.mark.asyncio
    async def test_failing_handler_does_not_block_logging(
        self, dispatcher, mock_logger, user_repo, project_repo
    ):
        # Arrange
        async def broken_handler(event):
            raise RuntimeError("projection store offline")

        dispatcher.register("ProjectCreated", broken_handler)
        user = await seed_user(user_repo)

        # Act
        result = await CreateProjectHandler(
            user_repo=user_repo, project_repo=project_repo, event_dispatcher=dispatcher
        ).handle(CreateProject(user_id=user.id, name="Portfolio"))

        # Assert
        assert isinstance(result, Success)
        assert _logged(mock_logger) == ["project_created"]
        mock_logger.error.assert_called_once()
        error_call = mock_logger.error.call_args
        assert error_call.args == ("event_handler_failed",)
        assert error_call.kwargs["handler_name"] == "broken_handler"
        assert error_call.kwargs["event_type"] == "ProjectCreated"
