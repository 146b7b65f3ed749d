"""Unit tests for LoggingEventHandler.

Tests cover:
- Message name and structured fields for representative events
- Enum and tuple fields rendered as plain values
- WARNING level for destructive events, INFO for the rest
"""

from typing import cast
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from sitecraft.domain.enums import ComponentType, ProjectStatus
from sitecraft.domain.events import (
    ComponentAdded,
    ComponentsReordered,
    ComponentUpdated,
    PageCreated,
    PageDeleted,
    ProjectArchived,
    ProjectConfigUpdated,
    ProjectDeleted,
)
from sitecraft.infrastructure.events.handlers import LoggingEventHandler


def _id() -> UUID:
    return cast(UUID, uuid7())


@pytest.fixture
def handler(mock_logger) -> LoggingEventHandler:
    return LoggingEventHandler(logger=mock_logger)


@pytest.mark.unit
class TestLoggingEventHandlerPageEvents:
    @pytest.mark.asyncio
    async def test_page_created(self, handler, mock_logger):
        # Arrange
        event = PageCreated(aggregate_id=_id(), project_id=_id(), page_name="Home", page_path="/")

        # Act
        await handler.handle_page_created(event)

        # Assert
        mock_logger.info.assert_called_once_with(
            "page_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
            page_name="Home",
            page_path="/",
        )

    @pytest.mark.asyncio
    async def test_page_deleted_logs_warning(self, handler, mock_logger):
        event = PageDeleted(aggregate_id=_id(), project_id=_id(), page_name="Old")

        await handler.handle_page_deleted(event)

        mock_logger.info.assert_not_called()
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "page_deleted"
        assert mock_logger.warning.call_args.kwargs["page_name"] == "Old"


@pytest.mark.unit
class TestLoggingEventHandlerComponentEvents:
    @pytest.mark.asyncio
    async def test_component_added_uses_enum_value(self, handler, mock_logger):
        event = ComponentAdded(
            aggregate_id=_id(),
            component_id=_id(),
            component_type=ComponentType.BUTTON,
            position=4,
        )

        await handler.handle_component_added(event)

        kwargs = mock_logger.info.call_args.kwargs
        assert mock_logger.info.call_args.args[0] == "component_added"
        assert kwargs["component_type"] == "Button"
        assert kwargs["position"] == 4
        assert kwargs["component_id"] == str(event.component_id)

    @pytest.mark.asyncio
    async def test_component_updated_lists_properties(self, handler, mock_logger):
        event = ComponentUpdated(
            aggregate_id=_id(), component_id=_id(), updated_properties=("content", "size")
        )

        await handler.handle_component_updated(event)

        assert mock_logger.info.call_args.kwargs["updated_properties"] == ["content", "size"]

    @pytest.mark.asyncio
    async def test_components_reordered(self, handler, mock_logger):
        order = (_id(), _id())
        event = ComponentsReordered(aggregate_id=_id(), new_order=order)

        await handler.handle_components_reordered(event)

        kwargs = mock_logger.info.call_args.kwargs
        assert kwargs["component_count"] == 2
        assert kwargs["new_order"] == [str(i) for i in order]


@pytest.mark.unit
class TestLoggingEventHandlerProjectEvents:
    @pytest.mark.asyncio
    async def test_config_updated(self, handler, mock_logger):
        user_id = _id()
        event = ProjectConfigUpdated(aggregate_id=_id(), config_type="navigation", user_id=user_id)

        await handler.handle_project_config_updated(event)

        kwargs = mock_logger.info.call_args.kwargs
        assert kwargs["config_type"] == "navigation"
        assert kwargs["user_id"] == str(user_id)
        assert kwargs["project_id"] == str(event.aggregate_id)

    @pytest.mark.asyncio
    async def test_project_archived_logs_warning(self, handler, mock_logger):
        event = ProjectArchived(
            aggregate_id=_id(), user_id=_id(), previous_status=ProjectStatus.PUBLISHED
        )

        await handler.handle_project_archived(event)

        assert mock_logger.warning.call_args.args[0] == "project_archived"
        assert mock_logger.warning.call_args.kwargs["previous_status"] == "PUBLISHED"

    @pytest.mark.asyncio
    async def test_project_deleted_logs_warning(self, handler, mock_logger):
        event = ProjectDeleted(aggregate_id=_id(), user_id=_id(), project_name="Site")

        await handler.handle_project_deleted(event)

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["project_name"] == "Site"
