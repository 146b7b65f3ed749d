"""Logging event handler for domain events.

Structured logging for every event in EVENT_REGISTRY (21 events: 8 page,
4 component, 9 project). Method names follow the registry convention
handle_<handler_name>, which lets the container wire subscriptions
automatically.

Log Levels:
    - INFO: all lifecycle and editing events
    - WARNING: destructive events (page/project deleted, project archived)

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - page_id / project_id / component_id: identifiers as strings
    - event-specific fields (names, paths, positions, config_type, ...)

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> dispatcher.register("PageCreated", logging_handler.handle_page_created)
"""

from sitecraft.domain.events import (
    ComponentAdded,
    ComponentRemoved,
    ComponentsReordered,
    ComponentUpdated,
    PageAddedToProject,
    PageCreated,
    PageDeleted,
    PageLayoutUpdated,
    PageNameChanged,
    PagePathChanged,
    PagePublished,
    PageRemovedFromProject,
    PageTitleChanged,
    PageUnpublished,
    ProjectArchived,
    ProjectConfigUpdated,
    ProjectCreated,
    ProjectDeleted,
    ProjectDescriptionChanged,
    ProjectNameChanged,
    ProjectPublished,
)
from sitecraft.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> await handler.handle_page_published(event)
        >>> # Log output: {"event": "page_published", "page_id": "...", ...}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    # =========================================================================
    # Page lifecycle
    # =========================================================================

    async def handle_page_created(self, event: PageCreated) -> None:
        """Log page creation (INFO level).

        Args:
            event: PageCreated event with project, name and path.
        """
        self._logger.info(
            "page_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
            page_name=event.page_name,
            page_path=event.page_path,
        )

    async def handle_page_name_changed(self, event: PageNameChanged) -> None:
        self._logger.info(
            "page_name_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
            old_name=event.old_name,
            new_name=event.new_name,
        )

    async def handle_page_path_changed(self, event: PagePathChanged) -> None:
        self._logger.info(
            "page_path_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
            old_path=event.old_path,
            new_path=event.new_path,
        )

    async def handle_page_title_changed(self, event: PageTitleChanged) -> None:
        self._logger.info(
            "page_title_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
            old_title=event.old_title,
            new_title=event.new_title,
        )

    async def handle_page_layout_updated(self, event: PageLayoutUpdated) -> None:
        """Log layout change (INFO level).

        Args:
            event: PageLayoutUpdated event carrying the new persisted layout.
        """
        self._logger.info(
            "page_layout_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
            layout=dict(event.layout),
        )

    async def handle_page_published(self, event: PagePublished) -> None:
        self._logger.info(
            "page_published",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
        )

    async def handle_page_unpublished(self, event: PageUnpublished) -> None:
        self._logger.info(
            "page_unpublished",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
        )

    async def handle_page_deleted(self, event: PageDeleted) -> None:
        """Log page deletion (WARNING level).

        Args:
            event: PageDeleted event with the removed page's name.
        """
        self._logger.warning(
            "page_deleted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            project_id=str(event.project_id),
            page_name=event.page_name,
        )

    # =========================================================================
    # Components
    # =========================================================================

    async def handle_component_added(self, event: ComponentAdded) -> None:
        """Log component insertion (INFO level).

        Args:
            event: ComponentAdded event with type and the index it landed at.
        """
        self._logger.info(
            "component_added",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            component_id=str(event.component_id),
            component_type=event.component_type.value,
            position=event.position,
        )

    async def handle_component_removed(self, event: ComponentRemoved) -> None:
        self._logger.info(
            "component_removed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            component_id=str(event.component_id),
            component_type=event.component_type.value,
        )

    async def handle_component_updated(self, event: ComponentUpdated) -> None:
        self._logger.info(
            "component_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            component_id=str(event.component_id),
            updated_properties=list(event.updated_properties),
        )

    async def handle_components_reordered(self, event: ComponentsReordered) -> None:
        self._logger.info(
            "components_reordered",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            page_id=str(event.aggregate_id),
            component_count=len(event.new_order),
            new_order=[str(component_id) for component_id in event.new_order],
        )

    # =========================================================================
    # Projects
    # =========================================================================

    async def handle_project_created(self, event: ProjectCreated) -> None:
        """Log project creation (INFO level).

        Args:
            event: ProjectCreated event with owner and initial name.
        """
        self._logger.info(
            "project_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            user_id=str(event.user_id),
            project_name=event.project_name,
        )

    async def handle_project_name_changed(self, event: ProjectNameChanged) -> None:
        self._logger.info(
            "project_name_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            old_name=event.old_name,
            new_name=event.new_name,
        )

    async def handle_project_description_changed(
        self, event: ProjectDescriptionChanged
    ) -> None:
        self._logger.info(
            "project_description_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            old_description=event.old_description,
            new_description=event.new_description,
        )

    async def handle_project_config_updated(self, event: ProjectConfigUpdated) -> None:
        self._logger.info(
            "project_config_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            user_id=str(event.user_id),
            config_type=event.config_type,
        )

    async def handle_page_added_to_project(self, event: PageAddedToProject) -> None:
        self._logger.info(
            "page_added_to_project",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            page_id=str(event.page_id),
        )

    async def handle_page_removed_from_project(
        self, event: PageRemovedFromProject
    ) -> None:
        self._logger.info(
            "page_removed_from_project",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            page_id=str(event.page_id),
        )

    async def handle_project_published(self, event: ProjectPublished) -> None:
        self._logger.info(
            "project_published",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            user_id=str(event.user_id),
        )

    async def handle_project_archived(self, event: ProjectArchived) -> None:
        """Log project archival (WARNING level).

        Args:
            event: ProjectArchived event with the status it left.
        """
        self._logger.warning(
            "project_archived",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            user_id=str(event.user_id),
            previous_status=event.previous_status.value,
        )

    async def handle_project_deleted(self, event: ProjectDeleted) -> None:
        self._logger.warning(
            "project_deleted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.aggregate_id),
            user_id=str(event.user_id),
            project_name=event.project_name,
        )
