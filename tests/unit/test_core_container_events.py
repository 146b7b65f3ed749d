"""Unit tests for get_event_dispatcher() container wiring.

This module verifies that every registered domain event has its logging
handler wired into the dispatcher, and that a missing handler is reported
according to events_strict_mode.

Pattern:
    Reads EVENT_REGISTRY and compares it with the dispatcher's registered
    event types after get_event_dispatcher() runs.
"""

from unittest.mock import patch

import pytest

from sitecraft.core.config import Settings
from sitecraft.core.container import get_event_dispatcher
from sitecraft.domain.events.registry import EVENT_REGISTRY
from sitecraft.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)


@pytest.fixture(autouse=True)
def clear_dispatcher_cache():
    get_event_dispatcher.cache_clear()
    yield
    get_event_dispatcher.cache_clear()


@pytest.fixture
def mock_container_logger(mock_logger):
    with patch(
        "sitecraft.core.container.infrastructure.get_logger", return_value=mock_logger
    ):
        yield mock_logger


def _patch_settings(**overrides):
    return patch(
        "sitecraft.core.config.get_settings",
        return_value=Settings(_env_file=None, **overrides),
    )


@pytest.mark.unit
class TestEventRegistryCompleteness:
    """Test that all domain events are registered with handlers."""

    def test_all_events_have_handlers(self, mock_container_logger):
        with _patch_settings():
            dispatcher = get_event_dispatcher()

        registered = set(dispatcher.get_registered_event_types())
        expected = {meta.event_type for meta in EVENT_REGISTRY if meta.requires_logging}

        missing = expected - registered
        if missing:
            pytest.fail(
                f"Found {len(missing)} event(s) without handlers:\n"
                + "\n".join(f"  - {name}" for name in sorted(missing))
            )

    def test_one_subscription_per_event(self, mock_container_logger):
        with _patch_settings():
            dispatcher = get_event_dispatcher()

        assert dispatcher.get_handler_count() == len(EVENT_REGISTRY)
        for meta in EVENT_REGISTRY:
            assert dispatcher.get_handler_count(meta.event_type) == 1

    def test_dispatcher_is_singleton(self, mock_container_logger):
        with _patch_settings():
            assert get_event_dispatcher() is get_event_dispatcher()


@pytest.mark.unit
class TestMissingHandlerModes:
    def test_graceful_mode_warns_and_skips(self, mock_container_logger):
        with _patch_settings(events_strict_mode=False):
            with patch.object(LoggingEventHandler, "handle_page_created", None):
                dispatcher = get_event_dispatcher()

        assert "PageCreated" not in dispatcher.get_registered_event_types()
        mock_container_logger.warning.assert_called_once_with(
            "Missing logging handler (graceful mode)",
            event_class="PageCreated",
            handler_method="handle_page_created",
        )

    def test_strict_mode_raises(self, mock_container_logger):
        with _patch_settings(events_strict_mode=True):
            with patch.object(LoggingEventHandler, "handle_project_deleted", None):
                with pytest.raises(RuntimeError) as exc_info:
                    get_event_dispatcher()

        assert "EVENTS_STRICT_MODE" in str(exc_info.value)
        assert "LoggingEventHandler.handle_project_deleted" in str(exc_info.value)

    def test_strict_mode_passes_when_complete(self, mock_container_logger):
        with _patch_settings(events_strict_mode=True):
            dispatcher = get_event_dispatcher()

        mock_container_logger.warning.assert_not_called()
        assert dispatcher.get_handler_count() == len(EVENT_REGISTRY)
