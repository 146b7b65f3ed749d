"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding (bind/with_context return new adapters)
- Renderer and level selection passed to structlog.configure

Architecture:
- Unit tests with mocked structlog
- One rendering test against real structlog output (capsys)
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from sitecraft.infrastructure.logging import ConsoleAdapter


@pytest.fixture
def mock_structlog():
    with patch("sitecraft.infrastructure.logging.console_adapter.structlog") as mocked:
        mocked.get_logger.return_value = MagicMock()
        yield mocked


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("method", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, mock_structlog, method):
        adapter = ConsoleAdapter()

        getattr(adapter, method)("Some message", page_id="123", position=2)

        getattr(mock_structlog.get_logger.return_value, method).assert_called_once_with(
            "Some message", page_id="123", position=2
        )

    def test_error_without_exception(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.error("Error occurred", event_type="PageCreated")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "Error occurred", event_type="PageCreated"
        )

    def test_error_with_exception_adds_details(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.error("event_handler_failed", error=ValueError("bad"), handler_name="h")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "event_handler_failed",
            handler_name="h",
            error_type="ValueError",
            error_message="bad",
        )

    def test_critical_with_exception(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.critical("startup_failed", error=RuntimeError("no config"))

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "startup_failed", error_type="RuntimeError", error_message="no config"
        )

    def test_logs_with_no_context(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.info("Simple message")

        mock_structlog.get_logger.return_value.info.assert_called_once_with("Simple message")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_bind_returns_new_adapter(self, mock_structlog):
        base_logger = mock_structlog.get_logger.return_value
        bound_logger = MagicMock()
        base_logger.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(project_id="p1")
        bound.info("scoped")

        assert bound is not adapter
        base_logger.bind.assert_called_once_with(project_id="p1")
        bound_logger.info.assert_called_once_with("scoped")
        base_logger.info.assert_not_called()

    def test_with_context_is_bind(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.with_context(user_id="u1")

        mock_structlog.get_logger.return_value.bind.assert_called_once_with(user_id="u1")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    def test_json_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=False)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value
        mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)

    @pytest.mark.parametrize(("level", "numeric"), [("DEBUG", 10), ("warning", 30)])
    def test_level_filter(self, mock_structlog, level, numeric):
        ConsoleAdapter(level=level)

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(numeric)

    def test_unknown_level_rejected(self, mock_structlog):
        with pytest.raises(KeyError):
            ConsoleAdapter(level="LOUD")


@pytest.mark.unit
class TestConsoleAdapterOutput:
    def test_json_output_is_parseable(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="INFO")

        adapter.info("page_published", page_id="abc")
        adapter.debug("filtered_out")

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["event"] == "page_published"
        assert record["page_id"] == "abc"
        assert record["level"] == "info"
        assert "timestamp" in record
