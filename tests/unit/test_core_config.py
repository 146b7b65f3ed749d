"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (log level, page sizes)
- JSON log selection
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sitecraft.core.config import Settings, get_settings
from sitecraft.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    def test_defaults_without_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100
        assert settings.recent_items_limit == 5
        assert settings.events_strict_mode is False


@pytest.mark.unit
class TestSettingsValidation:
    def test_log_level_normalized(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}, clear=True):
            assert Settings(_env_file=None).log_level == "WARNING"

    def test_log_level_invalid(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

        assert "Invalid log level" in str(exc_info.value)

    def test_page_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_page_size=0)

    def test_default_page_size_cannot_exceed_max(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, default_page_size=50, max_page_size=20)

        assert "default_page_size must not exceed max_page_size" in str(exc_info.value)


@pytest.mark.unit
class TestEnvironmentDetection:
    @pytest.mark.parametrize(
        ("environment", "development", "testing", "production"),
        [
            ("development", True, False, False),
            ("testing", False, True, False),
            ("ci", False, True, False),
            ("production", False, False, True),
        ],
    )
    def test_flags(self, environment, development, testing, production):
        with patch.dict(os.environ, {"ENVIRONMENT": environment}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_development is development
        assert settings.is_testing is testing
        assert settings.is_production is production

    def test_json_logs_outside_development(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "production"}, clear=True):
            assert Settings(_env_file=None).use_json_logs is True

    def test_console_logs_in_development(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "development"}, clear=True):
            assert Settings(_env_file=None).use_json_logs is False

    def test_log_json_override(self):
        env = {"ENVIRONMENT": "production", "LOG_JSON": "false"}
        with patch.dict(os.environ, env, clear=True):
            assert Settings(_env_file=None).use_json_logs is False


@pytest.mark.unit
class TestGetSettings:
    def test_cached_singleton(self):
        get_settings.cache_clear()

        assert get_settings() is get_settings()

    def test_cache_clear_reloads_environment(self):
        with patch.dict(os.environ, {"DEFAULT_PAGE_SIZE": "25"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().default_page_size == 25
