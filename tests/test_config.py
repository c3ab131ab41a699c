"""Tests for application configuration management."""

import os
import tempfile
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from property_planner.config import (
    Settings,
    get_global_settings,
    get_settings,
    reset_global_settings,
)


class TestSettings:
    """Test cases for Settings class."""

    def test_settings_loads_from_env_file(self):
        """Test that settings can load from a .env file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".env", delete=False) as f:
            f.write("APP_ENV=production\n")
            f.write("SECRET_KEY=test-secret-key-123\n")
            f.write("LOG_LEVEL=DEBUG\n")
            f.write("PROJECTION_CACHE_SIZE=16\n")
            temp_env_file = f.name

        try:
            with patch.dict(os.environ, {}, clear=True):
                settings = get_settings(env_file=temp_env_file)

                assert settings.app_env == "production"
                assert settings.secret_key == "test-secret-key-123"
                assert settings.log_level == "DEBUG"
                assert settings.projection_cache_size == 16
        finally:
            os.unlink(temp_env_file)

    def test_missing_secret_key_raises_exception(self):
        """Test that missing SECRET_KEY raises ValidationError."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SECRET_KEY" in str(exc_info.value)

    def test_placeholder_secret_key_raises_exception(self):
        """Test that placeholder SECRET_KEY raises ValidationError."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "your-secret-key-here-change-in-production"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SECRET_KEY must be set to a secure value" in str(exc_info.value)

    def test_app_env_validation(self):
        """Test APP_ENV validation."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "APP_ENV": "invalid-env"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "APP_ENV must be one of" in str(exc_info.value)

    def test_log_level_case_insensitive(self):
        """Test that LOG_LEVEL is case insensitive."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "LOG_LEVEL": "debug"},
            clear=True,
        ):
            assert Settings(_env_file=None).log_level == "DEBUG"

    def test_log_level_validation(self):
        """Test LOG_LEVEL validation."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "LOG_LEVEL": "LOUD"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "LOG_LEVEL must be one of" in str(exc_info.value)

    def test_negative_cache_size_rejected(self):
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "PROJECTION_CACHE_SIZE": "-1"},
            clear=True,
        ):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_default_values(self):
        """Test default values when environment variables are not set."""
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.app_env == "development"
            assert settings.flask_env == "development"
            assert settings.log_level == "INFO"
            assert settings.projection_cache_size == 128


class TestGlobalSettings:
    def test_global_settings_cached_until_reset(self):
        first = get_global_settings()
        assert get_global_settings() is first

        reset_global_settings()
        assert get_global_settings() is not first
