"""
Tests for configuration module.
"""
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from placeholder_svg.core.config import Settings, settings


class TestSettings:
    """Test Settings class."""

    def test_settings_instance(self):
        assert isinstance(settings, Settings)

    def test_settings_singleton(self):
        from placeholder_svg.core.config import settings as settings2

        assert settings is settings2

    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            defaults = Settings(_env_file=None)

        assert defaults.PORT == 8080
        assert defaults.ENVIRONMENT == "production"
        assert defaults.LOG_LEVEL == "INFO"
        assert defaults.DOCS_ENABLED is False
        assert defaults.SENTRY_DSN == ""

    def test_settings_are_immutable(self):
        with pytest.raises(ValidationError):
            settings.PORT = 9999


class TestConfigLoading:
    """Test configuration loading."""

    @patch.dict("os.environ", {"PORT": "9090", "ENVIRONMENT": "DEV", "LOG_LEVEL": "debug"})
    def test_environment_variables_loading(self):
        loaded = Settings(_env_file=None)

        assert loaded.PORT == 9090
        assert loaded.is_dev is True
        assert loaded.LOG_LEVEL == "DEBUG"

    def test_env_file_loading(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=7070\nENVIRONMENT=DEV\n", encoding="utf-8")

        with patch.dict("os.environ", {}, clear=True):
            loaded = Settings(_env_file=str(env_file))

        assert loaded.PORT == 7070
        assert loaded.is_dev is True


class TestCacheControl:
    def test_production(self):
        assert Settings(ENVIRONMENT="production").cache_control == "public, max-age=86400"

    def test_dev(self):
        assert Settings(ENVIRONMENT="DEV").cache_control == "no-cache"

    def test_dev_is_case_sensitive(self):
        assert Settings(ENVIRONMENT="dev").is_dev is False
