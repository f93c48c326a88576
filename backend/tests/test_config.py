"""
Notes App Backend — Settings Tests
====================================

What:  Validation and derived properties of the pydantic-settings Settings.
"""

import pydantic
import pytest

from notes_app.config import Settings


class TestSettings:

    def test_environment_is_normalised(self):
        assert Settings(environment=" Production ").environment == "production"

    def test_environment_defaults_to_production(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        settings = Settings()
        assert settings.environment == "production"
        assert settings.is_development is False

    def test_unknown_environment_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(environment="staging")

    def test_only_development_is_development(self):
        assert Settings(environment="development").is_development is True
        assert Settings(environment="test").is_development is False

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        s = Settings(cors_origins="http://a.test, http://b.test,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]
        assert s.cors_allow_any_origin is False

    def test_default_cors_allows_any_origin(self):
        assert Settings().cors_allow_any_origin is True

    def test_port_range_enforced(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(backend_port=80)
