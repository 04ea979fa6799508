"""
Tests for Settings validation and the default client wiring.
"""

import pytest

from shopai.config import Settings
from shopai.services import recommendation_client as recommendation_client_module


class TestSettings:

    def test_validate_passes_with_key(self, monkeypatch):
        monkeypatch.setattr(Settings, "GOOGLE_API_KEY", "test-google-api-key")
        Settings.validate()

    def test_validate_lists_missing_key(self, monkeypatch):
        monkeypatch.setattr(Settings, "GOOGLE_API_KEY", "")
        with pytest.raises(ValueError, match="GOOGLE_API_KEY"):
            Settings.validate()

    @pytest.mark.parametrize("environment,production,development", [
        ("production", True, False),
        ("PRODUCTION", True, False),
        ("development", False, True),
        ("testing", False, False),
    ])
    def test_environment_helpers(self, monkeypatch, environment, production, development):
        monkeypatch.setattr(Settings, "ENVIRONMENT", environment)
        assert Settings.is_production() is production
        assert Settings.is_development() is development


class TestDefaultClient:

    def test_built_from_settings(self, monkeypatch):
        monkeypatch.setattr(recommendation_client_module, "_default_client", None)
        monkeypatch.setattr(recommendation_client_module.settings, "GOOGLE_API_KEY", "from-env")
        monkeypatch.setattr(recommendation_client_module.settings, "GEMINI_MODEL", "gemini-from-env")

        client = recommendation_client_module.get_recommendation_client()

        assert client.model == "gemini-from-env"
        assert client._api_key == "from-env"
        assert recommendation_client_module.get_recommendation_client() is client
