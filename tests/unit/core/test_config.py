"""
Unit tests for application settings.
"""

from app.core.config import Settings


class TestSettings:

    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.MAX_ALERTS == 3
        assert s.API_PREFIX == "/api/v1"
        assert s.HOST == "127.0.0.1"
        assert s.PORT == 8000

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PORT", "9100")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.PORT == 9100
        assert s.LOG_LEVEL == "DEBUG"
