"""
Tests for configuration loading and production checks.
"""

from shared.config.settings import Settings


class TestProductionSettings:
    """Settings.validate_production_settings."""

    def test_development_defaults_pass(self):
        settings = Settings(environment="development")
        assert settings.validate_production_settings() == []

    def test_insecure_production_reported(self):
        settings = Settings(
            environment="production",
            debug=True,
            database_url="sqlite:///./backoffice.db",
            allowed_origins="",
        )

        errors = settings.validate_production_settings()

        assert len(errors) == 3
        assert any("DEBUG" in e for e in errors)
        assert any("DATABASE_URL" in e for e in errors)
        assert any("ALLOWED_ORIGINS" in e for e in errors)

    def test_secure_production_passes(self):
        settings = Settings(
            environment="production",
            debug=False,
            database_url="postgresql+psycopg://app:pw@db:5432/backoffice",
            allowed_origins="https://backoffice.example.com",
        )

        assert settings.validate_production_settings() == []

    def test_environment_variables_read(self, monkeypatch):
        monkeypatch.setenv("REST_API_PORT", "9000")
        monkeypatch.setenv("SQL_ECHO", "true")

        settings = Settings()

        assert settings.rest_api_port == 9000
        assert settings.sql_echo is True


class TestCorsOrigins:
    """rest_api.core.cors.get_cors_origins."""

    def test_defaults_when_unset(self, monkeypatch):
        from rest_api.core import cors

        monkeypatch.setattr(cors.settings, "allowed_origins", "")
        assert "http://localhost:5173" in cors.get_cors_origins()

    def test_configured_list_split(self, monkeypatch):
        from rest_api.core import cors

        monkeypatch.setattr(cors.settings, "allowed_origins", "https://a.example.com, https://b.example.com,")
        assert cors.get_cors_origins() == ["https://a.example.com", "https://b.example.com"]
