"""Unit tests for jobboard/config.py"""

import pytest

from jobboard.config import (
    DEFAULT_LOGIN_PASSWORD,
    BoardSettings,
    get_settings,
    validate_config_on_startup,
)


class TestBoardSettings:

    def test_reads_test_environment(self):
        settings = get_settings()
        assert settings.environment == "testing"
        assert settings.flask_secret_key == "test-secret-key"
        assert settings.login_password == "test-password"
        assert not settings.is_production

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_defaults(self, monkeypatch):
        for name in ("FLASK_SECRET_KEY", "LOGIN_PASSWORD", "ENVIRONMENT", "SEED_SAMPLE_JOBS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = BoardSettings(_env_file=None)

        assert settings.flask_secret_key is None
        assert settings.login_password == DEFAULT_LOGIN_PASSWORD
        assert settings.environment == "development"
        assert settings.seed_sample_jobs is True
        assert settings.log_level == "INFO"
        assert settings.log_format == "simple"
        assert settings.flask_port == 5000
        assert settings.flask_debug is False

    def test_normalizes_case(self):
        settings = BoardSettings(environment="PRODUCTION", log_level="debug", log_format="JSON")
        assert settings.environment == "production"
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.is_production

    @pytest.mark.parametrize("field,value", [
        ("environment", "qa"),
        ("log_level", "LOUD"),
        ("log_format", "xml"),
        ("flask_port", 0),
    ])
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValueError):
            BoardSettings(**{field: value})


class TestProductionValidation:

    def test_no_issues_outside_production(self):
        settings = BoardSettings(environment="development", flask_secret_key=None, flask_debug=True)
        assert settings.validate_production_config() == []

    def test_production_requires_secret_and_password(self):
        settings = BoardSettings(
            environment="production",
            flask_secret_key=None,
            login_password=DEFAULT_LOGIN_PASSWORD,
        )
        issues = settings.validate_production_config()
        assert len(issues) == 2
        assert all(issue.startswith("CRITICAL") for issue in issues)

    def test_debug_in_production_is_a_warning(self):
        settings = BoardSettings(
            environment="production",
            flask_secret_key="k",
            login_password="strong",
            flask_debug=True,
        )
        assert settings.validate_production_config() == ["WARNING: FLASK_DEBUG enabled in production"]


class TestValidateConfigOnStartup:

    def test_returns_settings(self):
        assert validate_config_on_startup() is get_settings()

    def test_critical_issue_raises(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("FLASK_SECRET_KEY", raising=False)
        get_settings.cache_clear()

        with pytest.raises(ValueError, match="FLASK_SECRET_KEY"):
            validate_config_on_startup()

    def test_invalid_env_is_reported(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "moon")
        get_settings.cache_clear()

        with pytest.raises(ValueError, match="Configuration validation failed"):
            validate_config_on_startup()
