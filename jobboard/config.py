"""
Job Board Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_PASSWORD = "change-me-in-production"


class BoardSettings(BaseSettings):
    """
    Job board configuration with validation.

    All settings can be overridden via environment variables
    (FLASK_SECRET_KEY, LOGIN_PASSWORD, ENVIRONMENT, ...).
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    # === Security ===
    flask_secret_key: Optional[str] = Field(
        default=None,
        description="Flask session signing key (required in production)"
    )
    login_password: str = Field(
        default=DEFAULT_LOGIN_PASSWORD,
        min_length=1,
        description="Shared password accepted by the sign-in form"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production, testing"
    )

    # === Data ===
    seed_sample_jobs: bool = Field(
        default=True,
        description="Serve the built-in sample postings"
    )

    # === Logging ===
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")
    log_format: str = Field(default="simple", description="simple or json")

    # === Server ===
    flask_port: int = Field(default=5000, ge=1, le=65535)
    flask_debug: bool = Field(default=False)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production", "testing"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(allowed))}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in {"simple", "json"}:
            raise ValueError("log_format must be 'simple' or 'json'")
        return v_lower

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def validate_production_config(self) -> List[str]:
        """
        Validate configuration is suitable for production.

        Returns list of warning/error messages.
        """
        issues = []

        if self.is_production:
            if not self.flask_secret_key:
                issues.append("CRITICAL: FLASK_SECRET_KEY required in production")
            if self.login_password == DEFAULT_LOGIN_PASSWORD:
                issues.append("CRITICAL: LOGIN_PASSWORD must be changed in production")
            if self.flask_debug:
                issues.append("WARNING: FLASK_DEBUG enabled in production")

        return issues


@lru_cache()
def get_settings() -> BoardSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for performance.
    Use this function to access configuration throughout the app.
    """
    return BoardSettings()


def validate_config_on_startup() -> BoardSettings:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    Logs warnings for non-critical issues.
    """
    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}") from e

    for issue in settings.validate_production_config():
        if issue.startswith("CRITICAL"):
            raise ValueError(issue)
        logger.warning(issue)

    logger.info(f"Configuration loaded: environment={settings.environment}")
    logger.info(f"  seed_sample_jobs={settings.seed_sample_jobs}")
    logger.info(f"  log_level={settings.log_level} log_format={settings.log_format}")
    logger.info(f"  flask_secret_key={'*****' if settings.flask_secret_key else 'not set'}")
    return settings
