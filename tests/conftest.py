"""
Global fixtures for all tests.

Sets a deterministic test environment BEFORE any application imports so
BoardSettings never picks up real credentials, and resets the cached
settings and repository singleton between tests.
"""

import os
from datetime import datetime, timezone

import pytest

os.environ["ENVIRONMENT"] = "testing"
os.environ["FLASK_SECRET_KEY"] = "test-secret-key"
os.environ["LOGIN_PASSWORD"] = "test-password"
os.environ["SEED_SAMPLE_JOBS"] = "true"
os.environ["LOG_LEVEL"] = "INFO"

from jobboard.config import get_settings
from jobboard.models import Job
from jobboard.repositories import reset_repository
from jobboard.sample_jobs import build_sample_jobs

FIXED_NOW = datetime(2025, 3, 7, 12, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Each test starts with fresh settings and a fresh repository."""
    get_settings.cache_clear()
    reset_repository()
    yield
    get_settings.cache_clear()
    reset_repository()


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def sample_jobs():
    """The three sample postings with a fixed creation time."""
    return build_sample_jobs(created_at=FIXED_NOW)


@pytest.fixture
def make_job():
    """Factory for jobs with sensible defaults; override any field by name."""
    counter = {"n": 0}

    def _make(**overrides) -> Job:
        counter["n"] += 1
        data = {
            "id": f"job-{counter['n']}",
            "title": "Backend Engineer",
            "company": "Acme",
            "location": "Berlin, Germany",
            "description": "Build APIs.",
            "job_type": "full-time",
            "experience_level": "mid",
            "tags": ["Python"],
            "application_type": "email",
            "application_email": "jobs@acme.test",
            "user_id": "owner",
            "created_at": FIXED_NOW,
        }
        data.update(overrides)
        return Job(**data)

    return _make
