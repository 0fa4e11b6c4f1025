"""
Shared fixtures for frontend tests.

Provides test clients (anonymous and signed in) and a repo fixture that
patches frontend.app._get_repo with an in-memory repository holding the
sample postings.
"""

from unittest.mock import patch

import pytest

from jobboard.auth import SESSION_USER_KEY
from jobboard.repositories import InMemoryJobRepository

TEST_USER = {
    "id": "tester@example.com",
    "email": "tester@example.com",
    "display_name": "tester",
}


@pytest.fixture
def app():
    # Import app here so the test environment is set first (tests/conftest.py)
    from frontend.app import app

    app.config['TESTING'] = True
    return app


@pytest.fixture
def anonymous_client(app):
    """Test client with no signed-in user."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def client(app):
    """Create an authenticated test client for the Flask app."""
    with app.test_client() as client:
        with client.session_transaction() as sess:
            sess[SESSION_USER_KEY] = dict(TEST_USER)
        yield client


@pytest.fixture
def repo(sample_jobs, fixed_now):
    """Patch the app's repository with the sample board."""
    repository = InMemoryJobRepository(
        sample_jobs,
        id_factory=lambda: "posted-1",
        clock=lambda: fixed_now,
    )
    with patch('frontend.app._get_repo', return_value=repository):
        yield repository
