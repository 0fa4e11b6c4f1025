"""
Tests for sign-in, sign-out and the auth gate in frontend/app.py
"""

import pytest

from jobboard.auth import SESSION_USER_KEY


class TestLogin:
    """Tests for /login"""

    def test_login_page(self, anonymous_client):
        response = anonymous_client.get('/login')

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert "Job Board" in html
        assert "Find your next opportunity or post a job opening" in html
        assert "Sign In to Continue" in html
        assert "Sign Out" not in html

    def test_login_success(self, anonymous_client, repo):
        response = anonymous_client.post('/login', data={
            "email": "Ada@Example.com",
            "password": "test-password",
        })

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/")
        with anonymous_client.session_transaction() as sess:
            assert sess[SESSION_USER_KEY]["email"] == "ada@example.com"

        html = anonymous_client.get('/').get_data(as_text=True)
        assert "Showing 3 of 3 jobs" in html
        assert "ada" in html

    def test_wrong_password(self, anonymous_client):
        response = anonymous_client.post('/login', data={
            "email": "ada@example.com",
            "password": "wrong",
        })

        assert response.status_code == 401
        html = response.get_data(as_text=True)
        assert "Invalid password" in html
        assert 'value="ada@example.com"' in html
        with anonymous_client.session_transaction() as sess:
            assert SESSION_USER_KEY not in sess

    def test_missing_email(self, anonymous_client):
        response = anonymous_client.post('/login', data={"password": "test-password"})
        assert response.status_code == 401
        assert "Email is required" in response.get_data(as_text=True)

    def test_signed_in_user_skips_login_page(self, client):
        response = client.get('/login')
        assert response.status_code == 302
        assert response.headers["Location"].endswith("/")


class TestLogout:

    def test_logout_clears_session(self, client, repo):
        response = client.post('/logout')

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/login")
        assert client.get('/').status_code == 302

    def test_logout_requires_post(self, client):
        assert client.get('/logout').status_code == 405


class TestAuthGate:
    """The gate distinguishes loading, anonymous and signed-in states."""

    @pytest.fixture
    def stuck_loading(self, mocker):
        # Never subscribe, so the context stays in its initial loading state
        return mocker.patch('frontend.app.AuthContext.attach', lambda self: self)

    def test_loading_page_while_resolving(self, client, repo, stuck_loading):
        response = client.get('/')

        assert response.status_code == 503
        html = response.get_data(as_text=True)
        assert "Loading..." in html
        assert "Showing" not in html

    def test_loading_api(self, client, repo, stuck_loading):
        response = client.get('/api/jobs')

        assert response.status_code == 503
        assert response.get_json() == {"error": "Authentication state loading"}

    def test_malformed_session_is_treated_as_signed_out(self, anonymous_client, repo):
        with anonymous_client.session_transaction() as sess:
            sess[SESSION_USER_KEY] = {"display_name": "ghost"}

        response = anonymous_client.get('/')

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/login")

    def test_health_is_public(self, anonymous_client, repo):
        assert anonymous_client.get('/health').status_code == 200
