"""End-to-end tests for the social sign-in endpoints."""

from dishka import Provider, Scope, provide
import pytest
from fastapi.testclient import TestClient

from userhub.adapter.google.client import (
    GoogleOAuthClient,
    GoogleOAuthError,
    MockGoogleOAuthClient,
)
from userhub.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by a mock container."""
    return TestClient(create_app(container=build_test_container()))


class TestGoogleSignIn:
    def test_first_sign_in_creates_account(self, client):
        response = client.post("/auth/google", json={"code": "auth-code"})

        assert response.status_code == 200
        body = response.json()
        assert body["created"] is True
        assert body["match"] == "not_found"
        assert body["account"]["google_external_id"] == "google-mock-123"
        assert body["account"]["avatar_url"]

    def test_second_sign_in_returns_same_account(self, client):
        first = client.post("/auth/google", json={"code": "code-1"}).json()
        second = client.post("/auth/google", json={"code": "code-2"}).json()

        assert second["created"] is False
        assert second["match"] == "found_by_email"
        assert second["account"]["account_id"] == first["account"]["account_id"]

    def test_missing_code_returns_422(self, client):
        response = client.post("/auth/google", json={})

        assert response.status_code == 422


class TestFacebookSignIn:
    def test_sign_in_creates_account(self, client):
        response = client.post("/auth/facebook", json={"access_token": "fb-token"})

        assert response.status_code == 200
        assert response.json()["account"]["facebook_external_id"] == "1000000001"


class FailingGoogleOverride(Provider):
    """Replaces the mock Google client with one whose exchange fails."""

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self) -> GoogleOAuthClient:
        client = MockGoogleOAuthClient()
        client.error = GoogleOAuthError("Token exchange failed: 400")
        return client


class MalformedGoogleOverride(Provider):
    """Replaces the mock Google client with one returning no email."""

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self) -> GoogleOAuthClient:
        client = MockGoogleOAuthClient()
        del client.profile["email"]
        return client


class TestProviderFailure:
    def test_provider_error_returns_502(self):
        """A failed exchange should map to 502."""
        container = build_test_container(overrides=[FailingGoogleOverride()])
        client = TestClient(create_app(container=container))

        response = client.post("/auth/google", json={"code": "bad"})

        assert response.status_code == 502

    def test_malformed_profile_returns_502(self):
        container = build_test_container(overrides=[MalformedGoogleOverride()])
        client = TestClient(create_app(container=container))

        response = client.post("/auth/google", json={"code": "auth-code"})

        assert response.status_code == 502


class NamelessGoogleOverride(Provider):
    """Replaces the mock Google client with one returning no family name."""

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self) -> GoogleOAuthClient:
        client = MockGoogleOAuthClient()
        del client.profile["family_name"]
        return client


class TestIncompleteProfile:
    def test_missing_family_name_returns_422(self):
        container = build_test_container(overrides=[NamelessGoogleOverride()])
        client = TestClient(create_app(container=container))

        response = client.post("/auth/google", json={"code": "auth-code"})

        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "last_name_required"
