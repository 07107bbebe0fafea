"""Unit tests for the Google OAuth client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from userhub.adapter.google.client import GoogleOAuthError, RealGoogleOAuthClient


@pytest.fixture
def google_client():
    """Create Google client with test configuration."""
    return RealGoogleOAuthClient(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://localhost:8000/auth/callback/google",
    )


def _response(status_code: int, payload: dict) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json = MagicMock(return_value=payload)
    response.text = str(payload)
    return response


class TestExchangeAndFetchProfile:
    """Tests for RealGoogleOAuthClient.exchange_and_fetch_profile()."""

    @pytest.mark.asyncio
    async def test_exchanges_code_then_fetches_userinfo(self, google_client):
        """Should post the code to the token endpoint and use the bearer token."""
        userinfo = {
            "id": "109876543210",
            "email": "jane@gmail.com",
            "given_name": "Jane",
            "family_name": "Doe",
            "picture": "https://lh3.googleusercontent.com/a/jane",
        }

        with patch("httpx.AsyncClient") as mock_client:
            http = mock_client.return_value.__aenter__.return_value
            http.post = AsyncMock(return_value=_response(200, {"access_token": "at-1"}))
            http.get = AsyncMock(return_value=_response(200, userinfo))

            profile = await google_client.exchange_and_fetch_profile("auth-code")

        assert profile == userinfo

        post_kwargs = http.post.call_args.kwargs
        assert http.post.call_args.args[0] == "https://oauth2.googleapis.com/token"
        assert post_kwargs["data"]["code"] == "auth-code"
        assert post_kwargs["data"]["grant_type"] == "authorization_code"
        assert post_kwargs["data"]["redirect_uri"] == (
            "http://localhost:8000/auth/callback/google"
        )

        get_kwargs = http.get.call_args.kwargs
        assert get_kwargs["headers"] == {"Authorization": "Bearer at-1"}

    @pytest.mark.asyncio
    async def test_rejected_code_raises(self, google_client):
        """Should raise GoogleOAuthError when the token endpoint refuses the code."""
        with patch("httpx.AsyncClient") as mock_client:
            http = mock_client.return_value.__aenter__.return_value
            http.post = AsyncMock(
                return_value=_response(400, {"error": "invalid_grant"})
            )
            http.get = AsyncMock()

            with pytest.raises(GoogleOAuthError, match="400"):
                await google_client.exchange_and_fetch_profile("expired-code")

            http.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_userinfo_failure_raises(self, google_client):
        """Should raise GoogleOAuthError when userinfo is not returned."""
        with patch("httpx.AsyncClient") as mock_client:
            http = mock_client.return_value.__aenter__.return_value
            http.post = AsyncMock(return_value=_response(200, {"access_token": "at"}))
            http.get = AsyncMock(return_value=_response(401, {}))

            with pytest.raises(GoogleOAuthError, match="401"):
                await google_client.exchange_and_fetch_profile("auth-code")

    @pytest.mark.asyncio
    async def test_network_error_is_wrapped(self, google_client):
        """Should convert httpx errors into GoogleOAuthError."""
        with patch("httpx.AsyncClient") as mock_client:
            http = mock_client.return_value.__aenter__.return_value
            http.post = AsyncMock(side_effect=httpx.ConnectError("unreachable"))

            with pytest.raises(GoogleOAuthError, match="HTTP error"):
                await google_client.exchange_and_fetch_profile("auth-code")
