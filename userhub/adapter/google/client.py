"""Google OAuth 2.0 client implementation.

Exchanges an authorization code obtained by the frontend for an access token
and fetches the user's profile from the userinfo endpoint.
"""

from typing import Any

import httpx
import logfire

from userhub.adapter.error import ProviderError
from userhub.domain.service.auth_service import ProviderClient


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


class GoogleOAuthClient(ProviderClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 authorization-code client."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        token_url: str = "https://oauth2.googleapis.com/token",
        userinfo_url: str = "https://www.googleapis.com/oauth2/v2/userinfo",
        timeout: float = 30.0,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Redirect URI the code was issued for
            token_url: Token endpoint
            userinfo_url: Userinfo endpoint
            timeout: Request timeout in seconds
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.token_url = token_url
        self.userinfo_url = userinfo_url
        self.timeout = timeout

    async def exchange_and_fetch_profile(self, auth_evidence: str) -> dict[str, Any]:
        """Exchange an authorization code and fetch the Google profile.

        Args:
            auth_evidence: Authorization code from the Google consent screen

        Returns:
            Google userinfo payload (id, email, given_name, family_name, picture)

        Raises:
            GoogleOAuthError: If the exchange or profile fetch fails
        """
        access_token = await self._exchange_code_for_token(auth_evidence)
        profile = await self._get_user_info(access_token)

        logfire.info("Google profile fetched", google_id=profile.get("id"))
        return profile

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Args:
            code: Authorization code

        Returns:
            Access token

        Raises:
            GoogleOAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google token exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"Token exchange failed: {response.status_code}"
                    )

                result = response.json()
                return result["access_token"]

        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}")

    async def _get_user_info(self, access_token: str) -> dict[str, Any]:
        """Get user information from Google.

        Args:
            access_token: OAuth access token

        Returns:
            Userinfo dictionary

        Raises:
            GoogleOAuthError: If API request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.userinfo_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google userinfo request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"Userinfo request failed: {response.status_code}"
                    )

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("Google userinfo HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}")


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Returns ``profile`` without making real API calls. Tests may replace
    ``profile`` or set ``error`` to simulate a failed exchange.
    """

    def __init__(self) -> None:
        self.profile: dict[str, Any] = {
            "id": "google-mock-123",
            "email": "mock.user@gmail.com",
            "given_name": "Mock",
            "family_name": "User",
            "picture": "https://lh3.googleusercontent.com/a/mock-avatar",
        }
        self.error: GoogleOAuthError | None = None
        self.codes: list[str] = []

    async def exchange_and_fetch_profile(self, auth_evidence: str) -> dict[str, Any]:
        """Return the configured mock profile."""
        self.codes.append(auth_evidence)
        if self.error:
            raise self.error
        return dict(self.profile)
