"""Facebook Graph API client implementation.

The frontend completes Facebook Login and hands over a user access token;
this client reads the user's profile from the Graph API with it.
"""

from typing import Any

import httpx
import logfire

from userhub.adapter.error import ProviderError
from userhub.domain.service.auth_service import ProviderClient


class FacebookGraphError(ProviderError):
    """Facebook Graph API error."""

    pass


class FacebookGraphClient(ProviderClient):
    """Base class for Facebook clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealFacebookGraphClient(FacebookGraphClient):
    """Facebook Graph API client reading the ``me`` object."""

    def __init__(
        self,
        graph_url: str = "https://graph.facebook.com",
        api_version: str = "v19.0",
        picture_width: int = 320,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Facebook Graph client.

        Args:
            graph_url: Graph API base URL
            api_version: Graph API version segment
            picture_width: Requested profile picture width in pixels
            timeout: Request timeout in seconds
        """
        self.me_url = f"{graph_url.rstrip('/')}/{api_version}/me"
        self.fields = f"first_name,last_name,email,picture.width({picture_width})"
        self.timeout = timeout

    async def exchange_and_fetch_profile(self, auth_evidence: str) -> dict[str, Any]:
        """Fetch the Facebook profile for a user access token.

        Args:
            auth_evidence: Facebook user access token

        Returns:
            Graph payload (id, email, first_name, last_name, picture.data.url)

        Raises:
            FacebookGraphError: If the Graph request fails
        """
        params = {"access_token": auth_evidence, "fields": self.fields}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.me_url, params=params, timeout=self.timeout
                )

                if response.status_code != 200:
                    logfire.error(
                        "Facebook profile request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise FacebookGraphError(
                        f"Profile request failed: {response.status_code}"
                    )

                profile = response.json()

        except httpx.HTTPError as e:
            logfire.error("Facebook profile HTTP error", error=str(e))
            raise FacebookGraphError(f"HTTP error fetching profile: {e}")

        logfire.info("Facebook profile fetched", facebook_id=profile.get("id"))
        return profile


class MockFacebookGraphClient(FacebookGraphClient):
    """Mock Facebook client for testing.

    Returns ``profile`` without making real API calls. Tests may replace
    ``profile`` or set ``error`` to simulate a failed request.
    """

    def __init__(self) -> None:
        self.profile: dict[str, Any] = {
            "id": "1000000001",
            "email": "mock.user@facebook.com",
            "first_name": "Mock",
            "last_name": "User",
            "picture": {
                "data": {
                    "url": "https://platform-lookaside.fbsbx.com/mock-avatar",
                    "width": 320,
                    "height": 320,
                }
            },
        }
        self.error: FacebookGraphError | None = None
        self.tokens: list[str] = []

    async def exchange_and_fetch_profile(self, auth_evidence: str) -> dict[str, Any]:
        """Return the configured mock profile."""
        self.tokens.append(auth_evidence)
        if self.error:
            raise self.error
        return dict(self.profile)
