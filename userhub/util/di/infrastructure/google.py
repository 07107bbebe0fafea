"""Google infrastructure providers."""

from dishka import Scope, provide

from userhub.adapter.google.client import GoogleOAuthClient, RealGoogleOAuthClient
from userhub.config import AuthSettings
from userhub.util.di.base import ProviderBase
from userhub.util.error import ConfigurationError


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self, auth: AuthSettings) -> GoogleOAuthClient:
        """Provide Google OAuth client.

        Returns:
            Google OAuth 2.0 client

        Raises:
            ConfigurationError: If Google OAuth credentials are not configured
        """
        if not auth.google.client_id:
            raise ConfigurationError("Google OAuth client ID must be configured")
        if not auth.google.client_secret:
            raise ConfigurationError("Google OAuth client secret must be configured")

        return RealGoogleOAuthClient(
            client_id=auth.google.client_id,
            client_secret=auth.google.client_secret,
            redirect_uri=auth.google.redirect_uri,
            token_url=auth.google.token_url,
            userinfo_url=auth.google.userinfo_url,
            timeout=auth.provider_timeout,
        )
