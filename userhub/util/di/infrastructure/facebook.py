"""Facebook infrastructure providers."""

from dishka import Scope, provide

from userhub.adapter.facebook.client import (
    FacebookGraphClient,
    RealFacebookGraphClient,
)
from userhub.config import AuthSettings
from userhub.util.di.base import ProviderBase


class FacebookProvider(ProviderBase):
    """Facebook component base."""

    __mock_component__ = "facebook"


class ProdFacebookProvider(FacebookProvider):
    """Production Facebook provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_facebook_graph_client(self, auth: AuthSettings) -> FacebookGraphClient:
        """Provide Facebook Graph API client."""
        return RealFacebookGraphClient(
            graph_url=auth.facebook.graph_url,
            api_version=auth.facebook.api_version,
            picture_width=auth.facebook.picture_width,
            timeout=auth.provider_timeout,
        )
