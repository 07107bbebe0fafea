"""Identity provider aggregation for multi-provider sign-in."""

from dishka import Scope, provide

from userhub.adapter.facebook.client import FacebookGraphClient
from userhub.adapter.google.client import GoogleOAuthClient
from userhub.domain.service.auth_service import ProviderClient
from userhub.domain.value import AuthProvider
from userhub.util.di.base import ProviderBase


class ProviderClientAggregatorProvider(ProviderBase):
    """Provider that aggregates all identity provider clients into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_provider_clients(
        self,
        google_oauth_client: GoogleOAuthClient,
        facebook_graph_client: FacebookGraphClient,
    ) -> dict[AuthProvider, ProviderClient]:
        """Provide dictionary of all provider clients.

        Args:
            google_oauth_client: Google OAuth client (specific type)
            facebook_graph_client: Facebook Graph client (specific type)

        Returns:
            Dictionary mapping AuthProvider to ProviderClient
        """
        return {
            AuthProvider.GOOGLE: google_oauth_client,
            AuthProvider.FACEBOOK: facebook_graph_client,
        }
