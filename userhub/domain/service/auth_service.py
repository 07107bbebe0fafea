"""Authentication domain service."""

from typing import Any

from userhub.domain.value import AuthProvider


class ProviderClient:
    """Generic client interface for social sign-in providers."""

    async def exchange_and_fetch_profile(self, auth_evidence: str) -> dict[str, Any]:
        """Exchange auth evidence for the provider's verified profile.

        Args:
            auth_evidence: Authorization code or access token, depending on
                the provider

        Returns:
            Raw profile payload in the provider's own shape

        Raises:
            ProviderError: If the exchange or profile fetch fails
        """
        raise NotImplementedError


class AuthService:
    """Domain service dispatching sign-in evidence to provider clients."""

    def __init__(self, provider_clients: dict[AuthProvider, ProviderClient]) -> None:
        """Initialize auth service.

        Args:
            provider_clients: Map of provider to client implementation
        """
        self.provider_clients = provider_clients

    async def fetch_profile(
        self, provider: AuthProvider, auth_evidence: str
    ) -> dict[str, Any]:
        """Fetch a verified raw profile from a provider.

        Args:
            provider: Provider the evidence belongs to
            auth_evidence: Authorization code or access token

        Returns:
            Raw provider profile payload

        Raises:
            ValueError: If provider not supported
        """
        client = self.provider_clients.get(provider)
        if not client:
            raise ValueError(f"Unsupported provider: {provider}")

        return await client.exchange_and_fetch_profile(auth_evidence)
