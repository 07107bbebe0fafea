"""Domain layer DI providers."""

from dishka import Scope, provide

from userhub.domain.repository import AccountRepository
from userhub.domain.service import (
    AccountMaterializer,
    AccountService,
    AuthService,
    AvatarDownloader,
    AvatarStorage,
    IdentityResolver,
    ProviderClient,
    SignInEvents,
)
from userhub.domain.value import AuthProvider
from userhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, provider_clients: dict[AuthProvider, ProviderClient]
    ) -> AuthService:
        """Provide sign-in provider dispatch service.

        Args:
            provider_clients: Dictionary mapping providers to their clients

        Returns:
            AuthService configured with all available provider clients
        """
        return AuthService(provider_clients=provider_clients)

    @provide
    def get_identity_resolver(
        self, account_repository: AccountRepository
    ) -> IdentityResolver:
        """Provide identity resolver."""
        return IdentityResolver(account_repository=account_repository)

    @provide
    def get_account_materializer(
        self,
        account_repository: AccountRepository,
        avatar_downloader: AvatarDownloader,
        avatar_storage: AvatarStorage,
    ) -> AccountMaterializer:
        """Provide account materializer."""
        return AccountMaterializer(
            account_repository=account_repository,
            avatar_downloader=avatar_downloader,
            avatar_storage=avatar_storage,
        )

    @provide
    def get_account_service(
        self, account_repository: AccountRepository, avatar_storage: AvatarStorage
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository, avatar_storage=avatar_storage
        )

    @provide(scope=Scope.APP)
    def get_sign_in_events(self) -> SignInEvents:
        """Provide sign-in event sink."""
        return SignInEvents()
