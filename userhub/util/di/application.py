"""Application layer DI providers."""

from dishka import Scope, provide

from userhub.application.usecase.account import (
    GetAccountUseCase,
    UpdateAccountAvatarUseCase,
    UpdateAccountUseCase,
)
from userhub.application.usecase.auth import SignInUseCase
from userhub.domain.service import (
    AccountMaterializer,
    AccountService,
    AuthService,
    IdentityResolver,
    SignInEvents,
)
from userhub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(
        self,
        auth_service: AuthService,
        identity_resolver: IdentityResolver,
        account_materializer: AccountMaterializer,
        events: SignInEvents,
    ) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(
            auth_service=auth_service,
            identity_resolver=identity_resolver,
            account_materializer=account_materializer,
            events=events,
        )

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_get_account_use_case(
        self, account_service: AccountService
    ) -> GetAccountUseCase:
        """Provide get account use case."""
        return GetAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_update_account_use_case(
        self, account_service: AccountService
    ) -> UpdateAccountUseCase:
        """Provide update account use case."""
        return UpdateAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_update_account_avatar_use_case(
        self, account_service: AccountService
    ) -> UpdateAccountAvatarUseCase:
        """Provide update account avatar use case."""
        return UpdateAccountAvatarUseCase(account_service=account_service)
