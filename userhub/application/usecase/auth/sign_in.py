"""Social sign-in use case."""

import logfire
from pydantic import BaseModel

from userhub.application.usecase.account.response import AccountResponse
from userhub.application.usecase.base import BaseUseCase
from userhub.domain.error import AccountConflictError
from userhub.domain.model import Account
from userhub.domain.service import (
    AccountMaterializer,
    AuthService,
    IdentityResolver,
    SignInEvents,
    normalize,
)
from userhub.domain.value import AuthProvider, CanonicalProfile, MatchKind


class SignInRequest(BaseModel):
    """Sign-in request carrying provider evidence.

    ``auth_evidence`` is an authorization code for Google and a user access
    token for Facebook.
    """

    provider: AuthProvider
    auth_evidence: str


class SignInResponse(BaseModel):
    """Sign-in response."""

    account: AccountResponse
    match: MatchKind  # How the account was reconciled
    created: bool


class SignInUseCase(BaseUseCase[SignInRequest, SignInResponse]):
    """Use case reconciling a social sign-in with stored accounts."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_resolver: IdentityResolver,
        account_materializer: AccountMaterializer,
        events: SignInEvents,
    ) -> None:
        """Initialize sign-in use case.

        Args:
            auth_service: Dispatches evidence to provider clients
            identity_resolver: Finds and links existing accounts
            account_materializer: Creates accounts for unknown profiles
            events: Structured event sink for the flow
        """
        self.auth_service = auth_service
        self.identity_resolver = identity_resolver
        self.account_materializer = account_materializer
        self.events = events

    async def sign_in_with_google(self, auth_code: str) -> SignInResponse:
        """Sign in with a Google authorization code."""
        return await self.execute(
            SignInRequest(provider=AuthProvider.GOOGLE, auth_evidence=auth_code)
        )

    async def sign_in_with_facebook(self, access_token: str) -> SignInResponse:
        """Sign in with a Facebook user access token."""
        return await self.execute(
            SignInRequest(provider=AuthProvider.FACEBOOK, auth_evidence=access_token)
        )

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute the sign-in flow.

        Steps:
        1. Exchange the evidence for the provider's verified profile
        2. Normalize it to a canonical profile
        3. Resolve it: by email, then by the provider's external id
        4. Found by email: link the external id if not yet set
           Found by external id: return the account unchanged
           Not found: create the account, avatar included

        Args:
            request: Sign-in request with provider evidence

        Returns:
            The reconciled account and how it was found

        Raises:
            ProviderError: If the provider exchange or avatar download fails
            MalformedProfileError: If the provider profile lacks required fields
        """
        with logfire.span("sign_in", provider=request.provider.value):
            raw_profile = await self.auth_service.fetch_profile(
                request.provider, request.auth_evidence
            )
            profile = normalize(request.provider, raw_profile)
            self.events.profile_fetched(profile)

            match = await self.identity_resolver.resolve(profile)
            self.events.resolved(profile, match.kind)

            if match.account is None:
                return await self._create(profile)

            account = await self._use_existing(match.account, match.kind, profile)
            return SignInResponse(
                account=AccountResponse.from_account(account),
                match=match.kind,
                created=False,
            )

    async def _use_existing(
        self, account: Account, kind: MatchKind, profile: CanonicalProfile
    ) -> Account:
        """Return a matched account, linking it first when found by email.

        The provider id may already belong to another account (the provider
        email moved to an address this account owns). The email match is
        then returned unlinked.
        """
        if kind is MatchKind.FOUND_BY_EXTERNAL_ID:
            return account

        current = account.external_id_for(profile.provider)
        if current is None:
            try:
                account = await self.identity_resolver.link(account, profile)
            except AccountConflictError as e:
                self.events.link_conflict(profile, account, e.field)
            else:
                self.events.linked(profile, account)
        elif current != profile.external_id:
            self.events.link_skipped(profile, account)
        return account

    async def _create(self, profile: CanonicalProfile) -> SignInResponse:
        """Materialize a new account.

        A concurrent sign-in for the same person can win the race to create
        the account; the storage uniqueness constraint then rejects ours and
        the winner is resolved and returned instead.
        """
        try:
            account = await self.account_materializer.materialize(profile)
        except AccountConflictError as e:
            self.events.creation_conflict(profile, e.field)
            match = await self.identity_resolver.resolve(profile)
            if match.account is None:
                raise
            account = await self._use_existing(match.account, match.kind, profile)
            return SignInResponse(
                account=AccountResponse.from_account(account),
                match=match.kind,
                created=False,
            )

        self.events.created(profile, account)
        return SignInResponse(
            account=AccountResponse.from_account(account),
            match=MatchKind.NOT_FOUND,
            created=True,
        )
