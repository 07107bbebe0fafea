"""Structured events emitted during social sign-in."""

import logfire

from userhub.domain.model import Account
from userhub.domain.value import CanonicalProfile, MatchKind


class SignInEvents:
    """Observability hooks for the sign-in flow.

    Injected into the sign-in use case so reconciliation stays free of
    logging calls; tests can substitute a recording implementation.
    """

    def profile_fetched(self, profile: CanonicalProfile) -> None:
        logfire.info(
            "Provider profile fetched",
            provider=profile.provider.value,
            external_id=profile.external_id,
        )

    def resolved(self, profile: CanonicalProfile, kind: MatchKind) -> None:
        logfire.info(
            "Sign-in resolved",
            provider=profile.provider.value,
            external_id=profile.external_id,
            match=kind.value,
        )

    def linked(self, profile: CanonicalProfile, account: Account) -> None:
        logfire.info(
            "Provider identity linked to account",
            provider=profile.provider.value,
            external_id=profile.external_id,
            account_id=str(account.id),
        )

    def link_skipped(self, profile: CanonicalProfile, account: Account) -> None:
        """An account found by email already holds a different external id."""
        logfire.warn(
            "Account already linked to a different provider identity",
            provider=profile.provider.value,
            external_id=profile.external_id,
            account_id=str(account.id),
        )

    def link_conflict(
        self, profile: CanonicalProfile, account: Account, field: str
    ) -> None:
        """The provider id is already linked to a different account."""
        logfire.warn(
            "Provider identity belongs to another account, not linking",
            provider=profile.provider.value,
            external_id=profile.external_id,
            account_id=str(account.id),
            field=field,
        )

    def created(self, profile: CanonicalProfile, account: Account) -> None:
        logfire.info(
            "New account created",
            provider=profile.provider.value,
            external_id=profile.external_id,
            account_id=str(account.id),
        )

    def creation_conflict(self, profile: CanonicalProfile, field: str) -> None:
        logfire.warn(
            "Concurrent sign-in created the account first",
            provider=profile.provider.value,
            external_id=profile.external_id,
            field=field,
        )
