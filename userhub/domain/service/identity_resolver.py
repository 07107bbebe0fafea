"""Identity resolution for social sign-in."""

from dataclasses import dataclass
from typing import Optional

from userhub.domain.model import Account
from userhub.domain.repository import AccountRepository
from userhub.domain.value import CanonicalProfile, MatchKind


@dataclass(frozen=True)
class Match:
    """Result of resolving a canonical profile.

    ``account`` is set for both FOUND_* kinds and None for NOT_FOUND.
    """

    kind: MatchKind
    account: Optional[Account] = None

    @classmethod
    def not_found(cls) -> "Match":
        return cls(kind=MatchKind.NOT_FOUND)


class IdentityResolver:
    """Maps a verified external profile onto an existing account.

    Lookup order is fixed: email first, then the provider's external id.
    A user who registered some other way and later signs in with a new
    provider under the same email is linked rather than duplicated; the
    external id covers users whose provider email changed since they linked.
    """

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize identity resolver.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def resolve(self, profile: CanonicalProfile) -> Match:
        """Find the account a profile belongs to.

        Performs lookups only, never writes.

        Args:
            profile: Canonical profile from the provider

        Returns:
            Match describing how (or whether) an account was found
        """
        account = await self.account_repository.find_by_email(profile.email)
        if account:
            return Match(kind=MatchKind.FOUND_BY_EMAIL, account=account)

        account = await self.account_repository.find_by_external_id(
            profile.provider, profile.external_id
        )
        if account:
            return Match(kind=MatchKind.FOUND_BY_EXTERNAL_ID, account=account)

        return Match.not_found()

    async def link(self, account: Account, profile: CanonicalProfile) -> Account:
        """Record the profile's external id on an account found by email.

        An external id that is already set is never replaced, so this only
        writes the first time a provider resolves to the account.

        Args:
            account: Account matched by email
            profile: Canonical profile that matched it

        Returns:
            The linked account (unchanged if nothing needed writing)

        Raises:
            AccountConflictError: If another account already holds the external id
        """
        if account.external_id_for(profile.provider) is not None:
            return account

        linked = account.with_external_id(profile.provider, profile.external_id)
        return await self.account_repository.save(linked)
