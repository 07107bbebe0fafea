"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from userhub.domain.model import Account
from userhub.domain.value import AccountId, AuthProvider


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Defines the contract for account persistence operations.
    Lookups return None when nothing matches; absence is not an error.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email.

        Args:
            email: Email address to match exactly

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(
        self, provider: AuthProvider, external_id: str
    ) -> Optional[Account]:
        """Find an account by the external id a provider assigned to it.

        Args:
            provider: The sign-in provider
            external_id: The person's id on that provider

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            AccountConflictError: If another account already holds the same
                email or provider external id
        """
        pass
