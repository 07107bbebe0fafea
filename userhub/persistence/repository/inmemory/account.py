"""In-memory account repository for testing."""

from typing import Optional

from userhub.domain.error import AccountConflictError
from userhub.domain.model import EXTERNAL_ID_FIELDS, Account
from userhub.domain.repository import AccountRepository
from userhub.domain.value import AccountId, AuthProvider


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Enforces the same uniqueness rules as the accounts table.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}
        self.save_count = 0

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email."""
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    async def find_by_external_id(
        self, provider: AuthProvider, external_id: str
    ) -> Optional[Account]:
        """Find an account by a provider's external id."""
        for account in self._accounts.values():
            if account.external_id_for(provider) == external_id:
                return account
        return None

    async def save(self, account: Account) -> Account:
        """Save or update an account."""
        unique_fields = ["email", *EXTERNAL_ID_FIELDS.values()]
        for other in self._accounts.values():
            if other.id == account.id:
                continue
            for field in unique_fields:
                value = getattr(account, field)
                if value is not None and getattr(other, field) == value:
                    raise AccountConflictError(field, value)

        self._accounts[account.id] = account
        self.save_count += 1
        return account

    def all(self) -> list[Account]:
        """Return every stored account."""
        return list(self._accounts.values())
