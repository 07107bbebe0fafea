"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.error import AccountConflictError
from userhub.domain.model import EXTERNAL_ID_FIELDS, Account
from userhub.domain.repository import AccountRepository
from userhub.domain.value import AccountId, AuthProvider
from userhub.persistence.mappers import account_to_dict, row_to_account
from userhub.persistence.tables import UNIQUE_CONSTRAINT_FIELDS, accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, stmt) -> Optional[Account]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return await self._find_one(
            select(accounts_table).where(accounts_table.c.id == account_id)
        )

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email."""
        return await self._find_one(
            select(accounts_table).where(accounts_table.c.email == email)
        )

    async def find_by_external_id(
        self, provider: AuthProvider, external_id: str
    ) -> Optional[Account]:
        """Find an account by a provider's external id."""
        column = accounts_table.c[EXTERNAL_ID_FIELDS[provider]]
        return await self._find_one(
            select(accounts_table).where(column == external_id)
        )

    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        The write runs in a savepoint so a uniqueness violation leaves the
        surrounding transaction usable.

        Args:
            account: Account to save

        Returns:
            Saved account

        Raises:
            AccountConflictError: If email or an external id is already taken
        """
        existing = await self.find_by_id(account.id)

        account_dict = account_to_dict(account)

        if existing:
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
        else:
            stmt = accounts_table.insert().values(**account_dict)

        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise self._conflict_from(e, account) from e

        await self.session.flush()
        return account

    @staticmethod
    def _conflict_from(error: IntegrityError, account: Account) -> Exception:
        message = str(error.orig)
        for constraint, field in UNIQUE_CONSTRAINT_FIELDS.items():
            if constraint in message:
                return AccountConflictError(field, str(getattr(account, field)))
        return error
