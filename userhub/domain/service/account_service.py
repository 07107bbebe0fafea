"""Account domain service."""

from pathlib import Path

import logfire

from userhub.domain.error import AccountValidationError, NotFoundError
from userhub.domain.model import Account
from userhub.domain.repository import AccountRepository
from userhub.domain.value import AccountId, AccountPatch

from .avatar_service import AvatarStorage

# Checked in this order; the first failure is reported
REQUIRED_ATTRIBUTES: tuple[tuple[str, str, str], ...] = (
    ("first_name", "first_name_required", "First name required"),
    ("last_name", "last_name_required", "Last name required"),
    ("email", "email_required", "Email required"),
)


def validate_account_attributes(attributes: dict[str, object]) -> None:
    """Check that required account attributes are present and non-empty.

    Args:
        attributes: Candidate attribute values

    Raises:
        AccountValidationError: Naming the first missing attribute
    """
    for field, code, message in REQUIRED_ATTRIBUTES:
        value = attributes.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise AccountValidationError(code, message)


class AccountService:
    """Domain service for direct account reads and edits."""

    def __init__(
        self,
        account_repository: AccountRepository,
        avatar_storage: AvatarStorage,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            avatar_storage: Avatar storage used for avatar replacement
        """
        self.account_repository = account_repository
        self.avatar_storage = avatar_storage

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def update_attributes(
        self, account_id: AccountId, patch: AccountPatch
    ) -> Account:
        """Apply an attribute patch and persist the result.

        Only attributes present in the patch are changed. The merged record
        is validated before anything is written.

        Args:
            account_id: Account ID
            patch: Allow-listed attribute changes

        Returns:
            Updated account

        Raises:
            NotFoundError: If account not found
            AccountValidationError: If a required attribute ends up empty
            AccountConflictError: If the new email belongs to another account
        """
        with logfire.span(
            "account_service.update_attributes", account_id=str(account_id)
        ):
            account = await self.get_by_id(account_id)

            changes = patch.changes()
            merged = {**account.model_dump(), **changes}
            validate_account_attributes(merged)

            updated = account.evolve(**changes)
            saved = await self.account_repository.save(updated)
            logfire.info(
                "Account updated",
                account_id=str(saved.id),
                fields=sorted(changes),
            )
            return saved

    async def update_avatar(self, account_id: AccountId, local_path: Path) -> Account:
        """Upload a new avatar and point the account at it.

        The previously stored image is left as is.

        Args:
            account_id: Account ID
            local_path: Local image file to upload

        Returns:
            Updated account

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.update_avatar", account_id=str(account_id)):
            account = await self.get_by_id(account_id)
            avatar_url = await self.avatar_storage.upload(account.id, local_path)

            updated = account.evolve(avatar_url=avatar_url)
            saved = await self.account_repository.save(updated)
            logfire.info(
                "Account avatar updated", account_id=str(saved.id), avatar_url=avatar_url
            )
            return saved

    async def save(self, account: Account) -> Account:
        """Save account (create or update).

        Args:
            account: Account to save

        Returns:
            Saved account
        """
        with logfire.span("account_service.save", account_id=str(account.id)):
            saved = await self.account_repository.save(account)
            logfire.info("Account saved", account_id=str(saved.id))
            return saved
