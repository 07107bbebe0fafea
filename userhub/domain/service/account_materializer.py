"""Account creation for first-time social sign-ins."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from userhub.domain.model import EXTERNAL_ID_FIELDS, Account
from userhub.domain.repository import AccountRepository
from userhub.domain.value import AccountId, CanonicalProfile

from .account_service import validate_account_attributes
from .avatar_service import AvatarDownloader, AvatarStorage


class AccountMaterializer:
    """Creates an account from a canonical profile, avatar included.

    The avatar is ingested before the account row is written, so an account
    created this way is never visible without an avatar_url. If ingestion
    fails nothing is persisted.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        avatar_downloader: AvatarDownloader,
        avatar_storage: AvatarStorage,
    ) -> None:
        """Initialize account materializer.

        Args:
            account_repository: Account repository
            avatar_downloader: Fetches the provider's avatar image
            avatar_storage: Stores the avatar against the new account id
        """
        self.account_repository = account_repository
        self.avatar_downloader = avatar_downloader
        self.avatar_storage = avatar_storage

    async def materialize(self, profile: CanonicalProfile) -> Account:
        """Create and persist a new account.

        Steps:
        1. Check the profile carries every required attribute
        2. Allocate the account id
        3. Download the avatar from the provider
        4. Upload it against the allocated id
        5. Build the account with the provider's external id
        6. Persist

        Args:
            profile: Canonical profile of the new user

        Returns:
            The persisted account

        Raises:
            AccountValidationError: If the profile lacks a name or email
            ProviderError: If the avatar cannot be downloaded
            AccountConflictError: If a concurrent sign-in created the account first
        """
        validate_account_attributes(
            {
                "first_name": profile.given_name,
                "last_name": profile.family_name,
                "email": profile.email,
            }
        )
        account_id = AccountId(uuid4())

        with logfire.span(
            "account_materializer.materialize",
            account_id=str(account_id),
            provider=profile.provider.value,
        ):
            local_path = await self.avatar_downloader.download_from_url(
                profile.avatar_source_url
            )
            try:
                avatar_url = await self.avatar_storage.upload(account_id, local_path)
            finally:
                await self.avatar_downloader.discard(local_path)

            now = datetime.now(timezone.utc)
            account = Account.model_validate(
                {
                    "id": account_id,
                    "first_name": profile.given_name,
                    "last_name": profile.family_name,
                    "email": profile.email,
                    "avatar_url": avatar_url,
                    EXTERNAL_ID_FIELDS[profile.provider]: profile.external_id,
                    "registration_date": now,
                    "updated_at": now,
                }
            )
            saved = await self.account_repository.save(account)

            logfire.info(
                "Account materialized",
                account_id=str(saved.id),
                provider=profile.provider.value,
            )
            return saved
