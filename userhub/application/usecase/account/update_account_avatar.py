"""Update account avatar use case."""

from pathlib import Path
from uuid import UUID

from pydantic import BaseModel

from userhub.application.usecase.account.response import AccountResponse
from userhub.application.usecase.base import BaseUseCase
from userhub.domain.service import AccountService
from userhub.domain.value import AccountId


class UpdateAccountAvatarRequest(BaseModel):
    """Update account avatar request."""

    account_id: str
    image_path: Path  # Local file holding the new image


class UpdateAccountAvatarUseCase(
    BaseUseCase[UpdateAccountAvatarRequest, AccountResponse]
):
    """Use case for replacing an account's avatar image."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize update account avatar use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: UpdateAccountAvatarRequest) -> AccountResponse:
        """Execute update avatar flow.

        Args:
            request: Request with account ID and local image path

        Returns:
            Updated account information

        Raises:
            NotFoundError: If account not found
        """
        account = await self.account_service.update_avatar(
            AccountId(UUID(request.account_id)), request.image_path
        )
        return AccountResponse.from_account(account)
