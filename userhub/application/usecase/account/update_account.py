"""Update account use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from userhub.application.usecase.account.response import AccountResponse
from userhub.application.usecase.base import BaseUseCase
from userhub.domain.service import AccountService
from userhub.domain.value import AccountId, AccountPatch


class UpdateAccountRequest(BaseModel):
    """Update account request.

    ``changes`` may contain arbitrary keys; only first_name, last_name and
    email are applied.
    """

    account_id: str
    changes: dict[str, Any]


class UpdateAccountUseCase(BaseUseCase[UpdateAccountRequest, AccountResponse]):
    """Use case for editing an account's name and email."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize update account use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: UpdateAccountRequest) -> AccountResponse:
        """Execute update account flow.

        Steps:
        1. Reduce the changes to the allow-listed attributes
        2. Load the account, apply, validate and save

        Args:
            request: Request with account ID and changes

        Returns:
            Updated account information

        Raises:
            NotFoundError: If account not found
            AccountValidationError: If first name, last name or email ends up empty
        """
        patch = AccountPatch.model_validate(request.changes)
        account = await self.account_service.update_attributes(
            AccountId(UUID(request.account_id)), patch
        )
        return AccountResponse.from_account(account)
