"""Get account use case."""

from uuid import UUID

from pydantic import BaseModel

from userhub.application.usecase.account.response import AccountResponse
from userhub.application.usecase.base import BaseUseCase
from userhub.domain.service import AccountService
from userhub.domain.value import AccountId


class GetAccountRequest(BaseModel):
    """Get account request."""

    account_id: str


class GetAccountUseCase(BaseUseCase[GetAccountRequest, AccountResponse]):
    """Use case for reading an account by ID."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize get account use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: GetAccountRequest) -> AccountResponse:
        """Execute get account flow.

        Args:
            request: Request with account ID

        Returns:
            Account information

        Raises:
            NotFoundError: If account not found
        """
        account = await self.account_service.get_by_id(
            AccountId(UUID(request.account_id))
        )
        return AccountResponse.from_account(account)
