"""Account representation returned by account use cases."""

from datetime import datetime

from pydantic import BaseModel

from userhub.domain.model import Account


class AccountResponse(BaseModel):
    """Public view of an account."""

    account_id: str
    first_name: str
    last_name: str
    email: str
    avatar_url: str | None
    google_external_id: str | None
    facebook_external_id: str | None
    registration_date: datetime
    updated_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            account_id=str(account.id),
            first_name=account.first_name,
            last_name=account.last_name,
            email=account.email,
            avatar_url=account.avatar_url,
            google_external_id=account.google_external_id,
            facebook_external_id=account.facebook_external_id,
            registration_date=account.registration_date,
            updated_at=account.updated_at,
        )
