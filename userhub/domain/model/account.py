"""Account aggregate root.

Accounts are created by social sign-in (Google, Facebook) or directly by an
administrator, and hold at most one linked external id per provider.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from userhub.domain.model.common import DomainModel, utcnow
from userhub.domain.value import AccountId, AuthProvider

# Per-provider column holding the provider's external id
EXTERNAL_ID_FIELDS: dict[AuthProvider, str] = {
    AuthProvider.GOOGLE: "google_external_id",
    AuthProvider.FACEBOOK: "facebook_external_id",
}


class Account(DomainModel):
    """Account aggregate root.

    Email is the primary key used to reconcile sign-ins across providers.
    """

    id: AccountId
    first_name: str
    last_name: str
    email: str
    avatar_url: Optional[str] = None
    google_external_id: Optional[str] = None
    facebook_external_id: Optional[str] = None
    registration_date: datetime = Field(default_factory=utcnow)

    def external_id_for(self, provider: AuthProvider) -> Optional[str]:
        """Return the external id linked for a provider, if any."""
        return getattr(self, EXTERNAL_ID_FIELDS[provider])

    def with_external_id(self, provider: AuthProvider, external_id: str) -> "Account":
        """Return a copy of this account linked to a provider's external id."""
        return self.evolve(**{EXTERNAL_ID_FIELDS[provider]: external_id})
