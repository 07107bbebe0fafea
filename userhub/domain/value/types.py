"""Domain value objects for account reconciliation.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import ConfigDict

from userhub.domain.value.common import ValueObject


class AuthProvider(str, Enum):
    """Supported social sign-in providers."""

    GOOGLE = "google"
    FACEBOOK = "facebook"


class CanonicalProfile(ValueObject):
    """Provider-independent profile produced from a raw provider payload.

    Reconciliation and account creation only ever see this shape, never the
    provider-specific field names.
    """

    provider: AuthProvider
    external_id: str  # Identifier assigned by the provider
    email: str
    given_name: str
    family_name: str
    avatar_source_url: str


class MatchKind(str, Enum):
    """Outcome of resolving a canonical profile against stored accounts."""

    FOUND_BY_EMAIL = "found_by_email"
    FOUND_BY_EXTERNAL_ID = "found_by_external_id"
    NOT_FOUND = "not_found"


class AccountPatch(ValueObject):
    """Attributes an account holder may change directly.

    Only the fields declared here are mutable through profile edits; any other
    key in an incoming patch is dropped.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None

    def changes(self) -> dict[str, str | None]:
        """Return only the attributes that were present in the patch."""
        return self.model_dump(exclude_unset=True)
