"""Domain value objects."""

from userhub.domain.value.identifiers import AccountId
from userhub.domain.value.types import (
    AccountPatch,
    AuthProvider,
    CanonicalProfile,
    MatchKind,
)

__all__ = [
    # Identifiers
    "AccountId",
    # Types
    "AccountPatch",
    "AuthProvider",
    "CanonicalProfile",
    "MatchKind",
]
