"""Domain services."""

from .account_materializer import AccountMaterializer
from .account_service import AccountService, validate_account_attributes
from .auth_service import AuthService, ProviderClient
from .avatar_service import AvatarDownloader, AvatarStorage
from .identity_resolver import IdentityResolver, Match
from .profile_normalizer import (
    normalize,
    normalize_facebook_profile,
    normalize_google_profile,
)
from .sign_in_events import SignInEvents

__all__ = [
    "AccountMaterializer",
    "AccountService",
    "AuthService",
    "AvatarDownloader",
    "AvatarStorage",
    "IdentityResolver",
    "Match",
    "ProviderClient",
    "SignInEvents",
    "normalize",
    "normalize_facebook_profile",
    "normalize_google_profile",
    "validate_account_attributes",
]
