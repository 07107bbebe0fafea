"""Mock providers for testing."""

from .avatar import MockAvatarProvider
from .facebook import MockFacebookProvider
from .google import MockGoogleProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAvatarProvider",
    "MockFacebookProvider",
    "MockGoogleProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
