"""Infrastructure providers."""

# Import bases
from .avatar import AvatarProvider
from .facebook import FacebookProvider
from .google import GoogleProvider
from .persistence import PersistenceProvider
from .providers import ProviderClientAggregatorProvider

# Import implementations (needed for __subclasses__())
from .avatar import ProdAvatarProvider  # noqa: F401
from .facebook import ProdFacebookProvider  # noqa: F401
from .google import ProdGoogleProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AvatarProvider",
    "FacebookProvider",
    "GoogleProvider",
    "PersistenceProvider",
    "ProdAvatarProvider",
    "ProdFacebookProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
    "ProviderClientAggregatorProvider",
]
