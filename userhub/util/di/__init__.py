"""Dependency injection module."""

from typing import Type

from userhub.util.di.application import ProdApplicationProvider
from userhub.util.di.base import Component, ProviderBase
from userhub.util.di.core import ProdConfigProvider
from userhub.util.di.domain import ProdDomainProvider
from userhub.util.di.infrastructure import (
    AvatarProvider,
    FacebookProvider,
    GoogleProvider,
    PersistenceProvider,
    ProdAvatarProvider,
    ProdFacebookProvider,
    ProdGoogleProvider,
    ProdPersistenceProvider,
    ProviderClientAggregatorProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    GoogleProvider,
    FacebookProvider,
    AvatarProvider,
    PersistenceProvider,
    # Combines the identity provider clients
    ProviderClientAggregatorProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    A provider without subclasses is concrete and used directly. A provider
    with subclasses is a mockable component; the implementation is picked
    by its ``__is_mock__`` flag.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", None) or base.__name__
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "AvatarProvider",
    "FacebookProvider",
    "GoogleProvider",
    "PersistenceProvider",
    "ProviderClientAggregatorProvider",
    # Infrastructure implementations
    "ProdAvatarProvider",
    "ProdFacebookProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
