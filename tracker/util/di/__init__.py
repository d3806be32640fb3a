"""Dependency injection wiring.

Every provider the application needs is listed in PROVIDERS. Component
bases are resolved to their production or mock subclass by get_provider.
"""

from tracker.util.di.application import ProdApplicationProvider
from tracker.util.di.base import Component, ProviderBase
from tracker.util.di.core import ProdConfigProvider
from tracker.util.di.domain import ProdDomainProvider
from tracker.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # mockable
]


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class that should be instantiated.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself for concrete providers, otherwise the matching subclass

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    if not base.is_mockable():
        return base

    impl = base.implementation(mock=use_mock)
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
        )
    return impl


__all__ = [
    "PROVIDERS",
    "Component",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
