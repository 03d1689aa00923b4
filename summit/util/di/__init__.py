"""Dependency injection module."""

from typing import Type

from summit.util.di.adapter import ProdAdapterProvider
from summit.util.di.application import ProdApplicationProvider
from summit.util.di.base import COMPONENTS, Component, ProviderBase
from summit.util.di.core import ProdConfigProvider
from summit.util.di.domain import ProdDomainProvider
from summit.util.di.infrastructure import (
    EmailProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
    ProdPushProvider,
    ProdQueueProvider,
    ProdStorageProvider,
    PushProvider,
    QueueProvider,
    StorageProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdAdapterProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    EmailProvider,
    PushProvider,
    StorageProvider,
    QueueProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a base.

    A base without subclasses is concrete and used as-is. A base with
    subclasses is a mockable component; the implementation is picked by its
    ``__is_mock__`` flag.

    Raises:
        ValueError: If the requested implementation doesn't exist
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
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdAdapterProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "EmailProvider",
    "PersistenceProvider",
    "PushProvider",
    "QueueProvider",
    "StorageProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProdPushProvider",
    "ProdQueueProvider",
    "ProdStorageProvider",
]
