"""Dependency injection module."""

from typing import Type

from gatehouse.util.di.application import ProdApplicationProvider
from gatehouse.util.di.base import Component, ProviderBase
from gatehouse.util.di.core import ProdConfigProvider
from gatehouse.util.di.domain import ProdDomainProvider
from gatehouse.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Concrete providers
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a base.

    A base without subclasses is concrete and used as-is. Otherwise the
    subclass whose ``__is_mock__`` flag matches ``use_mock`` is chosen.

    Args:
        base: Provider base class
        use_mock: Whether to pick the test implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If no matching implementation is registered
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
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
