"""Dependency injection module."""

from typing import Type

from senatus.util.di.application import ProdApplicationProvider
from senatus.util.di.base import Component, ProviderBase
from senatus.util.di.core import ProdConfigProvider
from senatus.util.di.domain import ProdDomainProvider
from senatus.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Core providers first, then mockable infrastructure components
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    A provider without subclasses is concrete and used as-is. A provider
    with subclasses is a mockable component; the implementation is chosen
    by its __is_mock__ flag.

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
