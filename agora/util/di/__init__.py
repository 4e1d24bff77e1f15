"""Dependency injection module."""

from typing import Type

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import COMPONENTS, Component, ProviderBase
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.infrastructure import (
    IpfsProvider,
    ProdIpfsProvider,
    ProdRelayerProvider,
    RelayerProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    RelayerProvider,
    IpfsProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a PROVIDERS entry.

    Mock variants are only found once their module is imported
    (tests import them through ``tests.di``).

    Raises:
        ValueError: If requested implementation not found
    """
    return base.variant(use_mock)


__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "IpfsProvider",
    "RelayerProvider",
    # Infrastructure implementations
    "ProdIpfsProvider",
    "ProdRelayerProvider",
]
