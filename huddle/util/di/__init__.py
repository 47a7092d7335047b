"""Dependency injection wiring."""

from huddle.util.di.application import ProdApplicationProvider
from huddle.util.di.base import Component, ProviderBase
from huddle.util.di.core import ProdConfigProvider
from huddle.util.di.domain import ProdDomainProvider
from huddle.util.di.infrastructure import (
    CatalogProvider,
    DirectoryProvider,
    PersistenceProvider,
    ProdDirectoryProvider,
)

# Every provider the application is assembled from; mockable components
# are listed by their base class
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    CatalogProvider,
    PersistenceProvider,
    DirectoryProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation slot."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "CatalogProvider",
    "PersistenceProvider",
    "DirectoryProvider",
    "ProdDirectoryProvider",
]
