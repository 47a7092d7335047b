"""Resource catalog infrastructure providers."""

from dishka import Scope, provide

from huddle.adapter.catalog import StaticResourceCatalog
from huddle.config import CatalogSettings
from huddle.domain.service import ResourceCatalog
from huddle.util.di.base import ProviderBase


class CatalogProvider(ProviderBase):
    """Resource catalog provider - concrete, built from settings."""

    @provide(scope=Scope.APP)
    def get_resource_catalog(self, settings: CatalogSettings) -> ResourceCatalog:
        """Provide static resource catalog."""
        return StaticResourceCatalog(settings)
