"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from huddle.config import BookingSettings, CatalogSettings, Settings
from huddle.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_booking_settings(self, settings: Settings) -> BookingSettings:
        """Provide booking rule settings."""
        return settings.booking

    @provide(scope=Scope.APP)
    def provide_catalog_settings(self, settings: Settings) -> CatalogSettings:
        """Provide resource catalog settings."""
        return settings.catalog
