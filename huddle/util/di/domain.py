"""Domain layer DI providers."""

from dishka import Scope, provide

from huddle.config import BookingSettings
from huddle.domain.repository import ConsensusStore
from huddle.domain.service import (
    BookingService,
    Directory,
    InvitationService,
    ResourceCatalog,
)
from huddle.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped; the state they act on lives in the
    APP-scoped consensus store they share.
    """

    scope = Scope.REQUEST

    @provide
    def get_booking_service(
        self,
        store: ConsensusStore,
        catalog: ResourceCatalog,
        directory: Directory,
        booking_settings: BookingSettings,
    ) -> BookingService:
        """Provide booking lifecycle domain service."""
        return BookingService(
            store=store,
            catalog=catalog,
            directory=directory,
            booking_settings=booking_settings,
        )

    @provide
    def get_invitation_service(
        self,
        store: ConsensusStore,
        directory: Directory,
        booking_settings: BookingSettings,
    ) -> InvitationService:
        """Provide invitation resolution domain service."""
        return InvitationService(
            store=store, directory=directory, booking_settings=booking_settings
        )
