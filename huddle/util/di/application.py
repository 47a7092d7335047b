"""Application layer DI providers."""

from dishka import Scope, provide

from huddle.application.usecase.booking import (
    CancelBookingUseCase,
    CreateBookingUseCase,
    GetBookingUseCase,
    GetScheduleUseCase,
    LeaveBookingUseCase,
    ListBookingsUseCase,
)
from huddle.application.usecase.catalog import ListResourcesUseCase
from huddle.application.usecase.invitation import (
    ListInvitationsUseCase,
    RespondToInvitationUseCase,
)
from huddle.domain.service import BookingService, InvitationService, ResourceCatalog
from huddle.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Booking use cases
    @provide(scope=Scope.REQUEST)
    def get_create_booking_use_case(
        self, booking_service: BookingService
    ) -> CreateBookingUseCase:
        """Provide create booking use case."""
        return CreateBookingUseCase(booking_service=booking_service)

    @provide(scope=Scope.REQUEST)
    def get_get_booking_use_case(
        self,
        booking_service: BookingService,
        invitation_service: InvitationService,
    ) -> GetBookingUseCase:
        """Provide get booking use case."""
        return GetBookingUseCase(
            booking_service=booking_service, invitation_service=invitation_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_bookings_use_case(
        self,
        booking_service: BookingService,
        invitation_service: InvitationService,
    ) -> ListBookingsUseCase:
        """Provide list bookings use case."""
        return ListBookingsUseCase(
            booking_service=booking_service, invitation_service=invitation_service
        )

    @provide(scope=Scope.REQUEST)
    def get_cancel_booking_use_case(
        self, invitation_service: InvitationService
    ) -> CancelBookingUseCase:
        """Provide cancel booking use case."""
        return CancelBookingUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_leave_booking_use_case(
        self, invitation_service: InvitationService
    ) -> LeaveBookingUseCase:
        """Provide leave booking use case."""
        return LeaveBookingUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_get_schedule_use_case(
        self, booking_service: BookingService
    ) -> GetScheduleUseCase:
        """Provide get schedule use case."""
        return GetScheduleUseCase(booking_service=booking_service)

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_respond_to_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> RespondToInvitationUseCase:
        """Provide respond to invitation use case."""
        return RespondToInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(invitation_service=invitation_service)

    # Catalog use cases
    @provide(scope=Scope.REQUEST)
    def get_list_resources_use_case(
        self, catalog: ResourceCatalog
    ) -> ListResourcesUseCase:
        """Provide list resources use case."""
        return ListResourcesUseCase(catalog=catalog)
