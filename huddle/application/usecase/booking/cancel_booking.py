"""Cancel booking use case."""

from uuid import UUID

from pydantic import BaseModel

from huddle.application.usecase.base import UseCase
from huddle.application.usecase.booking.items import BookingItem
from huddle.domain.service import InvitationService
from huddle.domain.value import BookingId, ParticipantId


class CancelBookingRequest(BaseModel):
    """Cancel booking request."""

    booking_id: str  # UUID string
    actor: str  # Must be the organizer


class CancelBookingUseCase(UseCase[CancelBookingRequest, BookingItem]):
    """Use case for an organizer cancelling their booking."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: CancelBookingRequest) -> BookingItem:
        """Execute cancel booking flow.

        Args:
            request: Cancel booking request

        Returns:
            The cancelled booking

        Raises:
            ValueError: If the booking ID is malformed
            DomainError: If the booking cannot be cancelled by the actor
        """
        booking = await self.invitation_service.cancel_booking(
            BookingId(UUID(request.booking_id)), ParticipantId(request.actor)
        )
        return BookingItem.from_booking(booking)
