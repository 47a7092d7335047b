"""Leave booking use case."""

from uuid import UUID

from pydantic import BaseModel

from huddle.application.usecase.base import UseCase
from huddle.application.usecase.booking.items import BookingItem
from huddle.domain.service import InvitationService
from huddle.domain.value import BookingId, ParticipantId


class LeaveBookingRequest(BaseModel):
    """Leave booking request."""

    booking_id: str  # UUID string
    actor: str  # Must be a current member


class LeaveBookingUseCase(UseCase[LeaveBookingRequest, BookingItem]):
    """Use case for a member leaving a booking."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: LeaveBookingRequest) -> BookingItem:
        """Execute leave booking flow.

        Args:
            request: Leave booking request

        Returns:
            The updated booking, cancelled if too few members remain

        Raises:
            ValueError: If the booking ID is malformed
            DomainError: If the actor cannot leave the booking
        """
        booking = await self.invitation_service.leave_booking(
            BookingId(UUID(request.booking_id)), ParticipantId(request.actor)
        )
        return BookingItem.from_booking(booking)
