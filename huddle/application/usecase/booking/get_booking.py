"""Get booking use case."""

from uuid import UUID

from pydantic import BaseModel

from huddle.application.usecase.base import UseCase
from huddle.application.usecase.booking.items import BookingItem
from huddle.domain.service import BookingService, InvitationService
from huddle.domain.value import BookingId


class GetBookingRequest(BaseModel):
    """Get booking request."""

    booking_id: str  # UUID string
    viewer: str | None = None  # Organizer also sees member answers


class GetBookingUseCase(UseCase[GetBookingRequest, BookingItem]):
    """Use case for looking up a single booking."""

    def __init__(
        self,
        booking_service: BookingService,
        invitation_service: InvitationService,
    ) -> None:
        self.booking_service = booking_service
        self.invitation_service = invitation_service

    async def execute(self, request: GetBookingRequest) -> BookingItem:
        """Get a booking.

        Raises:
            ValueError: If the booking ID is malformed
            NotFoundError: If the booking does not exist
        """
        booking = await self.booking_service.get_booking(
            BookingId(UUID(request.booking_id))
        )
        if request.viewer and request.viewer == booking.organizer:
            answers = await self.invitation_service.member_answers(booking)
            return BookingItem.from_booking(booking, answers)
        return BookingItem.from_booking(booking)
