"""Create booking use case."""

from datetime import date

import logfire
from pydantic import BaseModel, Field

from huddle.application.usecase.base import UseCase
from huddle.application.usecase.booking.items import BookingItem
from huddle.domain.service import BookingService
from huddle.domain.value import ParticipantId, ResourceId


class CreateBookingRequest(BaseModel):
    """Request to create a booking."""

    organizer: str  # Acting participant
    resource_id: str
    date: date
    slot: str
    members: list[str] = Field(max_length=20)  # Blank entries are ignored


class CreateBookingUseCase(UseCase[CreateBookingRequest, BookingItem]):
    """Use case for reserving a room and inviting the group."""

    def __init__(self, booking_service: BookingService) -> None:
        """Initialize use case.

        Args:
            booking_service: Booking domain service
        """
        self.booking_service = booking_service

    async def execute(self, request: CreateBookingRequest) -> BookingItem:
        """Execute create booking use case.

        Args:
            request: Create booking request

        Returns:
            The pending booking

        Raises:
            DomainError: If the booking violates a booking rule
        """
        with logfire.span(
            "create_booking",
            organizer=request.organizer,
            member_count=len(request.members),
        ):
            booking = await self.booking_service.create_booking(
                organizer=ParticipantId(request.organizer),
                resource_id=ResourceId(request.resource_id),
                day=request.date,
                slot=request.slot,
                candidate_members=request.members,
            )
            return BookingItem.from_booking(booking)
