"""List bookings use case."""

from datetime import date

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import UseCase
from huddle.application.usecase.booking.items import BookingItem
from huddle.domain.model import Booking
from huddle.domain.service import BookingService, InvitationService
from huddle.domain.value import (
    BookingFilter,
    BookingStatus,
    MembershipRole,
    ParticipantId,
)


class ListBookingsRequest(BaseModel):
    """List bookings of a participant."""

    participant: str
    role: MembershipRole = MembershipRole.ANY
    status: BookingStatus | None = None
    today: date | None = None  # Defaults to the current date


class ListBookingsResponse(BaseModel):
    """Bookings split into upcoming and past.

    Cancelled bookings always count as past.
    """

    upcoming: list[BookingItem]
    past: list[BookingItem]
    organized_count: int
    member_count: int


class ListBookingsUseCase(UseCase[ListBookingsRequest, ListBookingsResponse]):
    """Use case for a participant's own bookings."""

    def __init__(
        self,
        booking_service: BookingService,
        invitation_service: InvitationService,
    ) -> None:
        """Initialize use case.

        Args:
            booking_service: Booking domain service
            invitation_service: Invitation domain service
        """
        self.booking_service = booking_service
        self.invitation_service = invitation_service

    async def execute(self, request: ListBookingsRequest) -> ListBookingsResponse:
        """List bookings where the participant organizes or is a member.

        The organizer additionally sees every member's answer.

        Args:
            request: List bookings request

        Returns:
            Upcoming and past bookings
        """
        participant = ParticipantId(request.participant)
        today = request.today or date.today()

        with logfire.span(
            "list_bookings", participant=participant, role=request.role.value
        ):
            bookings = await self.booking_service.list_bookings(
                BookingFilter(
                    participant=participant,
                    role=request.role,
                    statuses=frozenset({request.status}) if request.status else None,
                )
            )

            upcoming: list[BookingItem] = []
            past: list[BookingItem] = []
            for booking in bookings:
                item = await self._to_item(booking, participant)
                if booking.date >= today and not booking.is_cancelled:
                    upcoming.append(item)
                else:
                    past.append(item)

            # Most recent past bookings first
            past.reverse()

            return ListBookingsResponse(
                upcoming=upcoming,
                past=past,
                organized_count=sum(1 for b in bookings if b.organizer == participant),
                member_count=sum(1 for b in bookings if b.is_member(participant)),
            )

    async def _to_item(
        self, booking: Booking, participant: ParticipantId
    ) -> BookingItem:
        if booking.organizer != participant:
            return BookingItem.from_booking(booking)
        answers = await self.invitation_service.member_answers(booking)
        return BookingItem.from_booking(booking, answers)
