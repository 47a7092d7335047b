"""Booking items shared by booking use case responses."""

from datetime import date, datetime

from pydantic import BaseModel

from huddle.domain.model import Booking
from huddle.domain.value import BookingStatus, InvitationStatus


class MemberAnswer(BaseModel):
    """A member's answer to their invitation."""

    participant: str
    status: InvitationStatus


class BookingItem(BaseModel):
    """Booking item in response."""

    booking_id: str
    resource_id: str
    resource_name: str
    date: date
    slot: str
    organizer: str
    members: list[str]
    status: BookingStatus
    created_at: datetime
    answers: list[MemberAnswer] | None = None  # Only shown to the organizer

    @classmethod
    def from_booking(
        cls,
        booking: Booking,
        answers: dict[str, InvitationStatus] | None = None,
    ) -> "BookingItem":
        """Build a response item from a booking."""
        return cls(
            booking_id=str(booking.id),
            resource_id=booking.resource_id,
            resource_name=booking.resource_name,
            date=booking.date,
            slot=booking.slot.root,
            organizer=booking.organizer,
            members=list(booking.members),
            status=booking.status,
            created_at=booking.created_at,
            answers=(
                [
                    MemberAnswer(participant=p, status=s)
                    for p, s in answers.items()
                ]
                if answers is not None
                else None
            ),
        )
