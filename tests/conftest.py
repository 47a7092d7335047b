"""Test configuration and fixtures."""

from datetime import date, datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from huddle.domain.model import Booking, Invitation
from huddle.domain.value import (
    BookingId,
    BookingStatus,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    ParticipantId,
    ResourceId,
    TimeSlot,
)

# Keep spans local: nothing is sent and the console stays quiet
logfire.configure(send_to_logfire=False, console=False)

ALICE = "alice@example.com"
BOB = "bob@example.com"
CHARLIE = "charlie@example.com"
DIANA = "diana@example.com"
EVE = "eve@example.com"
FRANK = "frank@example.com"
GRACE = "grace@example.com"
HEIDI = "heidi@example.com"

GROUP = [BOB, CHARLIE, DIANA]


def booking_day(offset: int = 7) -> date:
    """A day in the future, so bookings count as upcoming."""
    return date.today() + timedelta(days=offset)


@pytest.fixture
def day() -> date:
    return booking_day()


def make_booking(
    organizer: str = ALICE,
    members: tuple[str, ...] = (BOB, CHARLIE, DIANA),
    status: BookingStatus = BookingStatus.PENDING,
    day: date = date(2025, 9, 20),
    slot: str = "08:00-10:00",
    resource_id: str = "room-1",
) -> Booking:
    """Build a booking directly, bypassing the services."""
    return Booking(
        id=BookingId(uuid4()),
        resource_id=ResourceId(resource_id),
        resource_name="Discussion Room A",
        date=day,
        slot=TimeSlot(slot),
        organizer=ParticipantId(organizer),
        members=tuple(ParticipantId(m) for m in members),
        status=status,
        created_at=datetime.now(),
    )


def make_invitation(
    booking: Booking,
    recipient: str,
    status: InvitationStatus = InvitationStatus.PENDING,
    kind: InvitationKind = InvitationKind.ACTIONABLE,
) -> Invitation:
    """Build an invitation record for a booking."""
    return Invitation(
        id=InvitationId(uuid4()),
        booking_id=booking.id,
        recipient=ParticipantId(recipient),
        status=status,
        kind=kind,
        message="test",
        created_at=datetime.now(),
    )
