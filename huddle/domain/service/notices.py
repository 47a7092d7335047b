"""Message text and informational records.

Notices are invitation-shaped records created already resolved. They form
the activity trail shown to participants and never take part in consensus.
"""

from datetime import date, datetime
from uuid import uuid4

from huddle.domain.model import Booking, Invitation
from huddle.domain.value import (
    Decision,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    ParticipantId,
)


def format_day(day: date) -> str:
    """Short calendar date, e.g. 9/20/2025."""
    return f"{day.month}/{day.day}/{day.year}"


def describe(booking: Booking) -> str:
    """Where and when, e.g. 'Discussion Room C on 9/20/2025 at 08:00-10:00'."""
    return f"{booking.resource_name} on {format_day(booking.date)} at {booking.slot}"


def invitation_message(organizer_name: str) -> str:
    return f"{organizer_name} has invited you to a discussion room booking"


def notice(
    booking: Booking,
    recipient: ParticipantId,
    status: InvitationStatus,
    message: str,
    now: datetime,
) -> Invitation:
    """Build one resolved informational record."""
    return Invitation(
        id=InvitationId(uuid4()),
        booking_id=booking.id,
        recipient=recipient,
        status=status,
        kind=InvitationKind.INFORMATIONAL,
        message=message,
        created_at=now,
    )


def response_notices(
    booking: Booking,
    actor: ParticipantId,
    decision: Decision,
    actor_name: str,
    organizer_name: str,
    now: datetime,
) -> list[Invitation]:
    """Organizer notice and self confirmation for an answered invitation."""
    return [
        notice(
            booking,
            booking.organizer,
            decision.status,
            f"{actor_name} has {decision.value} your invitation "
            f"for {describe(booking)}",
            now,
        ),
        notice(
            booking,
            actor,
            decision.status,
            f"You {decision.value} the invitation for {describe(booking)} "
            f"organized by {organizer_name}",
            now,
        ),
    ]


def cancellation_notices(
    booking: Booking, organizer_name: str, now: datetime
) -> list[Invitation]:
    """One notice per current member when the organizer cancels."""
    return [
        notice(
            booking,
            member,
            InvitationStatus.DECLINED,
            f"{organizer_name} has cancelled the booking for {describe(booking)}",
            now,
        )
        for member in booking.members
    ]


def leave_notice(booking: Booking, actor_name: str, now: datetime) -> Invitation:
    """Notice to the organizer when a member leaves."""
    return notice(
        booking,
        booking.organizer,
        InvitationStatus.DECLINED,
        f"{actor_name} has left the booking for {describe(booking)}",
        now,
    )
