"""Consensus rules for bookings.

Pure functions over a booking and its invitation records. The booking keeps
a materialised status and member list; these rules recompute the quorum from
the current actionable invitations whenever an answer comes in.
"""

from collections.abc import Iterable

from huddle.domain.model import Booking, Invitation
from huddle.domain.value import BookingStatus, InvitationStatus, ParticipantId

DEFAULT_MIN_MEMBERS = 3


def qualifying_invitations(
    booking: Booking, invitations: Iterable[Invitation]
) -> list[Invitation]:
    """Actionable invitations of the booking addressed to a current member.

    Invitations of members who already left are excluded, even when still
    pending. Informational records never qualify.
    """
    return [
        invitation
        for invitation in invitations
        if invitation.booking_id == booking.id
        and invitation.is_actionable
        and booking.is_member(invitation.recipient)
    ]


def quorum_reached(booking: Booking, invitations: Iterable[Invitation]) -> bool:
    """Every current member has an accepted actionable invitation."""
    qualifying = qualifying_invitations(booking, invitations)
    if len(qualifying) != len(booking.members):
        return False
    return all(inv.status == InvitationStatus.ACCEPTED for inv in qualifying)


def evaluate(
    booking: Booking,
    invitations: Iterable[Invitation],
    min_members: int = DEFAULT_MIN_MEMBERS,
) -> BookingStatus:
    """Derive the booking status from its members and invitations.

    Cancelled is terminal and too few members cancels. Otherwise the
    booking is confirmed once the quorum is reached and keeps its current
    status until then, so a confirmation never reverts to pending.
    """
    if booking.is_cancelled or len(booking.members) < min_members:
        return BookingStatus.CANCELLED
    if quorum_reached(booking, invitations):
        return BookingStatus.CONFIRMED
    return booking.status


def member_statuses(
    booking: Booking, invitations: Iterable[Invitation]
) -> dict[ParticipantId, InvitationStatus]:
    """Answer of each current member, in member order.

    Members without an actionable invitation are reported as pending.
    """
    by_recipient = {
        inv.recipient: inv.status
        for inv in qualifying_invitations(booking, invitations)
    }
    return {
        member: by_recipient.get(member, InvitationStatus.PENDING)
        for member in booking.members
    }


def awaiting_answer(invitation: Invitation, booking: Booking | None) -> bool:
    """The recipient can still accept or decline this invitation."""
    return (
        booking is not None
        and invitation.is_actionable
        and invitation.is_pending
        and not booking.is_cancelled
        and booking.is_member(invitation.recipient)
    )
