"""Invitation entity."""

from datetime import datetime

from pydantic import Field

from huddle.domain.model.common import DomainModel
from huddle.domain.value import (
    BookingId,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    ParticipantId,
)


class Invitation(DomainModel):
    """Invitation-shaped record addressed to one participant of a booking.

    Business rules:
    - Exactly one actionable invitation per (booking, member) at creation
    - Actionable status only moves pending -> accepted | declined, never back
    - Informational records (notices) are created already resolved and
      never take part in the consensus check
    """

    id: InvitationId
    booking_id: BookingId
    recipient: ParticipantId
    status: InvitationStatus = InvitationStatus.PENDING
    kind: InvitationKind = InvitationKind.ACTIONABLE
    message: str
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_actionable(self) -> bool:
        return self.kind == InvitationKind.ACTIONABLE

    @property
    def is_pending(self) -> bool:
        return self.status == InvitationStatus.PENDING
