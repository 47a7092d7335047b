"""Invitation items shared by invitation use case responses."""

from datetime import datetime

from pydantic import BaseModel

from huddle.domain.model import Invitation
from huddle.domain.value import InvitationKind, InvitationStatus


class InvitationItem(BaseModel):
    """Invitation item in response."""

    invitation_id: str
    booking_id: str
    recipient: str
    status: InvitationStatus
    kind: InvitationKind
    message: str
    created_at: datetime

    @classmethod
    def from_invitation(cls, invitation: Invitation) -> "InvitationItem":
        """Build a response item from an invitation record."""
        return cls(
            invitation_id=str(invitation.id),
            booking_id=str(invitation.booking_id),
            recipient=invitation.recipient,
            status=invitation.status,
            kind=invitation.kind,
            message=invitation.message,
            created_at=invitation.created_at,
        )
