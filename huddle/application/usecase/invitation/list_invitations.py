"""List invitations use case."""

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import UseCase
from huddle.application.usecase.invitation.items import InvitationItem
from huddle.domain.service import InvitationService
from huddle.domain.value import ParticipantId


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    recipient: str


class ListInvitationsResponse(BaseModel):
    """Invitations awaiting an answer and the processed activity trail."""

    pending: list[InvitationItem]
    processed: list[InvitationItem]


class ListInvitationsUseCase(
    UseCase[ListInvitationsRequest, ListInvitationsResponse]
):
    """Use case for a participant's notification center."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        """List a participant's invitation records, newest first.

        Args:
            request: List invitations request

        Returns:
            Pending and processed records
        """
        with logfire.span("list_invitations", recipient=request.recipient):
            inbox = await self.invitation_service.list_invitations(
                ParticipantId(request.recipient)
            )
            return ListInvitationsResponse(
                pending=[InvitationItem.from_invitation(i) for i in inbox.pending],
                processed=[InvitationItem.from_invitation(i) for i in inbox.processed],
            )
