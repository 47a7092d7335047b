"""Respond to invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import UseCase
from huddle.application.usecase.booking.items import BookingItem
from huddle.application.usecase.invitation.items import InvitationItem
from huddle.domain.service import InvitationService
from huddle.domain.value import Decision, InvitationId, ParticipantId


class RespondToInvitationRequest(BaseModel):
    """Respond to invitation request."""

    invitation_id: str  # UUID string
    decision: Decision
    actor: str  # Must be the recipient


class RespondToInvitationResponse(BaseModel):
    """Outcome of an answer."""

    booking: BookingItem
    invitation: InvitationItem
    notices: list[InvitationItem]


class RespondToInvitationUseCase(
    UseCase[RespondToInvitationRequest, RespondToInvitationResponse]
):
    """Use case for accepting or declining an invitation."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(
        self, request: RespondToInvitationRequest
    ) -> RespondToInvitationResponse:
        """Execute respond flow.

        Args:
            request: Respond request

        Returns:
            Updated booking, answered invitation and the notices sent

        Raises:
            ValueError: If the invitation ID is malformed
            DomainError: If the invitation cannot be answered
        """
        with logfire.span(
            "respond_to_invitation",
            invitation_id=request.invitation_id,
            decision=request.decision.value,
        ):
            resolution = await self.invitation_service.respond(
                InvitationId(UUID(request.invitation_id)),
                request.decision,
                ParticipantId(request.actor),
            )
            return RespondToInvitationResponse(
                booking=BookingItem.from_booking(resolution.booking),
                invitation=InvitationItem.from_invitation(resolution.invitation),
                notices=[
                    InvitationItem.from_invitation(n) for n in resolution.notices
                ],
            )
