"""Invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from huddle.application.usecase.invitation import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    RespondToInvitationRequest,
    RespondToInvitationResponse,
    RespondToInvitationUseCase,
)
from huddle.domain.error import DomainError
from huddle.domain.value import Decision
from huddle.interface.api.routes.participant import current_participant
from huddle.interface.error import bad_request, to_http_exception

router = APIRouter(
    prefix="/invitations", tags=["invitations"], route_class=DishkaRoute
)


class RespondAPIRequest(BaseModel):
    """API request for answering an invitation."""

    decision: Decision


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    participant: str = Depends(current_participant),
) -> ListInvitationsResponse:
    """List the caller's invitations and notices, newest first.

    Args:
        list_invitations_use_case: List invitations use case from DI
        participant: Caller, from the X-Participant header

    Returns:
        Pending invitations and the processed activity trail
    """
    return await list_invitations_use_case.execute(
        ListInvitationsRequest(recipient=participant)
    )


@router.post("/{invitation_id}/respond", response_model=RespondToInvitationResponse)
async def respond_to_invitation(
    invitation_id: str,
    request: RespondAPIRequest,
    respond_use_case: FromDishka[RespondToInvitationUseCase],
    participant: str = Depends(current_participant),
) -> RespondToInvitationResponse:
    """Accept or decline an invitation.

    Args:
        invitation_id: Invitation UUID
        request: The decision
        respond_use_case: Respond use case from DI
        participant: Recipient, from the X-Participant header

    Returns:
        Updated booking, the answered invitation and the notices sent

    Raises:
        HTTPException: If the invitation is unknown, already answered, not
            addressed to the caller, or its booking is cancelled
    """
    try:
        return await respond_use_case.execute(
            RespondToInvitationRequest(
                invitation_id=invitation_id,
                decision=request.decision,
                actor=participant,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)
