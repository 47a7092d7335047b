"""Invitation use cases."""

from huddle.application.usecase.invitation.items import InvitationItem
from huddle.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from huddle.application.usecase.invitation.respond_to_invitation import (
    RespondToInvitationRequest,
    RespondToInvitationResponse,
    RespondToInvitationUseCase,
)

__all__ = [
    "InvitationItem",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "RespondToInvitationRequest",
    "RespondToInvitationResponse",
    "RespondToInvitationUseCase",
]
