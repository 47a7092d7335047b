"""Domain value objects for Huddle."""

from huddle.domain.value.identifiers import (
    BookingId,
    InvitationId,
    ParticipantId,
    ResourceId,
)
from huddle.domain.value.types import (
    BookingFilter,
    BookingStatus,
    Decision,
    InvitationKind,
    InvitationStatus,
    MembershipRole,
    TimeSlot,
)

__all__ = [
    # Identifiers
    "BookingId",
    "InvitationId",
    "ParticipantId",
    "ResourceId",
    # Types
    "BookingFilter",
    "BookingStatus",
    "Decision",
    "InvitationKind",
    "InvitationStatus",
    "MembershipRole",
    "TimeSlot",
]
