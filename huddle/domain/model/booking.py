"""Booking entity.

A booking reserves one resource for one time slot on one day, on behalf of
an organizer and a group of invited members. It only becomes confirmed once
every current member accepted their invitation.
"""

from datetime import date, datetime

from pydantic import Field, model_validator

from huddle.domain.model.common import DomainModel
from huddle.domain.value import (
    BookingId,
    BookingStatus,
    ParticipantId,
    ResourceId,
    TimeSlot,
)


class Booking(DomainModel):
    """Booking entity.

    Business rules:
    - Members are unique and never include the organizer
    - Between 3 and 6 members at creation
    - Cancelled is terminal: members and status never change afterwards
    - At most one non-cancelled booking per resource/date/slot
    - A participant takes part in at most one non-cancelled booking per day
    """

    id: BookingId
    resource_id: ResourceId
    resource_name: str  # Denormalised for message text
    date: date
    slot: TimeSlot
    organizer: ParticipantId
    members: tuple[ParticipantId, ...]
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_members(self) -> "Booking":
        """Members must be unique and exclude the organizer."""
        if len(set(self.members)) != len(self.members):
            raise ValueError("Booking members must be unique")
        if self.organizer in self.members:
            raise ValueError("Organizer cannot be listed as a member")
        return self

    @property
    def participants(self) -> frozenset[ParticipantId]:
        """Organizer and members together."""
        return frozenset((self.organizer, *self.members))

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    def is_member(self, participant: ParticipantId) -> bool:
        return participant in self.members

    def without_member(self, participant: ParticipantId) -> "Booking":
        """Return a copy with the participant removed from members."""
        return self.evolve(
            members=tuple(m for m in self.members if m != participant)
        )
