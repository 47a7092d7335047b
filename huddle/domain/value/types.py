"""Domain value objects for Huddle.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import field_validator

from huddle.domain.value.common import RootValueObject, ValueObject
from huddle.domain.value.identifiers import ParticipantId, ResourceId

if TYPE_CHECKING:
    from huddle.domain.model.booking import Booking

_SLOT_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)-([01]\d|2[0-3]):([0-5]\d)$")


class BookingStatus(str, Enum):
    """Lifecycle status of a booking.

    pending -> confirmed once every current member accepted.
    pending | confirmed -> cancelled on explicit cancel or when fewer than
    the minimum number of members remain. cancelled is terminal.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class InvitationStatus(str, Enum):
    """Status of an invitation."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class Decision(str, Enum):
    """Answer a participant gives to an invitation."""

    ACCEPTED = "accepted"
    DECLINED = "declined"

    @property
    def status(self) -> InvitationStatus:
        """Invitation status this decision resolves to."""
        return InvitationStatus(self.value)


class InvitationKind(str, Enum):
    """Kind of invitation record.

    Only actionable invitations take part in the consensus check.
    Informational records are the activity trail (organizer notices,
    self confirmations, cancellations) and are created already resolved.
    """

    ACTIONABLE = "actionable"
    INFORMATIONAL = "informational"


class MembershipRole(str, Enum):
    """Role of a participant in a booking, used for listing."""

    ORGANIZER = "organizer"
    MEMBER = "member"
    ANY = "any"


class TimeSlot(RootValueObject[str]):
    """Fixed time window of a day, e.g. '08:00-10:00'.

    Must be formatted as HH:MM-HH:MM with the start before the end.
    """

    @field_validator("root")
    @classmethod
    def validate_slot_format(cls, v: str) -> str:
        """Validate slot format and ordering."""
        match = _SLOT_PATTERN.match(v)
        if not match:
            raise ValueError("Time slot must be formatted as HH:MM-HH:MM")
        start_h, start_m, end_h, end_m = (int(g) for g in match.groups())
        if (start_h, start_m) >= (end_h, end_m):
            raise ValueError("Time slot must start before it ends")
        return v

    @property
    def start(self) -> str:
        return self.root.split("-")[0]

    @property
    def end(self) -> str:
        return self.root.split("-")[1]


class BookingFilter(ValueObject):
    """Criteria for listing bookings.

    All criteria are optional and combined with AND. ``role`` only applies
    when ``participant`` is given.
    """

    participant: ParticipantId | None = None
    role: MembershipRole = MembershipRole.ANY
    resource_id: ResourceId | None = None
    day: date | None = None
    slot: TimeSlot | None = None
    statuses: frozenset[BookingStatus] | None = None

    def matches(self, booking: "Booking") -> bool:
        """Check whether a booking satisfies every criterion."""
        if self.participant is not None:
            is_organizer = booking.organizer == self.participant
            is_member = self.participant in booking.members
            if self.role == MembershipRole.ORGANIZER and not is_organizer:
                return False
            if self.role == MembershipRole.MEMBER and not is_member:
                return False
            if self.role == MembershipRole.ANY and not (is_organizer or is_member):
                return False
        if self.resource_id is not None and booking.resource_id != self.resource_id:
            return False
        if self.day is not None and booking.date != self.day:
            return False
        if self.slot is not None and booking.slot != self.slot:
            return False
        if self.statuses is not None and booking.status not in self.statuses:
            return False
        return True
